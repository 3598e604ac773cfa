"""Shared schemas for netvoyager."""

from netvoyager.schemas.config import CellFormat, ExtractionMode, ExtractorConfig
from netvoyager.schemas.extraction import ExtractionResult

__all__ = ["CellFormat", "ExtractionMode", "ExtractionResult", "ExtractorConfig"]
