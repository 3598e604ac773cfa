"""netvoyager: extract text from a web page into a CSV file."""

from netvoyager.exceptions import (
    FetchError,
    InvalidSelectorError,
    NetvoyagerError,
    ParseError,
    SelectionEmpty,
    WriteError,
)
from netvoyager.extractor import PageExtractor, extract_page
from netvoyager.presets import PRESETS
from netvoyager.schemas import CellFormat, ExtractionMode, ExtractionResult, ExtractorConfig

__all__ = [
    "PRESETS",
    "CellFormat",
    "ExtractionMode",
    "ExtractionResult",
    "ExtractorConfig",
    "FetchError",
    "InvalidSelectorError",
    "NetvoyagerError",
    "PageExtractor",
    "ParseError",
    "SelectionEmpty",
    "WriteError",
    "extract_page",
]
