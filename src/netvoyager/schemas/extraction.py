"""Extraction output model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from netvoyager.schemas.config import ExtractionMode


class ExtractionResult(BaseModel):
    """Lines extracted from one page, ready to be written."""

    url: str
    selector: str
    mode: ExtractionMode
    lines: list[str] = Field(default_factory=list)
