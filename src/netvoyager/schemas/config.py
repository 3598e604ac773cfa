"""Run configuration for a page extraction."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

from netvoyager.config import NETVOYAGER_OUTPUT_PATH


class ExtractionMode(str, Enum):
    """How matched text lines are reduced before writing."""

    ALL = "all"
    FIRST_NONEMPTY = "first_nonempty"


class CellFormat(str, Enum):
    """How extracted lines are laid out in the CSV row."""

    LIST = "list"
    LINES = "lines"


class ExtractorConfig(BaseModel):
    """Everything a single extraction run needs.

    Attributes
    ----------
    url : str
        Page to fetch (http or https).
    selector : str
        CSS selector whose matched text is extracted.
    mode : ExtractionMode
        Reduction applied to the extracted lines.
    output_path : Path
        CSV file to (over)write.
    cell_format : CellFormat
        ``list`` writes all lines as one JSON array field, ``lines`` writes
        one field per line.

    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Page URL to fetch")
    selector: str = Field(..., description="CSS selector to extract")
    mode: ExtractionMode = Field(default=ExtractionMode.FIRST_NONEMPTY, description="Line reduction mode")
    output_path: Path = Field(default=NETVOYAGER_OUTPUT_PATH, description="CSV output file")
    cell_format: CellFormat = Field(default=CellFormat.LIST, description="CSV row layout")

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate that ``url`` is an absolute http(s) URL."""
        v = v.strip()
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            err = f"url must be an absolute http(s) URL, got {v!r}"
            raise ValueError(err)
        return v

    @field_validator("selector")
    @classmethod
    def validate_selector(cls, v: str) -> str:
        """Validate that ``selector`` is not empty."""
        if not v.strip():
            err = "selector cannot be empty"
            raise ValueError(err)
        return v.strip()
