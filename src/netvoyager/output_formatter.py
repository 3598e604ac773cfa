"""Serialize extraction results as CSV rows."""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Iterable, Sequence

from netvoyager.exceptions import WriteError
from netvoyager.schemas import CellFormat, ExtractionResult

logger = logging.getLogger(__name__)


def format_list_cell(lines: Sequence[str]) -> str:
    """Render ``lines`` as a single JSON array string, e.g. ``["World"]``."""
    return json.dumps(list(lines), ensure_ascii=False)


def format_row(result: ExtractionResult, cell_format: CellFormat = CellFormat.LIST) -> list[str]:
    """Build the CSV row for ``result``.

    ``list`` packs every line into one field; ``lines`` gives each line its
    own field.
    """
    if CellFormat(cell_format) is CellFormat.LINES:
        return list(result.lines)
    return [format_list_cell(result.lines)]


def write_rows(rows: Iterable[Sequence[str]], path: Path) -> int:
    """Write ``rows`` to ``path``, truncating any previous content.

    Returns:
        Number of rows written.

    Raises:
        WriteError: If the file cannot be opened or written.
    """
    count = 0
    try:
        with open(path, "w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            for row in rows:
                writer.writerow(row)
                count += 1
    except OSError as exc:
        raise WriteError(f"Could not write {path}: {exc}") from exc

    logger.info("Wrote %d row(s) to %s", count, path)
    return count
