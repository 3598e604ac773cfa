"""Reduce selected text lines according to an extraction mode."""

from __future__ import annotations

from typing import Sequence

from netvoyager.exceptions import SelectionEmpty
from netvoyager.schemas import ExtractionMode


def reduce_lines(lines: Sequence[str], mode: ExtractionMode) -> list[str]:
    """Apply ``mode`` to ``lines``.

    ``first_nonempty`` keeps only the first line with any characters;
    ``all`` keeps every line, empty ones included.

    Raises:
        SelectionEmpty: If the reduction leaves nothing to write.
    """
    mode = ExtractionMode(mode)
    if not lines:
        raise SelectionEmpty("Selector matched no text")

    if mode is ExtractionMode.FIRST_NONEMPTY:
        first = next((line for line in lines if len(line) > 0), None)
        if first is None:
            raise SelectionEmpty("Selector matched only empty lines")
        return [first]

    return list(lines)
