"""Named extraction targets."""

from __future__ import annotations

from typing import Final

from netvoyager.schemas import ExtractionMode

# name -> (url, selector, mode)
PRESETS: Final[dict[str, tuple[str, str, ExtractionMode]]] = {
    "hydrogen": (
        "https://en.wikipedia.org/wiki/Hydrogen",
        "p",
        ExtractionMode.FIRST_NONEMPTY,
    ),
    "elements": (
        "https://en.wikipedia.org/wiki/Chemical_element",
        "h2",
        ExtractionMode.ALL,
    ),
}

DEFAULT_PRESET: Final[str] = "hydrogen"
