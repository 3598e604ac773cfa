"""Command line entry point for netvoyager."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from netvoyager.config import NETVOYAGER_OUTPUT_PATH
from netvoyager.exceptions import NetvoyagerError
from netvoyager.extractor import PageExtractor
from netvoyager.presets import DEFAULT_PRESET, PRESETS
from netvoyager.schemas import CellFormat, ExtractionMode, ExtractorConfig
from netvoyager.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="netvoyager",
        description="Extract text from a web page with a CSS selector and write it to CSV.",
    )
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default=DEFAULT_PRESET,
        help=f"Named target supplying url, selector and mode (default: {DEFAULT_PRESET})",
    )
    parser.add_argument("--url", help="Page to fetch (overrides the preset)")
    parser.add_argument("--selector", help="CSS selector to extract (overrides the preset)")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ExtractionMode],
        help="Line reduction mode (overrides the preset)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=NETVOYAGER_OUTPUT_PATH,
        help=f"CSV file to overwrite (default: {NETVOYAGER_OUTPUT_PATH})",
    )
    parser.add_argument(
        "--cell-format",
        choices=[fmt.value for fmt in CellFormat],
        default=CellFormat.LIST.value,
        help="'list' writes one JSON array field, 'lines' one field per line",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> ExtractorConfig:
    url, selector, mode = PRESETS[args.preset]
    return ExtractorConfig(
        url=args.url if args.url is not None else url,
        selector=args.selector if args.selector is not None else selector,
        mode=ExtractionMode(args.mode) if args.mode else mode,
        output_path=args.output,
        cell_format=CellFormat(args.cell_format),
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = config_from_args(args)
    except ValidationError as exc:
        parser.error(str(exc))

    try:
        result = PageExtractor(config).run()
    except NetvoyagerError as exc:
        logger.debug("Extraction failed", exc_info=True)
        print(f"netvoyager: error: {exc}", file=sys.stderr)
        return 1

    logger.info("Extracted %d line(s) from %s", len(result.lines), result.url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
