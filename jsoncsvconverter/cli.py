"""Command-line interface for converting a JSON file into CSV."""
import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from .converter import convert_json_file
from .errors import ConversionError

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsoncsvconverter",
        description="Flatten a nested JSON document into a CSV file.",
    )
    parser.add_argument("input", type=Path, help="Path to the .json input file")
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Path to the CSV output (default: input path with a .csv extension)",
    )
    parser.add_argument("--log-level", default="INFO", choices=LOG_LEVELS, help="Logging verbosity")
    parser.add_argument("--preview", action="store_true", help="Log the headers and sample rows")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        result = convert_json_file(args.input, args.output)
    except (ConversionError, ValueError, OSError) as e:
        logger.error(f"Conversion of {args.input} failed: {e}")
        return 1

    logger.info(f"Wrote {result['row_count']} rows to {result['output_path']}")
    if args.preview:
        logger.info(f"Headers: {', '.join(result['headers'])}")
        for record in result['sample_data']:
            logger.info(f"  {record}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
