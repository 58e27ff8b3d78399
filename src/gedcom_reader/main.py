"""
Main entry for the GEDCOM Reader.

This module is intentionally thin:
- argument parsing
- configuration setup
- pipeline orchestration
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from gedcom_reader.config import get_config
from gedcom_reader.logger import configure_logging, get_logger

from gedcom_reader.core.context import ParseContext
from gedcom_reader.core.exceptions import ParseExecutionError
from gedcom_reader.core.pipeline import Pipeline

log = get_logger("main")


# ---------------------------------------------------------
# CLI Argument Parsing
# ---------------------------------------------------------
def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="GEDCOM Reader: split a GEDCOM file into FAM/INDI/SOUR/other records"
    )
    parser.add_argument(
        "-i",
        "--input",
        required=True,
        help="Path to GEDCOM input file",
    )
    parser.add_argument(
        "-o",
        "--output",
        default="outputs/records.json",
        help="Output JSON path",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )
    return parser


# ---------------------------------------------------------
# Pipeline Runner
# ---------------------------------------------------------
def run(input_path: str, output_path: str, debug_flag: bool) -> ParseContext:
    """
    Prepare context and execute the pipeline.
    """
    cfg = get_config()
    cfg.debug = bool(debug_flag)
    configure_logging(debug=cfg.debug)

    log.info(f"Loading GEDCOM: {input_path}")

    ctx = ParseContext(
        config=cfg,
        logger=log,
        input_path=input_path,
        output_path=output_path,
        debug=cfg.debug,
    )

    Pipeline(ctx).run()

    log.info(f"Pipeline complete. Output: {output_path}")
    return ctx


# ---------------------------------------------------------
# Program Entry Point
# ---------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        run(
            input_path=args.input,
            output_path=args.output,
            debug_flag=args.debug,
        )
    except ParseExecutionError as exc:
        log.error(f"Processing failed: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
