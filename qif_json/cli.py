# qif_json/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from qif_json.controllers.qif_loader import convert_qif, emitter_for_path
from qif_json.exceptions import QifParseError, UnsupportedOutputFormatError
from qif_json.utilities.config_logging import configure_logging

log = logging.getLogger(__name__)

UNSUPPORTED_OUTPUT_MESSAGE = "Unsupported output format. Use .json or .csv."


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="qif-json",
        description="Convert a QIF (Quicken Interchange Format) file to JSON.",
    )
    ap.add_argument("-f", "--file", type=Path, required=True,
                    help="Path to the QIF file to process")
    ap.add_argument("-o", "--output", type=Path,
                    help="Path to the output file (.json, or .csv for a flat transaction table). "
                         "Defaults to JSON on standard output.")
    ap.add_argument("--encoding", default="utf-8",
                    help="Text encoding of input QIF (default: utf-8). Try cp1252 for old exports.")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="Log parser details to standard error")
    ap.add_argument("--log-file", type=Path,
                    help="Also write a DEBUG log to this file (rotated at 5 MB)")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else "WARNING", args.log_file)

    if args.output is not None:
        try:
            emitter_for_path(args.output)
        except UnsupportedOutputFormatError:
            print(UNSUPPORTED_OUTPUT_MESSAGE, file=sys.stderr)
            return 2

    if not args.file.exists():
        raise SystemExit(f"Input QIF not found: {args.file}")
    if not args.file.is_file():
        raise SystemExit(f"Input path is not a file: {args.file}")

    try:
        convert_qif(args.file, args.output, encoding=args.encoding)
    except QifParseError as e:
        raise SystemExit(f"Failed to parse {args.file}: {e}") from e
    except OSError as e:
        raise SystemExit(f"I/O error: {e}") from e
    return 0


if __name__ == "__main__":
    sys.exit(main())
