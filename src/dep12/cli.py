"""Command line interface for checking DEP-12 upstream metadata."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import Any, Dict, List

from .config import Settings, load_settings
from .document import Dep12Document
from .exporters import to_yaml, warnings_to_dicts
from .models import ConstructionError
from .parsers import DocumentLoader
from .report import render_report
from .validation import Dep12Validator

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_WARNINGS = 1
EXIT_LOAD_ERROR = 2


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dep12", description="Validate Debian DEP-12 upstream metadata"
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging verbosity (default from DEP12_LOG_LEVEL)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser(
        "validate", help="Check debian/upstream/metadata files (or .bib files)"
    )
    validate.add_argument("inputs", nargs="+", type=Path, help="Files to validate")
    validate.add_argument(
        "--json-output",
        type=Path,
        help="Write structured validation results to a JSON file",
    )
    validate.add_argument(
        "--strict",
        action="store_true",
        default=settings.strict,
        help="Exit with status 1 when any warning is reported",
    )

    convert = subparsers.add_parser(
        "convert", help="Convert a BibTeX file into DEP-12 YAML with a Reference field"
    )
    convert.add_argument("input", type=Path, help="BibTeX file to convert")
    convert.add_argument("--output", type=Path, help="Write YAML here instead of stdout")
    return parser


def _validate_files(args: argparse.Namespace, settings: Settings) -> int:
    validator = Dep12Validator()
    results: Dict[str, Any] = {}
    exit_code = EXIT_OK
    found_warnings = False

    for path in args.inputs:
        try:
            document = Dep12Document.from_file(path, settings.yaml_config())
        except ConstructionError as exc:
            logger.error("Cannot load %s: %s", path, exc)
            print(f"{path}: {exc}", file=sys.stderr)
            results[str(path)] = {"error": str(exc)}
            exit_code = EXIT_LOAD_ERROR
            continue

        warnings = validator.validate(document)
        found_warnings = found_warnings or bool(warnings)
        print(render_report(warnings, source=str(path)))
        results[str(path)] = {"warnings": warnings_to_dicts(warnings)}

    if args.json_output:
        args.json_output.write_text(json.dumps(results, indent=2, default=str))

    if exit_code == EXIT_OK and args.strict and found_warnings:
        exit_code = EXIT_WARNINGS
    return exit_code


def _convert_file(args: argparse.Namespace) -> int:
    loader = DocumentLoader()
    try:
        document = Dep12Document.from_bibtex(loader.load_bibtex(loader.load_text(args.input)))
    except ConstructionError as exc:
        print(f"{args.input}: {exc}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    text = to_yaml(document)
    if args.output:
        args.output.write_text(text)
    else:
        print(text, end="")
    return EXIT_OK


def main(argv: List[str] | None = None) -> int:
    settings = load_settings()
    args = _build_parser(settings).parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level, logging.WARNING), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "convert":
        return _convert_file(args)
    return _validate_files(args, settings)


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    raise SystemExit(main())
