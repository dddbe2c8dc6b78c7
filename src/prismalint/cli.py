"""Command-line interface.

Run via::

    prismalint lint prisma/schema.prisma        # report naming violations
    prismalint lint --fix prisma/               # rewrite bad @map/@@map values
    prismalint wrap schema.prisma > schema.prisma.js
    prismalint rules

Settings are loaded from environment variables and ``.env`` file.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TextIO

from prismalint import __version__
from prismalint.config import load_config
from prismalint.exceptions import ConfigurationError
from prismalint.parser.carrier import extract, is_schema_filename, wrap
from prismalint.rules import RuleRegistry
from prismalint.service.linter import LintResult, SchemaLinter
from prismalint.settings import Settings

logger = logging.getLogger("prismalint.cli")

EXIT_OK = 0
EXIT_LINT_ERRORS = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prismalint", description="Naming-convention linter for Prisma schemas"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    commands = parser.add_subparsers(dest="command", required=True)

    lint = commands.add_parser("lint", help="Lint schema files or directories")
    lint.add_argument("paths", nargs="+", help="Schema files, carrier files or directories")
    lint.add_argument("-c", "--config", help="Configuration file (default: .prismalint.yaml)")
    lint.add_argument("-f", "--format", choices=["text", "json"], default="text")
    lint.add_argument(
        "--fix", action="store_true", help="Rewrite non-conforming @map/@@map values in place"
    )

    wrap_cmd = commands.add_parser("wrap", help="Print the JavaScript carrier for a schema")
    wrap_cmd.add_argument("file")

    extract_cmd = commands.add_parser("extract", help="Print the schema embedded in a carrier")
    extract_cmd.add_argument("file")

    commands.add_parser("rules", help="List available rules")
    return parser


def _iter_schema_files(paths: Sequence[str]) -> Iterator[Path]:
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            found = (p for p in path.rglob("*") if p.is_file() and is_schema_filename(p.name))
            yield from sorted(found)
        else:
            yield path


def _read(path: Path) -> str:
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def _write_text_report(results: list[LintResult], out: TextIO) -> None:
    errors = warnings = 0
    for result in results:
        for d in result.diagnostics:
            out.write(
                f"{result.filename}:{d.line}:{d.column + 1}  {d.severity.value:<5}  "
                f"{d.message}  {d.rule}\n"
            )
        errors += result.error_count
        warnings += result.warning_count
    if errors or warnings:
        out.write(f"\n{errors + warnings} problem(s) ({errors} error(s), {warnings} warning(s))\n")


def _write_json_report(results: list[LintResult], out: TextIO) -> None:
    payload = [
        {
            "filename": result.filename,
            "analysed": result.analysed,
            "diagnostics": [d.model_dump(mode="json") for d in result.diagnostics],
        }
        for result in results
    ]
    json.dump(payload, out, indent=2)
    out.write("\n")


def _run_lint(args: argparse.Namespace, settings: Settings, out: TextIO) -> int:
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, default_name=settings.config_file)
    linter = SchemaLinter.from_settings(settings, config)

    results: list[LintResult] = []
    for path in _iter_schema_files(args.paths):
        text = _read(path)
        if args.fix:
            fixed = linter.fix_text(text, filename=str(path))
            if fixed.changed:
                path.write_text(fixed.output, encoding="utf-8", newline="")
                logger.info("Applied %d fix(es) to %s", fixed.applied, path)
                text = fixed.output
        results.append(linter.lint_text(text, filename=str(path)))

    if args.format == "json":
        _write_json_report(results, out)
    else:
        _write_text_report(results, out)
    return EXIT_LINT_ERRORS if any(r.error_count for r in results) else EXIT_OK


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    """Entry point for the ``prismalint`` console script."""
    out = out or sys.stdout
    args = build_parser().parse_args(argv)
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    if args.command == "rules":
        for name in RuleRegistry.available():
            out.write(f"{name:<26} {RuleRegistry.get_class(name).description}\n")
        return EXIT_OK
    if args.command == "wrap":
        out.write(wrap(_read(Path(args.file))))
        return EXIT_OK
    if args.command == "extract":
        out.write(extract(_read(Path(args.file))).schema_text)
        return EXIT_OK

    try:
        return _run_lint(args, settings, out)
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())
