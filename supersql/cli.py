"""Command line entrypoint: format, check and fix SuperSQL files."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
import json
import logging
from pathlib import Path
import sys

from tqdm import tqdm

from supersql import __version__
from supersql.diagnostics import Diagnostic
from supersql.format import FormatOptions
from supersql.migrate import default_migration_rules
from supersql.pipeline import run_check, run_fix, run_format

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_IO_ERROR = 2


class _SourceReader:
    """Reads the requested files, remembering whether any could not be read."""

    def __init__(self, paths: list[Path], *, progress: bool, desc: str) -> None:
        self._paths = paths
        self._progress = progress
        self._desc = desc
        self.failed = False

    def __iter__(self) -> Iterator[tuple[Path, str]]:
        for path in tqdm(self._paths, desc=self._desc, unit="file", disable=not self._progress):
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.error("Cannot read %s: %s", path, exc)
                self.failed = True
                continue
            yield path, text

    def status(self, findings: bool) -> int:
        if self.failed:
            return EXIT_IO_ERROR
        return EXIT_FINDINGS if findings else EXIT_OK


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return number


def _write(path: Path, text: str) -> None:
    path.write_text(text, encoding="utf-8")
    logger.info("Wrote %s", path)


def _format_options(args: argparse.Namespace) -> FormatOptions:
    return FormatOptions(
        indent_width=args.indent_width,
        use_spaces=not args.tabs,
        trim_trailing_whitespace=args.trim_trailing_whitespace,
        insert_final_newline=args.final_newline,
        trim_final_newlines=args.trim_final_newlines,
    )


def _describe(path: Path, diagnostic: Diagnostic) -> str:
    start = diagnostic.range.start
    return f"{path}:{start.line + 1}:{start.character + 1}: {diagnostic.severity} [{diagnostic.code}] {diagnostic.message}"


def _cmd_format(args: argparse.Namespace) -> int:
    options = _format_options(args)
    reader = _SourceReader(args.paths, progress=args.progress, desc="format")
    unformatted = False
    for path, text in reader:
        result = run_format(text, options)
        if args.check:
            if result.changed:
                unformatted = True
                print(f"would reformat {path}")
        elif args.write:
            if result.changed:
                _write(path, result.formatted_text)
        else:
            sys.stdout.write(result.formatted_text)
    return reader.status(unformatted)


def _cmd_check(args: argparse.Namespace) -> int:
    reader = _SourceReader(args.paths, progress=args.progress, desc="check")
    report: list[dict[str, object]] = []
    errors = False
    for path, text in reader:
        result = run_check(text)
        errors = errors or result.has_errors
        if args.json:
            report.append(
                {
                    "path": str(path),
                    "diagnostics": [diagnostic.to_dict() for diagnostic in result.diagnostics],
                }
            )
            continue
        for diagnostic in result.diagnostics:
            print(_describe(path, diagnostic))
    if args.json:
        print(json.dumps(report, indent=2))
    return reader.status(errors)


def _cmd_fix(args: argparse.Namespace) -> int:
    reader = _SourceReader(args.paths, progress=args.progress, desc="fix")
    errors = False
    for path, text in reader:
        result = run_fix(text)
        logger.info("%s: %d fixes applied", path, len(result.edits))
        if args.write:
            if result.changed:
                _write(path, result.fixed_text)
        else:
            sys.stdout.write(result.fixed_text)
        for diagnostic in result.remaining:
            errors = errors or diagnostic.severity == "error"
            print(_describe(path, diagnostic), file=sys.stderr)
    return reader.status(errors)


def _cmd_rules(args: argparse.Namespace) -> int:
    for rule in default_migration_rules():
        fix = f"{rule.before} -> {rule.after}" if rule.after is not None else f"{rule.before} (no automatic fix)"
        print(f"{rule.code:<28} {rule.severity:<8} {fix}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="supersql", description="Format and migrate SuperSQL queries")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a tqdm progress bar while processing files",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    format_parser = subparsers.add_parser("format", help="Format files")
    format_parser.add_argument("paths", nargs="+", type=Path)
    mode = format_parser.add_mutually_exclusive_group()
    mode.add_argument("--write", action="store_true", help="Rewrite files in place")
    mode.add_argument("--check", action="store_true", help="Exit with 1 if any file would change")
    format_parser.add_argument("--indent-width", type=_non_negative_int, default=2, help="Spaces per indent level (default: 2)")
    format_parser.add_argument("--tabs", action="store_true", help="Indent with tabs")
    format_parser.add_argument("--trim-trailing-whitespace", action="store_true")
    format_parser.add_argument("--final-newline", action="store_true", help="End output with one newline")
    format_parser.add_argument("--trim-final-newlines", action="store_true")
    format_parser.set_defaults(handler=_cmd_format)

    check_parser = subparsers.add_parser("check", help="Report deprecated syntax")
    check_parser.add_argument("paths", nargs="+", type=Path)
    check_parser.add_argument("--json", action="store_true", help="Print editor-protocol shaped JSON")
    check_parser.set_defaults(handler=_cmd_check)

    fix_parser = subparsers.add_parser("fix", help="Apply automatic migration fixes")
    fix_parser.add_argument("paths", nargs="+", type=Path)
    fix_parser.add_argument("--write", action="store_true", help="Rewrite files in place")
    fix_parser.set_defaults(handler=_cmd_fix)

    rules_parser = subparsers.add_parser("rules", help="List migration rules")
    rules_parser.set_defaults(handler=_cmd_rules)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
