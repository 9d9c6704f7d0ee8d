"""Command-line entry point for the rulecheck analyzer."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from .application import Application
from .config import AnalyzerConfig, load_config
from .errors import AnalyzerError
from .progress import DotProgressPrinter
from .result import Report, format_summary_table

ERROR_EXIT_CODE = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rulecheck",
        description="Rule-based static analyzer for Python source",
    )
    parser.add_argument("path", help="File or directory to analyze.")
    parser.add_argument(
        "--validator",
        default=None,
        help="Python interpreter used for the syntax check (defaults to the running interpreter).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML settings file.",
    )
    parser.add_argument(
        "--rules-path",
        "-r",
        dest="rule_paths",
        action="append",
        default=[],
        help="Directory with additional rule modules (repeatable).",
    )
    parser.add_argument(
        "--disable",
        "-d",
        dest="disabled_rules",
        action="append",
        default=[],
        help="Fully qualified rule name to skip, e.g. rulecheck.rules.line_length (repeatable).",
    )
    parser.add_argument(
        "--no-builtin-rules",
        dest="builtin_rules",
        action="store_false",
        default=None,
        help="Do not load the built-in rules.",
    )
    parser.add_argument(
        "--extension",
        dest="extensions",
        action="append",
        default=[],
        help="File suffix to analyze when walking directories (repeatable, default .py).",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Report format.",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        type=str,
        default=None,
        help="Path to write the JSON report (e.g., artifacts/rulecheck.json).",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Print one character per analyzed file.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only log errors.")
    return parser


def configure_logging(verbose: bool, quiet: bool) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def resolve_config(args: argparse.Namespace) -> AnalyzerConfig:
    base = load_config(args.config) if args.config else AnalyzerConfig()
    return base.merge(
        validator=args.validator,
        builtin_rules=args.builtin_rules,
        rule_paths=args.rule_paths,
        disabled_rules=args.disabled_rules,
        extensions=args.extensions,
    )


def write_output(report: Report, output_path: str | None, report_format: str) -> None:
    summary = format_summary_table(report)
    print(summary)

    if output_path or report_format == "json":
        payload = json.dumps(report.to_dict(), indent=2)
        if output_path:
            output_file = Path(output_path)
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(payload, encoding="utf-8")
            print(f"\nReport written to {output_path}")
        else:
            print("\nJSON Report")
            print(payload)


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    try:
        config = resolve_config(args)
        app = Application.from_config(config)
        if args.progress:
            app.register_progress_printer(DotProgressPrinter())
        report = app.run(config.validator, args.path)
    except AnalyzerError as exc:
        print(f"rulecheck: error: {exc}", file=sys.stderr)
        return ERROR_EXIT_CODE

    write_output(report, args.output_path, args.format)
    return report.exit_code()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
