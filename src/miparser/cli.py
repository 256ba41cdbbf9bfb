"""
Command-line interface for miparser.

Usage:
  miparser report.txt                      # Detailed output
  miparser --summary report.txt            # Short summary
  miparser --yaml report.txt               # YAML to stdout
  miparser --yaml -o report.yaml report.txt  # YAML to file
  miparser --json -o report.json report.txt  # JSON to file
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from miparser._version import __version__
from miparser.config import get_config
from miparser.formatters import format_detailed, format_json, format_summary, format_yaml
from miparser.reader import read_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the miparser command."""
    parser = argparse.ArgumentParser(
        prog="miparser",
        description="Parse MediaInfo text reports into structured data.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  (default)    Detailed output: every parsed field with readable units
  -s/--summary Short summary of file and tracks
  -y/--yaml    YAML document (to stdout, or to -o file)
  -j/--json    JSON document (to stdout, or to -o file)

Examples:
  miparser report.txt
  miparser --summary report.txt
  miparser --yaml -o report.yaml report.txt
        """,
    )
    parser.add_argument("file", help="MediaInfo text file to parse")
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Write output to file (only with --yaml or --json)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

    # Mode selection (mutually exclusive)
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("-y", "--yaml", action="store_true", help="Output as YAML")
    mode_group.add_argument("-j", "--json", action="store_true", help="Output as JSON")
    mode_group.add_argument(
        "-s", "--summary", action="store_true", help="Show only summary information"
    )
    return parser


def _select_mode(args: argparse.Namespace, default: str) -> str:
    if args.summary:
        return "summary"
    if args.yaml:
        return "yaml"
    if args.json:
        return "json"
    return default


def main(argv: list[str] | None = None) -> int:
    """Main entry point for miparser CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = get_config()
    level = getattr(logging, config.logging.level, logging.WARNING)
    if args.verbose:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    mode = _select_mode(args, config.output.mode)
    if args.output and mode not in ("yaml", "json"):
        print("Error: -o/--output requires --yaml or --json", file=sys.stderr)
        return 1

    file_path = os.path.abspath(args.file)
    try:
        print(f"Parsing MediaInfo file: {file_path}\n")
        report = read_report(file_path)

        if mode == "summary":
            print(format_summary(report))
            return 0
        if mode == "formatted":
            print(format_detailed(report))
            return 0

        if mode == "yaml":
            output = format_yaml(report, indent=config.output.indent)
        else:
            output = format_json(report, indent=config.output.indent)

        if args.output:
            output_path = os.path.abspath(args.output)
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(output)
            print(f"{mode.upper()} output written to: {output_path}")
        else:
            print(output)
        return 0

    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Failed to process %s", file_path, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
