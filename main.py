#!/usr/bin/env python3
"""
Tailwind Class Categorizer
Command line entry point: prints the categorized lines for a class string
or for every class attribute in a markup file.
"""

import sys
import logging
import argparse
from pathlib import Path

from core.categorizer import format_class_string
from core.markup_extractor import MarkupExtractor
from tailwind.config_reader import load_config
from utils.file_utils import detect_filetype, read_file_content

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Group Tailwind classes into categorized lines.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--classes', help="Raw class attribute value to format")
    source.add_argument('--file', help="HTML/JSX/TSX file whose class attributes to preview")
    parser.add_argument('--config', help="JSON formatter config file (defaults to the built-in taxonomy)")
    parser.add_argument('--filetype', choices=['html', 'jsx', 'tsx'],
                        help="Markup type of --file (detected from the extension by default)")
    parser.add_argument('--print-width', type=int, help="Override printWidth")
    parser.add_argument('--mode', choices=['separate', 'separate-categorized', 'inline'],
                        help="Override viewportGrouping")
    parser.add_argument('--verbose', action='store_true', help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    """Main execution function."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = load_config(args.config).with_overrides(
        print_width=args.print_width,
        viewport_grouping=args.mode,
    )

    if args.classes is not None:
        for line in format_class_string(args.classes, config):
            print(line)
        return 0

    path = Path(args.file)
    filetype = args.filetype or detect_filetype(path)
    if filetype is None:
        print(f"Cannot detect markup type of {path}, pass --filetype", file=sys.stderr)
        return 1
    try:
        content = read_file_content(path)
    except OSError as e:
        print(f"Cannot read {path}: {e}", file=sys.stderr)
        return 1

    for preview in MarkupExtractor().preview_markup(content, filetype, config):
        print(f"{preview['location']}: {preview['original']}")
        for line in preview['lines']:
            print(f"    {line}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
