#!/usr/bin/env python3
"""
DocConversion CLI

Command-line interface for converting office documents to Markdown and
cleaning Markdown files.

Usage:
    python -m docconversion convert <source>... [options]
    python -m docconversion convert report.pdf -t ./docs
    python -m docconversion convert ~/Downloads             # every PDF/DOC/DOCX below
    python -m docconversion format ./docs                   # clean every .md below
    python -m docconversion readme ./docs --force           # expand rm_creator.md templates
    python -m docconversion formats

Options:
    -t, --target DIR     Output root; each document gets DIR/<name>/ReadMe.md
    --name FILE          Markdown file name (default: ReadMe.md)
    --force              Reconvert / overwrite existing output
    --attribution TEXT   Converter banner to strip (default: Aspose.Words)
    -v, --verbose        More log output (-vv for debug)
"""

import argparse
import logging
import sys
from pathlib import Path

from docconversion.config import ConversionConfig, DEFAULT_OUTPUT_FILE_NAME
from docconversion.core import ConversionStatus, DocConverter, get_files
from docconversion.readme_creator import ReadMeCreator

STATUS_TAGS = {
    ConversionStatus.CONVERTED: "[SAVED]",
    ConversionStatus.RECLEANED: "[CLEANED]",
    ConversionStatus.UNSUPPORTED: "[SKIP]",
    ConversionStatus.FAILED: "[ERROR]",
    ConversionStatus.MISSING: "[MISSING]",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docconversion",
        description=(
            "Document-to-Markdown conversion and cleanup\n\n"
            "Converts PDF, DOC and DOCX files into Markdown and normalizes\n"
            "the result: converter banners removed, headings spaced, blank\n"
            "lines collapsed, pipe tables aligned, image captions unified."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m docconversion convert policy.pdf -t ./markdown_out\n"
            "  python -m docconversion convert ./documents/ --force\n"
            "  python -m docconversion format ./markdown_out/\n"
            "  python -m docconversion readme ./markdown_out/rm_creator.md\n"
        ),
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v info, -vv debug)",
    )
    parser.add_argument(
        "--attribution",
        default=None,
        help="Converter attribution banner to strip (default: Aspose.Words)",
    )
    parser.add_argument(
        "--placeholder",
        default=None,
        help="Caption that replaces image alt texts (default: Illustration)",
    )

    sub = parser.add_subparsers(dest="command")

    convert = sub.add_parser("convert", help="Convert PDF/DOC/DOCX documents to Markdown")
    convert.add_argument("sources", nargs="+", help="Files or directories to convert")
    convert.add_argument(
        "-t", "--target",
        default=None,
        help="Output root directory (default: current directory)",
    )
    convert.add_argument(
        "--name",
        default=DEFAULT_OUTPUT_FILE_NAME,
        help=f"Markdown file name inside each output folder (default: {DEFAULT_OUTPUT_FILE_NAME})",
    )
    convert.add_argument("--force", action="store_true", help="Reconvert even if Markdown output exists")
    convert.add_argument("--soffice", default=None, help="Path to the LibreOffice binary for .doc files")

    fmt = sub.add_parser("format", help="Clean and format Markdown files in place")
    fmt.add_argument("sources", nargs="+", help="Markdown files or directories")

    readme = sub.add_parser("readme", help="Build ReadMe.md from rm_creator.md templates")
    readme.add_argument("sources", nargs="+", help="Template files or directories to search")
    readme.add_argument("--force", action="store_true", help="Overwrite existing ReadMe.md files")

    sub.add_parser("formats", help="Show supported input formats")
    return parser


def build_config(args) -> ConversionConfig:
    """Translate parsed arguments into a ConversionConfig."""
    options = {}
    if args.attribution:
        options["attribution"] = args.attribution
    if args.placeholder:
        options["placeholder"] = args.placeholder
    if getattr(args, "target", None):
        options["target_path"] = Path(args.target)
    if getattr(args, "name", None):
        options["output_file_name"] = args.name
    if getattr(args, "soffice", None):
        options["soffice"] = args.soffice
    options["force"] = getattr(args, "force", False)
    return ConversionConfig(**options)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "formats":
        _show_formats()
        return 0

    if not args.command:
        parser.print_help()
        print("\nError: No command given. Use convert, format, readme or formats.")
        return 1

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    print("=" * 60)
    print("  DOCCONVERSION - Document-to-Markdown Converter")
    print("=" * 60)
    print()

    if args.command == "readme":
        success_count, error_count = _run_readme(config, args.sources)
    else:
        success_count, error_count = _run_documents(config, args.command, args.sources)

    print()
    print("-" * 60)
    print(f"  Done: {success_count} processed, {error_count} errors")
    if args.command == "convert":
        print(f"  Output: {config.target_path}")
    print("-" * 60)
    return 1 if error_count else 0


def _run_documents(config: ConversionConfig, command: str, sources) -> tuple:
    engine = DocConverter(config)
    success_count = 0
    error_count = 0

    for source in sources:
        try:
            if command == "convert":
                results = engine.convert_all([source])
            else:
                results = engine.format_all([source])
        except (OSError, ValueError) as e:
            print(f"[ERROR] {source}: {e}", file=sys.stderr)
            error_count += 1
            continue

        for result in results:
            tag = STATUS_TAGS[result.status]
            target = result.output_path or result.source_file
            if result.ok:
                print(f"{tag} {target}")
                success_count += 1
            elif result.status is ConversionStatus.MISSING:
                print(f"{tag} {target}")
            else:
                stream = sys.stderr if result.status is ConversionStatus.FAILED else sys.stdout
                print(f"{tag} {result.source_file}: {result.message}", file=stream)
                error_count += 1

    return success_count, error_count


def _run_readme(config: ConversionConfig, sources) -> tuple:
    creator = ReadMeCreator(config)
    success_count = 0
    error_count = 0

    templates = []
    for source in sources:
        path = Path(source)
        if path.is_dir():
            templates.extend(get_files(path, config.template_name, [".md"]))
        else:
            templates.append(path)

    for template in templates:
        try:
            written = creator.create(template)
        except (OSError, ValueError) as e:
            print(f"[ERROR] {template}: {e}", file=sys.stderr)
            error_count += 1
            continue
        if written:
            print(f"[SAVED] {written}")
            success_count += 1
        else:
            print(f"[EXISTS] {template.parent / config.output_file_name} (use --force to overwrite)")

    return success_count, error_count


def _show_formats():
    """Display all supported formats."""
    formats = DocConverter.supported_formats()
    print("\nSupported Input Formats:")
    print("-" * 40)
    for category, extensions in formats.items():
        print(f"\n  {category}:")
        for ext in extensions:
            print(f"    {ext}")
    print()


if __name__ == "__main__":
    sys.exit(main())
