"""
Markdown cleanup pipeline.

    read -> boilerplate filter + spacing normalizer (one pass)
         -> table reflow -> image placeholder rewrite -> write

The file is read whole and overwritten whole. A path that does not exist is
a silent no-op.
"""

import logging
import re
from pathlib import Path
from typing import Iterable

from .boilerplate import DEFAULT_ATTRIBUTION, BoilerplateFilter
from .images import DEFAULT_PLACEHOLDER, rewrite_image_placeholders
from .spacing import SpacingNormalizer
from .tables import format_tables

logger = logging.getLogger(__name__)

# Line breaks only; str.splitlines() would also split on form feeds that
# PDF extraction leaves inside lines.
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split text into lines; a final line break does not start a new line."""
    lines = LINE_BREAK_RE.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def clean_lines(
    lines: Iterable[str],
    attribution: str = DEFAULT_ATTRIBUTION,
) -> list[str]:
    """Filter, normalize spacing and reflow tables. Returns the output lines."""
    boilerplate = BoilerplateFilter(attribution)
    spacing = SpacingNormalizer()
    spaced = list(spacing.normalize(boilerplate.filter(lines)))
    return format_tables(spaced)


def clean_text(
    text: str,
    attribution: str = DEFAULT_ATTRIBUTION,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> str:
    """
    Run the full cleanup on a Markdown string.

    Every output line, including the last, is terminated by a newline.
    """
    lines = clean_lines(split_lines(text), attribution=attribution)
    joined = "".join(f"{line}\n" for line in lines)
    return rewrite_image_placeholders(joined, placeholder)


def clean_and_format(
    file_path,
    attribution: str = DEFAULT_ATTRIBUTION,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> bool:
    """
    Clean a Markdown file in place.

    Args:
        file_path: Path of the Markdown file
        attribution: Converter attribution marker to strip
        placeholder: Caption that replaces every image alt text

    Returns:
        True if the file was rewritten, False if it does not exist
    """
    path = Path(file_path)
    if not path.is_file():
        logger.debug("Nothing to clean, %s does not exist", path)
        return False

    # utf-8-sig drops a leading byte-order mark if the converter wrote one
    original = path.read_text(encoding="utf-8-sig")
    cleaned = clean_text(original, attribution=attribution, placeholder=placeholder)

    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(cleaned)

    logger.info("Cleaned %s", path)
    return True
