"""
Blank-line and whitespace normalization.

Headings end up isolated by exactly one blank line above and below (when
there is neighbouring content), runs of blank lines collapse to one, leading
blank lines disappear, tabs become two spaces and trailing whitespace is
stripped.
"""

from typing import Iterable, Iterator, Optional

from .lines import LineInfo

TAB_REPLACEMENT = "  "


def normalize_line(line: str) -> str:
    """Expand tabs and strip trailing whitespace."""
    return line.replace("\t", TAB_REPLACEMENT).rstrip()


class SpacingNormalizer:
    """
    Single-pass normalizer carrying only the previously examined line.

    `previous` is None until the first line has been examined; a blank line
    seen while `previous` is None or blank is never emitted.
    """

    def __init__(self):
        self.previous: Optional[LineInfo] = None

    def _previous_has_content(self) -> bool:
        return self.previous is not None and not self.previous.is_blank

    def feed(self, line: str) -> list[str]:
        """Examine one line and return the lines to emit for it (0-2)."""
        current = LineInfo.of(line)
        out = []

        if current.is_heading:
            if self._previous_has_content():
                out.append("")
            out.append(normalize_line(line))
        elif not current.is_blank:
            if self.previous is not None and self.previous.is_heading:
                out.append("")
            out.append(normalize_line(line))
        elif self._previous_has_content():
            out.append("")

        self.previous = current
        return out

    def normalize(self, lines: Iterable[str]) -> Iterator[str]:
        for line in lines:
            yield from self.feed(line)
