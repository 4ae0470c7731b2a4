"""
Converter attribution banner filter.

Some converters (Aspose.Words evaluation builds in particular) prepend a
bold banner such as

    **Evaluation Only. Created with Aspose.Words. Copyright 2003-2024 Aspose Pty Ltd.**

followed by blank lines. The filter drops the banner and the blank run that
follows it, in a single forward pass with no lookahead.
"""

import logging
from enum import Enum
from typing import Iterable, Iterator

from .lines import is_blank

logger = logging.getLogger(__name__)

DEFAULT_ATTRIBUTION = "Aspose.Words"


class FilterState(Enum):
    """States of the boilerplate filter."""
    NORMAL = "normal"
    SUPPRESSING = "suppressing"


class BoilerplateFilter:
    """
    Two-state machine that suppresses the attribution banner.

    NORMAL:      marker line -> drop, go to SUPPRESSING; anything else passes.
    SUPPRESSING: marker or blank line -> drop; anything else passes and
                 returns to NORMAL.

    If the input ends while suppressing, the pending blank lines are lost.
    """

    def __init__(self, attribution: str = DEFAULT_ATTRIBUTION):
        if not attribution:
            raise ValueError("Attribution marker must not be empty")
        self.attribution = attribution
        self.state = FilterState.NORMAL
        self.dropped = 0

    def is_marker(self, line: str) -> bool:
        """Bold-delimited line naming the converter attribution."""
        text = line.strip()
        return (
            len(text) >= 4
            and text.startswith("**")
            and text.endswith("**")
            and self.attribution.lower() in text.lower()
        )

    def accept(self, line: str) -> bool:
        """Feed one line; return True if it should be kept."""
        if self.is_marker(line):
            self.state = FilterState.SUPPRESSING
        elif self.state is FilterState.SUPPRESSING and is_blank(line):
            pass
        else:
            self.state = FilterState.NORMAL
            return True

        self.dropped += 1
        return False

    def filter(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield the lines that survive the filter."""
        for line in lines:
            if self.accept(line):
                yield line

        if self.dropped:
            logger.debug("Dropped %d boilerplate lines", self.dropped)
