"""
Unit tests for the spacing normalizer.
"""

from docconversion.cleanup.spacing import SpacingNormalizer, normalize_line


def normalize(lines):
    return list(SpacingNormalizer().normalize(lines))


class TestNormalizeLine:
    """Tests for per-line whitespace handling."""

    def test_tabs_become_two_spaces(self):
        assert normalize_line("a\tb\t\tc") == "a  b    c"

    def test_trailing_whitespace_stripped(self):
        assert normalize_line("text \t ") == "text"

    def test_leading_whitespace_kept(self):
        assert normalize_line("  - item") == "  - item"


class TestBlankLines:
    """Tests for leading blanks and blank-run collapsing."""

    def test_leading_blank_lines_skipped(self):
        assert normalize(["", "  ", "\t", "text"]) == ["text"]

    def test_blank_run_collapses_to_one(self):
        assert normalize(["a", "", "", "", "b"]) == ["a", "", "b"]

    def test_whitespace_only_blank_emitted_empty(self):
        assert normalize(["a", "   ", "b"]) == ["a", "", "b"]

    def test_single_trailing_blank_kept(self):
        assert normalize(["a", "", ""]) == ["a", ""]

    def test_only_blank_lines(self):
        assert normalize(["", "", ""]) == []

    def test_empty_input(self):
        assert normalize([]) == []


class TestHeadings:
    """Tests for blank-line isolation of headings."""

    def test_heading_between_paragraphs(self):
        assert normalize(["para", "# H", "more"]) == ["para", "", "# H", "", "more"]

    def test_heading_at_start_gets_no_blank_before(self):
        assert normalize(["# T", "body"]) == ["# T", "", "body"]

    def test_consecutive_headings(self):
        assert normalize(["# A", "## B"]) == ["# A", "", "## B"]

    def test_existing_blank_after_heading_not_doubled(self):
        assert normalize(["# A", "", "text"]) == ["# A", "", "text"]

    def test_existing_blank_before_heading_not_doubled(self):
        assert normalize(["text", "", "# A"]) == ["text", "", "# A"]

    def test_previous_tracks_unemitted_blank(self):
        """A swallowed blank still counts as the previous line."""
        assert normalize(["a", "", "", "# H"]) == ["a", "", "# H"]

    def test_heading_at_end(self):
        assert normalize(["text", "# End"]) == ["text", "", "# End"]

    def test_indented_hash_is_plain_text(self):
        assert normalize(["text", "  # not heading"]) == ["text", "  # not heading"]

    def test_heading_trailing_whitespace_and_tabs(self):
        assert normalize(["#\tTitle  "]) == ["#  Title"]


class TestStatefulFeed:
    """Tests for the feed() interface."""

    def test_feed_returns_lines_per_input(self):
        normalizer = SpacingNormalizer()
        assert normalizer.feed("") == []
        assert normalizer.feed("text") == ["text"]
        assert normalizer.feed("# H") == ["", "# H"]
        assert normalizer.feed("after") == ["", "after"]
        assert normalizer.previous.text == "after"
