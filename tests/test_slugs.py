"""Unit tests for the slug sequencer and word count."""

from app.core.slugs import build_slug, count_words, next_slug_number


class TestNextSlugNumber:
    """Test next_slug_number function."""

    def test_no_slugs(self) -> None:
        """Empty input starts the sequence at 1."""
        assert next_slug_number([], "tech") == 1

    def test_only_matching_prefix_counts(self) -> None:
        """Slugs with another prefix are ignored."""
        assert next_slug_number({"tech-3", "tech-1", "other-9"}, "tech") == 4

    def test_non_numeric_suffix_ignored(self) -> None:
        """Non-numeric suffixes do not count."""
        assert next_slug_number({"tech-abc"}, "tech") == 1

    def test_extra_characters_ignored(self) -> None:
        """Only the exact <prefix>-<digits> form matches."""
        slugs = ["tech-5-draft", "my-tech-7", "tech-", "tech-12x", "tech-2"]
        assert next_slug_number(slugs, "tech") == 3
        assert next_slug_number(["tech-9\n"], "tech") == 1
        assert next_slug_number(["테크-4\n"], "테크") == 1

    def test_duplicates_collapse(self) -> None:
        """Repeated numbers are not an error."""
        assert next_slug_number(["tech-4", "tech-4", "tech-04"], "tech") == 5

    def test_localized_prefix(self) -> None:
        """The generated-post prefix is matched independently of the ASCII one."""
        slugs = ["테크-1", "테크-9", "tech-20"]
        assert next_slug_number(slugs, "테크") == 10
        assert next_slug_number(slugs, "tech") == 21

    def test_prefix_is_literal(self) -> None:
        """Regex characters in the prefix are matched literally."""
        assert next_slug_number(["a.b-3", "axb-8"], "a.b") == 4

    def test_non_ascii_digits_ignored(self) -> None:
        """Full-width digits are not a valid suffix."""
        assert next_slug_number(["tech-１２"], "tech") == 1

    def test_is_idempotent(self) -> None:
        """Same input, same output; input is not modified."""
        slugs = ["tech-1", "tech-2"]
        assert next_slug_number(slugs, "tech") == next_slug_number(slugs, "tech") == 3
        assert slugs == ["tech-1", "tech-2"]

    def test_build_slug(self) -> None:
        """Slug is assembled as <prefix>-<number>."""
        assert build_slug("테크", 7) == "테크-7"


class TestCountWords:
    """Test count_words function."""

    def test_strips_html(self) -> None:
        """Tags are removed before counting."""
        assert count_words("<p>Hello <b>big</b> world</p>") == 3

    def test_normalizes_whitespace(self) -> None:
        """Runs of whitespace and newlines count as one separator."""
        assert count_words("  one\n\n two\tthree  ") == 3

    def test_empty(self) -> None:
        """Empty or tag-only content has no words."""
        assert count_words("") == 0
        assert count_words(None) == 0
        assert count_words("<br/><hr>") == 0

    def test_korean(self) -> None:
        """Korean text is split on whitespace."""
        assert count_words("<h2>테니스 서브의</h2><p>물리 원리</p>") == 3
