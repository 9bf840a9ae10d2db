"""Tests for canonical identity keys."""

import pytest

from citekit.citations.styles import format_in_text
from citekit.core.models import Record
from citekit.library.identity import key_of, normalize_doi, normalize_text


class TestKeyOf:
    """Test identity key computation."""

    def test_doi_is_the_key(self, deep_learning):
        """Records with a DOI are keyed by it."""
        assert key_of(deep_learning) == "10.1038/nature14539"

    def test_doi_case_and_prefix_ignored(self):
        """DOI keys are prefix- and case-insensitive."""
        a = Record(title="A", doi="10.1038/NATURE14539")
        b = Record(title="B", doi="https://doi.org/10.1038/nature14539")
        assert key_of(a) == key_of(b)

    def test_composite_key(self):
        """Without a DOI the key is title-year-first author."""
        record = Record(
            title="  Attention Is  All You Need ",
            authors=("A Vaswani", "N Shazeer"),
            year=2017,
        )
        assert key_of(record) == "attention is all you need-2017-a vaswani"

    def test_composite_key_ignores_case_and_spacing(self):
        """Case and spacing differences collapse to one key."""
        a = Record(title="Deep Learning", authors=("Y LeCun",), year=2015)
        b = Record(title="deep  learning", authors=(" y lecun",), year=2015)
        assert key_of(a) == key_of(b)

    def test_composite_key_distinguishes_year(self):
        """Different years give different keys."""
        a = Record(title="Survey", authors=("A",), year=2020)
        b = Record(title="Survey", authors=("A",), year=2021)
        assert key_of(a) != key_of(b)

    def test_only_first_author_counts(self):
        """Co-author differences do not change the key."""
        a = Record(title="T", authors=("A", "B"), year=2000)
        b = Record(title="T", authors=("A", "C"), year=2000)
        assert key_of(a) == key_of(b)

    def test_blank_leading_author_skipped(self):
        """The key uses the first non-blank author, as citations do."""
        padded = Record(title="T", authors=(" ", "Smith"), year=2000)
        plain = Record(title="T", authors=("Smith",), year=2000)

        assert key_of(padded) == "t-2000-smith"
        assert key_of(padded) == key_of(plain)
        assert format_in_text(padded, "apa") == "(Smith, 2000)"

    def test_missing_parts(self, title_only):
        """Missing year and author become empty segments."""
        assert key_of(title_only) == "solitary paper--"
        assert key_of(Record(title="")) == "--"


class TestNormalizers:
    """Test the text and DOI normalizers."""

    @pytest.mark.parametrize(
        "value,expected",
        [(None, ""), ("", ""), ("  A\tB  c ", "a b c")],
    )
    def test_normalize_text(self, value, expected):
        """Whitespace is collapsed and text lower-cased."""
        assert normalize_text(value) == expected

    def test_normalize_doi(self):
        """DOI prefixes are removed before lower-casing."""
        assert normalize_doi("doi:10.1/ABC") == "10.1/abc"
        assert normalize_doi(None) == ""
