"""Tests for source deduplication."""

import logging

from citekit.core.models import Record
from citekit.core.normalize import normalize_records
from citekit.library.dedupe import SourceDeduplicator, dedupe


class TestDedupe:
    """Test first-seen-wins deduplication."""

    def test_search_and_library_duplicates(self, raw_records):
        """The same paper from two layers collapses to the first copy."""
        records = normalize_records(raw_records)

        unique = dedupe(records)

        assert len(unique) == 2
        assert unique[0].id == "s1"
        assert unique[1].title == "Attention Is All You Need"
        assert unique[1].authors == ("A Vaswani",)

    def test_order_is_preserved(self):
        """Kept records stay in input order."""
        records = [
            Record(title="C", year=2003),
            Record(title="A", year=2001),
            Record(title="c", year=2003),
            Record(title="B", year=2002),
        ]
        assert [r.title for r in dedupe(records)] == ["C", "A", "B"]

    def test_no_duplicates(self, deep_learning, single_author):
        """Distinct records all survive."""
        assert dedupe([deep_learning, single_author]) == [deep_learning, single_author]

    def test_empty_input(self):
        """Empty input yields an empty list."""
        assert dedupe([]) == []

    def test_dedupe_is_idempotent(self, raw_records):
        """Deduplicating twice changes nothing."""
        once = dedupe(normalize_records(raw_records))
        assert dedupe(once) == once


class TestSourceDeduplicator:
    """Test the detailed deduplication report."""

    def test_run_reports_matches(self, raw_records, caplog):
        """Each dropped record is paired with the record that was kept."""
        records = normalize_records(raw_records)

        with caplog.at_level(logging.INFO, logger="citekit.library.dedupe"):
            result = SourceDeduplicator().run(records)

        assert result.removed_count == 2
        first = result.duplicates[0]
        assert first.key == "10.1038/nature14539"
        assert first.kept.id == "s1"
        assert first.dropped.id == "lib-7"
        assert "Removed 2 duplicate" in caplog.text

    def test_groups(self, raw_records):
        """Groups contain only keys with several records."""
        groups = SourceDeduplicator().groups(normalize_records(raw_records))

        assert set(groups) == {
            "10.1038/nature14539",
            "attention is all you need-2017-a vaswani",
        }
        assert all(len(group) == 2 for group in groups.values())

    def test_custom_key_function(self):
        """A custom key function replaces identity keys."""
        records = [Record(title="A", year=2000), Record(title="B", year=2000)]
        deduplicator = SourceDeduplicator(key_func=lambda r: str(r.year))

        assert [r.title for r in deduplicator.dedupe(records)] == ["A"]
