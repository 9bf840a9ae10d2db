"""Tests for precomputed citation bundles."""

import logging

import msgspec
import pytest

from citekit.citations.renderer import CitationRenderer, enrich, render_all
from citekit.core.exceptions import InvalidStyleError
from citekit.core.fields import CitationStyle
from citekit.core.models import CitationBundle


class TestRenderAll:
    """Test bundle rendering."""

    def test_bundle_contains_every_style(self, deep_learning):
        """Both forms are rendered for all four styles."""
        bundle = render_all(deep_learning)

        assert isinstance(bundle, CitationBundle)
        assert bundle.fingerprint == deep_learning.fingerprint
        assert bundle.apa.in_text == "(Y LeCun et al., 2015)"
        assert bundle.mla.in_text == "(Y LeCun et al.)"
        assert bundle.chicago.in_text == "(Y LeCun, Y Bengio, and G Hinton 2015)"
        assert bundle.ieee.in_text == "[1]"
        assert bundle.ieee.reference.startswith("[1] Y LeCun, Y Bengio, and G Hinton,")

    def test_title_only_record_renders(self, title_only):
        """Sparse records still get a full bundle."""
        bundle = render_all(title_only)
        assert bundle.apa.reference == "Unknown (n.d.). Solitary Paper."

    def test_current_bundle_is_reused(self, deep_learning, caplog):
        """A current cached bundle is returned without re-rendering."""
        cached = enrich(deep_learning)

        with caplog.at_level(logging.DEBUG, logger="citekit.citations.renderer"):
            bundle = CitationRenderer().render_all(cached)

        assert bundle is cached.citations
        assert "cache hit" in caplog.text

    def test_stale_bundle_is_rerendered(self, deep_learning):
        """A bundle from older field values is ignored."""
        cached = enrich(deep_learning)
        stale = msgspec.structs.replace(cached, year=2016)

        bundle = render_all(stale)

        assert bundle is not cached.citations
        assert bundle.apa.in_text == "(Y LeCun et al., 2016)"


class TestEnrich:
    """Test attaching bundles to records."""

    def test_enrich_returns_new_record(self, deep_learning):
        """The input record is not modified."""
        enriched = enrich(deep_learning)

        assert deep_learning.citations is None
        assert enriched is not deep_learning
        assert enriched.has_current_citations
        assert enriched.title == deep_learning.title

    def test_enrich_is_idempotent(self, deep_learning):
        """Enriching a current record returns it unchanged."""
        enriched = enrich(deep_learning)
        assert enrich(enriched) is enriched

    def test_update_then_enrich(self, deep_learning):
        """Editing a field and enriching again refreshes the citations."""
        edited = enrich(deep_learning).update(title="Deeper Learning")
        assert edited.citations is None

        refreshed = enrich(edited)
        assert "Deeper Learning" in refreshed.citations.apa.reference

    def test_enrich_all_preserves_order(self, deep_learning, title_only):
        """Batch enrichment keeps input order."""
        records = CitationRenderer().enrich_all([title_only, deep_learning])
        assert [r.title for r in records] == ["Solitary Paper", "Deep Learning"]
        assert all(r.has_current_citations for r in records)


class TestCite:
    """Test single citation lookup."""

    def test_cite_prefers_cached_bundle(self, deep_learning):
        """Strings come from the attached bundle when it is current."""
        renderer = CitationRenderer()
        enriched = renderer.enrich(deep_learning)

        assert renderer.cite(enriched, "apa") == enriched.citations.apa.in_text
        assert renderer.cite(enriched, CitationStyle.IEEE, "reference") == (
            enriched.citations.ieee.reference
        )

    def test_cite_unknown_style(self, deep_learning):
        """Unknown styles raise."""
        with pytest.raises(InvalidStyleError):
            CitationRenderer().cite(deep_learning, "vancouver")
