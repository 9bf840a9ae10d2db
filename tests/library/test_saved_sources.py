"""Tests for saved-source collections."""

from citekit.core.models import Record
from citekit.library.saved import SavedSources


class TestSavedSources:
    """Test membership by identity key."""

    def test_add_and_contains(self, deep_learning):
        """Added sources are members."""
        saved = SavedSources(name="Thesis").add(deep_learning)

        assert saved.contains(deep_learning)
        assert len(saved) == 1
        assert saved.keys == ("10.1038/nature14539",)

    def test_add_is_immutable(self, deep_learning):
        """Adding returns a new collection."""
        empty = SavedSources(name="Thesis")
        saved = empty.add(deep_learning)

        assert len(empty) == 0
        assert saved is not empty
        assert saved.id == empty.id

    def test_same_source_from_other_layer(self, deep_learning):
        """A differently shaped copy of a saved source is recognized."""
        library_copy = Record(
            title="Deep learning",
            authors=("LeCun",),
            doi="https://doi.org/10.1038/NATURE14539",
        )
        saved = SavedSources(name="Thesis").add(deep_learning)

        assert saved.contains(library_copy)
        assert saved.add(library_copy) is saved

    def test_remove(self, deep_learning, single_author):
        """Removing keeps the other keys in order."""
        saved = (
            SavedSources(name="Thesis").add(deep_learning).add(single_author)
        )

        removed = saved.remove(deep_learning)

        assert not removed.contains(deep_learning)
        assert removed.contains(single_author)
        assert removed.remove(deep_learning) is removed

    def test_toggle(self, deep_learning):
        """Toggle saves then unsaves."""
        saved = SavedSources(name="Thesis").toggle(deep_learning)
        assert saved.contains(deep_learning)
        assert not saved.toggle(deep_learning).contains(deep_learning)

    def test_filter(self, deep_learning, single_author, title_only):
        """filter returns saved records in input order."""
        saved = SavedSources(name="Thesis").add(title_only).add(deep_learning)

        assert saved.filter([deep_learning, single_author, title_only]) == [
            deep_learning,
            title_only,
        ]
