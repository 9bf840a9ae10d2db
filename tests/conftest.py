"""Pytest configuration and shared record fixtures."""

import os
from typing import Any

import pytest

from citekit.core.fields import SourceKind
from citekit.core.models import Record


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """Isolate environment variables and config lookup for each test.

    Config files are searched in the working directory and under
    XDG_CONFIG_HOME, so both point into the test's temporary directory.
    """
    original_env = os.environ.copy()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.delenv("CITEKIT_STYLE", raising=False)
    monkeypatch.delenv("CITEKIT_OUTPUT", raising=False)
    monkeypatch.chdir(tmp_path)

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def deep_learning() -> Record:
    """Fully populated journal article."""
    return Record(
        title="Deep Learning",
        authors=("Y LeCun", "Y Bengio", "G Hinton"),
        year=2015,
        journal="Nature",
        volume="521",
        issue="7553",
        pages="436-444",
        doi="10.1038/nature14539",
    )


@pytest.fixture
def title_only() -> Record:
    """Record with nothing but a title."""
    return Record(title="Solitary Paper")


@pytest.fixture
def single_author() -> Record:
    """Single-author article without a DOI."""
    return Record(
        title="Attention Is All You Need",
        authors=("A Vaswani",),
        year=2017,
        journal="NeurIPS",
        volume="30",
        pages="5998-6008",
    )


@pytest.fixture
def website() -> Record:
    """Website source with a URL and no DOI."""
    return Record(
        title="General Format",
        authors=("Purdue OWL",),
        year=2023,
        url="https://owl.purdue.edu/owl/research_and_citation/apa_style",
        kind=SourceKind.WEBSITE,
    )


@pytest.fixture
def raw_records() -> list[dict[str, Any]]:
    """Loosely typed records as a search layer returns them."""
    return [
        {
            "id": "s1",
            "title": "Deep Learning",
            "authors": ["Y LeCun", "Y Bengio", "G Hinton"],
            "year": 2015,
            "journal": "Nature",
            "volume": "521",
            "issue": "7553",
            "pages": "436-444",
            "doi": "10.1038/nature14539",
            "source": "crossref",
        },
        {
            "id": "lib-7",
            "title": "Deep learning",
            "author": "Y LeCun, Y Bengio, G Hinton",
            "year": "2015",
            "doi": "https://doi.org/10.1038/NATURE14539",
        },
        {
            "title": "  Attention Is All You Need ",
            "author": "A Vaswani",
            "year": 2017,
            "type": "proceedings-article",
        },
        {
            "title": "attention is all you need",
            "authors": ["a vaswani", "N Shazeer"],
            "year": "2017",
        },
    ]
