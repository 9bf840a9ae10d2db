"""Pytest configuration and fixtures for CLI tests."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    """Click CLI test runner."""
    return CliRunner()


def _write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data, indent=2))
    return path


@pytest.fixture
def records_file(tmp_path, raw_records) -> Path:
    """JSON file holding search and library copies of two papers."""
    return _write_json(tmp_path / "records.json", raw_records)


@pytest.fixture
def single_record_file(tmp_path) -> Path:
    """JSON file with one fully populated record wrapped in an object."""
    return _write_json(
        tmp_path / "single.json",
        {
            "records": [
                {
                    "title": "Deep Learning",
                    "authors": ["Y LeCun", "Y Bengio", "G Hinton"],
                    "year": 2015,
                    "journal": "Nature",
                    "volume": "521",
                    "issue": "7553",
                    "pages": "436-444",
                    "doi": "10.1038/nature14539",
                }
            ]
        },
    )


@pytest.fixture
def confidence_file(tmp_path) -> Path:
    """Saved confidence analysis."""
    return _write_json(
        tmp_path / "confidence.json",
        {
            "totalCitations": 12,
            "overallConfidence": {
                "overall": 78.5,
                "recencyScore": 90,
                "coverageScore": 70,
                "qualityScore": 80,
                "diversityScore": 65,
                "status": "good",
                "warnings": ["Three citations are older than ten years"],
                "suggestions": ["Add a recent review article"],
            },
            "citationBreakdown": {
                "recent": 6,
                "acceptable": 3,
                "dated": 2,
                "outdated": 1,
            },
        },
    )


@pytest.fixture
def write_json(tmp_path):
    """Factory writing arbitrary JSON data to a named file."""

    def _write(name: str, data) -> Path:
        return _write_json(tmp_path / name, data)

    return _write
