"""JSON format importer and exporter for record exchange."""

import logging
from pathlib import Path
from typing import Any

import msgspec

from citekit.core.exceptions import ImportFormatError
from citekit.core.models import Record
from citekit.core.normalize import RecordNormalizer
from citekit.core.validators import ValidatorRegistry

logger = logging.getLogger(__name__)

# Top-level keys under which payloads wrap their record list
LIST_KEYS = ("records", "citations", "sources", "entries", "results")


class JsonImporter:
    """Import records from JSON.

    Accepts a top-level array of record objects or an object wrapping the
    array under one of ``LIST_KEYS``. Each record is normalized; records
    that fail validation are reported and skipped when ``validate`` is set.
    """

    def __init__(self, validate: bool = True):
        self.validate = validate
        self.normalizer = RecordNormalizer()
        self.validator_registry = ValidatorRegistry()

    def import_file(self, path: Path) -> tuple[list[Record], list[str]]:
        """Import from a JSON file.

        Returns:
            Imported records and per-record error messages.

        Raises:
            ImportFormatError: If the file cannot be read or is not a
                record list.
        """
        try:
            data = msgspec.json.decode(Path(path).read_bytes())
        except OSError as e:
            raise ImportFormatError(path, str(e)) from e
        except msgspec.DecodeError as e:
            raise ImportFormatError(path, f"invalid JSON: {e}") from e

        return self.import_data(data, source=path)

    def import_data(
        self, data: Any, source: object = "<data>"
    ) -> tuple[list[Record], list[str]]:
        """Import from already decoded JSON data."""
        items = self._record_list(data)
        if items is None:
            raise ImportFormatError(
                source, "expected an array or an object with a record list"
            )
        return self._import_records(items)

    def _record_list(self, data: Any) -> list[Any] | None:
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            for key in LIST_KEYS:
                if isinstance(data.get(key), list):
                    return data[key]
        return None

    def _import_records(self, items: list[Any]) -> tuple[list[Record], list[str]]:
        records = []
        errors = []

        for i, item in enumerate(items):
            if not isinstance(item, dict):
                errors.append(f"Record {i}: expected an object, got {type(item).__name__}")
                continue

            record = self.normalizer.normalize(item)

            if self.validate:
                messages = [
                    e.message
                    for e in self.validator_registry.validate(record)
                    if e.severity == "error"
                ]
                if messages:
                    errors.append(f"Record {i}: " + "; ".join(messages))
                    continue

            records.append(record)

        for error in errors:
            logger.warning(error)

        return records, errors

    def export_records(self, records: list[Record], path: Path) -> None:
        """Export records to JSON."""
        Path(path).write_bytes(encode_records(records))


def encode_records(records: list[Record]) -> bytes:
    """Encode records as indented JSON with a version header."""
    data = {"version": "1.0", "records": [record.to_dict() for record in records]}
    return msgspec.json.format(msgspec.json.encode(data), indent=2)
