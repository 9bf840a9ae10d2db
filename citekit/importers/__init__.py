"""Record importers."""

from citekit.importers.json import JsonImporter, encode_records

__all__ = ["JsonImporter", "encode_records"]
