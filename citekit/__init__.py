"""Citation formatting and source deduplication for academic writing tools."""

__version__ = "0.1.0"
