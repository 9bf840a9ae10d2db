"""Exception classes for citekit."""


class CitekitError(Exception):
    """Base exception for citekit errors."""

    pass


class InvalidStyleError(CitekitError, ValueError):
    """Raised when a citation style or context name is not recognized."""

    def __init__(self, kind: str, value: object):
        """Initialize with the enum kind and the rejected value."""
        self.kind = kind
        self.value = value
        super().__init__(f"Unknown citation {kind}: {value!r}")


class ConfidenceFormatError(CitekitError, ValueError):
    """Raised when a confidence analysis payload does not match its contract."""

    def __init__(self, message: str):
        """Initialize with a decode message."""
        super().__init__(f"Invalid confidence analysis: {message}")


class ImportFormatError(CitekitError, ValueError):
    """Raised when an import file cannot be read as a list of records."""

    def __init__(self, path: object, message: str):
        """Initialize with the file path and reason."""
        self.path = path
        super().__init__(f"Cannot import {path}: {message}")
