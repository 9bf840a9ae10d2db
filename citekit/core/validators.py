"""Validation system for bibliographic records.

Validation is advisory: normalization and rendering accept any record,
and validators report what a citation UI should flag to the user.

Key validators:
- TitleValidator: Ensures the required title is present
- YearValidator: Checks the publication year is plausible
- DOIValidator: Checks DOI syntax
- URLValidator: Checks URL structure
- AuthorValidator: Flags blank or suspicious author names
"""

import re
from abc import ABC, abstractmethod
from datetime import datetime
from urllib.parse import urlparse

from .models import Record, ValidationError


class Validator(ABC):
    """Base validator interface."""

    @abstractmethod
    def validate(self, record: Record) -> list[ValidationError]:
        """Validate a record and return list of errors."""
        pass


class TitleValidator(Validator):
    """Validate that a record has a non-blank title."""

    def validate(self, record: Record) -> list[ValidationError]:
        if record.title and record.title.strip():
            return []
        return [
            ValidationError(
                field="title",
                message="Title cannot be empty",
                severity="error",
                record_id=record.id,
            )
        ]


class YearValidator(Validator):
    """Validate the publication year range.

    Years more than one year in the future are accepted for in-press
    work but flagged.
    """

    MIN_YEAR = 1000

    def validate(self, record: Record) -> list[ValidationError]:
        if record.year is None:
            return [
                ValidationError(
                    field="year",
                    message="No publication year; citations will show n.d.",
                    severity="info",
                    record_id=record.id,
                )
            ]

        current_year = datetime.now().year
        if record.year < self.MIN_YEAR or record.year > current_year + 1:
            return [
                ValidationError(
                    field="year",
                    message=f"Implausible publication year: {record.year}",
                    severity="warning",
                    record_id=record.id,
                )
            ]
        return []


class DOIValidator(Validator):
    """Validate Digital Object Identifier (DOI) format.

    DOIs follow the pattern 10.XXXX/YYYY where XXXX is the registrant
    code and YYYY is the item identifier.
    """

    def validate(self, record: Record) -> list[ValidationError]:
        if record.doi and not re.match(r"^10\.\d{4,}/\S+$", record.doi):
            return [
                ValidationError(
                    field="doi",
                    message=f"Invalid DOI format: {record.doi}",
                    severity="warning",
                    record_id=record.id,
                )
            ]
        return []


class URLValidator(Validator):
    """Validate URL format and structure."""

    def validate(self, record: Record) -> list[ValidationError]:
        if not record.url:
            return []

        result = urlparse(record.url)
        if result.scheme not in ("http", "https") or not result.netloc:
            return [
                ValidationError(
                    field="url",
                    message=f"Invalid URL format: {record.url}",
                    severity="warning",
                    record_id=record.id,
                )
            ]
        return []


class AuthorValidator(Validator):
    """Flag author lists that will render poorly."""

    def validate(self, record: Record) -> list[ValidationError]:
        errors = []

        if not record.authors:
            errors.append(
                ValidationError(
                    field="authors",
                    message="No authors; citations will show Unknown",
                    severity="info",
                    record_id=record.id,
                )
            )

        for name in record.authors:
            if not any(c.isalpha() for c in name):
                errors.append(
                    ValidationError(
                        field="authors",
                        message=f"Author name has no letters: {name!r}",
                        severity="warning",
                        record_id=record.id,
                    )
                )

        return errors


class ValidatorRegistry:
    """Central registry for all validators."""

    def __init__(self, validators: list[Validator] | None = None):
        self.validators = validators or [
            TitleValidator(),
            YearValidator(),
            DOIValidator(),
            URLValidator(),
            AuthorValidator(),
        ]

    def register(self, validator: Validator) -> None:
        """Add a validator to the registry."""
        self.validators.append(validator)

    def validate(self, record: Record) -> list[ValidationError]:
        """Run all validators on a single record.

        Args:
            record: Record to validate.

        Returns:
            Combined list of all validation errors.
        """
        all_errors = []
        for validator in self.validators:
            all_errors.extend(validator.validate(record))
        return all_errors


_global_registry: ValidatorRegistry | None = None


def get_validator_registry() -> ValidatorRegistry:
    """Get or create the global validator registry."""
    global _global_registry

    if _global_registry is None:
        _global_registry = ValidatorRegistry()

    return _global_registry
