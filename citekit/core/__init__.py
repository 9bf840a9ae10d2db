"""Core domain models, normalization and validators for citable sources."""

# Exceptions
from citekit.core.exceptions import (
    CitekitError,
    ConfidenceFormatError,
    ImportFormatError,
    InvalidStyleError,
)

# Fields and enums
from citekit.core.fields import (
    BIBLIOGRAPHIC_FIELDS,
    NO_DATE,
    UNKNOWN_AUTHOR,
    CitationContext,
    CitationStyle,
    SourceKind,
)

# Models
from citekit.core.models import (
    CitationBundle,
    FormattedCitation,
    Record,
    ValidationError,
)

# Normalization
from citekit.core.normalize import (
    RecordNormalizer,
    normalize_record,
    normalize_records,
    split_author_string,
    strip_doi_prefix,
)

# Validators
from citekit.core.validators import (
    AuthorValidator,
    DOIValidator,
    TitleValidator,
    URLValidator,
    Validator,
    ValidatorRegistry,
    YearValidator,
    get_validator_registry,
)

__all__ = [
    # Exceptions
    "CitekitError",
    "InvalidStyleError",
    "ConfidenceFormatError",
    "ImportFormatError",
    # Fields and enums
    "BIBLIOGRAPHIC_FIELDS",
    "NO_DATE",
    "UNKNOWN_AUTHOR",
    "CitationContext",
    "CitationStyle",
    "SourceKind",
    # Models
    "Record",
    "FormattedCitation",
    "CitationBundle",
    "ValidationError",
    # Normalization
    "RecordNormalizer",
    "normalize_record",
    "normalize_records",
    "split_author_string",
    "strip_doi_prefix",
    # Validators
    "Validator",
    "TitleValidator",
    "YearValidator",
    "DOIValidator",
    "URLValidator",
    "AuthorValidator",
    "ValidatorRegistry",
    "get_validator_registry",
]
