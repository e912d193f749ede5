"""
Eligibility Service

Answers whether a promotion code is present in both the campaign and the
membership code sources.
"""

from .code_repository import FileCodeRepository, InMemoryCodeRepository
from .eligibility_service import EligibilityService
from .factory import create_eligibility_service
from .models import (
    CodeIndex,
    EligibilityError,
    EligibilityResult,
    ErrorCategory,
    ErrorKind,
    IndexState,
)
from .protocols import (
    CodeSourceError,
    CodeSourceProtocol,
    CodeValidationError,
    EligibilityServiceError,
    SourceLoadError,
    SourceLookupError,
)
from .validation import coerce_code, is_valid_code, validate_code

__all__ = [
    "EligibilityService",
    "create_eligibility_service",
    "FileCodeRepository",
    "InMemoryCodeRepository",
    "CodeIndex",
    "EligibilityError",
    "EligibilityResult",
    "ErrorCategory",
    "ErrorKind",
    "IndexState",
    "CodeSourceProtocol",
    "EligibilityServiceError",
    "CodeValidationError",
    "SourceLoadError",
    "SourceLookupError",
    "CodeSourceError",
    "coerce_code",
    "validate_code",
    "is_valid_code",
]
