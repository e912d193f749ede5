"""
Eligibility Service Data Models

Pydantic models for eligibility outcomes and error kinds.
"""

from enum import Enum
from typing import FrozenSet, Optional

from pydantic import BaseModel, Field

from .protocols import (
    CodeValidationError,
    EligibilityServiceError,
    SourceLoadError,
    SourceLookupError,
)


# Set of codes materialized from a source
CodeIndex = FrozenSet[str]

CODE_FIELD = "code"
MAX_CODE_LENGTH = 5


# ====================
# Enum Types
# ====================

class ErrorKind(str, Enum):
    """Kind of failure attached to an eligibility outcome"""
    EMPTY_CODE = "empty_code"
    TOO_LONG = "too_long"
    INVALID_CHARACTER = "invalid_character"
    SOURCE_LOAD = "source_load"
    SOURCE_LOOKUP = "source_lookup"


class ErrorCategory(str, Enum):
    """Coarse grouping of error kinds"""
    VALIDATION = "validation"
    SOURCE_LOAD = "source_load"
    SOURCE_LOOKUP = "source_lookup"


class IndexState(str, Enum):
    """Lifecycle of the campaign code index"""
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


VALIDATION_KINDS = frozenset({
    ErrorKind.EMPTY_CODE,
    ErrorKind.TOO_LONG,
    ErrorKind.INVALID_CHARACTER,
})


# ====================
# Outcome Models
# ====================

class EligibilityError(BaseModel):
    """Error carried by an eligibility outcome"""
    kind: ErrorKind
    message: str
    field: Optional[str] = Field(None, description="Input field that failed validation")
    source: Optional[str] = Field(None, description="Source that could not be read")

    @property
    def category(self) -> ErrorCategory:
        if self.kind in VALIDATION_KINDS:
            return ErrorCategory.VALIDATION
        if self.kind == ErrorKind.SOURCE_LOAD:
            return ErrorCategory.SOURCE_LOAD
        return ErrorCategory.SOURCE_LOOKUP

    def to_exception(self) -> EligibilityServiceError:
        """Build the exception matching this error"""
        if self.category == ErrorCategory.VALIDATION:
            return CodeValidationError(
                self.message, kind=self.kind.value, field=self.field or CODE_FIELD
            )
        if self.category == ErrorCategory.SOURCE_LOAD:
            return SourceLoadError(self.message, source=self.source)
        return SourceLookupError(self.message, source=self.source)

    def __str__(self) -> str:
        if self.category == ErrorCategory.VALIDATION:
            return f"validation error: {self.field} - {self.message}"
        return self.message


class EligibilityResult(BaseModel):
    """Outcome of a single eligibility query"""
    code: str
    eligible: bool = False
    error: Optional[EligibilityError] = None

    @property
    def success(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> bool:
        """Return the eligibility flag, raising if the query failed"""
        if self.error is not None:
            raise self.error.to_exception()
        return self.eligible


__all__ = [
    "CodeIndex",
    "CODE_FIELD",
    "MAX_CODE_LENGTH",
    "ErrorKind",
    "ErrorCategory",
    "IndexState",
    "EligibilityError",
    "EligibilityResult",
]
