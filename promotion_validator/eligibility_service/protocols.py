"""
Eligibility Service Protocols

Defines interfaces for dependency injection and testing.
Following the protocol-based architecture pattern.
"""

from typing import AbstractSet, Optional, Protocol


# ====================
# Source Protocol
# ====================


class CodeSourceProtocol(Protocol):
    """Protocol for a read-only source of promotion codes"""

    async def exists(self, code: str) -> bool:
        """Check whether code occurs in the source, stopping at the first match"""
        ...

    async def load_all(self) -> AbstractSet[str]:
        """Read every code in the source into a set"""
        ...


# ====================
# Custom Exceptions
# ====================


class EligibilityServiceError(Exception):
    """Base exception for eligibility service errors"""
    pass


class CodeValidationError(EligibilityServiceError):
    """Raised when a code fails syntactic validation"""

    def __init__(
        self,
        message: str,
        kind: str = "",
        field: str = "code"
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.field = field

    def __str__(self) -> str:
        return f"validation error: {self.field} - {self.message}"


class SourceLoadError(EligibilityServiceError):
    """Raised when the campaign source could not be materialized"""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class SourceLookupError(EligibilityServiceError):
    """Raised when the membership source lookup failed"""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class CodeSourceError(EligibilityServiceError):
    """Raised by a source provider when its backing store cannot be read"""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


__all__ = [
    "CodeSourceProtocol",
    "EligibilityServiceError",
    "CodeValidationError",
    "SourceLoadError",
    "SourceLookupError",
    "CodeSourceError",
]
