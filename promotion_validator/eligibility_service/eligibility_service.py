"""
Eligibility Service Business Logic

Checks whether a promotion code is present in both the campaign source
and the membership source.
"""

import asyncio
import logging
import time
from typing import Optional

from .protocols import CodeSourceProtocol
from .models import (
    CodeIndex,
    EligibilityError,
    EligibilityResult,
    ErrorKind,
    IndexState,
)
from .validation import RawCode, coerce_code, validate_code

logger = logging.getLogger(__name__)


def _describe_source(source: CodeSourceProtocol, error: Exception) -> Optional[str]:
    """Best-effort name of the source an error came from"""
    name = getattr(error, "source", None)
    if name:
        return str(name)
    return getattr(source, "name", None)


class EligibilityService:
    """
    Promotion eligibility engine

    The campaign source is read once into an in-memory index on the first
    query and reused for the lifetime of the instance, including a failed
    load. The membership source is never materialized; each query that
    passes the campaign index does one early-exit lookup against it.
    """

    def __init__(
        self,
        campaign_source: CodeSourceProtocol,
        membership_source: CodeSourceProtocol,
    ):
        """
        Initialize eligibility service with injected dependencies

        Args:
            campaign_source: Source indexed once and queried repeatedly
            membership_source: Source queried by point lookup only
        """
        self.campaign_source = campaign_source
        self.membership_source = membership_source

        self._index: Optional[CodeIndex] = None
        self._load_error: Optional[EligibilityError] = None
        self._index_state = IndexState.UNINITIALIZED
        self._index_lock = asyncio.Lock()

        logger.info("EligibilityService initialized with dependency injection")

    # ====================
    # Index State
    # ====================

    @property
    def index_state(self) -> IndexState:
        return self._index_state

    @property
    def index_size(self) -> int:
        return len(self._index) if self._index is not None else 0

    async def ensure_index_loaded(self) -> Optional[EligibilityError]:
        """
        Build the campaign index exactly once.

        Concurrent callers wait for the single build and all observe its
        outcome. A failed build is terminal and is never retried.

        Returns:
            None once the index is ready, otherwise the cached load error
        """
        if self._index_state in (IndexState.READY, IndexState.FAILED):
            return self._load_error

        async with self._index_lock:
            if self._index_state == IndexState.UNINITIALIZED:
                await self._build_index()

        return self._load_error

    async def _build_index(self) -> None:
        self._index_state = IndexState.LOADING
        started = time.perf_counter()
        try:
            codes = await self.campaign_source.load_all()
            index = frozenset(codes)
        except asyncio.CancelledError:
            # Build did not complete; the next caller starts it again
            self._index_state = IndexState.UNINITIALIZED
            raise
        except Exception as e:
            logger.error(f"Error loading campaign codes: {e}")
            self._load_error = EligibilityError(
                kind=ErrorKind.SOURCE_LOAD,
                message=str(e) or type(e).__name__,
                source=_describe_source(self.campaign_source, e),
            )
            self._index_state = IndexState.FAILED
            return

        self._index = index
        self._index_state = IndexState.READY
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"Campaign index loaded: {len(self._index)} codes in {elapsed_ms:.1f}ms"
        )

    # ====================
    # Eligibility
    # ====================

    async def is_eligible(self, code: RawCode) -> EligibilityResult:
        """Check whether code exists in both the campaign and membership sources"""
        code = coerce_code(code)
        validation_error = validate_code(code)
        if validation_error is not None:
            logger.debug(f"Rejected code {code!r}: {validation_error.message}")
            return EligibilityResult(code=code, eligible=False, error=validation_error)

        load_error = await self.ensure_index_loaded()
        if load_error is not None:
            return EligibilityResult(code=code, eligible=False, error=load_error)

        if code not in self._index:
            logger.debug(f"Code {code!r} not in campaign index")
            return EligibilityResult(code=code, eligible=False)

        try:
            in_membership = await self.membership_source.exists(code)
        except Exception as e:
            logger.error(f"Error looking up membership code {code!r}: {e}")
            return EligibilityResult(
                code=code,
                eligible=False,
                error=EligibilityError(
                    kind=ErrorKind.SOURCE_LOOKUP,
                    message=str(e) or type(e).__name__,
                    source=_describe_source(self.membership_source, e),
                ),
            )

        logger.debug(f"Code {code!r} membership lookup: {in_membership}")
        return EligibilityResult(code=code, eligible=bool(in_membership))

    async def check(self, code: RawCode) -> bool:
        """
        Check eligibility, raising on failure

        Raises:
            CodeValidationError: code is syntactically invalid
            SourceLoadError: campaign source could not be loaded
            SourceLookupError: membership source could not be read
        """
        result = await self.is_eligible(code)
        return result.raise_for_error()


__all__ = ["EligibilityService"]
