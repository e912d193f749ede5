"""
Eligibility Service Code Repositories

Data access layer - line-per-code text files and in-memory collections
"""

import asyncio
import logging
from pathlib import Path
from typing import AbstractSet, Iterable, TextIO, Union

from .protocols import CodeSourceError

logger = logging.getLogger(__name__)

# Longest line load_all accepts; longer lines fail the load
MAX_LINE_LENGTH = 64 * 1024

# Read size used to skip past lines that cannot match in exists
SKIP_CHUNK = 8192


def _strip_line_ending(line: str) -> str:
    """Drop a trailing \\n or \\r\\n and nothing else"""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class FileCodeRepository:
    """Code source backed by a text file with one code per line"""

    def __init__(self, file_path: Union[str, Path], encoding: str = "utf-8"):
        self.file_path = Path(file_path)
        self.encoding = encoding

    @property
    def name(self) -> str:
        return str(self.file_path)

    def _open(self) -> TextIO:
        # Split on \n only; a trailing \r is removed by _strip_line_ending
        return open(self.file_path, "r", encoding=self.encoding, newline="\n")

    def _read_error(self, error: Exception) -> CodeSourceError:
        return CodeSourceError(
            f"failed to read codes from {self.file_path}: {error}",
            source=self.name,
        )

    def _scan(self, code: str) -> bool:
        # A matching line is the code plus at most \r\n; longer lines are
        # skipped in SKIP_CHUNK pieces and never held whole
        limit = len(code) + 2
        try:
            with self._open() as f:
                while True:
                    line = f.readline(limit)
                    if not line:
                        return False
                    if len(line) == limit and not line.endswith("\n"):
                        while line and not line.endswith("\n"):
                            line = f.readline(SKIP_CHUNK)
                        continue
                    if _strip_line_ending(line) == code:
                        return True
        except (OSError, UnicodeDecodeError) as e:
            raise self._read_error(e) from e

    def _read_all(self) -> AbstractSet[str]:
        codes = set()
        line_number = 0
        try:
            with self._open() as f:
                while True:
                    # Room for a full line and its \r\n plus one character to detect overflow
                    line = f.readline(MAX_LINE_LENGTH + 3)
                    if not line:
                        break
                    line_number += 1
                    candidate = _strip_line_ending(line)
                    if len(candidate) > MAX_LINE_LENGTH:
                        raise CodeSourceError(
                            f"failed to read codes from {self.file_path}: "
                            f"line {line_number} exceeds {MAX_LINE_LENGTH} characters",
                            source=self.name,
                        )
                    codes.add(candidate)
        except (OSError, UnicodeDecodeError) as e:
            raise self._read_error(e) from e
        logger.debug(f"Read {len(codes)} codes from {self.file_path}")
        return codes

    async def exists(self, code: str) -> bool:
        """Scan the file for code, stopping at the first match"""
        return await asyncio.to_thread(self._scan, code)

    async def load_all(self) -> AbstractSet[str]:
        """Read every line of the file into a set"""
        return await asyncio.to_thread(self._read_all)

    def __repr__(self) -> str:
        return f"FileCodeRepository({str(self.file_path)!r})"


class InMemoryCodeRepository:
    """Code source backed by an in-memory collection"""

    def __init__(self, codes: Iterable[str], name: str = "memory"):
        self._codes = frozenset(codes)
        self.name = name

    async def exists(self, code: str) -> bool:
        return code in self._codes

    async def load_all(self) -> AbstractSet[str]:
        return set(self._codes)

    def __len__(self) -> int:
        return len(self._codes)


__all__ = ["FileCodeRepository", "InMemoryCodeRepository"]
