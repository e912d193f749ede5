"""
Component Tests for FileCodeRepository

Reads real code files written to tmp_path.
"""

import asyncio
import tracemalloc

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from promotion_validator.eligibility_service.code_repository import (
    MAX_LINE_LENGTH,
    FileCodeRepository,
    InMemoryCodeRepository,
)
from promotion_validator.eligibility_service.protocols import CodeSourceError


pytestmark = pytest.mark.component


class TestFileRepositoryExists:
    """Tests for FileCodeRepository.exists"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", ["abc", "promo", "sale"])
    async def test_code_exists(self, write_codes, code):
        repo = FileCodeRepository(write_codes("codes.txt", ["abc", "xyz", "promo", "sale"]))

        assert await repo.exists(code) is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "code",
        [
            "invalid",  # nonexistent
            "",         # empty
            "ab",       # partial match
            "ABC",      # case sensitive
            "abc ",     # no trimming
        ],
    )
    async def test_code_not_found(self, write_codes, code):
        repo = FileCodeRepository(write_codes("codes.txt", ["abc", "xyz", "promo"]))

        assert await repo.exists(code) is False

    @pytest.mark.asyncio
    async def test_crlf_line_endings(self, write_codes):
        repo = FileCodeRepository(write_codes("codes.txt", ["abc", "promo"], line_ending="\r\n"))

        assert await repo.exists("promo") is True
        assert await repo.load_all() == {"abc", "promo"}

    @pytest.mark.asyncio
    async def test_last_line_without_newline(self, tmp_path):
        path = tmp_path / "codes.txt"
        path.write_text("abc\npromo", encoding="utf-8")

        assert await FileCodeRepository(path).exists("promo") is True

    @pytest.mark.asyncio
    async def test_surrounding_whitespace_kept(self, tmp_path):
        path = tmp_path / "codes.txt"
        path.write_text(" promo\nsale \n", encoding="utf-8")
        repo = FileCodeRepository(path)

        assert await repo.exists("promo") is False
        assert await repo.exists(" promo") is True

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        repo = FileCodeRepository(tmp_path / "nonexistent" / "file.txt")

        with pytest.raises(CodeSourceError) as exc_info:
            await repo.exists("promo")

        assert exc_info.value.source == repo.name
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    @pytest.mark.asyncio
    async def test_undecodable_file(self, tmp_path):
        path = tmp_path / "codes.txt"
        path.write_bytes(b"abc\n\xff\xfe\n")

        with pytest.raises(CodeSourceError):
            await FileCodeRepository(path).exists("zzz")

    @pytest.mark.asyncio
    async def test_long_line_skipped(self, tmp_path):
        path = tmp_path / "codes.txt"
        path.write_text("x" * 200_000 + "\npromo\n", encoding="utf-8")

        assert await FileCodeRepository(path).exists("promo") is True

    @pytest.mark.asyncio
    async def test_long_line_starting_with_code_does_not_match(self, tmp_path):
        path = tmp_path / "codes.txt"
        path.write_text("promo" + "x" * 100_000 + "\nsale\n", encoding="utf-8")
        repo = FileCodeRepository(path)

        assert await repo.exists("promo") is False
        assert await repo.exists("sale") is True

    @pytest.mark.asyncio
    async def test_code_followed_by_lone_cr_does_not_match(self, tmp_path):
        path = tmp_path / "codes.txt"
        path.write_bytes(b"promo\rx\nabc\r\n")
        repo = FileCodeRepository(path)

        assert await repo.exists("promo") is False
        assert await repo.exists("abc") is True

    @pytest.mark.asyncio
    async def test_long_line_not_held_in_memory(self, tmp_path):
        line_length = 2 * 1024 * 1024
        path = tmp_path / "codes.txt"
        path.write_text("y" * line_length + "\npromo\n", encoding="utf-8")
        repo = FileCodeRepository(path)

        tracemalloc.start()
        try:
            found = await repo.exists("promo")
            _, peak = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()

        assert found is True
        assert peak < line_length // 4

    @pytest.mark.asyncio
    async def test_concurrent_lookups(self, write_codes):
        codes = [f"{a}{b}" for a in "abcdefghij" for b in "abcdefghij"]
        repo = FileCodeRepository(write_codes("codes.txt", codes))

        results = await asyncio.gather(*(repo.exists(c) for c in codes + ["zzzzz"]))

        assert results == [True] * len(codes) + [False]


class TestFileRepositoryLoadAll:
    """Tests for FileCodeRepository.load_all"""

    @pytest.mark.asyncio
    async def test_load_all(self, write_codes):
        repo = FileCodeRepository(write_codes("codes.txt", ["abc", "xyz", "promo", "sale"]))

        codes = await repo.load_all()

        assert codes == {"abc", "xyz", "promo", "sale"}

    @pytest.mark.asyncio
    async def test_duplicates_collapse(self, write_codes):
        repo = FileCodeRepository(write_codes("codes.txt", ["abc", "abc", "xyz"]))

        assert await repo.load_all() == {"abc", "xyz"}

    @pytest.mark.asyncio
    async def test_empty_file(self, write_codes):
        repo = FileCodeRepository(write_codes("codes.txt", []))

        assert await repo.load_all() == set()

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        repo = FileCodeRepository(tmp_path / "missing.txt")

        with pytest.raises(CodeSourceError) as exc_info:
            await repo.load_all()

        assert "missing.txt" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_line_at_length_limit_accepted(self, tmp_path):
        path = tmp_path / "codes.txt"
        path.write_text("a" * MAX_LINE_LENGTH + "\r\npromo\n", encoding="utf-8")

        codes = await FileCodeRepository(path).load_all()

        assert codes == {"a" * MAX_LINE_LENGTH, "promo"}

    @pytest.mark.asyncio
    async def test_line_over_length_limit_fails(self, tmp_path):
        path = tmp_path / "codes.txt"
        path.write_text("promo\n" + "a" * (MAX_LINE_LENGTH + 1) + "\n", encoding="utf-8")
        repo = FileCodeRepository(path)

        with pytest.raises(CodeSourceError) as exc_info:
            await repo.load_all()

        assert "line 2 exceeds" in str(exc_info.value)
        assert exc_info.value.source == repo.name

class TestInMemoryRepository:
    """Tests for InMemoryCodeRepository"""

    @pytest.mark.asyncio
    async def test_exists_and_load_all(self):
        repo = InMemoryCodeRepository(["promo", "gold"], name="membership")

        assert await repo.exists("promo") is True
        assert await repo.exists("sale") is False
        assert await repo.load_all() == {"promo", "gold"}
        assert len(repo) == 2
        assert repo.name == "membership"

    @pytest.mark.asyncio
    async def test_load_all_returns_copy(self):
        repo = InMemoryCodeRepository(["promo"])

        codes = await repo.load_all()
        codes.add("gold")

        assert await repo.exists("gold") is False
