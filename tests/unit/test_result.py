"""
Unit tests for the Ok/Err result wrapper.
"""

import pytest

from presentation_service.domain_core.errors import NotFoundError, StorageError
from presentation_service.domain_core.result import Err, ErrorKind, Ok, returns_result


class TestReturnsResult:
    @pytest.mark.asyncio
    async def test_value_is_wrapped_in_ok(self):
        @returns_result
        async def operation():
            return 42

        result = await operation()

        assert result == Ok(42)
        assert result.is_ok

    @pytest.mark.asyncio
    async def test_domain_error_becomes_err(self):
        @returns_result
        async def operation():
            raise NotFoundError("Missing Deck")

        result = await operation()

        assert isinstance(result, Err)
        assert not result.is_ok
        assert result.kind == ErrorKind.NOT_FOUND
        assert "was not found" in result.detail

    @pytest.mark.asyncio
    async def test_storage_error_keeps_its_kind(self):
        @returns_result
        async def operation():
            raise StorageError("insert", "connection refused")

        result = await operation()

        assert result == Err(
            kind=ErrorKind.STORAGE_ERROR,
            detail="Storage error during insert: connection refused",
        )

    @pytest.mark.asyncio
    async def test_non_domain_errors_propagate(self):
        @returns_result
        async def operation():
            raise RuntimeError("bug")

        with pytest.raises(RuntimeError, match="bug"):
            await operation()
