"""Tests for disposables."""

import asyncio

import pytest

from client_utils.disposable import IDisposable, using, using_async


class TestDisposable:
    """Tests for the disposable protocol."""

    def test_can_be_constructed(self, disposable):
        """Test that using() passes the resource to the callback."""
        seen = []
        using(disposable, seen.append)
        assert seen == [disposable]

    def test_is_disposable(self, disposable):
        """Test runtime protocol check."""
        assert isinstance(disposable, IDisposable)
        assert not isinstance(object(), IDisposable)

    def test_is_disposed(self, disposable):
        """Test is_disposed before and after dispose()."""
        assert disposable.is_disposed() is False
        disposable.dispose()
        assert disposable.is_disposed() is True


class TestUsing:
    """Tests for using()."""

    def test_returns_callback_result(self, disposable):
        """Test that using() returns what the callback returned."""
        assert using(disposable, lambda d: 42) == 42
        assert disposable.dispose_count == 1

    def test_disposed_on_error(self, disposable):
        """Test that dispose() is called when the callback raises."""
        with pytest.raises(RuntimeError, match="Whooops"):
            using(disposable, lambda d: d.whooops())
        assert disposable.dispose_count == 1

    def test_disposed_before_result(self, disposable):
        """Test that dispose() runs before using() returns."""
        order = []
        disposable.dispose_callback = lambda: order.append("disposed")

        result = using(disposable, lambda d: order.append("callback") or "done")
        order.append(result)

        assert order == ["callback", "disposed", "done"]


class TestUsingAsync:
    """Tests for using_async()."""

    @pytest.mark.asyncio
    async def test_disposed_after_success(self, disposable):
        """Test that dispose() is called after the awaited callback."""

        async def callback(d):
            await asyncio.sleep(0.001)
            assert d.dispose_count == 0
            return "ok"

        assert await using_async(disposable, callback) == "ok"
        assert disposable.dispose_count == 1

    @pytest.mark.asyncio
    async def test_disposed_when_async_fails(self, disposable):
        """Test that dispose() is called when the callback raises."""

        async def callback(d):
            await asyncio.sleep(0.001)
            raise ValueError("failed")

        with pytest.raises(ValueError, match="failed"):
            await using_async(disposable, callback)
        assert disposable.dispose_count == 1
