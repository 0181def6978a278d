"""Pytest configuration and fixtures."""

import logging
import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


class MockDisposable:
    """Disposable that counts dispose() calls."""

    def __init__(self):
        self.dispose_count = 0
        self.dispose_callback = None

    def is_disposed(self) -> bool:
        return self.dispose_count > 0

    def dispose(self) -> None:
        self.dispose_count += 1
        if self.dispose_callback:
            self.dispose_callback()

    def whooops(self):
        raise RuntimeError("Whooops")


class MockClass:
    """Target object for tracing tests."""

    def __init__(self, test_value: str | None = None):
        self._test_value = test_value

    def test_error(self, msg: str):
        raise ValueError(msg)

    def test_scope(self):
        return self._test_value

    @staticmethod
    def add_static(*args: int) -> int:
        return sum(args)

    @classmethod
    def add_class(cls, *args: int) -> int:
        return sum(args)

    def add_instance(self, *args: int) -> int:
        return sum(args)

    async def add_instance_async(self, *args: int) -> int:
        return sum(args)

    async def test_error_async(self, msg: str):
        raise ValueError(msg)


@pytest.fixture(autouse=True)
def reset_client_utils(monkeypatch):
    """Isolate tests from the environment and from logging setup."""
    from client_utils.config import reset_settings

    for name in (
        "LOG_LEVEL",
        "LOG_FILE",
        "DEBOUNCE_MS",
        "RETRIES",
        "RETRY_INTERVAL_MS",
        "RETRY_TIMEOUT_MS",
    ):
        monkeypatch.delenv(f"CLIENT_UTILS_{name}", raising=False)
    reset_settings()

    yield

    reset_settings()
    logger = logging.getLogger("client_utils")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def disposable():
    """Create a MockDisposable."""
    return MockDisposable()


@pytest.fixture
def instance():
    """Create a fresh MockClass instance."""
    return MockClass("testValue")


@pytest.fixture
def mock_class():
    """Create a fresh MockClass subclass so class-level traces don't leak between tests."""
    return type("TracedMockClass", (MockClass,), {})


@pytest.fixture
def observable():
    """Create an empty ObservableValue."""
    from client_utils.observable import ObservableValue

    return ObservableValue()
