"""Shared pytest fixtures for saferesult tests."""

from collections.abc import Callable
from typing import Any

import pytest


class CallRecorder:
    """Callable that records every call and returns a fixed transform of its input."""

    def __init__(self, fn: Callable[..., Any]) -> None:
        self.fn = fn
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self.calls.append((args, kwargs))
        return self.fn(*args, **kwargs)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def doubler() -> CallRecorder:
    """A counting function that doubles its argument."""
    return CallRecorder(lambda x: x * 2)


@pytest.fixture
def exploder() -> CallRecorder:
    """A counting function that always raises ValueError("bad")."""

    def explode(*args: Any, **kwargs: Any) -> Any:
        raise ValueError("bad")

    return CallRecorder(explode)
