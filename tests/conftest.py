"""Shared sources for pyoiter tests."""

from collections.abc import Iterable, Iterator

import pytest


class Tracked:
    """Records the lifecycle of generators built with `Tracked.source`."""

    def __init__(self) -> None:
        self.pulled: list[object] = []
        self.closed = 0

    def source[T](self, values: Iterable[T]) -> Iterator[T]:
        try:
            for value in values:
                self.pulled.append(value)
                yield value
        finally:
            self.closed += 1


class BrokenClose:
    """A closable iterator whose `close()` always fails."""

    def __iter__(self) -> "BrokenClose":
        return self

    def __next__(self) -> int:
        raise StopIteration

    def close(self) -> None:
        msg = "boom"
        raise RuntimeError(msg)


@pytest.fixture
def tracked() -> Tracked:
    return Tracked()


@pytest.fixture
def broken_close() -> BrokenClose:
    return BrokenClose()
