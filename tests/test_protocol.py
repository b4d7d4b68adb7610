"""Tests for the iteration protocol probes and close helpers."""

import logging
from collections.abc import Iterator

import pytest

import pyoiter as po


class TestProbes:
    """Test the capability probes."""

    def test_is_iterable(self) -> None:
        """Test iterable detection."""
        assert po.is_iterable([1])
        assert po.is_iterable("abc")
        assert po.is_iterable(po.Iter())
        assert not po.is_iterable(545)
        assert not po.is_iterable(None)

    def test_is_iterator(self) -> None:
        """Test iterator detection."""
        assert po.is_iterator(iter([1]))
        assert po.is_iterator(x for x in [1])
        assert not po.is_iterator([1])
        assert not po.is_iterator(po.Iter(1))

    def test_is_multi_iterable(self) -> None:
        """Test that only sources giving independent traversals are multi-iterable."""
        assert po.is_multi_iterable([1, 2])
        assert po.is_multi_iterable({"a": 1})
        assert po.is_multi_iterable(po.Iter.from_((1, 2)))
        assert po.is_multi_iterable(po.Iter.range(3))
        assert not po.is_multi_iterable(x for x in [1])
        assert not po.is_multi_iterable(iter([1]))
        assert not po.is_multi_iterable(po.Iter(1, 2))
        assert not po.is_multi_iterable(po.Iter.from_(x for x in [1]))
        assert not po.is_multi_iterable(545)

    def test_is_multi_iterable_does_not_consume(self) -> None:
        """Test that probing leaves the source untouched."""
        data = po.Iter.from_([1, 2])
        po.is_multi_iterable(data)
        assert data.to_list() == [1, 2]

    def test_is_multi_iterable_closes_requested_iterators(self) -> None:
        """Test that the two fresh iterators requested by the check are released."""
        requested: list[Iterator[int]] = []

        def factory() -> Iterator[int]:
            gen = (x for x in range(3))
            requested.append(gen)
            return gen

        assert po.is_multi_iterable(po.Iter.from_generator(factory))
        assert len(requested) == 2
        assert all(list(gen) == [] for gen in requested)

    def test_is_multi_iterable_keeps_shared_iterator_open(self) -> None:
        """Test that a single-use source is not closed by the check."""
        gen = (x for x in range(3))
        assert not po.is_multi_iterable(po.Iter.from_(gen))
        assert list(gen) == [0, 1, 2]

    def test_is_closable(self) -> None:
        """Test closable detection."""
        assert po.is_closable(x for x in [1])
        assert po.is_closable(iter(po.Iter.range(2)))
        assert not po.is_closable(iter([1]))
        assert not po.is_closable([1])

    def test_static_aliases(self) -> None:
        """Test that the probes are reachable from Iter."""
        assert po.Iter.is_iterable([1])
        assert po.Iter.is_multi_iterable([1])
        assert po.Iter.get_iterator([1, 2]).__next__() == 1


def test_get_iterator_rejects_non_iterables() -> None:
    """Test that get_iterator raises NotIterableError, a TypeError."""
    with pytest.raises(po.NotIterableError, match="545 is not an iterable"):
        po.get_iterator(545)
    with pytest.raises(TypeError):
        po.get_iterator(None)


class TestClose:
    """Test the close helpers."""

    def test_close_generator(self) -> None:
        """Test that closing a started generator ends it."""
        gen = (x for x in range(5))
        assert next(gen) == 0
        assert po.close_iterator(gen) is True
        assert list(gen) == []

    def test_close_non_closable(self) -> None:
        """Test that non-closable values are a no-op."""
        assert po.close_iterator(iter([1, 2])) is False
        assert po.close_iterator([1, 2]) is False
        assert po.close_iterator(545) is False

    def test_close_failure_is_logged(
        self, broken_close: object, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a failing close returns False and logs the error."""
        with caplog.at_level(logging.DEBUG, logger="pyoiter._protocol"):
            assert po.close_iterator(broken_close) is False
        assert any("failed to close" in r.getMessage() for r in caplog.records)
        assert caplog.records[-1].exc_info is not None

    def test_close_all(self, tracked) -> None:  # noqa: ANN001
        """Test that every iterator is closed, whatever the others are."""
        first = tracked.source([1, 2])
        second = tracked.source([3, 4])
        next(first)
        next(second)
        po.close_all_iterators(first, iter([5]), 545, second)
        assert tracked.closed == 2
        assert list(first) == []
        assert list(second) == []
