"""Capability probes and release helpers for the Python iteration protocol.

- An `Iterable` is any object exposing `__iter__`.
- An `Iterator` is an `Iterable` that also exposes `__next__`.
- A closable `Iterator` also exposes a `close()` method, like every generator does.

Closing is the only cancellation primitive: every combinator closes the iterators it pulls from once it stops.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any, Protocol, TypeIs

from ._core import get_config
from ._errors import NotIterableError

logger = logging.getLogger(__name__)


class Closable[T](Iterator[T], Protocol):
    def close(self) -> object: ...


def is_iterable(obj: object) -> TypeIs[Iterable[Any]]:
    """Check if **obj** can produce an `Iterator`.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.is_iterable([1, 2]), po.is_iterable("abc"), po.is_iterable(545)
    (True, True, False)

    ```
    """
    return isinstance(obj, Iterable)


def is_iterator(obj: object) -> TypeIs[Iterator[Any]]:
    """Check if **obj** is a step machine, i.e. an `Iterable` exposing `__next__`.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.is_iterator([1, 2]), po.is_iterator(iter([1, 2]))
    (False, True)

    ```
    """
    return isinstance(obj, Iterator)


def is_closable(obj: object) -> TypeIs[Closable[Any]]:
    """Check if **obj** is an `Iterator` with a callable `close()`.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.is_closable(iter([1, 2])), po.is_closable(x for x in [1, 2])
    (False, True)

    ```
    """
    return is_iterator(obj) and callable(getattr(obj, "close", None))


def get_iterator[T](obj: Iterable[T]) -> Iterator[T]:
    """Request an `Iterator` from **obj**.

    Args:
        obj (Iterable[T]): The source to iterate.

    Returns:
        Iterator[T]: The iterator produced by the source.

    Raises:
        NotIterableError: If **obj** is not iterable.
    """
    if not is_iterable(obj):
        msg = f"{obj!r} is not an iterable"
        raise NotIterableError(msg)
    return iter(obj)


def check_iterables(*objs: object) -> None:
    for obj in objs:
        if not is_iterable(obj):
            msg = f"{obj!r} is not an iterable"
            raise NotIterableError(msg)


def is_multi_iterable(obj: object) -> bool:
    """Check if **obj** yields an independent traversal on each request.

    Two iterators are requested: both must differ from **obj** itself and from each other.

    Requesting them calls the factory of an `Iter.from_generator` twice. When they are fresh, both are closed before returning, so no value is pulled and no traversal is left open.

    A `list` is multi-iterable, a generator, or an `Iter` built from literal values, is not.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.is_multi_iterable([1, 2]), po.is_multi_iterable(x for x in [1, 2])
    (True, False)
    >>> po.is_multi_iterable(po.Iter(1, 2)), po.is_multi_iterable(po.Iter.range(2))
    (False, True)

    ```
    """
    if not is_iterable(obj):
        return False
    first = iter(obj)
    second = iter(obj)
    if first is obj or first is second:
        return False
    close_all_iterators(first, second)
    return True


def close_iterator(iterator: object) -> bool:
    """Close **iterator** if it supports it.

    Never raises: a failure while closing is logged and reported as `False`.

    Args:
        iterator (object): The iterator to release.

    Returns:
        bool: `True` if the iterator was closed, `False` if it is not closable or failed to close.

    Example:
    ```python
    >>> import pyoiter as po
    >>> gen = (x for x in range(3))
    >>> po.close_iterator(gen), list(gen)
    (True, [])
    >>> po.close_iterator(iter([1, 2]))
    False

    ```
    """
    if not is_closable(iterator):
        return False
    try:
        iterator.close()
    except Exception:
        logger.log(
            get_config().close_log_level,
            "failed to close %r",
            iterator,
            exc_info=True,
        )
        return False
    return True


def close_all_iterators(*iterators: object) -> None:
    """Close every given iterator, see `close_iterator`."""
    for iterator in iterators:
        close_iterator(iterator)
