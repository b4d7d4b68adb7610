from ._core import Pipeable, PyoConfig, get_config
from ._errors import NotCallableError, NotIterableError
from ._iter import Iter
from ._numeric import to_integer, to_positive_integer
from ._protocol import (
    close_all_iterators,
    close_iterator,
    get_iterator,
    is_closable,
    is_iterable,
    is_iterator,
    is_multi_iterable,
)
from ._types import Group

__all__ = [
    "Group",
    "Iter",
    "NotCallableError",
    "NotIterableError",
    "Pipeable",
    "PyoConfig",
    "close_all_iterators",
    "close_iterator",
    "get_config",
    "get_iterator",
    "is_closable",
    "is_iterable",
    "is_iterator",
    "is_multi_iterable",
    "to_integer",
    "to_positive_integer",
]
