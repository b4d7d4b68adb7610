from collections.abc import Callable
from textwrap import shorten
from typing import Any


def callable_repr(func: Callable[..., Any], width: int = 60) -> str:
    name: str = getattr(func, "__qualname__", None) or repr(func)
    # nested generator functions carry their enclosing method in the qualname
    short = name.rsplit("<locals>.", 1)[-1]
    return shorten(short, width=max(width, 4), placeholder="...")
