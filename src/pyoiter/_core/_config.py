from __future__ import annotations

import functools
import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ._format import callable_repr


def _parse_level(value: str) -> int:
    if value.strip().isdigit():
        return int(value)
    level = logging.getLevelNamesMapping().get(value.strip().upper())
    if level is None:
        msg = f"unknown logging level: {value!r}"
        raise ValueError(msg)
    return level


@dataclass(slots=True, frozen=True)
class PyoConfig:
    """Package wide settings.

    Loaded once from the environment by `get_config()`, and immutable afterwards.

    Args:
        repr_width (int): Maximum width of the source description shown by `Iter.__repr__`.
        close_log_level (int): Logging level used when closing an upstream iterator fails.
    """

    repr_width: int = 60
    close_log_level: int = logging.DEBUG

    @classmethod
    def from_env(cls) -> PyoConfig:
        """Build a config from the `PYOITER_*` environment variables.

        Unset variables keep their default value.

        Returns:
            PyoConfig: The loaded configuration.

        Example:
        ```python
        >>> import os
        >>> import pyoiter as po
        >>> os.environ["PYOITER_REPR_WIDTH"] = "20"
        >>> po.PyoConfig.from_env().repr_width
        20
        >>> del os.environ["PYOITER_REPR_WIDTH"]

        ```
        """
        defaults = cls()
        width = os.getenv("PYOITER_REPR_WIDTH")
        level = os.getenv("PYOITER_CLOSE_LOG_LEVEL")
        return cls(
            repr_width=int(width) if width else defaults.repr_width,
            close_log_level=_parse_level(level) if level else defaults.close_log_level,
        )

    def iter_repr(self, factory: Callable[..., Any]) -> str:
        return callable_repr(factory, self.repr_width)


@functools.cache
def get_config() -> PyoConfig:
    return PyoConfig.from_env()
