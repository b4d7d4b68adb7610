from ._config import PyoConfig, get_config
from ._main import Pipeable

__all__ = [
    "Pipeable",
    "PyoConfig",
    "get_config",
]
