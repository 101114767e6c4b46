from ._config import Config, get_config
from ._logging import LOGGER_NAME, get_logger

__all__ = [
    "LOGGER_NAME",
    "Config",
    "get_config",
    "get_logger",
]
