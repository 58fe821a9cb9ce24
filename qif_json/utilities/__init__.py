from .config_logging import LOGGING, build_logging_config, configure_logging
from .converters_scalar import clean_number_like_string, to_decimal
from .core_util import (
    open_for_read,
    open_for_write,
)

__all__ = [
    "to_decimal",
    "clean_number_like_string",
    "open_for_read",
    "open_for_write",
    "LOGGING",
    "build_logging_config",
    "configure_logging",
]
