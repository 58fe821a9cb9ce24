# qif_json/utilities/config_logging.py
from __future__ import annotations

import copy
import logging.config
from pathlib import Path
from typing import Any

LOGGING: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        # StreamHandler writes to stderr, keeping stdout free for the document
        "console": {
            "class": "logging.StreamHandler",
            "level": "WARNING",
            "formatter": "simple",
        },
    },
    "loggers": {
        # root logger
        "": {
            "level": "DEBUG",
            "handlers": ["console"],
        },
    },
}

_FILE_HANDLER: dict[str, Any] = {
    "class": "logging.handlers.RotatingFileHandler",
    "level": "DEBUG",
    "formatter": "verbose",
    "maxBytes": 5_000_000,
    "backupCount": 5,
    "encoding": "utf-8",
}


def build_logging_config(
    console_level: str = "WARNING", log_file: Path | None = None
) -> dict[str, Any]:
    """Return a copy of ``LOGGING`` with the console level and optional file log applied."""
    config = copy.deepcopy(LOGGING)
    config["handlers"]["console"]["level"] = console_level
    if log_file is not None:
        config["handlers"]["file"] = {**_FILE_HANDLER, "filename": str(log_file)}
        config["loggers"][""]["handlers"].append("file")
    return config


def configure_logging(
    console_level: str = "WARNING", log_file: Path | None = None
) -> None:
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(console_level, log_file))
