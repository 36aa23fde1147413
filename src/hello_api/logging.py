"""Centralized logging configuration for the hello API."""

from __future__ import annotations

import copy
import logging
from logging.config import dictConfig

APP_LOGGER = "hello_api"

_LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        }
    },
    "loggers": {
        "uvicorn": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "uvicorn.error": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "uvicorn.access": {"handlers": ["console"], "level": "WARNING", "propagate": False},
        APP_LOGGER: {"level": "INFO"},
    },
}


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging; the app logger follows ``level``."""

    config = copy.deepcopy(_LOGGING_CONFIG)
    config["loggers"][APP_LOGGER]["level"] = level.upper()
    config["root"] = {"level": level.upper(), "handlers": ["console"]}
    dictConfig(config)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger within the hello_api hierarchy."""

    full_name = f"{APP_LOGGER}.{name}" if name else APP_LOGGER
    return logging.getLogger(full_name)
