"""Logging configuration for the API process."""

from typing import Any


def get_logging_config(level: str = "INFO") -> dict[str, Any]:
    """Build the dict passed to Django's LOGGING setting."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
            "access": {
                "format": "%(asctime)s [api] %(message)s",
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
            "access": {
                "class": "logging.StreamHandler",
                "formatter": "access",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "marketplace": {
                "handlers": ["default"],
                "level": level,
                "propagate": False,
            },
            "marketplace.requests": {
                "handlers": ["access"],
                "level": level,
                "propagate": False,
            },
            # RequestLogMiddleware already reports every API request
            "django.server": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False,
            },
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"],
        },
    }
