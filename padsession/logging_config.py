"""
Logging configuration for padsession and the Redis client.
"""

import logging
import logging.config
from typing import Any, Dict


class RedisKeyFilter(logging.Filter):
    """Drop noisy per-command debug records from the redis client."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("redis") and record.levelno < logging.INFO:
            return False
        return True


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration for logging.config.dictConfig."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "redis_key_filter": {
                "()": RedisKeyFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
                "filters": ["redis_key_filter"]
            }
        },
        "loggers": {
            "padsession": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            },
            "redis": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False
            }
        },
        "root": {
            "level": "INFO",
            "handlers": ["default"]
        }
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the padsession logging configuration."""
    logging.config.dictConfig(get_logging_config(level))
