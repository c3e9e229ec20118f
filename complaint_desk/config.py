"""Default settings and logging setup for the complaint desk."""
from __future__ import annotations

import logging.config
import os
from typing import Any, Dict, Mapping

from .adapters.config_loader import load_config

SETTINGS_ENV = "COMPLAINT_DESK_SETTINGS"

DEFAULT_CONFIG: Dict[str, Any] = {
    "SECRET_KEY": "dev",
    "AUTO_INIT_DB": True,
    "SEED_DB": True,
    "TECHNICIAN_WORKLOAD_LIMIT": 10,
    "MAX_BOARDS": 64,
    "LOG_LEVEL": "INFO",
}


def settings_from_env() -> Dict[str, Any]:
    """Load the optional JSON/YAML settings file named by the environment."""
    path = os.environ.get(SETTINGS_ENV)
    return load_config(path) if path else {}


def logging_config(level: str) -> Dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": level,
            },
        },
        "loggers": {
            "complaint_desk": {"handlers": ["console"], "level": level, "propagate": True},
        },
    }


def configure_logging(config: Mapping[str, Any]) -> None:
    level = str(config.get("LOG_LEVEL", "INFO")).upper()
    logging.config.dictConfig(logging_config(level))
