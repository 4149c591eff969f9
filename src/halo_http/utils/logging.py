"""Logging utilities."""

import json
import logging
import logging.config
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import yaml

from ..core.config import LoggingSettings

HANDLER_NAME = "halo_http.stdout"


class JSONFormatter(logging.Formatter):
    """Render log records as one JSON object per line."""

    def format(self, record):
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_logging(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """Setup halo_http logging.

    Loads a dictConfig YAML file when ``settings.log_config_file`` exists,
    otherwise attaches a stdout handler to the ``halo_http`` logger.

    Args:
        settings: Logging settings. If None, will load from environment.

    Returns:
        The configured package logger.
    """
    settings = settings or LoggingSettings()
    logger = logging.getLogger("halo_http")

    log_config_path = Path(settings.log_config_file)
    if log_config_path.exists():
        try:
            with open(log_config_path, 'r') as f:
                config = yaml.safe_load(f)
            logging.config.dictConfig(config)
            return logger
        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            # Fall through to the stdout handler below
            logger.warning(f"Failed to load logging config from {log_config_path}: {e}")

    level = getattr(logging, settings.log_level.upper())

    if settings.log_format == "json":
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    # Reuse the handler from an earlier call so records are emitted once
    handler = next((h for h in logger.handlers if h.get_name() == HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)
    handler.setFormatter(formatter)

    logger.setLevel(level)

    return logger
