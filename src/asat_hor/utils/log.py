"""Logging setup."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str, log_file: Optional[Union[str, Path]] = None) -> None:
    """
    Setup logging configuration.

    Args:
        level: Logging level
        log_file: Optional log file path
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_file) if log_file else logging.NullHandler()
        ],
        force=True
    )


def configure_logging(config: Dict[str, Any]) -> None:
    """Apply the 'logging' section of a configuration."""
    logging_config = config.get("logging", {})
    setup_logging(logging_config.get("level", "WARNING"), logging_config.get("file"))
