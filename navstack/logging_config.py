"""
Logging configuration for navstack.

Library modules only ever call ``loguru.logger``; sinks are installed here,
once, by applications (see ``navstack.demo.app.main``).
"""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from .config import get_logging_settings


LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[category]}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(
    level: Optional[str] = None,
    log_file: Optional[Union[str, Path]] = None,
    rotation: Optional[str] = None,
) -> None:
    """
    Configure loguru sinks.

    Arguments that are not given are taken from the ``[logging]`` section of
    the configuration file.

    Args:
        level: Minimum level for all sinks
        log_file: Optional path of a rotating log file
        rotation: Rotation policy passed to loguru for the file sink
    """
    settings = get_logging_settings()
    level = (level or settings["log_level"]).upper()
    log_file = log_file or settings["log_file"]
    rotation = rotation or settings["rotation"]

    # Records logged without a bound category still need a value for LOG_FORMAT
    logger.configure(extra={"category": "navstack"})
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            level=level,
            format=LOG_FORMAT,
            rotation=rotation,
            encoding="utf-8",
        )
        logger.info(f"Logging to file: {log_path}")

    logger.debug(f"Logging configured at level {level}")
