"""Logging setup for applications embedding the decoder."""

import sys
from typing import Optional

from loguru import logger


class LoggingConfig:
    """Applies the loguru sinks once per process."""

    _configured = False

    @classmethod
    def configure(cls, log_level: str = 'INFO', log_file: Optional[str] = None) -> None:
        """
        Configure logging.

        Args:
            log_level: The logging level (DEBUG, INFO, WARNING, ERROR)
            log_file: Optional log file path for file logging
        """
        if cls._configured:
            return

        # replace the default handler
        logger.remove()
        logger.add(
            sys.stderr,
            level=log_level,
            format='{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}',
        )

        if log_file:
            logger.add(
                log_file,
                level=log_level,
                rotation='10 MB',
                retention='7 days',
            )

        cls._configured = True
        logger.debug("Logging configured at {}", log_level)

    @classmethod
    def reset(cls) -> None:
        """Allow configure() to run again."""
        cls._configured = False
