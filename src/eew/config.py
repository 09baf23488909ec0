"""
Decoder configuration from environment variables.

    EEW_EPICENTER_TABLE  JSON file replacing the bundled epicenter names
    EEW_AREA_TABLE       JSON file replacing the bundled region names
    EEW_LOG_LEVEL        log level for configure_logging (default INFO)
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from loguru import logger

from ..jma import CodeTables, load_code_tables


@dataclass
class Config:
    """Configuration for the telegram decoder."""

    epicenter_table: Optional[str] = None
    area_table: Optional[str] = None
    log_level: str = 'INFO'

    @classmethod
    def from_env(cls) -> 'Config':
        """Create config from environment variables."""
        return cls(
            epicenter_table=os.getenv('EEW_EPICENTER_TABLE') or None,
            area_table=os.getenv('EEW_AREA_TABLE') or None,
            log_level=os.getenv('EEW_LOG_LEVEL', 'INFO').upper(),
        )


@lru_cache(maxsize=None)
def default_tables() -> CodeTables:
    """
    Code tables shared by every Telegram built without explicit tables.

    Loaded once per process from the environment configuration.
    """
    config = Config.from_env()
    tables = load_code_tables(config.epicenter_table, config.area_table)
    logger.debug(
        "Code tables ready: {} epicenters, {} areas",
        len(tables.epicenter), len(tables.area)
    )
    return tables
