# EEW (Earthquake Early Warning) fastcast telegram decoder
from .telegram import Telegram
from .errors import FormatError
from .types import UNSPECIFIED, Unspecified, RegionalForecast
from .labels import JMA_LABELS, LabelSet
from .config import Config, default_tables
from .logging_config import LoggingConfig

__all__ = [
    'Telegram', 'FormatError',
    'UNSPECIFIED', 'Unspecified', 'RegionalForecast',
    'JMA_LABELS', 'LabelSet',
    'Config', 'default_tables', 'LoggingConfig'
]
