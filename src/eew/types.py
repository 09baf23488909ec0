"""
Decoded value types for EEW telegrams.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Union


class Unspecified(Enum):
    """
    Marker for a field whose bytes hold the "not set" placeholder
    (for example "///" in a cancellation telegram).
    """
    UNSPECIFIED = 'unspecified'

    def __repr__(self) -> str:
        return 'UNSPECIFIED'


UNSPECIFIED = Unspecified.UNSPECIFIED


@dataclass(frozen=True)
class RegionalForecast:
    """
    One record of the EBI block: forecast for a single region.

    arrival_time is None when the telegram carries no arrival time.
    warning and arrival are None when the flag is not set.
    """
    area_code: int
    area_name: str
    intensity: Union[str, Unspecified]
    arrival_time: Optional[datetime]
    warning: Optional[bool]
    arrival: Optional[bool]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            'area_code': self.area_code,
            'area_name': self.area_name,
            'intensity': None if self.intensity is UNSPECIFIED else self.intensity,
            'arrival_time': self.arrival_time.isoformat() if self.arrival_time else None,
            'warning': self.warning,
            'arrival': self.arrival
        }
