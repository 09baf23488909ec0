"""
EBI block: per-region forecasts trailing the telegram.

    EBI 251 S6+6- ////// 11 300 S5+5- ////// 11 250 S5+5- ////// 11

The block starts with the "EBI" marker at byte 135. Records follow from
byte 139, 20 bytes each (line breaks count as the separator byte):

    AAA SMMmm hhmmss WR
    |    | |    |    |+- main shock already arrived (0/1, / unset)
    |    | |    |    +-- warning issued for the region (0/1, / unset)
    |    | |    +------- expected arrival time, ////// if none
    |    | +------------ lower intensity bound, // for "or above"
    |    +-------------- upper intensity bound
    +------------------- region code
"""

from datetime import date, datetime, time
from typing import Iterator, Optional, Tuple, Union

from ..jma import CodeTable
from . import fields
from .constants import (
    EBI_MARKER, EBI_MARKER_OFFSET, EBI_START, EBI_STRIDE,
    EBI_AREA_CODE, EBI_INTENSITY_MAX, EBI_INTENSITY_MIN,
    EBI_ARRIVAL_TIME, EBI_WARNING, EBI_ARRIVAL,
    JST, UNSET_ARRIVAL_TIME
)
from .errors import FormatError
from .labels import LabelSet
from .types import UNSPECIFIED, Unspecified, RegionalForecast


def _part(record: str, span: Tuple[int, int]) -> str:
    start, length = span
    return record[start:start + length]


def has_block(raw: str) -> bool:
    """Check for the EBI marker at its fixed offset."""
    return raw[EBI_MARKER_OFFSET:EBI_MARKER_OFFSET + len(EBI_MARKER)] == EBI_MARKER


def iter_records(raw: str) -> Iterator[str]:
    """
    Yield the raw 20-byte records of the EBI block.

    A record is only emitted while bytes remain after it, so a truncated
    last record (or the one touching the end of the text) is skipped.
    """
    if not has_block(raw):
        return

    offset = EBI_START
    while offset + EBI_STRIDE < len(raw):
        yield raw[offset:offset + EBI_STRIDE]
        offset += EBI_STRIDE


def decode_intensity(record: str, labels: LabelSet) -> Union[str, Unspecified]:
    """
    Render the forecast intensity of a record.

    The upper bound sits before the lower bound. An unset lower bound
    means "upper or above"; equal bounds give a single class.
    """
    upper_code = _part(record, EBI_INTENSITY_MAX)
    lower_code = _part(record, EBI_INTENSITY_MIN)

    upper = fields.intensity('ebi.intensity', upper_code, labels)
    lower = fields.intensity('ebi.intensity', lower_code, labels)
    if upper is UNSPECIFIED:
        return UNSPECIFIED

    if lower is UNSPECIFIED:
        return labels.intensity_or_above.format(intensity=upper)
    if lower_code == upper_code:
        return upper
    return labels.intensity_range.format(lower=lower, upper=upper)


def decode_arrival_time(record: str, event_date: date) -> Optional[datetime]:
    """Combine the record's hhmmss with the date of the earthquake."""
    raw = _part(record, EBI_ARRIVAL_TIME)
    if raw == UNSET_ARRIVAL_TIME:
        return None
    if not raw.isdigit():
        raise FormatError('ebi.arrival_time', raw)

    try:
        clock = time(int(raw[0:2]), int(raw[2:4]), int(raw[4:6]))
    except ValueError:
        raise FormatError('ebi.arrival_time', raw) from None
    return datetime.combine(event_date, clock, tzinfo=JST)


def decode_record(record: str, event_date: date, areas: CodeTable, labels: LabelSet) -> RegionalForecast:
    """
    Decode one 20-byte EBI record.

    Args:
        record: Raw record text
        event_date: Date of the earthquake, completes the arrival time
        areas: Region code table
        labels: Label set for intensity text

    Returns:
        RegionalForecast
    """
    area_code = fields.parse_int('ebi.area_code', _part(record, EBI_AREA_CODE))
    area_name = areas.lookup(area_code)
    if area_name is None:
        raise FormatError('ebi.area_name', str(area_code))

    return RegionalForecast(
        area_code=area_code,
        area_name=area_name,
        intensity=decode_intensity(record, labels),
        arrival_time=decode_arrival_time(record, event_date),
        warning=fields.tri_state('ebi.warning', record[EBI_WARNING]),
        arrival=fields.tri_state('ebi.arrival', record[EBI_ARRIVAL])
    )


def decode_block(raw: str, event_date: date, areas: CodeTable, labels: LabelSet) -> Tuple[RegionalForecast, ...]:
    """Decode every EBI record in telegram order. Empty when there is no block."""
    return tuple(decode_record(record, event_date, areas, labels) for record in iter_records(raw))
