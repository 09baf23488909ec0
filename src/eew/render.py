"""
Whole-telegram operations: decode all fields, text report and validation.

All of them walk FIELDS and call the same accessors a caller would, so the
validity check can never disagree with the individual fields.
"""

from datetime import datetime
from typing import Any, Dict, List

from loguru import logger

from .errors import FormatError
from .types import UNSPECIFIED

# canonical field order
FIELDS = (
    'type', 'from_office', 'drill_type', 'report_time', 'number_of_telegram',
    'is_continued', 'earthquake_time', 'id', 'status', 'is_final', 'number',
    'epicenter', 'position', 'depth', 'magnitude', 'seismic_intensity',
    'observation_points_of_magnitude', 'probability_of_depth',
    'probability_of_magnitude', 'probability_of_position',
    'probability_of_depth_jma', 'land_or_sea', 'is_warning',
    'prediction_method', 'change', 'reason_of_change', 'ebi'
)

TIME_FORMAT = '%Y-%m-%d %H:%M:%S'


def decode_all(telegram) -> Dict[str, Any]:
    """
    Decode every field of a telegram.

    Returns:
        Dict of field name to decoded value, in FIELDS order

    Raises:
        FormatError: for the first field that fails
    """
    return {name: getattr(telegram, name) for name in FIELDS}


def validate(telegram) -> None:
    """Decode every field, raising the first FormatError."""
    for name in FIELDS:
        getattr(telegram, name)


def is_valid(telegram) -> bool:
    """Whether every field of the telegram decodes."""
    try:
        validate(telegram)
    except FormatError as e:
        logger.debug("Invalid telegram: {}", e)
        return False
    return True


def _json_value(value: Any) -> Any:
    if value is UNSPECIFIED:
        return None
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, tuple):
        return [record.to_dict() for record in value]
    return value


def to_dict(telegram) -> Dict[str, Any]:
    """Decode every field into JSON-friendly values (UNSPECIFIED becomes None)."""
    return {name: _json_value(value) for name, value in telegram.decode_all().items()}


def _format_value(value: Any, labels) -> str:
    if value is UNSPECIFIED:
        return labels.unspecified
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, datetime):
        return value.strftime(TIME_FORMAT)
    return str(value)


def render(telegram) -> str:
    """
    Render a telegram as a multi-line text report.

    One "caption: value" line per field, followed by the regional
    forecasts when the telegram carries an EBI block.
    """
    labels = telegram.labels
    decoded = telegram.decode_all()

    lines: List[str] = [labels.report_title.format(number=decoded['number'])]
    for name in FIELDS:
        if name == 'ebi':
            continue
        caption = labels.captions.get(name, name)
        lines.append(f"{caption}: {_format_value(decoded[name], labels)}")

    if telegram.has_ebi:
        lines.append('')
        lines.append(labels.ebi_title)
        for record in decoded['ebi']:
            if record.arrival:
                arrival_time = labels.already_arrived
            elif record.arrival_time:
                arrival_time = record.arrival_time.strftime('%H:%M:%S')
            else:
                arrival_time = ''
            lines.append(labels.ebi_line.format(
                area_name=record.area_name,
                intensity=_format_value(record.intensity, labels),
                arrival_time=arrival_time,
                warning=_format_value(record.warning, labels)
            ))

    return '\n'.join(lines) + '\n'
