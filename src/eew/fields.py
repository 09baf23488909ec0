"""
Decoding rules shared by the telegram header and the EBI block.

Every helper takes the field name so a failure names the field it came from.
"""

from datetime import datetime
from typing import Mapping, Optional, Union

from .constants import JST, UNSET, UNSET_INTENSITY
from .errors import FormatError
from .labels import PARTITIONS, LabelSet
from .types import UNSPECIFIED, Unspecified

# flag digits with no assigned meaning
RESERVED_FLAG_DIGITS = frozenset('23456789')


def parse_int(field: str, raw: str) -> int:
    """Parse a fixed-width decimal field. Signs and spaces are rejected."""
    if not raw.isdigit():
        raise FormatError(field, raw)
    return int(raw)


def parse_timestamp(field: str, raw: str) -> datetime:
    """
    Parse a YYMMDDhhmmss field into a JST datetime.

    The two-digit year is taken as 20YY.
    """
    if len(raw) != 12 or not raw.isdigit():
        raise FormatError(field, raw)

    year, month, day, hour, minute, second = (int(raw[i:i + 2]) for i in range(0, 12, 2))
    try:
        return datetime(2000 + year, month, day, hour, minute, second, tzinfo=JST)
    except ValueError:
        raise FormatError(field, raw) from None


def lookup(field: str, table: Mapping[str, str], code: str) -> str:
    """Exact-match a code against a label table."""
    try:
        return table[code]
    except KeyError:
        raise FormatError(field, code) from None


def categorical(field: str, code: str, labels: LabelSet, table: Optional[str] = None) -> Union[str, Unspecified]:
    """
    Decode a single-character code using its partition.

    Args:
        field: Accessor name, used to find the partition
        code: The raw character
        labels: Label set providing the text
        table: Label table name when it differs from the field name

    Returns:
        Label text, the "undefined" label for reserved codes, or UNSPECIFIED
    """
    partition = PARTITIONS[field]
    if code in partition.unset:
        return UNSPECIFIED
    if code in partition.reserved:
        return labels.undefined
    if code in partition.valid:
        return lookup(field, getattr(labels, table or field), code)
    raise FormatError(field, code)


def intensity(field: str, code: str, labels: LabelSet) -> Union[str, Unspecified]:
    """Decode a two-character seismic intensity class."""
    if code == UNSET_INTENSITY:
        return UNSPECIFIED
    return lookup(field, labels.intensity, code)


def tri_state(field: str, code: str) -> Optional[bool]:
    """
    Decode a flag that may be unset.

    "1" is True, "0" is False, "/" and the reserved digits 2-9 are None.
    """
    if code == '1':
        return True
    if code == '0':
        return False
    if code == UNSET or code in RESERVED_FLAG_DIGITS:
        return None
    raise FormatError(field, code)
