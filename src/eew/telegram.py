"""
EEW fastcast telegram

Decodes the fixed-width code telegram JMA distributes to advanced users of
Earthquake Early Warning. Every field is read from an absolute byte offset
into the raw text, line breaks included:

    37 03 00 110415233453 C11
    110415233416
    ND20110415233435 NCN005 JD////////////// JN///
    251 N370 E1408 010 66 6+ RK66324 RT01/// RC13///
    EBI 251 S6+6- ////// 11 300 S5+5- ////// 11 250 S5+5- ////// 11
    9999=

Fields are decoded on access and never stored back into the buffer, so a
Telegram can be shared freely between threads.
"""

import re
from datetime import datetime
from functools import cached_property
from typing import Any, Dict, Optional, Tuple, Union

from ..jma import CodeTables
from . import fields, regional, render
from .config import default_tables
from .constants import (
    MIN_SIZE, TYPE, OFFICE, DRILL_TYPE, REPORT_TIME, NUMBER_OF_TELEGRAM,
    CONTINUE, EARTHQUAKE_TIME, EARTHQUAKE_ID, STATUS, NUMBER, EPICENTER,
    POSITION, DEPTH, MAGNITUDE, SEISMIC_INTENSITY,
    PROBABILITY_OF_POSITION, PROBABILITY_OF_DEPTH, PROBABILITY_OF_MAGNITUDE,
    OBSERVATION_POINTS_OF_MAGNITUDE, PROBABILITY_OF_DEPTH_JMA,
    LAND_OR_SEA, WARNING, PREDICTION_METHOD, CHANGE, REASON_OF_CHANGE,
    UNSET, UNSET_EPICENTER, UNSET_POSITION, UNSET_DEPTH, UNSET_MAGNITUDE,
    CANCEL_TYPE, FINAL_STATUS, NORMAL_DRILL_TYPE
)
from .errors import FormatError
from .labels import (
    JMA_LABELS, LabelSet, DRILL_CODES, NON_DRILL_CODES, NON_FINAL_STATUS
)
from .types import UNSPECIFIED, Unspecified, RegionalForecast


class Telegram:
    """
    A single EEW fastcast telegram.

    Two telegrams are equal when their raw text is identical.
    """

    POSITION_PATTERN = re.compile(r'[NS]\d{3} [EW]\d{4}')

    def __init__(self, text: str, tables: Optional[CodeTables] = None, labels: LabelSet = JMA_LABELS):
        """
        Args:
            text: Raw telegram text
            tables: Epicenter and region code tables (defaults to the configured ones)
            labels: Label text for categorical fields
        """
        if not isinstance(text, str):
            raise TypeError(f"Telegram text must be str, not {type(text).__name__}")
        if not text.isascii():
            raise FormatError('encoding', message="Telegram must be ASCII text")
        if len(text) < MIN_SIZE:
            raise FormatError(
                'size', text,
                f"Telegram too short: {len(text)} bytes, at least {MIN_SIZE} required"
            )

        self._raw = text
        self.tables = tables if tables is not None else default_tables()
        self.labels = labels

    # buffer

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def size(self) -> int:
        """Telegram size in bytes."""
        return len(self._raw)

    def __len__(self) -> int:
        return len(self._raw)

    def __str__(self) -> str:
        return self._raw

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Telegram):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __repr__(self) -> str:
        try:
            return (
                f"<Telegram {self.id} #{self.number} "
                f"{self._text(self.epicenter)} intensity={self._text(self.seismic_intensity)}>"
            )
        except FormatError:
            return f"<Telegram invalid ({self.size} bytes)>"

    def slice(self, offset: int, length: int) -> str:
        """
        Return length bytes starting at offset.

        Raises:
            FormatError: if the range does not lie inside the telegram
        """
        if offset < 0 or length < 0 or offset + length > len(self._raw):
            raise FormatError(
                'slice', None,
                f"Range {offset}+{length} outside telegram of {len(self._raw)} bytes"
            )
        return self._raw[offset:offset + length]

    def _field(self, span: Tuple[int, int]) -> str:
        return self.slice(*span)

    def _char(self, offset: int) -> str:
        return self.slice(offset, 1)

    def _text(self, value: Any) -> str:
        return self.labels.unspecified if value is UNSPECIFIED else str(value)

    # header

    @property
    def type(self) -> str:
        """Telegram type (電文種別)."""
        return fields.lookup('type', self.labels.type, self._field(TYPE))

    @property
    def is_canceled(self) -> bool:
        return self._field(TYPE) == CANCEL_TYPE

    @property
    def from_office(self) -> str:
        """Issuing office (発信官署)."""
        return fields.lookup('from_office', self.labels.office, self._field(OFFICE))

    @property
    def drill_type(self) -> str:
        """Drill / test indicator (訓練等の識別符)."""
        return fields.lookup('drill_type', self.labels.drill_type, self._field(DRILL_TYPE))

    @property
    def is_drill(self) -> bool:
        code = self._field(DRILL_TYPE)
        if code in DRILL_CODES:
            return True
        if code in NON_DRILL_CODES:
            return False
        raise FormatError('drill_type', code)

    @property
    def report_time(self) -> datetime:
        """Time the telegram was issued."""
        return fields.parse_timestamp('report_time', self._field(REPORT_TIME))

    @property
    def number_of_telegram(self) -> int:
        """How many telegrams make up this report, this one included."""
        return fields.parse_int('number_of_telegram', self._field(NUMBER_OF_TELEGRAM))

    @property
    def is_continued(self) -> bool:
        """Whether the code part continues in another telegram."""
        code = self._field(CONTINUE)
        if code == '1':
            return True
        if code == '0':
            return False
        raise FormatError('is_continued', code)

    @property
    def earthquake_time(self) -> datetime:
        """Time the earthquake occurred or was detected."""
        return fields.parse_timestamp('earthquake_time', self._field(EARTHQUAKE_TIME))

    @property
    def id(self) -> str:
        """Earthquake identifier, kept as its 14-digit numeral string."""
        raw = self._field(EARTHQUAKE_ID)
        fields.parse_int('id', raw)
        return raw

    @property
    def status(self) -> Union[str, Unspecified]:
        """Report status, e.g. normal, correction or final."""
        code = self._field(STATUS)
        if code == UNSET:
            return UNSPECIFIED
        return fields.lookup('status', self.labels.status, code)

    @property
    def is_final(self) -> bool:
        code = self._field(STATUS)
        if code == FINAL_STATUS:
            return True
        if code in NON_FINAL_STATUS:
            return False
        raise FormatError('is_final', code)

    @property
    def is_normal(self) -> bool:
        """Normal or final report outside of a drill."""
        return self._field(STATUS) in ('0', FINAL_STATUS) and self._field(DRILL_TYPE) == NORMAL_DRILL_TYPE

    @property
    def number(self) -> int:
        """Revision number: sequence of this report for the same earthquake."""
        return fields.parse_int('number', self._field(NUMBER))

    revision = number

    @property
    def is_first(self) -> bool:
        return self.number == 1

    # hypocenter

    @property
    def epicenter_code(self) -> Union[int, Unspecified]:
        raw = self._field(EPICENTER)
        if raw == UNSET_EPICENTER:
            return UNSPECIFIED
        return fields.parse_int('epicenter', raw)

    @property
    def epicenter(self) -> Union[str, Unspecified]:
        """Epicenter name (震央地名) from the epicenter code table."""
        code = self.epicenter_code
        if code is UNSPECIFIED:
            return UNSPECIFIED

        name = self.tables.epicenter.lookup(code)
        if name is None:
            raise FormatError('epicenter', self._field(EPICENTER))
        return name

    @property
    def position(self) -> Union[str, Unspecified]:
        """Epicenter position, e.g. "N37.0 E140.8"."""
        raw = self._field(POSITION)
        if raw == UNSET_POSITION:
            return UNSPECIFIED
        if not self.POSITION_PATTERN.fullmatch(raw):
            raise FormatError('position', raw)
        return f"{raw[:3]}.{raw[3:9]}.{raw[9:]}"

    @property
    def depth(self) -> Union[int, Unspecified]:
        """Hypocenter depth in km."""
        raw = self._field(DEPTH)
        if raw == UNSET_DEPTH:
            return UNSPECIFIED
        return fields.parse_int('depth', raw)

    @property
    def magnitude(self) -> Union[float, Unspecified]:
        raw = self._field(MAGNITUDE)
        if raw == UNSET_MAGNITUDE:
            return UNSPECIFIED
        if not raw.isdigit():
            raise FormatError('magnitude', raw)
        return float(f"{raw[0]}.{raw[1]}")

    @property
    def seismic_intensity(self) -> Union[str, Unspecified]:
        """Forecast peak seismic intensity class (最大予測震度)."""
        return fields.intensity('seismic_intensity', self._field(SEISMIC_INTENSITY), self.labels)

    # RK: probabilities

    @property
    def probability_of_position(self) -> Union[str, Unspecified]:
        return fields.categorical('probability_of_position', self._char(PROBABILITY_OF_POSITION), self.labels)

    @property
    def probability_of_depth(self) -> Union[str, Unspecified]:
        return fields.categorical(
            'probability_of_depth', self._char(PROBABILITY_OF_DEPTH), self.labels,
            table='probability_of_position'
        )

    @property
    def probability_of_magnitude(self) -> Union[str, Unspecified]:
        return fields.categorical('probability_of_magnitude', self._char(PROBABILITY_OF_MAGNITUDE), self.labels)

    @property
    def observation_points_of_magnitude(self) -> Union[str, Unspecified]:
        """Stations used for the magnitude (JMA internal use)."""
        return fields.categorical(
            'observation_points_of_magnitude', self._char(OBSERVATION_POINTS_OF_MAGNITUDE), self.labels
        )

    # older releases published this byte under the position name
    probability_of_position_jma = observation_points_of_magnitude

    @property
    def probability_of_depth_jma(self) -> Union[str, Unspecified]:
        return fields.categorical('probability_of_depth_jma', self._char(PROBABILITY_OF_DEPTH_JMA), self.labels)

    # RT

    @property
    def land_or_sea(self) -> Union[str, Unspecified]:
        return fields.categorical('land_or_sea', self._char(LAND_OR_SEA), self.labels)

    @property
    def is_warning(self) -> bool:
        """Whether the report includes a warning. Unset and reserved digits read as False."""
        code = self._char(WARNING)
        if code == '1':
            return True
        if code == '0' or code == UNSET or code in fields.RESERVED_FLAG_DIGITS:
            return False
        raise FormatError('is_warning', code)

    @property
    def prediction_method(self) -> Union[str, Unspecified]:
        return fields.categorical('prediction_method', self._char(PREDICTION_METHOD), self.labels)

    # RC

    @property
    def change(self) -> Union[str, Unspecified]:
        """Change of the forecast peak intensity since the previous report."""
        return fields.categorical('change', self._char(CHANGE), self.labels)

    @property
    def is_changed(self) -> bool:
        code = self._char(CHANGE)
        if code in ('1', '2'):
            return True
        if code == UNSET or code.isdigit():
            return False
        raise FormatError('change', code)

    @property
    def reason_of_change(self) -> Union[str, Unspecified]:
        return fields.categorical('reason_of_change', self._char(REASON_OF_CHANGE), self.labels)

    # EBI

    @property
    def has_ebi(self) -> bool:
        return regional.has_block(self._raw)

    @cached_property
    def ebi(self) -> Tuple[RegionalForecast, ...]:
        """Regional forecasts in telegram order, empty without an EBI block."""
        if not self.has_ebi:
            return ()
        return regional.decode_block(self._raw, self.earthquake_time.date(), self.tables.area, self.labels)

    # whole telegram

    @cached_property
    def _decoded(self) -> Dict[str, Any]:
        return render.decode_all(self)

    def decode_all(self) -> Dict[str, Any]:
        """Every field by name, in canonical order."""
        return dict(self._decoded)

    def to_dict(self) -> Dict[str, Any]:
        """Every field by name, with JSON-friendly values."""
        return render.to_dict(self)

    def render(self) -> str:
        """Multi-line text report."""
        return render.render(self)

    def validate(self) -> None:
        """Decode every field, raising the first FormatError."""
        render.validate(self)

    @property
    def is_valid(self) -> bool:
        return render.is_valid(self)
