"""
Tests for decode-all, text report and validation
"""

import json

import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from src.eew import Telegram, FormatError, UNSPECIFIED
from src.eew.render import FIELDS

from samples import SAMPLE, CANCELED, VENDOR_QUIRK, SOUTH_WEST, replace_at


ALL_SAMPLES = [SAMPLE, CANCELED, VENDOR_QUIRK, SOUTH_WEST]


def every_field_decodes(telegram: Telegram) -> bool:
    for name in FIELDS:
        try:
            getattr(telegram, name)
        except FormatError:
            return False
    return True


class TestDecodeAll:
    """Tests for decoding every field at once."""

    def test_canonical_order(self):
        decoded = Telegram(SAMPLE).decode_all()
        assert tuple(decoded) == FIELDS

    def test_values(self):
        decoded = Telegram(SAMPLE).decode_all()
        assert decoded['from_office'] == '東京'
        assert decoded['number'] == 5
        assert decoded['magnitude'] == 6.6
        assert decoded['seismic_intensity'] == '6強'
        assert len(decoded['ebi']) == 17

    def test_deterministic(self):
        for text in ALL_SAMPLES:
            assert Telegram(text).decode_all() == Telegram(text).decode_all()

    def test_returns_copy(self):
        telegram = Telegram(SAMPLE)
        decoded = telegram.decode_all()
        decoded['number'] = 99
        assert telegram.decode_all()['number'] == 5

    def test_unset_values(self):
        decoded = Telegram(CANCELED).decode_all()
        assert decoded['magnitude'] is UNSPECIFIED
        assert decoded['ebi'] == ()

    def test_to_dict_is_json(self):
        data = Telegram(SAMPLE).to_dict()
        assert data['report_time'] == '2011-04-15T23:34:53+09:00'
        assert data['prediction_method'] is None
        assert data['ebi'][0]['area_code'] == 251
        assert data['ebi'][0]['intensity'] == '6弱から6強'
        json.dumps(data, ensure_ascii=False)

    def test_to_dict_unset(self):
        data = Telegram(CANCELED).to_dict()
        assert data['depth'] is None
        assert data['position'] is None
        assert data['ebi'] == []


class TestValidation:
    """Tests that validation agrees with the individual fields."""

    @pytest.mark.parametrize('text', ALL_SAMPLES)
    def test_valid_samples(self, text):
        telegram = Telegram(text)
        assert telegram.is_valid
        telegram.validate()
        assert every_field_decodes(telegram)

    @pytest.mark.parametrize('offset,value', [
        (0, '40'), (26, '1104152334XX'), (105, 'A6'),
        (130, 'X'), (139, '999'), (139 + 17, 'X')
    ])
    def test_invalid_variants(self, offset, value):
        telegram = Telegram(replace_at(SAMPLE, offset, value))
        assert not telegram.is_valid
        assert not every_field_decodes(telegram)
        with pytest.raises(FormatError):
            telegram.validate()

    def test_first_failure_is_reported(self):
        """Test that the earliest failing field in canonical order is raised."""
        text = replace_at(replace_at(SAMPLE, 105, 'A6'), 3, '09')
        with pytest.raises(FormatError) as excinfo:
            Telegram(text).validate()
        assert excinfo.value.field == 'from_office'

    def test_valid_is_stable(self):
        telegram = Telegram(replace_at(SAMPLE, 0, '40'))
        assert telegram.is_valid is False
        assert telegram.is_valid is False


class TestRender:
    """Tests for the text report."""

    def test_sample_report(self):
        report = Telegram(SAMPLE).render()
        lines = report.splitlines()

        assert lines[0] == '緊急地震速報 (第5報)'
        assert '発信官署: 東京' in lines
        assert '震央地名: 福島県浜通り' in lines
        assert '震央の位置: N37.0 E140.8' in lines
        assert '電文の発表時刻: 2011-04-15 23:34:53' in lines
        assert '予測手法: 不明又は未設定' in lines
        assert '警報を含む内容かどうか: true' in lines

    def test_ebi_section(self):
        report = Telegram(SAMPLE).render()
        assert '地域毎の警報の判別、最大予測震度及び主要動到達予測時刻(EBI):' in report
        assert 'すでに到達' in report
        assert '予想到達時刻: 23:34:55' in report
        assert '6弱から6強' in report

    def test_canceled_report(self):
        report = Telegram(CANCELED).render()
        assert '震央地名: 不明又は未設定' in report
        assert 'EBI' not in report

    def test_invalid_report_raises(self):
        with pytest.raises(FormatError):
            Telegram(replace_at(SAMPLE, 0, '40')).render()
