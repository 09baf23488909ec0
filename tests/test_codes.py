"""
Tests for code tables, configuration and logging setup
"""

import json

import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from loguru import logger

from src.eew import Telegram, Config, LoggingConfig, default_tables
from src.jma import (
    CodeTable, load_code_tables,
    EPICENTER_CODES, AREA_CODES, get_epicenter_name, get_area_name
)

from samples import SAMPLE


class TestCodeTable:
    """Tests for the read-only code lookups."""

    def test_lookup(self):
        table = CodeTable('area', {251: '福島県浜通り'})
        assert table.lookup(251) == '福島県浜通り'
        assert table.lookup(999) is None
        assert 251 in table
        assert len(table) == 1
        assert list(table) == [251]

    def test_read_only(self):
        source = {251: '福島県浜通り'}
        table = CodeTable('area', source)
        source[300] = '茨城県北部'
        assert 300 not in table
        with pytest.raises(TypeError):
            table.entries[300] = '茨城県北部'

    def test_bundled_tables(self):
        assert get_epicenter_name(251) == '福島県浜通り'
        assert get_area_name(251) == '福島県浜通り'
        assert get_area_name(999) is None
        assert 309 in EPICENTER_CODES
        assert 350 in AREA_CODES

    def test_from_json(self, tmp_path):
        path = tmp_path / 'areas.json'
        path.write_text(json.dumps({'100': 'Ishikari North'}), encoding='utf-8')

        table = CodeTable.from_json('area', path)
        assert table.lookup(100) == 'Ishikari North'

    def test_from_json_rejects_bad_codes(self, tmp_path):
        path = tmp_path / 'areas.json'
        path.write_text(json.dumps({'1a0': 'Ishikari North'}), encoding='utf-8')
        with pytest.raises(ValueError):
            CodeTable.from_json('area', path)

    def test_from_json_rejects_non_object(self, tmp_path):
        path = tmp_path / 'areas.json'
        path.write_text(json.dumps(['Ishikari North']), encoding='utf-8')
        with pytest.raises(ValueError):
            CodeTable.from_json('area', path)

    def test_load_defaults(self):
        tables = load_code_tables()
        assert tables.epicenter.lookup(251) == '福島県浜通り'
        assert tables.area.lookup(222) == '宮城県中部'


class TestConfig:
    """Tests for environment configuration."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv('EEW_EPICENTER_TABLE', raising=False)
        monkeypatch.delenv('EEW_AREA_TABLE', raising=False)
        monkeypatch.delenv('EEW_LOG_LEVEL', raising=False)

        config = Config.from_env()
        assert config.epicenter_table is None
        assert config.area_table is None
        assert config.log_level == 'INFO'

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv('EEW_EPICENTER_TABLE', '/tmp/epicenter.json')
        monkeypatch.setenv('EEW_LOG_LEVEL', 'debug')

        config = Config.from_env()
        assert config.epicenter_table == '/tmp/epicenter.json'
        assert config.log_level == 'DEBUG'

    def test_default_tables_from_env(self, monkeypatch, tmp_path):
        path = tmp_path / 'epicenter.json'
        path.write_text(json.dumps({'251': 'Fukushima Hamadori'}), encoding='utf-8')
        monkeypatch.setenv('EEW_EPICENTER_TABLE', str(path))
        monkeypatch.delenv('EEW_AREA_TABLE', raising=False)

        default_tables.cache_clear()
        try:
            assert Telegram(SAMPLE).epicenter == 'Fukushima Hamadori'
            assert default_tables() is default_tables()
        finally:
            default_tables.cache_clear()


class TestLoggingConfig:
    """Tests for the loguru setup."""

    def test_configure_file_sink(self, tmp_path):
        log_file = tmp_path / 'eew.log'
        LoggingConfig.reset()
        try:
            LoggingConfig.configure('DEBUG', str(log_file))
            # a second call is ignored
            LoggingConfig.configure('ERROR')

            assert not Telegram(SAMPLE.replace('37 03', '40 03', 1)).is_valid
            logger.remove()

            content = log_file.read_text(encoding='utf-8')
            assert 'Invalid telegram' in content
        finally:
            LoggingConfig.reset()
            logger.remove()
            logger.add(sys.stderr)
