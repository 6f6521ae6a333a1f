"""ロギングと設定のテスト"""
import json
import logging
import logging.handlers
import sys

import pytest

from sumoson.config import ScraperConfig
from sumoson.utils import StructuredFormatter, setup_logger


class TestScraperConfig:
    """環境変数からの設定読み込み"""

    def test_defaults(self, monkeypatch):
        for name in ('SUMOSON_TIMEOUT', 'SUMOSON_USER_AGENT', 'SUMOSON_LOG_LEVEL',
                     'SUMOSON_LOG_FILE', 'SUMOSON_LOG_JSON'):
            monkeypatch.delenv(name, raising=False)
        config = ScraperConfig.get_config()
        assert config['timeout'] == ScraperConfig.DEFAULT_TIMEOUT
        assert config['user_agent'] == ScraperConfig.DEFAULT_USER_AGENT
        assert config['log_level'] == 'WARNING'
        assert config['log_file'] is None
        assert config['log_json'] is False

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv('SUMOSON_TIMEOUT', '10')
        monkeypatch.setenv('SUMOSON_USER_AGENT', 'custom-agent')
        monkeypatch.setenv('SUMOSON_LOG_LEVEL', 'debug')
        monkeypatch.setenv('SUMOSON_LOG_FILE', '/tmp/sumoson.log')
        monkeypatch.setenv('SUMOSON_LOG_JSON', 'TRUE')
        config = ScraperConfig.get_config()
        assert config['timeout'] == 10
        assert config['user_agent'] == 'custom-agent'
        assert config['log_level'] == 'DEBUG'
        assert config['log_file'] == '/tmp/sumoson.log'
        assert config['log_json'] is True

    @pytest.mark.parametrize('value', ['abc', '1.5', '0'])
    def test_invalid_timeout(self, monkeypatch, value):
        monkeypatch.setenv('SUMOSON_TIMEOUT', value)
        with pytest.raises(ValueError, match='SUMOSON_TIMEOUT'):
            ScraperConfig.get_config()

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.delenv('SUMOSON_TIMEOUT', raising=False)
        monkeypatch.setenv('SUMOSON_LOG_LEVEL', 'verbose')
        with pytest.raises(ValueError, match='SUMOSON_LOG_LEVEL'):
            ScraperConfig.get_config()


class TestLogger:
    """ロガーのセットアップ"""

    @pytest.fixture
    def logger_name(self):
        name = 'sumoson_test_logger'
        yield name
        test_logger = logging.getLogger(name)
        for handler in test_logger.handlers:
            handler.close()
        test_logger.handlers.clear()

    def test_console_only(self, logger_name):
        logger = setup_logger(logger_name, level='INFO')
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_setup_twice_does_not_duplicate_handlers(self, logger_name):
        setup_logger(logger_name)
        logger = setup_logger(logger_name)
        assert len(logger.handlers) == 1

    def test_setup_twice_closes_previous_handlers(self, logger_name, tmp_path):
        """再設定時に以前のファイルハンドラーを閉じる"""
        log_file = tmp_path / 'sumoson.log'
        logger = setup_logger(logger_name, log_file=log_file)
        file_handler = next(h for h in logger.handlers
                            if isinstance(h, logging.handlers.RotatingFileHandler))
        assert file_handler.stream is not None

        setup_logger(logger_name, log_file=log_file)
        assert file_handler.stream is None
        assert file_handler not in logger.handlers

    def test_log_file(self, logger_name, tmp_path):
        log_file = tmp_path / 'logs' / 'sumoson.log'
        logger = setup_logger(logger_name, level=logging.INFO, log_file=log_file, use_json=True)
        assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)

        logger.info("物件情報を抽出しました", extra={'listing_id': '87706145'})
        for handler in logger.handlers:
            handler.flush()

        entry = json.loads(log_file.read_text(encoding='utf-8').splitlines()[-1])
        assert entry['message'] == "物件情報を抽出しました"
        assert entry['level'] == 'INFO'
        assert entry['listing_id'] == '87706145'


class TestStructuredFormatter:
    """JSONフォーマッターのテスト"""

    def test_format_exception(self):
        try:
            raise ValueError("不正な値")
        except ValueError:
            record = logging.LogRecord('sumoson', logging.ERROR, __file__, 1,
                                       "抽出失敗", None, sys.exc_info())
        data = json.loads(StructuredFormatter().format(record))
        assert data['message'] == "抽出失敗"
        assert data['exception']['type'] == 'ValueError'
        assert data['exception']['message'] == "不正な値"
