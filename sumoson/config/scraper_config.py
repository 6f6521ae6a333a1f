"""
スクレイパー設定
環境変数またはデフォルト値から設定を読み込む
"""

import os
from typing import Dict, Any


class ScraperConfig:
    """スクレイパーの設定クラス"""

    # デフォルト設定
    DEFAULT_TIMEOUT = 30  # HTTPタイムアウト（秒）
    DEFAULT_USER_AGENT = ('Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
                          '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36')
    DEFAULT_LOG_LEVEL = 'WARNING'

    LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

    @classmethod
    def get_config(cls) -> Dict[str, Any]:
        """
        環境変数またはデフォルト値から設定を取得

        Raises:
            ValueError: 環境変数の値が不正な場合
        """
        return {
            'timeout': cls._get_timeout(),
            'user_agent': os.getenv('SUMOSON_USER_AGENT', cls.DEFAULT_USER_AGENT),
            'log_level': cls._get_log_level(),
            'log_file': os.getenv('SUMOSON_LOG_FILE') or None,
            'log_json': os.getenv('SUMOSON_LOG_JSON', 'false').lower() == 'true',
        }

    @classmethod
    def _get_timeout(cls) -> int:
        value = os.getenv('SUMOSON_TIMEOUT')
        if value is None:
            return cls.DEFAULT_TIMEOUT
        try:
            timeout = int(value)
        except ValueError:
            raise ValueError(f"SUMOSON_TIMEOUT は整数で指定してください: {value!r}") from None
        if timeout <= 0:
            raise ValueError(f"SUMOSON_TIMEOUT は1以上を指定してください: {value!r}")
        return timeout

    @classmethod
    def _get_log_level(cls) -> str:
        value = os.getenv('SUMOSON_LOG_LEVEL', cls.DEFAULT_LOG_LEVEL)
        level = value.upper()
        if level not in cls.LOG_LEVELS:
            raise ValueError(f"SUMOSON_LOG_LEVEL は {', '.join(cls.LOG_LEVELS)} のいずれかを"
                             f"指定してください: {value!r}")
        return level
