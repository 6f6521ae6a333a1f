"""
ロギングユーティリティ
CLIとスクレイパーで使用する統一されたロガーを提供
"""

import logging
import logging.handlers
import json
from datetime import datetime, timezone
from pathlib import Path
import traceback
from typing import Optional, Union

# LogRecordの標準属性（extraで渡されたカスタム属性と区別するため）
_STANDARD_ATTRS = {
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "thread", "threadName", "exc_info", "exc_text", "stack_info",
    "taskName", "message",
}


class StructuredFormatter(logging.Formatter):
    """構造化されたログフォーマッター（JSON形式）"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # エラーの場合は追加情報を含める
        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info),
            }

        # カスタム属性があれば追加
        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logger(
    name: str,
    level: Union[int, str] = logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    use_json: bool = False
) -> logging.Logger:
    """
    ロガーをセットアップ

    Args:
        name: ロガー名（'sumoson' を指定するとパッケージ全体に適用される）
        level: ログレベル
        log_file: ログファイルのパス（Noneの場合はコンソールのみ）
        max_bytes: ローテーションするファイルサイズ
        backup_count: 保持する世代数
        use_json: JSON形式で出力するか

    Returns:
        設定済みのロガー
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # 既存のハンドラーを閉じてからクリア
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    if use_json:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    # コンソールハンドラー（標準出力はJSON結果用に空けておく）
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # ファイルハンドラー（ローテーション付き）
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
