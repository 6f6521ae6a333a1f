"""
コマンドラインインターフェース

物件詳細ページのURLを受け取り、抽出した物件情報をJSONで出力する

使用例:
    sumoson https://suumo.jp/ikkodate/tokyo/sc_shinjuku/nc_87706145/
    sumoson --html saved.html https://suumo.jp/ikkodate/tokyo/sc_shinjuku/nc_87706145/
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .config import ScraperConfig
from .exceptions import PropertyExtractionError
from .scrapers import SuumoScraper
from .utils import setup_logger

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """引数パーサーを作成"""
    parser = argparse.ArgumentParser(prog='sumoson', description='SUUMO物件詳細ページから物件情報を抽出')
    parser.add_argument('url', help='物件詳細ページのURL（/nc_<物件ID>/ を含む）')
    parser.add_argument('--html', type=Path, help='取得済みのHTMLファイル（指定時はURLを取得しない）')
    parser.add_argument('--indent', type=int, default=None, help='JSONのインデント幅')
    parser.add_argument('--log-level', type=str.upper, default=None,
                        choices=ScraperConfig.LOG_LEVELS,
                        help='ログレベル（デフォルト: 環境変数SUMOSON_LOG_LEVEL または WARNING）')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """メイン関数"""
    args = build_parser().parse_args(argv)
    try:
        config = ScraperConfig.get_config()
    except ValueError as e:
        print(f"設定が不正です: {e}")
        return 1

    setup_logger(
        'sumoson',
        level=args.log_level or config['log_level'],
        log_file=config['log_file'],
        use_json=config['log_json'],
    )

    try:
        with SuumoScraper(config=config) as scraper:
            if args.html:
                record = scraper.parse_html(args.html.read_bytes(), args.url)
            else:
                record = scraper.scrape(args.url)
    except PropertyExtractionError as e:
        logger.debug(f"抽出失敗: {e.__class__.__name__}: {e}")
        print(e)
        return 1
    except OSError as e:
        print(f"HTMLファイルを読み込めません: {e}")
        return 1

    print(record.to_json(indent=args.indent))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
