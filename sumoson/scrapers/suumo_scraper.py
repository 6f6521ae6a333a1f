"""
SUUMOスクレイパー
物件詳細ページを取得し、物件情報を抽出する
"""

import logging
from typing import Optional, Dict, Any, Union

from .components import HttpClientComponent, HtmlParserComponent
from .parsers import SuumoParser
from ..config import ScraperConfig
from ..exceptions import FetchError
from ..schemas import PropertyRecord


class SuumoScraper:
    """SUUMOのスクレイパー（物件詳細ページ1件単位）"""

    def __init__(self, http_client: Optional[HttpClientComponent] = None,
                 logger: Optional[logging.Logger] = None,
                 config: Optional[Dict[str, Any]] = None):
        """
        初期化

        Args:
            http_client: HTTPクライアント（Noneの場合は設定から生成）
            logger: ロガーインスタンス
            config: 設定（Noneの場合はScraperConfigから取得）
        """
        self.logger = logger or logging.getLogger(__name__)
        self.config = config or ScraperConfig.get_config()
        self.http_client = http_client or HttpClientComponent(
            logger=self.logger,
            timeout=self.config['timeout'],
            user_agent=self.config['user_agent'],
        )
        self.html_parser = HtmlParserComponent(logger=self.logger)
        self.parser = SuumoParser(logger=self.logger)

    def fetch_page(self, url: str) -> str:
        """
        ページを取得してHTML文字列を返す

        Raises:
            FetchError: 取得に失敗した場合
        """
        content, error_info = self.http_client.fetch(url)
        if error_info:
            raise FetchError(f"ページを取得できません ({error_info['type']}): {error_info['message']}",
                             query=url)
        return content

    def parse_html(self, html_content: Union[str, bytes], url: str) -> PropertyRecord:
        """取得済みのHTMLから物件情報を抽出"""
        document = self.html_parser.parse_html(html_content)
        return self.parser.parse_property_detail(document, url)

    def scrape(self, url: str) -> PropertyRecord:
        """
        物件詳細ページを取得して物件情報を抽出

        Args:
            url: 物件詳細ページのURL（例: "https://suumo.jp/ikkodate/tokyo/sc_shinjuku/nc_87706145/"）

        Returns:
            物件情報

        Raises:
            PropertyExtractionError: 取得または抽出に失敗した場合
        """
        self.logger.debug(f"物件詳細ページを取得: {url}")
        return self.parse_html(self.fetch_page(url), url)

    def close(self):
        """HTTPセッションを閉じる"""
        self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
