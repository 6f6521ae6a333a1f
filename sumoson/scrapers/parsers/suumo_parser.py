"""
SUUMO専用HTMLパーサー

SUUMO（suumo.jp）一戸建て物件詳細ページの「物件詳細情報」テーブルから
物件情報を抽出する
"""
import logging
from datetime import datetime
from typing import Optional, List
from urllib.parse import urlparse

from .base_parser import BaseHtmlParser
from ..components import DocumentNode
from ...schemas import PropertyRecord


class SuumoParser(BaseHtmlParser):
    """SUUMO専用パーサー"""

    # 物件詳細情報テーブルの見出し
    DETAIL_TITLE_SELECTOR = '#mainContents .secTitleInnerR'
    DETAIL_TITLE_MARKER = '物件詳細情報'

    # ラベル要素のセレクタ
    LABEL_SELECTOR = '.fl'
    HEADER_SELECTOR = 'th'

    POSTING_DATE_MARKER = '情報提供日'

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        初期化

        Args:
            logger: ロガーインスタンス
        """
        super().__init__(logger)
        self.logger = logger or logging.getLogger(__name__)

    def parse_property_detail(self, document: DocumentNode, url: str) -> PropertyRecord:
        """
        物件詳細をパース

        各フィールドを決まった順序で抽出し、最初に失敗した時点で中断する。

        Args:
            document: 物件詳細ページの文書ツリー
            url: 物件詳細ページのURL

        Returns:
            物件情報

        Raises:
            PropertyExtractionError: いずれかのフィールドの抽出に失敗した場合
        """
        listing_id = self.extract_listing_id(url)
        posting_date = self.extract_posting_date(document)

        # 以降のフィールドはすべて同じテーブルから取得する
        table = self.find_detail_table(document, url)

        record = PropertyRecord(
            id=listing_id,
            posting_date=posting_date,
            name=self.extract_name(table),
            price=self.extract_price(table),
            floor_plan=self.extract_floor_plan(table),
            land_area=self.extract_land_area(table),
            building_area=self.extract_building_area(table),
            construction_date=self.extract_construction_date(table),
            address=self.extract_address(table),
            traffic=self.extract_traffic(table),
        )
        self.logger.info(f"物件情報を抽出しました: id={record.id} name={record.name}")
        return record

    # ========== 文書全体から取得する項目 ==========

    def extract_listing_id(self, url: str) -> str:
        """URLから物件IDを抽出"""
        return self.parse_listing_id(url)

    def extract_posting_date(self, document: DocumentNode) -> datetime:
        """「情報提供日：YYYY/M/D」から情報提供日を抽出"""
        paragraphs = document.find_containing('p', self.POSTING_DATE_MARKER)
        if not paragraphs:
            raise self.structure_not_found(f"「{self.POSTING_DATE_MARKER}」が見つかりません",
                                           'posting_date', f"p:contains('{self.POSTING_DATE_MARKER}')")
        text = ''.join(p.text().strip() for p in paragraphs)
        return self.parse_posting_date(text)

    def find_detail_table(self, document: DocumentNode, url: str = '') -> DocumentNode:
        """
        「物件詳細情報」テーブルを探す

        見出しの2階層上の要素の中にあるテーブルを物件詳細テーブルとする。

        Raises:
            StructureNotFoundError: テーブルが見つからない場合
        """
        titles = document.find_containing(self.DETAIL_TITLE_SELECTOR, self.DETAIL_TITLE_MARKER)
        for title in titles:
            section = title.ancestor(2)
            table = section.select_one('table') if section is not None else None
            if table is not None:
                return table

        query = f"{self.DETAIL_TITLE_SELECTOR}:contains('{self.DETAIL_TITLE_MARKER}') << << table"
        raise self.structure_not_found("物件詳細情報テーブルが見つかりません", 'detail_table',
                                       f"{query} url_query={urlparse(url or '').query}")

    # ========== 物件詳細情報テーブルから取得する項目 ==========

    def extract_name(self, table: DocumentNode) -> str:
        """物件名（ラベルと同じ行のtd）"""
        label = self.find_label(table, self.LABEL_SELECTOR, '物件名', 'name')
        row = label.closest('tr')
        cells = row.select('td') if row is not None else []
        if not cells:
            raise self.structure_not_found("「物件名」の値セルが見つかりません", 'name',
                                           f"{self.LABEL_SELECTOR}:contains('物件名') < tr td")
        return self.require_text(''.join(cell.text() for cell in cells), 'name')

    def extract_price(self, table: DocumentNode) -> int:
        """価格（円単位）"""
        cell = self.find_value_cell(table, self.LABEL_SELECTOR, '価格', 'price')
        # 価格は「円」を含む段落に書かれている
        paragraphs = cell.find_containing('p', '円')
        if paragraphs:
            text = ''.join(p.text() for p in paragraphs)
        else:
            text = cell.text()
        return self.parse_price(text, 'price')

    def extract_floor_plan(self, table: DocumentNode) -> str:
        """間取り（例: 3LDK）"""
        cell = self.find_value_cell(table, self.LABEL_SELECTOR, '間取り', 'floor_plan')
        return self.require_text(cell.text(), 'floor_plan')

    def extract_land_area(self, table: DocumentNode) -> float:
        """土地面積（㎡）"""
        cell = self.find_value_cell(table, self.LABEL_SELECTOR, '土地面積', 'land_area')
        return self.parse_area(cell.text(), 'land_area')

    def extract_building_area(self, table: DocumentNode) -> float:
        """建物面積（㎡）"""
        cell = self.find_value_cell(table, self.LABEL_SELECTOR, '建物面積', 'building_area')
        return self.parse_area(cell.text(), 'building_area')

    def extract_construction_date(self, table: DocumentNode) -> datetime:
        """築年月（完成予定を含む）"""
        cell = self.find_value_cell(table, self.LABEL_SELECTOR, '築年月', 'construction_date')
        return self.parse_year_month(cell.text(), 'construction_date')

    def extract_address(self, table: DocumentNode) -> str:
        """住所（値セル内の最初の段落）"""
        cell = self.find_value_cell(table, self.HEADER_SELECTOR, '住所', 'address')
        paragraphs = cell.select('p:first-child')
        if not paragraphs:
            raise self.structure_not_found("「住所」の段落が見つかりません", 'address',
                                           f"{self.HEADER_SELECTOR}:contains('住所') + * p:first-child")
        return self.require_text(''.join(p.text() for p in paragraphs), 'address')

    def extract_traffic(self, table: DocumentNode) -> List[str]:
        """交通（路線ごとに1件、文書順）"""
        cell = self.find_value_cell(table, self.HEADER_SELECTOR, '交通', 'traffic')
        blocks = cell.select('div')
        if not blocks:
            raise self.structure_not_found("「交通」の路線情報が見つかりません", 'traffic',
                                           f"{self.HEADER_SELECTOR}:contains('交通') + * div")
        return [block.text().strip() for block in blocks]
