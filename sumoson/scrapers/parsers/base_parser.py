"""
基底HTMLパーサークラス

サイト固有パーサーの基底となるクラス
ラベル探索と値の変換の共通処理を提供
"""
import logging
from typing import Optional, Callable, Any
from datetime import datetime

from ..components import DocumentNode
from ..data_normalizer import (
    extract_listing_id,
    extract_price,
    extract_area,
    parse_posting_date,
    parse_year_month,
    require_text,
)
from ...exceptions import PropertyExtractionError, StructureNotFoundError


class BaseHtmlParser:
    """
    HTMLパーサー基底クラス

    責務: サイト固有パーサーの共通インターフェースを提供
    - 文書ツリーの操作はDocumentNodeに委譲
    - データ変換はDataNormalizerの関数を使用
    - 失敗はWARNINGで記録してから送出
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        初期化

        Args:
            logger: ロガーインスタンス
        """
        self.logger = logger or logging.getLogger(__name__)

    # ========== エラー ==========

    def structure_not_found(self, message: str, field: str, query: str) -> StructureNotFoundError:
        """要素が見つからないことを記録し、送出する例外を返す"""
        self.logger.warning(f"{message} (field={field}, query={query})")
        return StructureNotFoundError(message, field=field, query=query)

    def _convert(self, func: Callable[..., Any], *args: Any) -> Any:
        """DataNormalizerの関数を呼び出し、失敗を記録して再送出"""
        try:
            return func(*args)
        except PropertyExtractionError as e:
            self.logger.warning(f"値の変換に失敗しました: {e}")
            raise

    # ========== ラベル探索 ==========

    def find_label(self, scope: DocumentNode, selector: str, label: str, field: str) -> DocumentNode:
        """
        ラベル文字列を含む要素を探す

        Args:
            scope: 探索範囲
            selector: ラベル要素のCSSセレクタ（例: '.fl', 'th'）
            label: ラベル文字列（部分一致）
            field: エラーに記録するフィールド名

        Returns:
            最初にマッチしたラベル要素

        Raises:
            StructureNotFoundError: ラベルが見つからない場合
        """
        query = f"{selector}:contains('{label}')"
        matches = scope.find_containing(selector, label)
        if not matches:
            raise self.structure_not_found(f"ラベル「{label}」が見つかりません", field, query)

        self.logger.debug(f"ラベル「{label}」を検出: {len(matches)}件 (field={field})")
        return matches[0]

    def find_value_cell(self, scope: DocumentNode, selector: str, label: str, field: str) -> DocumentNode:
        """
        ラベルに対応する値セルを探す

        ラベルを含む見出しセル（th）の次の兄弟要素を値セルとする。

        Raises:
            StructureNotFoundError: ラベルまたは値セルが見つからない場合
        """
        label_node = self.find_label(scope, selector, label, field)
        header = label_node if label_node.tag == 'th' else label_node.closest('th')
        cell = header.next_sibling() if header is not None else None
        if cell is None:
            raise self.structure_not_found(f"「{label}」の値セルが見つかりません", field,
                                           f"{selector}:contains('{label}') < th + *")
        return cell

    # ========== データ変換メソッド（DataNormalizerを使用） ==========

    def parse_listing_id(self, url: str) -> str:
        """URLから物件IDを抽出"""
        return self._convert(extract_listing_id, url)

    def parse_price(self, text: str, field: str = 'price') -> int:
        """価格をパース（円単位）"""
        return self._convert(extract_price, text, field)

    def parse_area(self, text: str, field: str) -> float:
        """面積をパース（㎡単位）"""
        return self._convert(extract_area, text, field)

    def parse_posting_date(self, text: str, field: str = 'posting_date') -> datetime:
        """情報提供日をパース"""
        return self._convert(parse_posting_date, text, field)

    def parse_year_month(self, text: str, field: str) -> datetime:
        """築年月をパース"""
        return self._convert(parse_year_month, text, field)

    def require_text(self, text: Optional[str], field: str) -> str:
        """空でないテキストを返す"""
        return self._convert(require_text, text, field)
