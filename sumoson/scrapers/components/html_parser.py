"""
HTMLパーサーコンポーネント

HTML解析に関する共通処理を担当
- 文書ツリーの抽象インターフェース（DocumentNode）
- BeautifulSoupによる実装（SoupNode）
- HTML文字列の解析
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional, List, Union
from bs4 import BeautifulSoup, Tag


class DocumentNode(ABC):
    """
    文書ツリーのノード

    抽出処理が必要とする操作だけを定義する
    - テキスト部分一致による検索
    - 親・祖先（タグ指定）への移動
    - 次の兄弟要素への移動
    - CSSセレクタによる子孫要素の選択
    - テキスト内容の取得

    HTMLライブラリごとにこのクラスを実装すれば、抽出処理はそのまま使える。
    """

    @property
    @abstractmethod
    def tag(self) -> str:
        """タグ名"""

    @abstractmethod
    def text(self) -> str:
        """子孫を含むテキスト内容（空白は除去しない）"""

    @abstractmethod
    def parent(self) -> Optional['DocumentNode']:
        """親ノード"""

    @abstractmethod
    def next_sibling(self) -> Optional['DocumentNode']:
        """次の兄弟要素（テキストノードは飛ばす）"""

    @abstractmethod
    def select(self, selector: str) -> List['DocumentNode']:
        """CSSセレクタにマッチする子孫要素（文書順）"""

    def select_one(self, selector: str) -> Optional['DocumentNode']:
        """CSSセレクタにマッチする最初の子孫要素"""
        elements = self.select(selector)
        return elements[0] if elements else None

    def find_containing(self, selector: str, substring: str) -> List['DocumentNode']:
        """セレクタにマッチし、テキストに部分文字列を含む要素"""
        return [node for node in self.select(selector) if substring in node.text()]

    def closest(self, tag: str) -> Optional['DocumentNode']:
        """指定タグの最も近い祖先（自分自身は含まない）"""
        node = self.parent()
        while node is not None:
            if node.tag == tag:
                return node
            node = node.parent()
        return None

    def ancestor(self, levels: int) -> Optional['DocumentNode']:
        """levels階層上の祖先"""
        node: Optional[DocumentNode] = self
        for _ in range(levels):
            if node is None:
                return None
            node = node.parent()
        return node


class SoupNode(DocumentNode):
    """BeautifulSoupによるDocumentNodeの実装"""

    def __init__(self, element: Union[Tag, BeautifulSoup]):
        self._element = element

    @property
    def element(self) -> Union[Tag, BeautifulSoup]:
        """ラップしているBeautifulSoupの要素"""
        return self._element

    @property
    def tag(self) -> str:
        return self._element.name

    def text(self) -> str:
        return self._element.get_text()

    def parent(self) -> Optional['SoupNode']:
        parent = self._element.parent
        return SoupNode(parent) if parent is not None else None

    def next_sibling(self) -> Optional['SoupNode']:
        sibling = self._element.find_next_sibling()
        return SoupNode(sibling) if sibling is not None else None

    def select(self, selector: str) -> List['SoupNode']:
        return [SoupNode(element) for element in self._element.select(selector)]

    def __eq__(self, other) -> bool:
        return isinstance(other, SoupNode) and self._element is other._element

    def __hash__(self) -> int:
        return id(self._element)

    def __repr__(self) -> str:
        return f"SoupNode(<{self.tag}>)"


class HtmlParserComponent:
    """
    HTML解析コンポーネント

    責務: HTMLを文書ツリーに変換する
    データの意味解釈や変換はDataNormalizerに委譲
    """

    def __init__(self, logger: Optional[logging.Logger] = None,
                 parser: str = 'html.parser'):
        """
        初期化

        Args:
            logger: ロガーインスタンス
            parser: BeautifulSoupのパーサー名
        """
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser

    def parse_html(self, html_content: Union[str, bytes]) -> SoupNode:
        """
        HTMLを文書ツリーに変換

        Args:
            html_content: HTML文字列、またはファイルから読み込んだバイト列
                （バイト列の文字コードはmetaタグ等から推定する）

        Returns:
            文書全体を表すノード
        """
        if not html_content:
            self.logger.warning("空のHTMLを解析します")
        soup = BeautifulSoup(html_content or '', self.parser)
        if isinstance(html_content, bytes):
            self.logger.debug(f"HTML解析完了 (サイズ: {len(html_content)} バイト, "
                              f"文字コード: {soup.original_encoding})")
        else:
            self.logger.debug(f"HTML解析完了 (サイズ: {len(html_content or '')} 文字)")
        return SoupNode(soup)
