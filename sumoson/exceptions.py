"""
物件情報抽出の例外クラス

抽出処理は最初の失敗で中断し、その原因を以下のいずれかで呼び出し元に伝える
- FetchError: ページを取得できなかった
- StructureNotFoundError: 期待する要素（詳細テーブル、ラベル等）が存在しない
- ValueParseError: 値は見つかったが想定した書式ではない
- URLFormatError: URLに物件IDが含まれていない
"""
from typing import Optional


class PropertyExtractionError(Exception):
    """物件情報抽出エラーの基底クラス"""

    def __init__(self, message: str,
                 field: Optional[str] = None,
                 query: Optional[str] = None,
                 text: Optional[str] = None):
        """
        初期化

        Args:
            message: エラーメッセージ
            field: 失敗したフィールド名（例: 'price'）
            query: 探索に使ったセレクタ・ラベル・パターン
            text: 実際に見つかったテキスト（見つからなかった場合はNone）
        """
        super().__init__(message)
        self.message = message
        self.field = field
        self.query = query
        self.text = text

    def __str__(self) -> str:
        parts = [self.message]
        if self.field:
            parts.append(f"field={self.field}")
        if self.query:
            parts.append(f"query={self.query}")
        if self.text is not None:
            parts.append(f"text={self.text!r}")
        return ' '.join(parts)


class FetchError(PropertyExtractionError):
    """ページの取得に失敗した場合の例外"""
    pass


class StructureNotFoundError(PropertyExtractionError):
    """HTML構造が想定と異なり、要素が見つからない場合の例外"""
    pass


class ValueParseError(PropertyExtractionError):
    """値の書式が想定と異なる場合の例外"""
    pass


class URLFormatError(PropertyExtractionError):
    """URLから物件IDを取得できない場合の例外"""
    pass
