"""
データ正規化フレームワーク
物件詳細ページから取り出した文字列を型付きの値に変換するためのユーティリティ

このモジュールは以下の機能を提供します：
1. URLからの物件ID抽出
2. 価格（万円）の円単位への変換
3. 面積（m2）の抽出
4. 日付（YYYY/M/D、YYYY年M月）の変換

値の書式が想定と異なる場合は ValueParseError、
URLに物件IDがない場合は URLFormatError を送出する。
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Optional

from ..exceptions import ValueParseError, URLFormatError


# 日付はすべて日本時間として扱う
JST = timezone(timedelta(hours=9), 'JST')


class DataNormalizer:
    """データ正規化のメインクラス"""

    # 値の書式ごとのパターン
    LISTING_ID_PATTERN = re.compile(r'/nc_([0-9]+)/')
    POSTING_DATE_PATTERN = re.compile(r'情報提供日：(.*)$')
    DATE_PATTERN = re.compile(r'([0-9]{4})/([0-9]{1,2})/([0-9]{1,2})')
    PRICE_SUFFIX_PATTERN = re.compile(r'万円$')
    INTEGER_PATTERN = re.compile(r'[0-9]+')
    AREA_PATTERN = re.compile(r'(.*)m2.*$')
    DECIMAL_PATTERN = re.compile(r'[0-9]+(?:\.[0-9]*)?|\.[0-9]+')
    YEAR_MONTH_PATTERN = re.compile(r'([0-9]{4})年([0-9]{1,2})月')

    PRICE_UNIT = 10000  # 1万円
    OKU_CHAR = '億'
    MAN_YEN_CHARS = '万円'
    PLANNED_CHARS = '予定'

    # ========== 物件ID ==========

    def extract_listing_id(self, url: str) -> str:
        """
        URLから物件IDを抽出

        Args:
            url: 物件詳細ページのURL（例: "https://suumo.jp/ikkodate/tokyo/sc_shinjuku/nc_87706145/"）

        Returns:
            物件ID（数字の文字列）

        Raises:
            URLFormatError: URLに /nc_<数字>/ が含まれない場合

        Examples:
            >>> normalizer.extract_listing_id("https://suumo.jp/ikkodate/tokyo/sc_shinjuku/nc_87706145/")
            '87706145'
        """
        match = self.LISTING_ID_PATTERN.search(url or '')
        if not match:
            raise URLFormatError("URLに物件IDが見つかりません",
                                 field='id', query=self.LISTING_ID_PATTERN.pattern, text=url)
        return match.group(1)

    # ========== 価格関連 ==========

    def extract_price(self, text: str, field: str = 'price') -> int:
        """
        文字列から価格を抽出（円単位）

        前後の「億」は数値として扱わず文字として取り除くだけなので、
        「1億2000万円」のように億を含む価格は変換できない。

        Args:
            text: 価格の文字列（例: "5000万円"）
            field: エラーに記録するフィールド名

        Returns:
            円単位の価格（1万円の倍数）

        Raises:
            ValueParseError: 末尾が「万円」でない、または数値部分が整数でない場合

        Examples:
            >>> normalizer.extract_price("5000万円")
            50000000
            >>> normalizer.extract_price("億5000万円")
            50000000
        """
        price_text = (text or '').strip().strip(self.OKU_CHAR)
        if not self.PRICE_SUFFIX_PATTERN.search(price_text):
            raise ValueParseError("価格の末尾が「万円」ではありません",
                                  field=field, query=self.PRICE_SUFFIX_PATTERN.pattern, text=text)

        number_text = price_text.strip(self.MAN_YEN_CHARS)
        if not self.INTEGER_PATTERN.fullmatch(number_text):
            raise ValueParseError("価格を整数に変換できません",
                                  field=field, query=self.INTEGER_PATTERN.pattern, text=text)

        return int(number_text) * self.PRICE_UNIT

    # ========== 面積関連 ==========

    def extract_area(self, text: str, field: str = 'area') -> float:
        """
        文字列から面積を抽出（㎡単位）

        最後の「m2」より前の部分を数値として扱う。

        Args:
            text: 面積の文字列（例: "123.45m2", "100.5m2（30.4坪）"）
            field: エラーに記録するフィールド名

        Returns:
            ㎡単位の面積

        Raises:
            ValueParseError: 「m2」がない、または数値に変換できない場合
        """
        match = self.AREA_PATTERN.search((text or '').strip())
        if not match:
            raise ValueParseError("面積の単位「m2」が見つかりません",
                                  field=field, query=self.AREA_PATTERN.pattern, text=text)

        number_text = match.group(1).strip()
        if not self.DECIMAL_PATTERN.fullmatch(number_text):
            raise ValueParseError("面積を数値に変換できません",
                                  field=field, query=self.DECIMAL_PATTERN.pattern, text=text)

        return float(number_text)

    # ========== 日付関連 ==========

    def parse_posting_date(self, text: str, field: str = 'posting_date') -> datetime:
        """
        「情報提供日：YYYY/M/D」形式の文字列から日付を抽出

        Args:
            text: 情報提供日を含む文字列
            field: エラーに記録するフィールド名

        Returns:
            日本時間0時のdatetime

        Raises:
            ValueParseError: 「情報提供日：」の後ろが日付として解釈できない場合
        """
        match = self.POSTING_DATE_PATTERN.search(text or '')
        if not match:
            raise ValueParseError("情報提供日の書式が不正です",
                                  field=field, query=self.POSTING_DATE_PATTERN.pattern, text=text)
        return self.parse_date(match.group(1), field=field)

    def parse_date(self, text: str, field: str = 'date') -> datetime:
        """
        「YYYY/M/D」形式の文字列をdatetimeに変換

        Args:
            text: 日付文字列（例: "2018/5/10"）
            field: エラーに記録するフィールド名

        Returns:
            日本時間0時のdatetime

        Raises:
            ValueParseError: 書式が異なる、または存在しない日付の場合
        """
        date_match = self.DATE_PATTERN.fullmatch((text or '').strip())
        if not date_match:
            raise ValueParseError("日付の書式が不正です",
                                  field=field, query=self.DATE_PATTERN.pattern, text=text)
        try:
            year = int(date_match.group(1))
            month = int(date_match.group(2))
            day = int(date_match.group(3))
            return datetime(year, month, day, tzinfo=JST)
        except ValueError as e:
            raise ValueParseError(f"存在しない日付です: {e}",
                                  field=field, query=self.DATE_PATTERN.pattern, text=text) from e

    def parse_year_month(self, text: str, field: str = 'construction_date') -> datetime:
        """
        「YYYY年M月」形式の文字列をdatetimeに変換

        前後の「予定」は取り除く（未完成物件の完成予定年月）。

        Args:
            text: 築年月の文字列（例: "2015年3月", "2015年3月予定"）
            field: エラーに記録するフィールド名

        Returns:
            その月の1日、日本時間0時のdatetime

        Raises:
            ValueParseError: 書式が異なる、または存在しない月の場合

        Examples:
            >>> normalizer.parse_year_month("2015年3月予定")
            datetime.datetime(2015, 3, 1, 0, 0, tzinfo=datetime.timezone(datetime.timedelta(seconds=32400), 'JST'))
        """
        year_month_text = (text or '').strip().strip(self.PLANNED_CHARS)
        match = self.YEAR_MONTH_PATTERN.fullmatch(year_month_text)
        if not match:
            raise ValueParseError("築年月の書式が不正です",
                                  field=field, query=self.YEAR_MONTH_PATTERN.pattern, text=text)
        try:
            return datetime(int(match.group(1)), int(match.group(2)), 1, tzinfo=JST)
        except ValueError as e:
            raise ValueParseError(f"存在しない年月です: {e}",
                                  field=field, query=self.YEAR_MONTH_PATTERN.pattern, text=text) from e

    # ========== テキスト ==========

    def require_text(self, text: Optional[str], field: str) -> str:
        """
        前後の空白を除去し、空でないことを確認

        Raises:
            ValueParseError: 空文字列の場合
        """
        value = (text or '').strip()
        if not value:
            raise ValueParseError("値が空です", field=field, text=text)
        return value


# シングルトンインスタンス
_normalizer = DataNormalizer()


# 便利な関数（直接インポートして使用可能）
def extract_listing_id(url: str) -> str:
    """URLから物件IDを抽出"""
    return _normalizer.extract_listing_id(url)


def extract_price(text: str, field: str = 'price') -> int:
    """文字列から価格を抽出（円単位）"""
    return _normalizer.extract_price(text, field)


def extract_area(text: str, field: str = 'area') -> float:
    """文字列から面積を抽出（㎡単位）"""
    return _normalizer.extract_area(text, field)


def parse_posting_date(text: str, field: str = 'posting_date') -> datetime:
    """「情報提供日：YYYY/M/D」から日付を抽出"""
    return _normalizer.parse_posting_date(text, field)


def parse_date(text: str, field: str = 'date') -> datetime:
    """「YYYY/M/D」をdatetimeに変換"""
    return _normalizer.parse_date(text, field)


def parse_year_month(text: str, field: str = 'construction_date') -> datetime:
    """「YYYY年M月」をdatetimeに変換"""
    return _normalizer.parse_year_month(text, field)


def require_text(text: Optional[str], field: str) -> str:
    """空でないテキストを返す"""
    return _normalizer.require_text(text, field)
