"""
スクレイパーパーサーモジュール

サイト専用のHTMLパーサーを提供
"""

from .base_parser import BaseHtmlParser
from .suumo_parser import SuumoParser

__all__ = [
    'BaseHtmlParser',
    'SuumoParser',
]
