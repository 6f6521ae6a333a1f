"""
sumoson - SUUMO物件詳細ページから物件情報を抽出するライブラリ
"""

from .exceptions import (
    PropertyExtractionError,
    FetchError,
    StructureNotFoundError,
    ValueParseError,
    URLFormatError,
)
from .schemas import PropertyRecord
from .scrapers import SuumoScraper
from .scrapers.parsers import SuumoParser

__version__ = '0.1.0'

__all__ = [
    'PropertyExtractionError',
    'FetchError',
    'StructureNotFoundError',
    'ValueParseError',
    'URLFormatError',
    'PropertyRecord',
    'SuumoScraper',
    'SuumoParser',
]
