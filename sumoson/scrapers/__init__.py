# Scrapers package

# データ正規化フレームワークのインポート
from .data_normalizer import (
    DataNormalizer,
    extract_listing_id,
    extract_price,
    extract_area,
    parse_posting_date,
    parse_date,
    parse_year_month,
    require_text,
)

# スクレイパークラスのインポート
from .suumo_scraper import SuumoScraper


__all__ = [
    'DataNormalizer',
    'extract_listing_id',
    'extract_price',
    'extract_area',
    'parse_posting_date',
    'parse_date',
    'parse_year_month',
    'require_text',
    'SuumoScraper',
]
