"""
スクレイパーコンポーネント

各機能を独立したコンポーネントに分離し、
単一責任の原則に従った設計を実現
"""

from .http_client import HttpClientComponent
from .html_parser import HtmlParserComponent, DocumentNode, SoupNode

__all__ = [
    'HttpClientComponent',
    'HtmlParserComponent',
    'DocumentNode',
    'SoupNode',
]
