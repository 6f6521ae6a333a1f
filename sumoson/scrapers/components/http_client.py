"""
HTTPクライアントコンポーネント

HTTP通信に関する処理を担当
- ページ取得（1回のみ、リトライしない）
- エラーの分類
- セッション管理
"""
import requests
from typing import Optional, Tuple, Dict, Any
import logging


class HttpClientComponent:
    """HTTP通信を担当するコンポーネント"""

    DEFAULT_HEADERS = {
        'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
                      '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
        'Accept-Language': 'ja,en;q=0.9',
    }

    def __init__(self, logger: Optional[logging.Logger] = None,
                 timeout: int = 30,
                 user_agent: Optional[str] = None):
        """
        初期化

        Args:
            logger: ロガーインスタンス
            timeout: タイムアウト秒数
            user_agent: User-Agentヘッダー（Noneの場合はデフォルト）
        """
        self.logger = logger or logging.getLogger(__name__)
        self.timeout = timeout

        # セッション作成
        self.session = requests.Session()
        self.session.headers.update(self.DEFAULT_HEADERS)
        if user_agent:
            self.session.headers['User-Agent'] = user_agent

    def fetch(self, url: str) -> Tuple[Optional[str], Optional[Dict[str, Any]]]:
        """
        URLからコンテンツを取得

        Args:
            url: 取得するURL

        Returns:
            (content, error_info) のタプル
            - content: 取得したコンテンツ（成功時）
            - error_info: エラー情報（失敗時）
        """
        try:
            self.logger.debug(f"HTTP GET リクエスト送信: {url}")
            response = self.session.get(url, timeout=self.timeout)

            # ステータスコードチェック
            if response.status_code == 404:
                return None, {
                    'type': 'http_404',
                    'status_code': 404,
                    'url': url,
                    'message': 'Page not found'
                }

            if response.status_code == 503:
                return None, {
                    'type': 'http_503',
                    'status_code': 503,
                    'url': url,
                    'message': 'Service unavailable'
                }

            response.raise_for_status()

            # エンコーディング設定
            if response.encoding is None or response.encoding == 'ISO-8859-1':
                response.encoding = response.apparent_encoding or 'utf-8'

            content = response.text
            self.logger.debug(f"コンテンツ取得成功: {url} (サイズ: {len(content)} 文字)")
            return content, None

        except requests.exceptions.Timeout:
            error_info = {
                'type': 'timeout',
                'url': url,
                'message': f'Request timeout after {self.timeout} seconds'
            }

        except requests.exceptions.ConnectionError as e:
            error_info = {
                'type': 'connection_error',
                'url': url,
                'message': str(e)
            }

        except requests.exceptions.HTTPError as e:
            error_info = {
                'type': 'http_error',
                'status_code': e.response.status_code if e.response is not None else None,
                'url': url,
                'message': str(e)
            }

        except requests.exceptions.RequestException as e:
            error_info = {
                'type': 'request_error',
                'url': url,
                'message': str(e)
            }

        self.logger.error(f"コンテンツ取得失敗: {url} ({error_info['type']}: {error_info['message']})")
        return None, error_info

    def close(self):
        """セッションを閉じる"""
        if self.session:
            self.session.close()

    def __enter__(self):
        """コンテキストマネージャーのエントリ"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """コンテキストマネージャーの終了"""
        self.close()
