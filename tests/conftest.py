"""テスト共通のフィクスチャ"""
import pytest

from sumoson.scrapers.components import HtmlParserComponent
from sumoson.scrapers.parsers import SuumoParser


LISTING_URL = "https://suumo.jp/ikkodate/tokyo/sc_shinjuku/nc_87706145/"

DEFAULT_TRAFFIC = [
    "ＪＲ山手線「新宿」徒歩10分",
    "都営大江戸線「都庁前」徒歩7分",
    "東京メトロ丸ノ内線「西新宿」徒歩8分",
]

DEFAULT_VALUES = {
    'posting_date': "2018/5/10",
    'name': "新宿区西新宿3丁目 新築一戸建て",
    'price': "5480万円",
    'floor_plan': "3LDK",
    'land_area': "100.52m2（30.4坪）",
    'building_area': "95.3m2",
    'construction_date': "2019年3月予定",
    'address': "東京都新宿区西新宿3",
    'traffic': DEFAULT_TRAFFIC,
    'charset': "UTF-8",
}


def build_detail_html(**overrides) -> str:
    """SUUMO一戸建て詳細ページを模したHTMLを作成"""
    values = dict(DEFAULT_VALUES, **overrides)
    traffic_html = "\n".join(f"<div>{line}</div>" for line in values['traffic'])
    return f"""
    <html>
    <head><meta charset="{values['charset']}"><title>{values['name']}｜SUUMO</title></head>
    <body>
    <div id="mainContents">
        <div class="section_h1">
            <h1>{values['name']}</h1>
        </div>
        <div class="mt10">
            <p class="fs10">情報提供日：{values['posting_date']}</p>
            <p class="fs10">次回更新予定日：随時</p>
        </div>
        <div class="secWrapper">
            <div class="secTitleOuterR">
                <h3 class="secTitleInnerR">物件詳細情報</h3>
            </div>
            <table class="data_table table_gaiyou">
                <tr>
                    <th><div class="fl">物件名</div></th>
                    <td colspan="3">
                        {values['name']}
                    </td>
                </tr>
                <tr>
                    <th><div class="fl">価格</div><div class="fr"><a href="#">ヒント</a></div></th>
                    <td>
                        <p>{values['price']}</p>
                        <p>※価格は税込み</p>
                    </td>
                    <th><div class="fl">間取り</div></th>
                    <td>
                        {values['floor_plan']}
                    </td>
                </tr>
                <tr>
                    <th><div class="fl">土地面積</div></th>
                    <td>
                        {values['land_area']}
                    </td>
                    <th><div class="fl">建物面積</div></th>
                    <td>
                        {values['building_area']}
                    </td>
                </tr>
                <tr>
                    <th><div class="fl">築年月</div></th>
                    <td>
                        {values['construction_date']}
                    </td>
                    <th><div class="fl">駐車場</div></th>
                    <td>有</td>
                </tr>
                <tr>
                    <th>住所</th>
                    <td colspan="3">
                        <p>{values['address']}</p>
                        <p><a href="#">周辺環境</a></p>
                    </td>
                </tr>
                <tr>
                    <th>交通</th>
                    <td colspan="3">
                        {traffic_html}
                    </td>
                </tr>
            </table>
        </div>
    </div>
    </body>
    </html>
    """


@pytest.fixture
def detail_html():
    """詳細ページHTMLを作成する関数"""
    return build_detail_html


@pytest.fixture
def html_parser():
    """HTMLパーサーコンポーネント"""
    return HtmlParserComponent()


@pytest.fixture
def parser():
    """SUUMOパーサー"""
    return SuumoParser()


@pytest.fixture
def parse_document(html_parser):
    """HTML文字列を文書ツリーに変換する関数"""
    return html_parser.parse_html


@pytest.fixture
def detail_table(parser, parse_document):
    """フィクスチャHTMLの物件詳細情報テーブルを取得する関数"""
    def _detail_table(**overrides):
        document = parse_document(build_detail_html(**overrides))
        return parser.find_detail_table(document, LISTING_URL)
    return _detail_table
