"""物件情報のPydanticスキーマ"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple
from datetime import datetime


class PropertyRecord(BaseModel):
    """
    物件詳細ページ1件分の抽出結果

    すべてのフィールドが必須。抽出に1つでも失敗した場合は生成されない。
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(pattern=r'^\d+$')
    posting_date: datetime  # 情報提供日
    name: str = Field(min_length=1)
    price: int = Field(multiple_of=10000)  # 円単位
    floor_plan: str = Field(min_length=1)
    land_area: float  # ㎡
    building_area: float  # ㎡
    address: str = Field(min_length=1)
    traffic: Tuple[str, ...] = Field(min_length=1)
    construction_date: datetime  # 築年月（予定を含む）

    def to_json(self, indent: Optional[int] = None) -> str:
        """JSON文字列に変換（日付はISO 8601形式）"""
        return self.model_dump_json(indent=indent)
