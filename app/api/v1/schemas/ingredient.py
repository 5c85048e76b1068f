"""재료 관련 스키마"""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

IngredientCategory = Literal[
    "flour",
    "eggs",
    "cheese",
    "meat",
    "vegetables",
    "pickles",
    "fish",
    "salad",
    "condiment",
    "seed",
    "nuts",
    "fruit",
    "milk",
    "sweeteners",
]


class IngredientCreateRequest(BaseModel):
    """재료 생성 요청 (영양 정보는 serving 기준, 가격은 한 패키지 기준)"""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="재료 이름 (중복 불가)")
    category: Optional[IngredientCategory] = Field(None, description="재료 분류")
    serving: Optional[float] = Field(None, ge=0, description="영양 정보 기준량")
    energy: Optional[float] = Field(None, description="에너지 (serving 기준)")
    fat: Optional[float] = Field(None, description="지방 (serving 기준)")
    carbs: Optional[float] = Field(None, description="탄수화물 (serving 기준)")
    protein: Optional[float] = Field(None, description="단백질 (serving 기준)")
    price: Optional[float] = Field(None, description="패키지 가격")
    package_size: Optional[float] = Field(None, ge=0, alias="packageSize", description="패키지 용량")


class IngredientReference(BaseModel):
    """재료 참조 ({"_id": ...})"""

    model_config = ConfigDict(populate_by_name=True)

    ingredient_id: int = Field(..., alias="_id")
