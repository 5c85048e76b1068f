"""컴포넌트 관련 스키마"""
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from app.api.v1.schemas.ingredient import IngredientReference


class ComponentUsageItem(BaseModel):
    """
    컴포넌트 재료 한 줄

    id가 "temp-"로 시작하면 새로 추가된 재료입니다.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Union[int, str] = Field(..., description="usage ID 또는 temp-xxx")
    amount: Optional[float] = Field(None, description="사용량")
    ingredient: IngredientReference
