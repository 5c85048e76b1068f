"""레시피 관련 스키마"""
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

RecipeType = Literal["pizza", "salad", "dessert"]

# 선택하지 않은 드롭다운 값
PLACEHOLDER = "Select"


class RecipeCreateRequest(BaseModel):
    """
    레시피 생성 요청

    recipeIngredients[i]는 recipeAmounts[i]와 짝을 이루며,
    "Select" 항목은 저장하지 않습니다.
    """

    model_config = ConfigDict(populate_by_name=True)

    recipe_name: str = Field(..., min_length=1, alias="recipeName", description="레시피 이름 (중복 불가)")
    recipe_components: List[Union[int, str]] = Field(default_factory=list, alias="recipeComponents")
    recipe_ingredients: List[Union[int, str]] = Field(default_factory=list, alias="recipeIngredients")
    recipe_amounts: List[Optional[float]] = Field(default_factory=list, alias="recipeAmounts")
    recipe_type: Optional[RecipeType] = Field(None, alias="recipeType")
    description: Optional[str] = None
