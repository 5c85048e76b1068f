"""레시피 관련 라우트"""
import logging
from typing import List, Union

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.schemas.recipe import PLACEHOLDER, RecipeCreateRequest
from app.core.config import get_settings
from app.core.exceptions import DuplicateNameError, ReferenceNotFoundError
from app.db.session import get_session
from app.services import catalog_service, nutrition_service
from app.utils.json_numbers import finite_or_none

logger = logging.getLogger(__name__)

router = APIRouter()
settings = get_settings()


def _to_id(value: Union[int, str], kind: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ReferenceNotFoundError(kind, value) from exc


def _selected_ingredients(request: RecipeCreateRequest) -> List[tuple[int, float | None]]:
    """선택된 재료만 (ingredient_id, amount)로 묶기 - 같은 인덱스의 amount와 짝"""
    selected = []
    for index, ingredient_id in enumerate(request.recipe_ingredients):
        if ingredient_id == PLACEHOLDER:
            continue
        amount = request.recipe_amounts[index] if index < len(request.recipe_amounts) else None
        selected.append((_to_id(ingredient_id, "ingredient"), amount))
    return selected


@router.get("/recipes")
async def list_recipes(session: AsyncSession = Depends(get_session)) -> dict:
    """
    레시피 목록 조회

    각 레시피에 재료별 환산값, 컴포넌트별 합계, 전체 영양 정보와 원가를 붙여 반환합니다.
    무게 집계 대상 타입(기본 salad)은 직접 재료 사용량 합계를 weight로 반환합니다.
    """
    try:
        recipes = await catalog_service.list_recipes(session)
        aggregated = nutrition_service.aggregate_recipes(recipes, settings.weight_bearing_recipe_type)
    except ReferenceNotFoundError as e:
        logger.error("Recipe listing failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e)) from e

    return {"recipes": finite_or_none(aggregated)}


@router.post("/recipe", status_code=303)
async def create_recipe(
    request: RecipeCreateRequest,
    session: AsyncSession = Depends(get_session),
) -> RedirectResponse:
    """
    레시피 생성

    "Select"(선택 안 함) 항목은 제외하고 저장합니다.

    **Returns:**
        성공 시 "/"로 리다이렉트 (303)
    """
    try:
        ingredients = _selected_ingredients(request)
        component_ids = [
            _to_id(component_id, "component")
            for component_id in request.recipe_components
            if component_id != PLACEHOLDER
        ]
        await catalog_service.create_recipe(
            session,
            name=request.recipe_name,
            ingredients=ingredients,
            component_ids=component_ids,
            recipe_type=request.recipe_type,
            description=request.description,
        )
        await session.commit()
    except DuplicateNameError as e:
        await session.rollback()
        logger.warning("Recipe rejected: %s", e)
        raise HTTPException(status_code=409, detail=str(e)) from e
    except ReferenceNotFoundError as e:
        await session.rollback()
        logger.error("Recipe creation failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e)) from e

    return RedirectResponse(url="/", status_code=303)
