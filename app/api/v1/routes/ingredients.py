"""재료 관련 라우트"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.schemas.ingredient import IngredientCreateRequest
from app.core.exceptions import DuplicateNameError
from app.db.session import get_session
from app.services import catalog_service
from app.utils.json_numbers import finite_or_none

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/ingredients")
async def list_ingredients(session: AsyncSession = Depends(get_session)) -> dict:
    """
    재료 목록 조회

    이름 순(대소문자 무시)으로 정렬한 뒤 category별로 묶어서 반환합니다.
    category가 없는 재료는 "uncategorized"에 들어갑니다.
    """
    ingredients = await catalog_service.list_ingredients(session)
    return {"ingredients": finite_or_none(catalog_service.group_by_category(ingredients))}


@router.post("/ingredient", status_code=303)
async def create_ingredient(
    request: IngredientCreateRequest,
    session: AsyncSession = Depends(get_session),
) -> RedirectResponse:
    """
    재료 생성

    **Returns:**
        성공 시 "/"로 리다이렉트 (303)
    """
    try:
        await catalog_service.create_ingredient(
            session,
            name=request.name,
            category=request.category,
            serving=request.serving,
            energy=request.energy,
            fat=request.fat,
            carbs=request.carbs,
            protein=request.protein,
            price=request.price,
            package_size=request.package_size,
        )
        await session.commit()
    except DuplicateNameError as e:
        await session.rollback()
        logger.warning("Ingredient rejected: %s", e)
        raise HTTPException(status_code=409, detail=str(e)) from e

    return RedirectResponse(url="/", status_code=303)
