"""컴포넌트 관련 라우트"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.schemas.component import ComponentUsageItem
from app.core.exceptions import DocumentNotFoundError, InvalidUsageError, ReferenceNotFoundError
from app.db.session import get_session
from app.services import catalog_service, nutrition_service
from app.services.usage_reconciler import UsageEntry, parse_usage_key
from app.utils.json_numbers import finite_or_none

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/components")
async def list_components(session: AsyncSession = Depends(get_session)) -> dict:
    """컴포넌트 목록 조회 (재료별 환산값, 영양 정보 합계, 원가 포함)"""
    try:
        components = await catalog_service.list_components(session)
        aggregated = nutrition_service.aggregate_components(components)
    except ReferenceNotFoundError as e:
        logger.error("Component listing failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e)) from e

    return {"components": finite_or_none(aggregated)}


@router.put("/component/{component_id}")
async def update_component_ingredients(
    component_id: int,
    items: List[ComponentUsageItem],
    session: AsyncSession = Depends(get_session),
) -> dict:
    """
    컴포넌트 재료 목록 교체

    요청 목록과 저장된 목록의 차이(추가/수정/삭제)를 계산해 한 번에 반영합니다.

    **Args:**
        component_id: 컴포넌트 ID
        items: 새 재료 목록 [{id, amount, ingredient: {_id}}]

    **Returns:**
        갱신된 컴포넌트 (영양 정보, 원가 포함)
    """
    try:
        proposed = [
            UsageEntry(
                usage_id=parse_usage_key(item.id, position),
                ingredient_id=item.ingredient.ingredient_id,
                amount=item.amount,
                position=position,
            )
            for position, item in enumerate(items)
        ]
        await catalog_service.update_component_usages(session, component_id, proposed)
        await session.commit()
        component = await catalog_service.get_component(session, component_id)
    except DocumentNotFoundError as e:
        await session.rollback()
        raise HTTPException(status_code=404, detail=str(e)) from e
    except InvalidUsageError as e:
        await session.rollback()
        logger.warning("Component %s update rejected: %s", component_id, e)
        raise HTTPException(status_code=400, detail=str(e)) from e
    except ReferenceNotFoundError as e:
        await session.rollback()
        logger.error("Component %s update failed: %s", component_id, e)
        raise HTTPException(status_code=500, detail=str(e)) from e

    return {"component": finite_or_none(nutrition_service.aggregate_component(component))}
