"""
카탈로그 저장소 서비스 - Ingredient / Component / Recipe

DB 조회 결과를 집계 로직이 사용하는 문서(dict) 형태로 변환합니다.
세션 commit / rollback은 라우트에서 처리하고, 여기서는 flush까지만 합니다.
"""
import logging
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import DocumentNotFoundError, DuplicateNameError, ReferenceNotFoundError
from app.db.models import (
    Component,
    ComponentIngredient,
    Ingredient,
    Recipe,
    RecipeComponent,
    RecipeIngredient,
)
from app.services.usage_reconciler import UsageEntry, apply_changes, reconcile

logger = logging.getLogger(__name__)

UNCATEGORIZED = "uncategorized"


# ===== 문서 변환 =====

def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def _weight_document(raw: Optional[float], cooked: Optional[float]) -> Optional[dict[str, Any]]:
    if raw is None and cooked is None:
        return None
    return {"raw": raw, "cooked": cooked}


def ingredient_to_document(ingredient: Ingredient) -> dict[str, Any]:
    return {
        "_id": ingredient.ingredient_id,
        "name": ingredient.name,
        "category": ingredient.category,
        "serving": ingredient.serving,
        "energy": ingredient.energy,
        "fat": ingredient.fat,
        "carbs": ingredient.carbs,
        "protein": ingredient.protein,
        "price": ingredient.price,
        "packageSize": ingredient.package_size,
        "createdAt": _isoformat(ingredient.created_at),
        "updatedAt": _isoformat(ingredient.updated_at),
    }


def usage_to_document(usage: ComponentIngredient | RecipeIngredient) -> dict[str, Any]:
    if usage.ingredient is None:
        raise ReferenceNotFoundError("ingredient", usage.ingredient_id)
    return {
        "_id": usage.usage_id,
        "ingredient": ingredient_to_document(usage.ingredient),
        "amount": usage.amount,
    }


def component_to_document(component: Component) -> dict[str, Any]:
    return {
        "_id": component.component_id,
        "name": component.name,
        "avatar": component.avatar,
        "weight": _weight_document(component.weight_raw, component.weight_cooked),
        "ingredients": [usage_to_document(usage) for usage in component.usages],
        "createdAt": _isoformat(component.created_at),
        "updatedAt": _isoformat(component.updated_at),
    }


def recipe_to_document(recipe: Recipe) -> dict[str, Any]:
    components = []
    for link in recipe.component_links:
        if link.component is None:
            raise ReferenceNotFoundError("component", link.component_id)
        components.append(component_to_document(link.component))

    return {
        "_id": recipe.recipe_id,
        "name": recipe.name,
        "avatar": recipe.avatar,
        "description": recipe.description,
        "type": recipe.type,
        "price": recipe.price,
        "weight": _weight_document(recipe.weight_raw, recipe.weight_cooked),
        "ingredients": [usage_to_document(usage) for usage in recipe.usages],
        "components": components,
        "createdAt": _isoformat(recipe.created_at),
        "updatedAt": _isoformat(recipe.updated_at),
    }


def group_by_category(ingredients: Iterable[dict[str, Any]]) -> dict[str, list[dict[str, Any]]]:
    """이름 순(대소문자 무시)으로 정렬한 뒤 category별로 묶기"""
    grouped: dict[str, list[dict[str, Any]]] = {}
    for ingredient in sorted(ingredients, key=lambda item: (item.get("name") or "").lower()):
        grouped.setdefault(ingredient.get("category") or UNCATEGORIZED, []).append(ingredient)
    return grouped


# ===== 조회 =====

def _component_query():
    return select(Component).options(
        selectinload(Component.usages).selectinload(ComponentIngredient.ingredient)
    ).execution_options(populate_existing=True)


def _recipe_query():
    return select(Recipe).options(
        selectinload(Recipe.usages).selectinload(RecipeIngredient.ingredient),
        selectinload(Recipe.component_links)
        .selectinload(RecipeComponent.component)
        .selectinload(Component.usages)
        .selectinload(ComponentIngredient.ingredient),
    ).execution_options(populate_existing=True)


async def list_ingredients(session: AsyncSession) -> list[dict[str, Any]]:
    result = await session.execute(select(Ingredient).order_by(Ingredient.ingredient_id))
    return [ingredient_to_document(ingredient) for ingredient in result.scalars().all()]


async def list_components(session: AsyncSession) -> list[dict[str, Any]]:
    result = await session.execute(_component_query().order_by(Component.component_id))
    return [component_to_document(component) for component in result.scalars().all()]


async def get_component(session: AsyncSession, component_id: int) -> dict[str, Any]:
    """컴포넌트 하나를 최신 상태로 조회"""
    result = await session.execute(
        _component_query().where(Component.component_id == component_id)
    )
    component = result.scalar_one_or_none()
    if component is None:
        raise DocumentNotFoundError("Component", component_id)
    return component_to_document(component)


async def list_recipes(session: AsyncSession) -> list[dict[str, Any]]:
    result = await session.execute(_recipe_query().order_by(Recipe.recipe_id))
    return [recipe_to_document(recipe) for recipe in result.scalars().all()]


async def _ensure_exist(session: AsyncSession, id_column, ids: Iterable[int], kind: str) -> None:
    wanted = set(ids)
    if not wanted:
        return
    result = await session.execute(select(id_column).where(id_column.in_(wanted)))
    missing = wanted - set(result.scalars().all())
    if missing:
        raise ReferenceNotFoundError(kind, sorted(missing)[0])


# ===== 생성 / 수정 =====

async def create_ingredient(
    session: AsyncSession,
    name: str,
    serving: Optional[float] = None,
    energy: Optional[float] = None,
    fat: Optional[float] = None,
    carbs: Optional[float] = None,
    protein: Optional[float] = None,
    price: Optional[float] = None,
    package_size: Optional[float] = None,
    category: Optional[str] = None,
) -> Ingredient:
    """
    재료 생성

    Raises:
        DuplicateNameError: 같은 이름의 재료가 이미 있는 경우
    """
    ingredient = Ingredient(
        name=name,
        category=category,
        serving=serving,
        energy=energy,
        fat=fat,
        carbs=carbs,
        protein=protein,
        price=price,
        package_size=package_size,
    )
    session.add(ingredient)
    try:
        await session.flush()
    except IntegrityError as exc:
        raise DuplicateNameError("Ingredient", name) from exc

    logger.info("Ingredient created: id=%s name=%s", ingredient.ingredient_id, name)
    return ingredient


async def create_recipe(
    session: AsyncSession,
    name: str,
    ingredients: Sequence[tuple[int, Optional[float]]],
    component_ids: Sequence[int],
    recipe_type: Optional[str] = None,
    description: Optional[str] = None,
) -> Recipe:
    """
    레시피 생성

    Args:
        session: DB 세션
        name: 레시피 이름
        ingredients: (ingredient_id, amount) 목록
        component_ids: 컴포넌트 ID 목록
        recipe_type: pizza / salad / dessert
        description: 설명

    Raises:
        ReferenceNotFoundError: 존재하지 않는 재료/컴포넌트를 참조한 경우
        DuplicateNameError: 같은 이름의 레시피가 이미 있는 경우
    """
    await _ensure_exist(session, Ingredient.ingredient_id, (i for i, _ in ingredients), "ingredient")
    await _ensure_exist(session, Component.component_id, component_ids, "component")

    recipe = Recipe(
        name=name,
        type=recipe_type,
        description=description,
        usages=[
            RecipeIngredient(ingredient_id=ingredient_id, amount=amount, position=position)
            for position, (ingredient_id, amount) in enumerate(ingredients)
        ],
        component_links=[
            RecipeComponent(component_id=component_id, position=position)
            for position, component_id in enumerate(component_ids)
        ],
    )
    session.add(recipe)
    try:
        await session.flush()
    except IntegrityError as exc:
        raise DuplicateNameError("Recipe", name) from exc

    logger.info(
        "Recipe created: id=%s name=%s ingredients=%d components=%d",
        recipe.recipe_id,
        name,
        len(ingredients),
        len(component_ids),
    )
    return recipe


async def update_component_usages(
    session: AsyncSession,
    component_id: int,
    proposed: list[UsageEntry],
) -> Component:
    """
    컴포넌트의 재료 목록을 요청 목록으로 교체

    저장된 목록과 요청 목록의 차이(추가/수정/삭제)를 계산해 그대로 적용합니다.

    Raises:
        DocumentNotFoundError: 컴포넌트가 없는 경우
        InvalidUsageError: 이 컴포넌트에 속하지 않은 usage id가 포함된 경우
        ReferenceNotFoundError: 존재하지 않는 재료를 참조한 경우
    """
    result = await session.execute(_component_query().where(Component.component_id == component_id))
    component = result.scalar_one_or_none()
    if component is None:
        raise DocumentNotFoundError("Component", component_id)

    rows = {usage.usage_id: usage for usage in component.usages}
    stored = [
        UsageEntry(
            usage_id=usage.usage_id,
            ingredient_id=usage.ingredient_id,
            amount=usage.amount,
            position=position,
        )
        for position, usage in enumerate(component.usages)
    ]
    changes = reconcile(stored, proposed)
    if changes.is_empty:
        return component

    await _ensure_exist(
        session,
        Ingredient.ingredient_id,
        (entry.ingredient_id for entry in [*changes.inserted, *changes.updated]),
        "ingredient",
    )

    usages = []
    for entry in apply_changes(stored, changes):
        if entry.usage_id is None:
            usage = ComponentIngredient(ingredient_id=entry.ingredient_id)
        else:
            usage = rows[entry.usage_id]
            usage.ingredient_id = entry.ingredient_id
        usage.amount = entry.amount
        usage.position = entry.position
        usages.append(usage)

    # 목록에서 빠진 usage는 delete-orphan으로 삭제
    component.usages = usages
    await session.flush()

    logger.info(
        "Component %s usages updated: inserted=%d updated=%d removed=%d",
        component_id,
        len(changes.inserted),
        len(changes.updated),
        len(changes.removed),
    )
    return component
