"""
영양 정보 / 원가 집계 서비스

재료 사용량(usage)을 환산한 뒤 재료 → 컴포넌트 → 레시피 순서로 합산합니다.
입력은 catalog_service가 만든 문서(dict)이며, DB 조회 로직은 포함하지 않습니다.

- 영양 정보: 재료의 serving 기준값을 사용량에 비례해 환산
- 가격: 패키지 가격을 packageSize 대비 사용량에 비례해 환산 (소수점 2자리 문자열)
- 무게: 무게 집계 대상 레시피 타입(기본 salad)만 직접 사용량 합계를 계산
"""
import math
from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Union

from app.core.exceptions import ReferenceNotFoundError

NUTRITION_FIELDS = ("energy", "fat", "carbs", "protein")

# 환산 가격: 0이면 정수 0, 그 외에는 "1.00" 형태의 문자열 (inf는 float 그대로)
Price = Union[int, str, float]

CENT = Decimal("0.01")


def _number(value: Any) -> float:
    if value is None:
        return 0
    return value


def _divide(numerator: float, denominator: float) -> float:
    """IEEE 754 나눗셈: 0으로 나누면 예외 대신 inf / nan을 반환"""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def format2(value: float) -> Union[str, float]:
    """
    소수점 2자리 문자열로 변환 (0.5 단위는 0에서 먼 쪽으로 반올림)

    inf / nan은 문자열로 만들지 않고 그대로 반환합니다. 응답에서는 null이 됩니다.
    """
    if not math.isfinite(value):
        return value
    return str(Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP))


def empty_nutrition() -> dict[str, float]:
    return {field: 0 for field in NUTRITION_FIELDS}


def scale_nutrition(ingredient: Mapping[str, Any], amount: Any) -> dict[str, float]:
    """
    사용량에 맞게 영양 정보 환산

    필드 값이 양수일 때만 (값 / serving) * amount 로 계산하고, 아니면 0.
    serving이 0인 경우는 따로 막지 않으므로 결과가 inf가 될 수 있습니다.
    serving이 비어 있으면 기준량을 알 수 없으므로 양수 필드는 nan.
    """
    serving = ingredient.get("serving")
    amount = _number(amount)

    nutrition = {}
    for field in NUTRITION_FIELDS:
        value = _number(ingredient.get(field))
        if not value > 0:
            nutrition[field] = 0
        elif serving is None:
            nutrition[field] = math.nan
        else:
            nutrition[field] = _divide(value, serving) * amount
    return nutrition


def scale_price(ingredient: Mapping[str, Any], amount: Any) -> Price:
    """
    사용량에 해당하는 가격 환산

    (price / packageSize) * amount 가 0 또는 nan이면 정수 0,
    그 외에는 소수점 2자리 문자열을 반환합니다.
    price / packageSize / amount 중 하나라도 비어 있으면 0.
    """
    price = ingredient.get("price")
    package_size = ingredient.get("packageSize")
    if price is None or package_size is None or amount is None:
        return 0

    price_for_amount = _divide(price, package_size) * amount
    if price_for_amount == 0 or math.isnan(price_for_amount):
        return 0
    return format2(price_for_amount)


def scale(ingredient: Mapping[str, Any], amount: Any) -> dict[str, Any]:
    """재료 하나의 사용량에 대한 영양 정보와 가격"""
    return {
        "nutrition": scale_nutrition(ingredient, amount),
        "price": scale_price(ingredient, amount),
    }


def sum_nutrition(items: Iterable[Mapping[str, Any]]) -> dict[str, float]:
    """영양 정보 필드별 합계 (빈 목록이면 모두 0)"""
    total = empty_nutrition()
    for nutrition in items:
        for field in NUTRITION_FIELDS:
            total[field] += float(_number(nutrition.get(field)))
    return total


def sum_prices(prices: Iterable[Price]) -> float:
    """문자열 가격을 숫자로 바꿔 합산"""
    return sum((float(price) for price in prices), 0)


def scale_usages(usages: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """각 usage 문서에 nutrition / price를 붙여 반환"""
    scaled = []
    for usage in usages:
        ingredient = usage.get("ingredient")
        if not isinstance(ingredient, Mapping):
            raise ReferenceNotFoundError("ingredient", ingredient)
        scaled.append({**usage, **scale(ingredient, usage.get("amount"))})
    return scaled


def aggregate_component(component: Mapping[str, Any]) -> dict[str, Any]:
    """컴포넌트의 재료별 환산값과 합계(nutrition, cost)"""
    usages = scale_usages(component.get("ingredients") or [])
    return {
        **component,
        "ingredients": usages,
        "nutrition": sum_nutrition(usage["nutrition"] for usage in usages),
        "cost": format2(sum_prices(usage["price"] for usage in usages)),
    }


def aggregate_components(components: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    return [aggregate_component(component) for component in components]


def aggregate_recipe(recipe: Mapping[str, Any], weight_bearing_type: str = "salad") -> dict[str, Any]:
    """
    레시피 전체 영양 정보 / 원가 / 무게 계산

    - nutrition: 직접 재료 합계 + 컴포넌트 합계 (필드별 소수점 2자리 문자열)
    - cost: 직접 재료 가격 합계 + 컴포넌트 cost 합계 (반올림하지 않은 숫자)
    - weight: weight_bearing_type 레시피만, 직접 재료 amount 합계 (컴포넌트 내부 제외)
    """
    usages = scale_usages(recipe.get("ingredients") or [])
    components = aggregate_components(recipe.get("components") or [])

    direct_nutrition = sum_nutrition(usage["nutrition"] for usage in usages)
    component_nutrition = sum_nutrition(component["nutrition"] for component in components)

    aggregated = {
        **recipe,
        "ingredients": usages,
        "components": components,
        "nutrition": {
            field: format2(direct_nutrition[field] + component_nutrition[field])
            for field in NUTRITION_FIELDS
        },
        "cost": sum_prices(usage["price"] for usage in usages)
        + sum_prices(component["cost"] for component in components),
    }

    if recipe.get("type") == weight_bearing_type:
        aggregated["weight"] = sum((_number(usage.get("amount")) for usage in usages), 0)

    return aggregated


def aggregate_recipes(recipes: Iterable[Mapping[str, Any]], weight_bearing_type: str = "salad") -> list[dict[str, Any]]:
    return [aggregate_recipe(recipe, weight_bearing_type) for recipe in recipes]
