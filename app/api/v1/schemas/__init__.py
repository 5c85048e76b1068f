"""API v1 schemas package"""

from app.api.v1.schemas.common import HealthStatus
from app.api.v1.schemas.component import ComponentUsageItem
from app.api.v1.schemas.ingredient import IngredientCreateRequest, IngredientReference
from app.api.v1.schemas.recipe import PLACEHOLDER, RecipeCreateRequest

__all__ = [
    # Common
    "HealthStatus",
    # Ingredients
    "IngredientCreateRequest",
    "IngredientReference",
    # Components
    "ComponentUsageItem",
    # Recipes
    "RecipeCreateRequest",
    "PLACEHOLDER",
]
