"""API v1 routes package"""

from app.api.v1.routes import components, health, ingredients, recipes

__all__ = [
    "components",
    "health",
    "ingredients",
    "recipes",
]
