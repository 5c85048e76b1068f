"""Database package - models, session, and base classes."""
from app.db.base import Base
from app.db.models import (
    Component,
    ComponentIngredient,
    Ingredient,
    Recipe,
    RecipeComponent,
    RecipeIngredient,
)
from app.db.session import SessionLocal, engine, get_session

__all__ = [
    "Base",
    "Ingredient",
    "Component",
    "ComponentIngredient",
    "Recipe",
    "RecipeIngredient",
    "RecipeComponent",
    # Session
    "engine",
    "SessionLocal",
    "get_session",
]
