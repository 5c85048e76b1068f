"""Create ingredient, component and recipe tables

Revision ID: 001
Revises:
Create Date: 2026-10-19

Usages (ingredient + amount) are stored as ordered rows under their
component or recipe. Recipes reference components through RecipeComponent.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

INGREDIENT_CATEGORIES = (
    "flour", "eggs", "cheese", "meat", "vegetables", "pickles", "fish",
    "salad", "condiment", "seed", "nuts", "fruit", "milk", "sweeteners",
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime, nullable=True, server_default=sa.func.current_timestamp()),
        sa.Column("updated_at", sa.DateTime, nullable=True, server_default=sa.func.current_timestamp()),
    ]


def upgrade() -> None:
    op.create_table(
        "Ingredient",
        sa.Column("ingredient_id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
        sa.Column("category", sa.Enum(*INGREDIENT_CATEGORIES, name="ingredient_category_enum"), nullable=True),
        sa.Column("serving", sa.Float, nullable=True),
        sa.Column("energy", sa.Float, nullable=True),
        sa.Column("fat", sa.Float, nullable=True),
        sa.Column("carbs", sa.Float, nullable=True),
        sa.Column("protein", sa.Float, nullable=True),
        sa.Column("price", sa.Float, nullable=True),
        sa.Column("package_size", sa.Float, nullable=True),
        *_timestamps(),
    )
    op.create_table(
        "Component",
        sa.Column("component_id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
        sa.Column("avatar", sa.String(255), nullable=True, unique=True),
        sa.Column("weight_raw", sa.Float, nullable=True),
        sa.Column("weight_cooked", sa.Float, nullable=True),
        *_timestamps(),
    )
    op.create_table(
        "ComponentIngredient",
        sa.Column("usage_id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column(
            "component_id",
            sa.BigInteger,
            sa.ForeignKey("Component.component_id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("ingredient_id", sa.BigInteger, sa.ForeignKey("Ingredient.ingredient_id"), nullable=False),
        sa.Column("amount", sa.Float, nullable=True),
        sa.Column("position", sa.Integer, nullable=False, server_default="0"),
    )
    op.create_table(
        "Recipe",
        sa.Column("recipe_id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
        sa.Column("avatar", sa.String(255), nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("type", sa.Enum("pizza", "salad", "dessert", name="recipe_type_enum"), nullable=True),
        sa.Column("price", sa.Float, nullable=True),
        sa.Column("weight_raw", sa.Float, nullable=True),
        sa.Column("weight_cooked", sa.Float, nullable=True),
        *_timestamps(),
    )
    op.create_table(
        "RecipeIngredient",
        sa.Column("usage_id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column(
            "recipe_id",
            sa.BigInteger,
            sa.ForeignKey("Recipe.recipe_id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("ingredient_id", sa.BigInteger, sa.ForeignKey("Ingredient.ingredient_id"), nullable=False),
        sa.Column("amount", sa.Float, nullable=True),
        sa.Column("position", sa.Integer, nullable=False, server_default="0"),
    )
    op.create_table(
        "RecipeComponent",
        sa.Column("link_id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column(
            "recipe_id",
            sa.BigInteger,
            sa.ForeignKey("Recipe.recipe_id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("component_id", sa.BigInteger, sa.ForeignKey("Component.component_id"), nullable=False),
        sa.Column("position", sa.Integer, nullable=False, server_default="0"),
    )


def downgrade() -> None:
    op.drop_table("RecipeComponent")
    op.drop_table("RecipeIngredient")
    op.drop_table("Recipe")
    op.drop_table("ComponentIngredient")
    op.drop_table("Component")
    op.drop_table("Ingredient")
