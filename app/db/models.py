"""데이터베이스 모델 정의 - 재료 / 컴포넌트 / 레시피"""
from datetime import datetime
from typing import List, Optional

from sqlalchemy import DateTime, Enum, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base, IdType

INGREDIENT_CATEGORIES = (
    "flour",
    "eggs",
    "cheese",
    "meat",
    "vegetables",
    "pickles",
    "fish",
    "salad",
    "condiment",
    "seed",
    "nuts",
    "fruit",
    "milk",
    "sweeteners",
)

RECIPE_TYPES = ("pizza", "salad", "dessert")


class Ingredient(Base):
    """Ingredient 테이블 - 영양 정보는 serving 기준, 가격은 한 패키지 기준"""

    __tablename__ = "Ingredient"

    ingredient_id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    category: Mapped[Optional[str]] = mapped_column(
        Enum(*INGREDIENT_CATEGORIES, name="ingredient_category_enum"), nullable=True
    )
    serving: Mapped[Optional[float]] = mapped_column(Float, nullable=True, comment='영양 정보 기준량')
    energy: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    fat: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    carbs: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    protein: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    price: Mapped[Optional[float]] = mapped_column(Float, nullable=True, comment='패키지 가격')
    package_size: Mapped[Optional[float]] = mapped_column(Float, nullable=True, comment='패키지 용량')
    created_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True, server_default=func.current_timestamp())
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, nullable=True, server_default=func.current_timestamp(), onupdate=func.current_timestamp()
    )

    def __repr__(self) -> str:
        return f"<Ingredient(ingredient_id={self.ingredient_id}, name={self.name})>"


class Component(Base):
    """Component 테이블 - 재료 묶음 (예: 도우, 소스)"""

    __tablename__ = "Component"

    component_id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    avatar: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, unique=True)
    weight_raw: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    weight_cooked: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    created_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True, server_default=func.current_timestamp())
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, nullable=True, server_default=func.current_timestamp(), onupdate=func.current_timestamp()
    )

    usages: Mapped[List["ComponentIngredient"]] = relationship(
        back_populates="component",
        cascade="all, delete-orphan",
        order_by="ComponentIngredient.position",
    )

    def __repr__(self) -> str:
        return f"<Component(component_id={self.component_id}, name={self.name})>"


class ComponentIngredient(Base):
    """컴포넌트 안의 재료 사용량"""

    __tablename__ = "ComponentIngredient"

    usage_id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    component_id: Mapped[int] = mapped_column(
        IdType, ForeignKey("Component.component_id", ondelete="CASCADE"), nullable=False, index=True
    )
    ingredient_id: Mapped[int] = mapped_column(IdType, ForeignKey("Ingredient.ingredient_id"), nullable=False)
    amount: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    component: Mapped["Component"] = relationship(back_populates="usages")
    ingredient: Mapped["Ingredient"] = relationship()

    def __repr__(self) -> str:
        return f"<ComponentIngredient(usage_id={self.usage_id}, ingredient_id={self.ingredient_id}, amount={self.amount})>"


class Recipe(Base):
    """Recipe 테이블 - 재료와 컴포넌트로 구성"""

    __tablename__ = "Recipe"

    recipe_id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    avatar: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    type: Mapped[Optional[str]] = mapped_column(Enum(*RECIPE_TYPES, name="recipe_type_enum"), nullable=True)
    price: Mapped[Optional[float]] = mapped_column(Float, nullable=True, comment='판매 가격')
    # raw는 계산 가능, cooked는 직접 측정
    weight_raw: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    weight_cooked: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    created_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True, server_default=func.current_timestamp())
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, nullable=True, server_default=func.current_timestamp(), onupdate=func.current_timestamp()
    )

    usages: Mapped[List["RecipeIngredient"]] = relationship(
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeIngredient.position",
    )
    component_links: Mapped[List["RecipeComponent"]] = relationship(
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeComponent.position",
    )

    def __repr__(self) -> str:
        return f"<Recipe(recipe_id={self.recipe_id}, name={self.name}, type={self.type})>"


class RecipeIngredient(Base):
    """레시피에 직접 들어가는 재료 사용량"""

    __tablename__ = "RecipeIngredient"

    usage_id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    recipe_id: Mapped[int] = mapped_column(IdType, ForeignKey("Recipe.recipe_id", ondelete="CASCADE"), nullable=False, index=True)
    ingredient_id: Mapped[int] = mapped_column(IdType, ForeignKey("Ingredient.ingredient_id"), nullable=False)
    amount: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    recipe: Mapped["Recipe"] = relationship(back_populates="usages")
    ingredient: Mapped["Ingredient"] = relationship()

    def __repr__(self) -> str:
        return f"<RecipeIngredient(usage_id={self.usage_id}, ingredient_id={self.ingredient_id}, amount={self.amount})>"


class RecipeComponent(Base):
    """레시피 → 컴포넌트 참조"""

    __tablename__ = "RecipeComponent"

    link_id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    recipe_id: Mapped[int] = mapped_column(IdType, ForeignKey("Recipe.recipe_id", ondelete="CASCADE"), nullable=False, index=True)
    component_id: Mapped[int] = mapped_column(IdType, ForeignKey("Component.component_id"), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    recipe: Mapped["Recipe"] = relationship(back_populates="component_links")
    component: Mapped["Component"] = relationship()

    def __repr__(self) -> str:
        return f"<RecipeComponent(recipe_id={self.recipe_id}, component_id={self.component_id})>"
