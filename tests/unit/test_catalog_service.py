"""카탈로그 저장소 서비스 테스트"""
import pytest

from app.core.exceptions import (
    DocumentNotFoundError,
    DuplicateNameError,
    InvalidUsageError,
    ReferenceNotFoundError,
)
from app.db.models import Component, ComponentIngredient, Ingredient
from app.services import catalog_service
from app.services.usage_reconciler import UsageEntry


async def _seed_component(session) -> Component:
    flour = Ingredient(name="flour", serving=100, energy=364, price=2, package_size=1000)
    water = Ingredient(name="water", serving=100, energy=0, price=0, package_size=1)
    yeast = Ingredient(name="yeast", serving=10, energy=30, price=1, package_size=50)
    component = Component(
        name="dough",
        usages=[
            ComponentIngredient(ingredient=flour, amount=500, position=0),
            ComponentIngredient(ingredient=water, amount=300, position=1),
        ],
    )
    session.add_all([flour, water, yeast, component])
    await session.commit()
    return component


class TestGroupByCategory:
    def test_case_insensitive_sort_within_group(self):
        ingredients = [
            {"name": "banana", "category": "fruit"},
            {"name": "Apple", "category": "fruit"},
        ]

        grouped = catalog_service.group_by_category(ingredients)

        assert grouped == {"fruit": [{"name": "Apple", "category": "fruit"}, {"name": "banana", "category": "fruit"}]}

    def test_missing_category_is_its_own_group(self):
        grouped = catalog_service.group_by_category([{"name": "salt", "category": None}, {"name": "pepper"}])

        assert [item["name"] for item in grouped[catalog_service.UNCATEGORIZED]] == ["pepper", "salt"]


class TestCreate:
    async def test_duplicate_ingredient_name(self, db_session):
        await catalog_service.create_ingredient(db_session, name="flour", serving=100)
        await db_session.commit()

        with pytest.raises(DuplicateNameError):
            await catalog_service.create_ingredient(db_session, name="flour", serving=50)
        await db_session.rollback()

    async def test_recipe_with_unknown_ingredient(self, db_session):
        with pytest.raises(ReferenceNotFoundError):
            await catalog_service.create_recipe(db_session, name="ghost", ingredients=[(999, 10)], component_ids=[])

    async def test_recipe_documents_are_hydrated(self, db_session):
        component = await _seed_component(db_session)
        flour = await catalog_service.create_ingredient(db_session, name="semolina", serving=100, energy=360)
        await catalog_service.create_recipe(
            db_session,
            name="focaccia",
            ingredients=[(flour.ingredient_id, 50)],
            component_ids=[component.component_id],
            recipe_type="pizza",
        )
        await db_session.commit()

        recipes = await catalog_service.list_recipes(db_session)

        assert len(recipes) == 1
        recipe = recipes[0]
        assert recipe["type"] == "pizza"
        assert recipe["ingredients"][0]["ingredient"]["name"] == "semolina"
        assert recipe["components"][0]["name"] == "dough"
        assert [usage["ingredient"]["name"] for usage in recipe["components"][0]["ingredients"]] == ["flour", "water"]


class TestUpdateComponentUsages:
    async def test_missing_component(self, db_session):
        with pytest.raises(DocumentNotFoundError):
            await catalog_service.update_component_usages(db_session, 404, [])

    async def test_replace_usage_list(self, db_session):
        component = await _seed_component(db_session)
        flour_usage, water_usage = component.usages
        yeast_id = next(item["_id"] for item in await catalog_service.list_ingredients(db_session) if item["name"] == "yeast")

        proposed = [
            UsageEntry(usage_id=None, ingredient_id=yeast_id, amount=7, position=0),
            UsageEntry(usage_id=flour_usage.usage_id, ingredient_id=flour_usage.ingredient_id, amount=450, position=1),
        ]
        await catalog_service.update_component_usages(db_session, component.component_id, proposed)
        await db_session.commit()

        document = await catalog_service.get_component(db_session, component.component_id)

        assert [(usage["ingredient"]["name"], usage["amount"]) for usage in document["ingredients"]] == [
            ("yeast", 7),
            ("flour", 450),
        ]
        assert document["ingredients"][1]["_id"] == flour_usage.usage_id
        assert water_usage.usage_id not in [usage["_id"] for usage in document["ingredients"]]

    async def test_foreign_usage_id_is_rejected(self, db_session):
        component = await _seed_component(db_session)

        with pytest.raises(InvalidUsageError):
            await catalog_service.update_component_usages(
                db_session,
                component.component_id,
                [UsageEntry(usage_id=12345, ingredient_id=1, amount=1, position=0)],
            )

    async def test_unknown_ingredient_is_rejected(self, db_session):
        component = await _seed_component(db_session)

        with pytest.raises(ReferenceNotFoundError):
            await catalog_service.update_component_usages(
                db_session,
                component.component_id,
                [UsageEntry(usage_id=None, ingredient_id=999, amount=1, position=0)],
            )
