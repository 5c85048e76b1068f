"""컴포넌트 라우트 테스트"""
import pytest
from sqlalchemy import select

from app.db.models import Component, ComponentIngredient, Ingredient


@pytest.fixture
async def dough(db_session):
    """flour 50 + flour 50 로 만든 컴포넌트 (energy 200, cost 2.00)"""
    flour = Ingredient(name="flour", category="flour", serving=100, energy=200, fat=0, carbs=40, protein=10, price=10, package_size=500)
    salt = Ingredient(name="salt", category="condiment", serving=1, energy=0, price=1, package_size=1000)
    component = Component(
        name="dough",
        usages=[
            ComponentIngredient(ingredient=flour, amount=50, position=0),
            ComponentIngredient(ingredient=flour, amount=50, position=1),
        ],
    )
    db_session.add_all([flour, salt, component])
    await db_session.commit()
    return {
        "component_id": component.component_id,
        "usage_ids": [usage.usage_id for usage in component.usages],
        "flour_id": flour.ingredient_id,
        "salt_id": salt.ingredient_id,
    }


async def test_list_components_with_totals(async_client, dough):
    response = await async_client.get("/components")

    assert response.status_code == 200
    components = response.json()["components"]
    assert len(components) == 1
    component = components[0]
    assert component["_id"] == dough["component_id"]
    assert component["nutrition"]["energy"] == 200
    assert component["cost"] == "2.00"
    assert component["ingredients"][0]["nutrition"]["energy"] == 100
    assert component["ingredients"][0]["price"] == "1.00"
    assert component["ingredients"][0]["ingredient"]["name"] == "flour"


async def test_list_components_empty(async_client):
    response = await async_client.get("/components")

    assert response.status_code == 200
    assert response.json() == {"components": []}


async def test_zero_serving_is_reported_as_null(async_client, db_session):
    broken = Ingredient(name="mystery", serving=0, energy=100, price=5, package_size=0)
    db_session.add(Component(name="odd", usages=[ComponentIngredient(ingredient=broken, amount=10, position=0)]))
    await db_session.commit()

    response = await async_client.get("/components")

    assert response.status_code == 200
    component = response.json()["components"][0]
    assert component["ingredients"][0]["nutrition"]["energy"] is None
    assert component["ingredients"][0]["price"] is None
    assert component["cost"] is None


async def test_missing_package_size_costs_nothing(async_client, db_session):
    response = await async_client.post(
        "/ingredient", json={"name": "loose oats", "serving": 100, "energy": 380, "price": 10}
    )
    assert response.status_code == 303

    oats = (await db_session.execute(select(Ingredient).where(Ingredient.name == "loose oats"))).scalar_one()
    db_session.add(Component(name="porridge", usages=[ComponentIngredient(ingredient_id=oats.ingredient_id, amount=50, position=0)]))
    await db_session.commit()

    response = await async_client.get("/components")

    component = response.json()["components"][0]
    assert component["ingredients"][0]["price"] == 0
    assert component["ingredients"][0]["nutrition"]["energy"] == pytest.approx(190)
    assert component["cost"] == "0.00"


async def test_update_component_ingredients(async_client, dough):
    first, second = dough["usage_ids"]
    body = [
        {"id": str(first), "amount": "100", "ingredient": {"_id": dough["flour_id"]}},
        {"id": "temp-1", "amount": 500, "ingredient": {"_id": dough["salt_id"]}},
    ]

    response = await async_client.put(f"/component/{dough['component_id']}", json=body)

    assert response.status_code == 200
    component = response.json()["component"]
    assert [usage["_id"] for usage in component["ingredients"]][0] == first
    assert second not in [usage["_id"] for usage in component["ingredients"]]
    assert [(usage["ingredient"]["name"], usage["amount"]) for usage in component["ingredients"]] == [
        ("flour", 100),
        ("salt", 500),
    ]
    assert component["nutrition"]["energy"] == 200
    assert component["cost"] == "2.50"

    listed = (await async_client.get("/components")).json()["components"][0]
    assert listed["ingredients"] == component["ingredients"]


async def test_update_unknown_component(async_client, dough):
    body = [{"id": "temp-1", "amount": 5, "ingredient": {"_id": dough["salt_id"]}}]

    response = await async_client.put("/component/9999", json=body)

    assert response.status_code == 404


async def test_update_with_foreign_usage_id(async_client, dough):
    body = [{"id": "424242", "amount": 5, "ingredient": {"_id": dough["salt_id"]}}]

    response = await async_client.put(f"/component/{dough['component_id']}", json=body)

    assert response.status_code == 400


async def test_update_with_unknown_ingredient(async_client, dough):
    body = [{"id": "temp-1", "amount": 5, "ingredient": {"_id": 9999}}]

    response = await async_client.put(f"/component/{dough['component_id']}", json=body)

    assert response.status_code == 500

    listed = (await async_client.get("/components")).json()["components"][0]
    assert len(listed["ingredients"]) == 2
