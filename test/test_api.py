from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from main import create_app
from src.domain.entities import Ingredient
from src.domain.errors import MissingIngredientProducts


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c


def test_recipe_summary(client):
    r = client.get("/recipe_summary")
    assert r.status_code == 200, r.text
    data = r.json()["recipes"]
    skillet = data["Creamy Chicken Skillet"]
    assert skillet["cheapestCost"] > 0
    assert list(skillet["nutrientsAtCheapestCost"]) == ["Carbohydrates", "Fat", "Protein", "Sodium"]
    assert skillet["nutrientsAtCheapestCost"]["Protein"]["quantityPer"]["uomName"] == "grams"


def test_recipe_summary_failure_is_reported(client):
    class _Failing:
        def summarize_all(self):
            raise MissingIngredientProducts(Ingredient("Saffron"))

    client.app.state.summarizer = _Failing()
    r = client.get("/recipe_summary")
    assert r.status_code == 404
    assert "Saffron" in r.json()["detail"]


def test_convert_two_hops(client):
    r = client.post(
        "/convert",
        json={"uomAmount": 1, "uomName": "pound", "uomType": "mass", "toName": "grams", "toType": "mass"},
    )
    assert r.status_code == 200, r.text
    out = r.json()
    assert out["uomName"] == "grams"
    assert out["uomAmount"] == pytest.approx(453.592)


def test_convert_without_path(client):
    r = client.post(
        "/convert",
        json={"uomAmount": 1, "uomName": "grams", "uomType": "mass", "toName": "whole", "toType": "units"},
    )
    assert r.status_code == 404


def test_convert_rejects_unknown_unit(client):
    r = client.post(
        "/convert",
        json={"uomAmount": 1, "uomName": "furlongs", "uomType": "mass", "toName": "grams", "toType": "mass"},
    )
    assert r.status_code == 422
