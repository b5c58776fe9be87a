from __future__ import annotations

from typing import Dict

import pytest

from src.application.nutrition import aggregate_nutrients, order_nutrients
from src.domain.entities import NutrientFact, Product, UnitOfMeasure, UoMName, UoMType


def _grams(amount: float) -> UnitOfMeasure:
    return UnitOfMeasure(amount, UoMName.GRAMS, UoMType.MASS)


def _fact(name: str, amount: float, per: UnitOfMeasure) -> NutrientFact:
    return NutrientFact(name, _grams(amount), per)


def _identity(nf: NutrientFact) -> NutrientFact:
    return nf


def test_same_nutrient_amounts_are_summed():
    per = _grams(100)
    nutrient_map: Dict[str, NutrientFact] = {}
    aggregate_nutrients(nutrient_map, Product("a", "A", nutrient_facts=[_fact("Protein", 4, per)]), _identity)
    aggregate_nutrients(nutrient_map, Product("b", "B", nutrient_facts=[_fact("Protein", 6, per)]), _identity)

    assert nutrient_map["Protein"].quantity_amount.amount == 10
    assert nutrient_map["Protein"].quantity_per == per


def test_first_basis_is_kept_when_bases_differ():
    first_per = _grams(100)
    other_per = UnitOfMeasure(1, UoMName.WHOLE, UoMType.UNITS)
    nutrient_map: Dict[str, NutrientFact] = {}
    aggregate_nutrients(nutrient_map, Product("a", "A", nutrient_facts=[_fact("Fat", 3, first_per)]), _identity)
    aggregate_nutrients(nutrient_map, Product("b", "B", nutrient_facts=[_fact("Fat", 5, other_per)]), _identity)

    assert nutrient_map["Fat"].quantity_amount.amount == 8
    assert nutrient_map["Fat"].quantity_per == first_per


def test_source_facts_are_not_mutated():
    src = _fact("Protein", 4, _grams(100))
    product = Product("a", "A", nutrient_facts=[src])
    nutrient_map: Dict[str, NutrientFact] = {}
    aggregate_nutrients(nutrient_map, product, _identity)
    aggregate_nutrients(nutrient_map, product, _identity)

    assert nutrient_map["Protein"].quantity_amount.amount == 8
    assert src.quantity_amount.amount == 4


def test_facts_are_normalized_before_summing(sample_base_units):
    per = _grams(100)
    sodium = NutrientFact("Sodium", UnitOfMeasure(500, UoMName.MILLIGRAMS, UoMType.MASS), per)
    nutrient_map: Dict[str, NutrientFact] = {}
    aggregate_nutrients(nutrient_map, Product("s", "S", nutrient_facts=[sodium]), sample_base_units.get_nutrient_fact_in_base_units)

    assert nutrient_map["Sodium"].quantity_amount.name == UoMName.GRAMS
    assert nutrient_map["Sodium"].quantity_amount.amount == pytest.approx(0.5)


def test_order_follows_allow_list():
    per = _grams(100)
    nutrient_map = {
        "Sodium": _fact("Sodium", 1, per),
        "Fiber": _fact("Fiber", 2, per),
        "Protein": _fact("Protein", 3, per),
        "Carbohydrates": _fact("Carbohydrates", 4, per),
    }
    ordered = order_nutrients(nutrient_map, ["Carbohydrates", "Fat", "Protein", "Sodium"])

    assert list(ordered) == ["Carbohydrates", "Protein", "Sodium"]
    assert ordered["Protein"] is nutrient_map["Protein"]
