# recipe_costing/src/application/nutrition.py
from __future__ import annotations

from typing import Callable, Dict, Iterable

from src.domain.entities import NutrientFact, Product, UnitOfMeasure

NutrientNormalizer = Callable[[NutrientFact], NutrientFact]


def aggregate_nutrients(
    nutrient_map: Dict[str, NutrientFact],
    product: Product,
    normalize: NutrientNormalizer,
) -> None:
    """
    Fold a product's nutrient facts (in base units) into nutrient_map in place.

    The first fact seen for a nutrient fixes its quantity_per; later facts
    only add to quantity_amount. Bases are not compared.
    """
    for nf in product.nutrient_facts:
        base_nf = normalize(nf)
        name = base_nf.nutrient_name
        current = nutrient_map.get(name)
        if current is None:
            nutrient_map[name] = NutrientFact(
                nutrient_name=name,
                quantity_amount=UnitOfMeasure(base_nf.quantity_amount.amount, base_nf.quantity_amount.name, base_nf.quantity_amount.type),
                quantity_per=UnitOfMeasure(base_nf.quantity_per.amount, base_nf.quantity_per.name, base_nf.quantity_per.type),
            )
            continue
        amt = current.quantity_amount
        nutrient_map[name] = NutrientFact(
            nutrient_name=name,
            quantity_amount=UnitOfMeasure(amt.amount + base_nf.quantity_amount.amount, amt.name, amt.type),
            quantity_per=current.quantity_per,
        )


def order_nutrients(nutrient_map: Dict[str, NutrientFact], order: Iterable[str]) -> Dict[str, NutrientFact]:
    # allow-list order; missing names are omitted, not zero-filled
    return {k: nutrient_map[k] for k in order if k in nutrient_map}
