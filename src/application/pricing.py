# recipe_costing/src/application/pricing.py
from __future__ import annotations

import logging
import math
from typing import Callable, Optional, Sequence

from src.domain.entities import CheapestOffer, Ingredient, Product, RecipeLineItem, SupplierOffer
from src.domain.errors import NoSupplierFound
from src.services.base_units import BaseUnits

log = logging.getLogger("app.pricing")

CostPerBaseUnit = Callable[[SupplierOffer], float]


# ----------------------------
# Supplier selection
# ----------------------------
def find_cheapest_supplier(
    products: Sequence[Product],
    cost_per_base_unit: CostPerBaseUnit,
    ingredient: Optional[Ingredient] = None,
) -> CheapestOffer:
    """
    Cheapest offer across all products, scanning products then offers in input order.
    Strict less-than keeps the first offer on ties.
    """
    best: Optional[CheapestOffer] = None
    best_cost = math.inf

    for prod in products:
        for offer in prod.supplier_offers:
            cost = cost_per_base_unit(offer)
            if cost < best_cost:
                best_cost = cost
                best = CheapestOffer(product=prod, offer=offer, cost_per_base_unit=cost)

    if best is None:
        raise NoSupplierFound(ingredient)

    log.debug(
        "Cheapest offer for %s: %s/%s at %s per base unit",
        ingredient.name if ingredient else "?",
        best.offer.supplier_name,
        best.offer.product_name,
        best.cost_per_base_unit,
    )
    return best


# ----------------------------
# Line item cost
# ----------------------------
def calculate_line_item_cost(
    line_item: RecipeLineItem,
    offer: SupplierOffer,
    cost_per_base_unit: float,
    base_units: BaseUnits,
) -> float:
    """Required quantity in the offer's base unit times its cost per base unit."""
    base = base_units.get_base_uom(offer.uom.type)
    required = base_units.graph.convert(line_item.unit_of_measure, base.name, base.type)
    return required.amount * cost_per_base_unit
