# =========================
# FILE: recipe_costing/src/services/base_units.py
# =========================
from __future__ import annotations

import logging
from typing import Dict, Mapping

from src.domain.entities import NutrientFact, SupplierOffer, UnitOfMeasure, UoMName, UoMType
from src.services.unit_graph import UnitConversionGraph

log = logging.getLogger("services.base_units")


class BaseUnits:
    """Normalizes offers and nutrient facts to the canonical unit of each unit type."""

    def __init__(self, graph: UnitConversionGraph, base_units: Mapping[str, str]) -> None:
        self.graph = graph
        self._base: Dict[UoMType, UoMName] = {UoMType(t): UoMName(n) for t, n in base_units.items()}

    def get_base_uom(self, uom_type: UoMType) -> UnitOfMeasure:
        name = self._base.get(uom_type)
        if name is None:
            raise ValueError(f"No base unit configured for unit type: {uom_type.value}")
        return UnitOfMeasure(1.0, name, uom_type)

    def to_base(self, uom: UnitOfMeasure) -> UnitOfMeasure:
        base = self.get_base_uom(uom.type)
        return self.graph.convert(uom, base.name, base.type)

    def get_cost_per_base_unit(self, offer: SupplierOffer) -> float:
        pack = self.to_base(offer.uom)
        if pack.amount <= 0:
            raise ValueError(f"Offer {offer.supplier_name}/{offer.product_name} has no package size")
        return float(offer.price) / pack.amount

    def get_nutrient_fact_in_base_units(self, fact: NutrientFact) -> NutrientFact:
        return NutrientFact(
            nutrient_name=fact.nutrient_name,
            quantity_amount=self.to_base(fact.quantity_amount),
            quantity_per=self.to_base(fact.quantity_per),
        )
