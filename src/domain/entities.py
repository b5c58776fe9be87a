# recipe_costing/src/domain/entities.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple


class UoMName(str, Enum):
    CUPS = "cups"
    GRAMS = "grams"
    KILOGRAM = "kilogram"
    MILLIGRAMS = "milligrams"
    MILLILITRES = "millilitres"
    LITRES = "litres"
    OUNCES = "ounces"
    POUND = "pound"
    TABLESPOONS = "tablespoons"
    TEASPOONS = "teaspoons"
    WHOLE = "whole"


class UoMType(str, Enum):
    MASS = "mass"
    VOLUME = "volume"
    UNITS = "units"


UnitNode = Tuple[UoMName, UoMType]


@dataclass(frozen=True)
class UnitOfMeasure:
    amount: float
    name: UoMName
    type: UoMType

    @property
    def node(self) -> UnitNode:
        return (self.name, self.type)

    def to_dict(self) -> Dict[str, Any]:
        return {"uomAmount": self.amount, "uomName": self.name.value, "uomType": self.type.value}


@dataclass(frozen=True)
class ConversionEdge:
    """Multiplying a quantity in (from_name, from_type) by factor gives (to_name, to_type)."""
    from_name: UoMName
    from_type: UoMType
    to_name: UoMName
    to_type: UoMType
    factor: float

    @property
    def source(self) -> UnitNode:
        return (self.from_name, self.from_type)

    @property
    def target(self) -> UnitNode:
        return (self.to_name, self.to_type)


@dataclass(frozen=True)
class Ingredient:
    name: str
    type: str | None = None


@dataclass(frozen=True)
class RecipeLineItem:
    ingredient: Ingredient
    unit_of_measure: UnitOfMeasure


@dataclass(frozen=True)
class Recipe:
    name: str
    line_items: List[RecipeLineItem]


@dataclass(frozen=True)
class SupplierOffer:
    supplier_name: str
    product_name: str
    price: float
    uom: UnitOfMeasure


@dataclass(frozen=True)
class NutrientFact:
    """quantity_amount of nutrient_name per quantity_per of product."""
    nutrient_name: str
    quantity_amount: UnitOfMeasure
    quantity_per: UnitOfMeasure

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nutrientName": self.nutrient_name,
            "quantityAmount": self.quantity_amount.to_dict(),
            "quantityPer": self.quantity_per.to_dict(),
        }


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    nutrient_facts: List[NutrientFact] = field(default_factory=list)
    supplier_offers: List[SupplierOffer] = field(default_factory=list)


@dataclass(frozen=True)
class CheapestOffer:
    product: Product
    offer: SupplierOffer
    cost_per_base_unit: float


@dataclass(frozen=True)
class RecipeSummary:
    total_cost: float
    nutrients: Dict[str, NutrientFact]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cheapestCost": self.total_cost,
            "nutrientsAtCheapestCost": {k: v.to_dict() for k, v in self.nutrients.items()},
        }
