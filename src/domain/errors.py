# recipe_costing/src/domain/errors.py
from __future__ import annotations

from src.domain.entities import Ingredient, UnitOfMeasure, UoMName, UoMType


class RecipeCostingError(LookupError):
    """Raised when a recipe cannot be priced; aborts the whole run."""


class ConversionNotFound(RecipeCostingError):
    def __init__(self, from_uom: UnitOfMeasure, to_name: UoMName, to_type: UoMType) -> None:
        self.from_uom = from_uom
        self.to_name = to_name
        self.to_type = to_type
        super().__init__(
            f"Couldn't convert {from_uom.name.value} ({from_uom.type.value}) "
            f"to {to_name.value} ({to_type.value})"
        )


class NoSupplierFound(RecipeCostingError):
    def __init__(self, ingredient: Ingredient | None = None) -> None:
        self.ingredient = ingredient
        name = ingredient.name if ingredient else "these products"
        super().__init__(f"No suppliers found for {name}")


class MissingIngredientProducts(RecipeCostingError):
    def __init__(self, ingredient: Ingredient) -> None:
        self.ingredient = ingredient
        super().__init__(f"No products found for ingredient: {ingredient.name}")
