# recipe_costing/src/domain/repositories.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from src.domain.entities import ConversionEdge, Ingredient, Product, Recipe


class RecipeReadRepo(ABC):
    @abstractmethod
    def all(self) -> List[Recipe]:
        ...


class ProductReadRepo(ABC):
    @abstractmethod
    def for_ingredient(self, ingredient: Ingredient) -> List[Product]:
        """Candidate products for an ingredient; may be empty."""


class UnitReadRepo(ABC):
    @abstractmethod
    def all(self) -> List[ConversionEdge]:
        """Conversion edges in listed order."""
