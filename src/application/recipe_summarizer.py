# recipe_costing/src/application/recipe_summarizer.py
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from src.application.nutrition import aggregate_nutrients, order_nutrients
from src.application.pricing import calculate_line_item_cost, find_cheapest_supplier
from src.core.config import NUTRIENT_ORDER
from src.domain.entities import NutrientFact, Recipe, RecipeSummary
from src.domain.errors import MissingIngredientProducts
from src.domain.repositories import ProductReadRepo, RecipeReadRepo
from src.services.base_units import BaseUnits

log = logging.getLogger("app.recipe_summarizer")


class RecipeSummarizer:
    """Recipe -> cheapest offer per line item -> total cost + ordered nutrient totals."""

    def __init__(
        self,
        recipe_repo: RecipeReadRepo,
        product_repo: ProductReadRepo,
        base_units: BaseUnits,
        nutrient_order: Optional[Sequence[str]] = None,
    ) -> None:
        self.recipe_repo = recipe_repo
        self.product_repo = product_repo
        self.base_units = base_units
        self.nutrient_order: List[str] = list(nutrient_order if nutrient_order is not None else NUTRIENT_ORDER)

    def summarize_all(self) -> Dict[str, RecipeSummary]:
        return self.calculate_recipe_summary(self.recipe_repo.all())

    def calculate_recipe_summary(self, recipes: Sequence[Recipe]) -> Dict[str, RecipeSummary]:
        # Any error aborts the whole run: no partial mapping is returned.
        summary: Dict[str, RecipeSummary] = {}
        for recipe in recipes:
            summary[recipe.name] = self.summarize(recipe)
        return summary

    def summarize(self, recipe: Recipe) -> RecipeSummary:
        total_cost = 0.0
        nutrient_map: Dict[str, NutrientFact] = {}

        for item in recipe.line_items:
            products = self.product_repo.for_ingredient(item.ingredient)
            if not products:
                raise MissingIngredientProducts(item.ingredient)

            cheapest = find_cheapest_supplier(
                products,
                self.base_units.get_cost_per_base_unit,
                ingredient=item.ingredient,
            )
            total_cost += calculate_line_item_cost(
                item, cheapest.offer, cheapest.cost_per_base_unit, self.base_units
            )
            aggregate_nutrients(nutrient_map, cheapest.product, self.base_units.get_nutrient_fact_in_base_units)

        log.info("Recipe %r: %d line item(s), cheapest cost=%.4f", recipe.name, len(recipe.line_items), total_cost)
        return RecipeSummary(total_cost=total_cost, nutrients=order_nutrients(nutrient_map, self.nutrient_order))
