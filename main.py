from __future__ import annotations

import logging
import uvicorn
from fastapi import FastAPI
from dotenv import load_dotenv
load_dotenv()
from src.api.routes import router
from src.core.config import API_HOST, API_PORT, BASE_UNITS, CACHE_CONVERSION_TREES, NUTRIENT_ORDER

from src.infrastructure import sample_data
from src.infrastructure.memory_repositories import (
    InMemoryProductRepository,
    InMemoryRecipeRepository,
    InMemoryUnitRepository,
)
from src.services.unit_graph import UnitConversionGraph
from src.services.base_units import BaseUnits
from src.application.recipe_summarizer import RecipeSummarizer

log = logging.getLogger("app")


def create_app() -> FastAPI:
    app = FastAPI(title="Recipe Costing")

    @app.on_event("startup")
    def on_startup() -> None:
        recipe_repo = InMemoryRecipeRepository(sample_data.RECIPES)
        product_repo = InMemoryProductRepository(sample_data.PRODUCTS)
        unit_repo = InMemoryUnitRepository(sample_data.UNITS)

        unit_graph = UnitConversionGraph(unit_repo, cache_trees=CACHE_CONVERSION_TREES)
        base_units = BaseUnits(unit_graph, BASE_UNITS)
        summarizer = RecipeSummarizer(
            recipe_repo=recipe_repo,
            product_repo=product_repo,
            base_units=base_units,
            nutrient_order=NUTRIENT_ORDER,
        )

        # DI for routes.py
        app.state.unit_graph = unit_graph
        app.state.summarizer = summarizer
        log.info("Startup complete")

    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host=API_HOST, port=API_PORT, reload=False)
