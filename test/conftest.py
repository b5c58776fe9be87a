from __future__ import annotations

import pytest

from src.infrastructure import sample_data
from src.infrastructure.memory_repositories import (
    InMemoryProductRepository,
    InMemoryRecipeRepository,
    InMemoryUnitRepository,
)
from src.services.base_units import BaseUnits
from src.services.unit_graph import UnitConversionGraph

from fakes import BASE_UNITS


@pytest.fixture
def sample_graph() -> UnitConversionGraph:
    return UnitConversionGraph(InMemoryUnitRepository(sample_data.UNITS))


@pytest.fixture
def sample_base_units(sample_graph: UnitConversionGraph) -> BaseUnits:
    return BaseUnits(sample_graph, BASE_UNITS)


@pytest.fixture
def sample_recipes() -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository(sample_data.RECIPES)


@pytest.fixture
def sample_products() -> InMemoryProductRepository:
    return InMemoryProductRepository(sample_data.PRODUCTS)
