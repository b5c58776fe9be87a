# =========================
# FILE: recipe_costing/src/api/schemas.py
# =========================
from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field

from src.domain.entities import UoMName, UoMType


class UnitOfMeasureOut(BaseModel):
    uomAmount: float
    uomName: UoMName
    uomType: UoMType


class NutrientFactOut(BaseModel):
    nutrientName: str
    quantityAmount: UnitOfMeasureOut
    quantityPer: UnitOfMeasureOut


class RecipeSummaryOut(BaseModel):
    cheapestCost: float
    nutrientsAtCheapestCost: Dict[str, NutrientFactOut] = Field(default_factory=dict)


class RecipeSummaryResponse(BaseModel):
    recipes: Dict[str, RecipeSummaryOut]


class ConvertRequest(BaseModel):
    uomAmount: float = Field(..., examples=[1.0])
    uomName: UoMName = Field(..., examples=["pound"])
    uomType: UoMType = Field(..., examples=["mass"])
    toName: UoMName = Field(..., examples=["grams"])
    toType: UoMType = Field(..., examples=["mass"])
