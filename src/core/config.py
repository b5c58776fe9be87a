# recipe_costing/src/core/config.py
from __future__ import annotations
import os
import logging
from typing import Dict, List


def _csv(value: str) -> List[str]:
    return [x.strip() for x in value.split(",") if x.strip()]


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


# Output order of the nutrient summary; anything not listed is dropped.
NUTRIENT_ORDER: List[str] = _csv(os.getenv("NUTRIENT_ORDER", "Carbohydrates,Fat,Protein,Sodium"))

# Canonical unit per unit type, used for pricing and nutrient normalization.
BASE_UNITS: Dict[str, str] = {
    "mass": os.getenv("BASE_UNIT_MASS", "grams"),
    "volume": os.getenv("BASE_UNIT_VOLUME", "millilitres"),
    "units": os.getenv("BASE_UNIT_UNITS", "whole"),
}

CACHE_CONVERSION_TREES: bool = _flag(os.getenv("CACHE_CONVERSION_TREES", "true"))

API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8081"))

# Global logging (module-level loggers inherit this)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
