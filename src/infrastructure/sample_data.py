# recipe_costing/src/infrastructure/sample_data.py
"""Static catalogue served by the in-memory repositories."""
from __future__ import annotations

from typing import Any, Dict, List


def _uom(amount: float, name: str, uom_type: str) -> Dict[str, Any]:
    return {"uomAmount": amount, "uomName": name, "uomType": uom_type}


def _edge(from_name: str, from_type: str, to_name: str, to_type: str, factor: float) -> Dict[str, Any]:
    return {
        "fromUnitName": from_name,
        "fromUnitType": from_type,
        "toUnitName": to_name,
        "toUnitType": to_type,
        "conversionFactor": factor,
    }


def _fact(name: str, amount: float, unit: str, per: float, per_unit: str, per_type: str = "mass") -> Dict[str, Any]:
    return {
        "nutrientName": name,
        "quantityAmount": _uom(amount, unit, "mass"),
        "quantityPer": _uom(per, per_unit, per_type),
    }


UNITS: List[Dict[str, Any]] = [
    _edge("cups", "volume", "millilitres", "volume", 236.588),
    _edge("tablespoons", "volume", "millilitres", "volume", 14.7868),
    _edge("teaspoons", "volume", "millilitres", "volume", 4.92892),
    _edge("litres", "volume", "millilitres", "volume", 1000),
    _edge("millilitres", "volume", "litres", "volume", 0.001),
    _edge("kilogram", "mass", "grams", "mass", 1000),
    _edge("grams", "mass", "kilogram", "mass", 0.001),
    _edge("pound", "mass", "kilogram", "mass", 0.453592),
    _edge("ounces", "mass", "grams", "mass", 28.3495),
    _edge("milligrams", "mass", "grams", "mass", 0.001),
    # density-style bridges used when recipes and suppliers measure differently
    _edge("cups", "volume", "grams", "mass", 240),
    _edge("teaspoons", "volume", "grams", "mass", 6),
]

RECIPES: List[Dict[str, Any]] = [
    {
        "recipeName": "Creamy Chicken Skillet",
        "lineItems": [
            {
                "ingredient": {"ingredientName": "Chicken Breasts", "ingredientType": "meat"},
                "unitOfMeasure": _uom(1, "pound", "mass"),
            },
            {
                "ingredient": {"ingredientName": "Heavy Cream", "ingredientType": "dairy"},
                "unitOfMeasure": _uom(1, "cups", "volume"),
            },
            {
                "ingredient": {"ingredientName": "Salt", "ingredientType": "seasoning"},
                "unitOfMeasure": _uom(1, "teaspoons", "volume"),
            },
            {
                "ingredient": {"ingredientName": "Eggs", "ingredientType": "dairy"},
                "unitOfMeasure": _uom(2, "whole", "units"),
            },
        ],
    },
]

PRODUCTS: List[Dict[str, Any]] = [
    {
        "productId": "chicken-breast-fillet",
        "productName": "Chicken Breast Fillets",
        "ingredientName": "Chicken Breasts",
        "nutrientFacts": [
            _fact("Protein", 31, "grams", 100, "grams"),
            _fact("Fat", 3.6, "grams", 100, "grams"),
            _fact("Sodium", 74, "milligrams", 100, "grams"),
        ],
        "supplierProducts": [
            {
                "supplierName": "Butcher Bros",
                "supplierProductName": "Free Range Chicken Breast 1kg",
                "supplierPrice": 12.5,
                "supplierProductUoM": _uom(1, "kilogram", "mass"),
            },
            {
                "supplierName": "Fresh Market",
                "supplierProductName": "Chicken Breast 500g",
                "supplierPrice": 5.75,
                "supplierProductUoM": _uom(500, "grams", "mass"),
            },
        ],
    },
    {
        "productId": "chicken-breast-organic",
        "productName": "Organic Chicken Breast",
        "ingredientName": "Chicken Breasts",
        "nutrientFacts": [
            _fact("Protein", 30, "grams", 100, "grams"),
            _fact("Fat", 3, "grams", 100, "grams"),
        ],
        "supplierProducts": [
            {
                "supplierName": "Green Fields",
                "supplierProductName": "Organic Chicken Breast 2lb",
                "supplierPrice": 14.0,
                "supplierProductUoM": _uom(2, "pound", "mass"),
            },
        ],
    },
    {
        "productId": "heavy-cream",
        "productName": "Heavy Cream",
        "ingredientName": "Heavy Cream",
        "nutrientFacts": [
            _fact("Fat", 36, "grams", 100, "millilitres", "volume"),
            _fact("Carbohydrates", 2.8, "grams", 100, "millilitres", "volume"),
            _fact("Protein", 2.1, "grams", 100, "millilitres", "volume"),
        ],
        "supplierProducts": [
            {
                "supplierName": "Dairy Direct",
                "supplierProductName": "Heavy Cream 1L",
                "supplierPrice": 6.2,
                "supplierProductUoM": _uom(1, "litres", "volume"),
            },
            {
                "supplierName": "Fresh Market",
                "supplierProductName": "Heavy Cream 300ml",
                "supplierPrice": 2.4,
                "supplierProductUoM": _uom(300, "millilitres", "volume"),
            },
        ],
    },
    {
        "productId": "sea-salt",
        "productName": "Sea Salt",
        "ingredientName": "Salt",
        "nutrientFacts": [
            _fact("Sodium", 38758, "milligrams", 100, "grams"),
        ],
        "supplierProducts": [
            {
                "supplierName": "Spice World",
                "supplierProductName": "Sea Salt 1kg",
                "supplierPrice": 3.0,
                "supplierProductUoM": _uom(1, "kilogram", "mass"),
            },
        ],
    },
    {
        "productId": "free-range-eggs",
        "productName": "Free Range Eggs",
        "ingredientName": "Eggs",
        "nutrientFacts": [
            _fact("Protein", 6.3, "grams", 1, "whole", "units"),
            _fact("Fat", 4.8, "grams", 1, "whole", "units"),
            _fact("Cholesterol", 186, "milligrams", 1, "whole", "units"),
        ],
        "supplierProducts": [
            {
                "supplierName": "Happy Hens",
                "supplierProductName": "Free Range Eggs x12",
                "supplierPrice": 4.8,
                "supplierProductUoM": _uom(12, "whole", "units"),
            },
            {
                "supplierName": "Fresh Market",
                "supplierProductName": "Free Range Eggs x6",
                "supplierPrice": 2.7,
                "supplierProductUoM": _uom(6, "whole", "units"),
            },
        ],
    },
]
