# recipe_costing/src/infrastructure/memory_repositories.py
from __future__ import annotations
from typing import List, Dict, Any, Iterable
import logging
from src.domain.entities import (
    ConversionEdge, Ingredient, NutrientFact, Product, Recipe, RecipeLineItem,
    SupplierOffer, UnitOfMeasure, UoMName, UoMType,
)
from src.domain.repositories import RecipeReadRepo, ProductReadRepo, UnitReadRepo

log = logging.getLogger("infra.memory_repo")

def _ingredient_key(name: str) -> str:
    return " ".join((name or "").split()).lower()

def parse_uom(doc: Dict[str, Any]) -> UnitOfMeasure:
    return UnitOfMeasure(
        amount=float(doc["uomAmount"]),
        name=UoMName(doc["uomName"]),
        type=UoMType(doc["uomType"]),
    )

def _parse_price(offer: Dict[str, Any]) -> float:
    price = float(offer.get("supplierPrice", 0))
    if price < 0:
        raise ValueError(f"negative supplierPrice: {price}")
    return price

class InMemoryRecipeRepository(RecipeReadRepo):
    """
    Read-only recipe repository over camelCase documents.
    Parses everything once at construction; order is preserved.
    """
    def __init__(self, docs: Iterable[Dict[str, Any]]) -> None:
        self._items: List[Recipe] = [self._parse_recipe(doc) for doc in docs]
        if not self._items:
            log.warning("InMemoryRecipeRepository: no recipes loaded")
        else:
            log.info("InMemoryRecipeRepository loaded %d recipes", len(self._items))

    def _parse_recipe(self, doc: Dict[str, Any]) -> Recipe:
        try:
            line_items = [
                RecipeLineItem(
                    ingredient=Ingredient(
                        name=(li["ingredient"].get("ingredientName") or "").strip(),
                        type=li["ingredient"].get("ingredientType"),
                    ),
                    unit_of_measure=parse_uom(li["unitOfMeasure"]),
                )
                for li in (doc.get("lineItems") or [])
            ]
            return Recipe(name=(doc.get("recipeName") or "").strip(), line_items=line_items)
        except Exception as e:
            log.exception("Invalid recipe document: %s", doc)
            raise ValueError(f"Invalid recipe document: {e}") from e

    def all(self) -> List[Recipe]:
        return self._items

class InMemoryProductRepository(ProductReadRepo):
    """Products indexed by the ingredient they supply (case/whitespace-insensitive)."""

    def __init__(self, docs: Iterable[Dict[str, Any]]) -> None:
        self._by_ingredient: Dict[str, List[Product]] = {}
        count = 0
        for doc in docs:
            key = _ingredient_key(doc.get("ingredientName") or "")
            self._by_ingredient.setdefault(key, []).append(self._parse_product(doc))
            count += 1
        log.info("InMemoryProductRepository loaded %d products for %d ingredients", count, len(self._by_ingredient))

    def _parse_product(self, x: Dict[str, Any]) -> Product:
        try:
            facts = [
                NutrientFact(
                    nutrient_name=str(nf["nutrientName"]).strip(),
                    quantity_amount=parse_uom(nf["quantityAmount"]),
                    quantity_per=parse_uom(nf["quantityPer"]),
                )
                for nf in (x.get("nutrientFacts") or [])
            ]
            offers = [
                SupplierOffer(
                    supplier_name=str(sp.get("supplierName") or "").strip(),
                    product_name=str(sp.get("supplierProductName") or "").strip(),
                    price=_parse_price(sp),
                    uom=parse_uom(sp["supplierProductUoM"]),
                )
                for sp in (x.get("supplierProducts") or [])
            ]
            return Product(
                id=str(x.get("productId") or ""),
                name=str(x.get("productName") or "").strip(),
                nutrient_facts=facts,
                supplier_offers=offers,
            )
        except Exception as e:
            log.exception("Invalid product document: %s", x)
            raise ValueError(f"Invalid product document: {e}") from e

    def for_ingredient(self, ingredient: Ingredient) -> List[Product]:
        return list(self._by_ingredient.get(_ingredient_key(ingredient.name), []))

class InMemoryUnitRepository(UnitReadRepo):
    """Directed conversion edges, kept in the order they are listed."""

    def __init__(self, docs: Iterable[Dict[str, Any]]) -> None:
        self._edges: List[ConversionEdge] = [self._parse_edge(d) for d in docs]
        if not self._edges:
            log.warning("InMemoryUnitRepository: no conversion edges loaded")
        else:
            log.info("InMemoryUnitRepository loaded %d conversion edges", len(self._edges))

    def _parse_edge(self, d: Dict[str, Any]) -> ConversionEdge:
        try:
            return ConversionEdge(
                from_name=UoMName(d["fromUnitName"]),
                from_type=UoMType(d["fromUnitType"]),
                to_name=UoMName(d["toUnitName"]),
                to_type=UoMType(d["toUnitType"]),
                factor=float(d["conversionFactor"]),
            )
        except Exception as e:
            log.exception("Invalid conversion document: %s", d)
            raise ValueError(f"Invalid conversion document: {e}") from e

    def all(self) -> List[ConversionEdge]:
        return self._edges
