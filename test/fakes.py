from __future__ import annotations

from typing import List

from src.domain.entities import ConversionEdge, UoMName, UoMType
from src.domain.repositories import UnitReadRepo


class StaticUnits(UnitReadRepo):
    def __init__(self, edges: List[ConversionEdge]) -> None:
        self.edges = edges
        self.calls = 0

    def all(self) -> List[ConversionEdge]:
        self.calls += 1
        return self.edges


def edge(from_name: str, from_type: str, to_name: str, to_type: str, factor: float) -> ConversionEdge:
    return ConversionEdge(UoMName(from_name), UoMType(from_type), UoMName(to_name), UoMType(to_type), factor)


BASE_UNITS = {"mass": "grams", "volume": "millilitres", "units": "whole"}
