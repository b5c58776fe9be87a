# recipe_costing/src/api/routes.py
from __future__ import annotations

import logging
from typing import Any

import anyio
from fastapi import APIRouter, Depends, HTTPException, Request

from src.api.schemas import ConvertRequest, RecipeSummaryResponse, UnitOfMeasureOut
from src.domain.entities import UnitOfMeasure
from src.domain.errors import RecipeCostingError

log = logging.getLogger("api.routes")
router = APIRouter()


# -------------------------
# Dependencies via app.state
# -------------------------
def get_summarizer(request: Request):
    summarizer = getattr(request.app.state, "summarizer", None)
    if summarizer is None:
        raise RuntimeError("summarizer not initialized. Check app startup wiring.")
    return summarizer


def get_unit_graph(request: Request):
    graph = getattr(request.app.state, "unit_graph", None)
    if graph is None:
        raise RuntimeError("unit_graph not initialized. Check app startup wiring.")
    return graph


# -------------------------
# /recipe_summary (all recipes, fail-fast)
# -------------------------
@router.get("/recipe_summary", response_model=RecipeSummaryResponse)
async def recipe_summary(summarizer=Depends(get_summarizer)) -> Any:
    try:
        summary = await anyio.to_thread.run_sync(summarizer.summarize_all)
    except RecipeCostingError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        log.exception("Processing /recipe_summary error")
        raise HTTPException(status_code=500, detail=str(e))
    return {"recipes": {name: s.to_dict() for name, s in summary.items()}}


# -------------------------
# /convert (single unit graph query)
# -------------------------
@router.post("/convert", response_model=UnitOfMeasureOut)
def convert(req: ConvertRequest, graph=Depends(get_unit_graph)) -> Any:
    src_uom = UnitOfMeasure(amount=req.uomAmount, name=req.uomName, type=req.uomType)
    try:
        return graph.convert(src_uom, req.toName, req.toType).to_dict()
    except RecipeCostingError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        log.exception("Processing /convert error")
        raise HTTPException(status_code=500, detail=str(e))
