# app/presentation/routers.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from bson import Decimal128, ObjectId
from fastapi import APIRouter, Depends, Query
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.application.use_cases import MedicineCatalogUseCase
from app.container import get_catalog_uc
from app.domain.errors import NotFoundError
from app.domain.models import (
    ALTERNATIVES_DEFAULT_SIZE, ALTERNATIVES_MAX_SIZE,
    SEARCH_DEFAULT_SIZE, SEARCH_MAX_SIZE,
    MedicineId, PageRequest,
)
from app.presentation.schemas import ErrorResponse, MedicineListResponse, MedicineResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

_ERRORS = {500: {"model": ErrorResponse}}
_BSON_ENCODERS = {
    ObjectId: str,
    Decimal128: lambda d: float(d.to_decimal()),
    datetime: lambda d: d.isoformat(),
}


def _encode(payload: Any) -> Any:
    return jsonable_encoder(payload, custom_encoder=_BSON_ENCODERS)

def _error(status_code: int, err: Exception | str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": str(err)})


# ── SEARCH ────────────────────────────────────────────────────────
@router.get("/search", response_model=MedicineListResponse, responses=_ERRORS)
async def search_medicines(
    q: str | None = Query(None),
    page: str | None = Query(None),
    size: str | None = Query(None),
    uc: MedicineCatalogUseCase = Depends(get_catalog_uc),
):
    try:
        pg = PageRequest.from_query(page, size, SEARCH_DEFAULT_SIZE, SEARCH_MAX_SIZE)
        out = await uc.search(q, pg)
        return MedicineListResponse(**_encode(out))
    except Exception as e:
        logger.exception("search failed q=%r", q)
        return _error(500, e)


# ── GET BY ID ─────────────────────────────────────────────────────
@router.get(
    "/medicines/{medicine_id}",
    response_model=MedicineResponse,
    responses={404: {"model": ErrorResponse}, **_ERRORS},
)
async def get_medicine(medicine_id: str, uc: MedicineCatalogUseCase = Depends(get_catalog_uc)):
    try:
        doc = await uc.get(MedicineId.parse(medicine_id))
        return MedicineResponse(document=_encode(doc))
    except NotFoundError:
        return _error(404, "Not found")
    except Exception as e:
        logger.exception("get medicine failed id=%s", medicine_id)
        return _error(500, e)


# ── ALTERNATIVES (same composition_key) ───────────────────────────
@router.get(
    "/medicines/{medicine_id}/alternatives",
    response_model=MedicineListResponse,
    responses=_ERRORS,
)
async def medicine_alternatives(
    medicine_id: str,
    page: str | None = Query(None),
    size: str | None = Query(None),
    uc: MedicineCatalogUseCase = Depends(get_catalog_uc),
):
    try:
        pg = PageRequest.from_query(page, size, ALTERNATIVES_DEFAULT_SIZE, ALTERNATIVES_MAX_SIZE)
        out = await uc.alternatives(MedicineId.parse(medicine_id), pg)
        return MedicineListResponse(**_encode(out))
    except Exception as e:
        logger.exception("alternatives failed id=%s", medicine_id)
        return _error(500, e)
