# app/presentation/schemas.py
from __future__ import annotations
from pydantic import BaseModel, Field
from typing import Any, Dict, List


# Dokumen medicine dikirim apa adanya (ObjectId → str), field bisa bervariasi
class MedicineListResponse(BaseModel):
    total: int = Field(..., description="Jumlah dokumen pada halaman ini")
    documents: List[Dict[str, Any]] = []

class MedicineResponse(BaseModel):
    document: Dict[str, Any]

class ErrorResponse(BaseModel):
    error: str
