# app/infra/repo/mongo_repo.py
from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from pymongo.errors import PyMongoError

from app.domain.errors import QueryError
from app.domain.models import MEDICINE_PROJECTION, MedicineId
from app.domain.ports import MedicineRepoPort
from app.infra.repo.mongo_client import MongoConnection


class MongoMedicineRepo(MedicineRepoPort):
    """
    Async read-only repository untuk koleksi `medicines`.

    Koneksi diambil dari MongoConnection (cache per proses); error koneksi
    (DatabaseConnectionError) diteruskan apa adanya, error query dibungkus
    sebagai QueryError.
    """

    def __init__(self, connection: MongoConnection) -> None:
        self.connection = connection

    # ──────────────────────────────────────────────────────────────
    #  Prefix search on brand_name
    # ──────────────────────────────────────────────────────────────
    async def search_by_brand_prefix(self, q: str, skip: int, limit: int) -> List[Dict[str, Any]]:
        # anchored + case-insensitive; user text is matched literally
        flt = {"brand_name": {"$regex": "^" + re.escape(q), "$options": "i"}}
        return await self._find_page(flt, skip, limit)

    # ──────────────────────────────────────────────────────────────
    #  Exact lookups
    # ──────────────────────────────────────────────────────────────
    async def find_by_id(self, medicine_id: MedicineId,
                         projection: Optional[Dict[str, int]] = None) -> Optional[Dict[str, Any]]:
        coll = await self.connection.collection()
        try:
            return await coll.find_one({"_id": medicine_id.value}, projection)
        except PyMongoError as e:
            raise QueryError(str(e)) from e

    async def find_alternatives(self, composition_key: Any, exclude_id: Any,
                                skip: int, limit: int) -> List[Dict[str, Any]]:
        flt = {"composition_key": composition_key, "_id": {"$ne": exclude_id}}
        return await self._find_page(flt, skip, limit)

    async def _find_page(self, flt: Dict[str, Any], skip: int, limit: int) -> List[Dict[str, Any]]:
        coll = await self.connection.collection()
        try:
            cursor = coll.find(flt, MEDICINE_PROJECTION).skip(skip).limit(limit)
            return [doc async for doc in cursor]
        except PyMongoError as e:
            raise QueryError(str(e)) from e
