# app/application/use_cases.py
from __future__ import annotations

import logging
from typing import Any, Dict

from app.domain.errors import NotFoundError
from app.domain.models import MedicineId, PageRequest
from app.domain.ports import MedicineRepoPort

logger = logging.getLogger("meddb.catalog")


def _page_result(docs) -> Dict[str, Any]:
    # total = jumlah dokumen di halaman ini, bukan total seluruh match
    return {"total": len(docs), "documents": docs}


class MedicineCatalogUseCase:
    def __init__(self, repo: MedicineRepoPort):
        self.repo = repo

    async def search(self, q: str | None, page: PageRequest) -> Dict[str, Any]:
        q = (q or "").strip()
        if not q:
            return _page_result([])
        docs = await self.repo.search_by_brand_prefix(q, skip=page.skip, limit=page.limit)
        logger.debug("search q=%r page=%s size=%s -> %d", q, page.page, page.size, len(docs))
        return _page_result(docs)

    async def get(self, medicine_id: MedicineId) -> Dict[str, Any]:
        doc = await self.repo.find_by_id(medicine_id)
        if not doc:
            raise NotFoundError("Not found")
        return doc

    async def alternatives(self, medicine_id: MedicineId, page: PageRequest) -> Dict[str, Any]:
        """
        Dua langkah:
          1) ambil composition_key milik dokumen dasar
          2) cari dokumen lain dengan key yang sama, kecuali dokumen dasar itu sendiri
        """
        base = await self.repo.find_by_id(medicine_id, projection={"composition_key": 1})
        if not base or not base.get("composition_key"):
            return _page_result([])

        docs = await self.repo.find_alternatives(
            base["composition_key"], base["_id"], skip=page.skip, limit=page.limit
        )
        return _page_result(docs)
