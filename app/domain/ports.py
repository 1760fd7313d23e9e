# app/domain/ports.py
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from app.domain.models import MedicineId


class MedicineRepoPort(ABC):
    """Read-only contract over the medicines collection (see MongoMedicineRepo)."""

    @abstractmethod
    async def search_by_brand_prefix(self, q: str, skip: int, limit: int) -> List[Dict[str, Any]]: ...

    @abstractmethod
    async def find_by_id(self, medicine_id: MedicineId,
                         projection: Optional[Dict[str, int]] = None) -> Optional[Dict[str, Any]]: ...

    @abstractmethod
    async def find_alternatives(self, composition_key: Any, exclude_id: Any,
                                skip: int, limit: int) -> List[Dict[str, Any]]: ...
