# app/domain/models.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal, Optional, Union

from bson import ObjectId

# Fields returned by list-style queries (search, alternatives). `_id` always comes back.
MEDICINE_PROJECTION = {
    "brand_name": 1,
    "composition": 1,
    "composition_key": 1,
    "manufacturer": 1,
    "dosage_form": 1,
    "price": 1,
}

SEARCH_DEFAULT_SIZE, SEARCH_MAX_SIZE = 20, 200
ALTERNATIVES_DEFAULT_SIZE, ALTERNATIVES_MAX_SIZE = 100, 500


@dataclass(frozen=True)
class MedicineId:
    """
    Lookup key resolved once at the HTTP boundary.

    kind == "native" → value is an ObjectId
    kind == "raw"    → value is the path string as given (string `_id` collections)
    """
    kind: Literal["native", "raw"]
    value: Union[ObjectId, str]

    @classmethod
    def parse(cls, raw: str) -> "MedicineId":
        if ObjectId.is_valid(raw):
            return cls("native", ObjectId(raw))
        return cls("raw", raw)


_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def parse_int(raw: Optional[str], default: int) -> int:
    """Lenient integer parse: leading digits win ("12abc" → 12), garbage → default."""
    if raw is None:
        return default
    m = _INT_PREFIX.match(str(raw))
    return int(m.group(1)) if m else default


@dataclass(frozen=True)
class PageRequest:
    page: int
    size: int

    @property
    def skip(self) -> int:
        return self.page * self.size

    @property
    def limit(self) -> int:
        return self.size

    @classmethod
    def from_query(cls, page: Optional[str], size: Optional[str],
                   default_size: int, max_size: int) -> "PageRequest":
        p = max(0, parse_int(page, 0))
        s = min(max_size, max(1, parse_int(size, default_size)))
        return cls(page=p, size=s)
