# app/config.py
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from app.domain.errors import ConfigurationError

def _split_origins(raw: str) -> List[str]:
    return [o.strip().rstrip("/") for o in raw.split(",") if o.strip()]


@dataclass(frozen=True)
class Settings:
    mongodb_uri: str
    db_name: str = "meddb"
    collection: str = "medicines"
    public_dir: Path = Path("public")
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        """
        MONGODB_URI        wajib; tanpa ini proses menolak start
        DB_NAME            default "meddb"
        COLLECTION         default "medicines"
        PUBLIC_DIR         folder aset statis (default "public" relatif ke working dir)
        CORS_ALLOW_ORIGINS "https://foo.com,https://bar.com" (default "*")
        """
        uri = (os.getenv("MONGODB_URI") or "").strip()
        if not uri:
            raise ConfigurationError("Set MONGODB_URI in .env")
        return cls(
            mongodb_uri=uri,
            db_name=os.getenv("DB_NAME") or "meddb",
            collection=os.getenv("COLLECTION") or "medicines",
            public_dir=public_dir(),
            cors_allow_origins=cors_allow_origins(),
        )


# Dipakai saat import main.py (middleware & static mount), sebelum lifespan jalan.
def public_dir() -> Path:
    return Path(os.getenv("PUBLIC_DIR") or "public").resolve()


def cors_allow_origins() -> List[str]:
    return _split_origins(os.getenv("CORS_ALLOW_ORIGINS", "*")) or ["*"]
