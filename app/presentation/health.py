# app/presentation/health.py
from fastapi import APIRouter, Depends

from app.infra.repo.mongo_client import MongoConnection
from app.container import get_connection

router = APIRouter()

@router.get("/healthz")
async def healthz():
    # Liveness: proses hidup
    return {"ok": True}

@router.get("/readyz")
async def readyz(conn: MongoConnection = Depends(get_connection)):
    checks = {}; ok = True
    # Mongo: cukup ping, service ini read-only
    try:
        await conn.ping()
        checks["mongo"] = True
    except Exception as e:
        checks["mongo"] = False; checks["mongo_error"] = str(e); ok = False
    return {"ok": ok, **checks}
