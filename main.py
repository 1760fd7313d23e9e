# main.py
from dotenv import load_dotenv
load_dotenv()

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.config import Settings, cors_allow_origins, public_dir
from app.infra.repo.mongo_client import MongoConnection
from app.presentation.health import router as health_router
from app.presentation.routers import router as api_router

# --- logging config HARUS di atas ---
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
log = logging.getLogger("meddb")
app_logger = logging.getLogger("meddb.request")


# ─────────────────────────────────────────────────────────────
# Lifespan: validasi config (fatal jika MONGODB_URI kosong),
# pasang MongoConnection (lazy, connect saat request pertama), tutup saat shutdown
# ─────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings.from_env()
    log.info("Config: DB_NAME=%s COLLECTION=%s", settings.db_name, settings.collection)
    app.state.settings = settings
    app.state.mongo = MongoConnection.from_settings(settings)
    try:
        yield
    finally:
        app.state.mongo.close()


app = FastAPI(
    title="MedDB Catalog API",
    version=os.getenv("APP_VERSION", "0.1.0"),
    lifespan=lifespan,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    app_logger.info(f"Incoming {request.method} {request.url.path}")
    try:
        response = await call_next(request)
        app_logger.info(f"Completed {request.method} {request.url.path} -> {response.status_code}")
        return response
    except Exception:
        app_logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        raise


# ─────────────────────────────────────────────────────────────
# CORS (atur via env: CORS_ALLOW_ORIGINS="https://foo.com,https://bar.com")
# ─────────────────────────────────────────────────────────────
allow_origins = cors_allow_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials="*" not in allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ─────────────────────────────────────────────────────────────
# Routes
# ─────────────────────────────────────────────────────────────
app.include_router(health_router, tags=["health"])
app.include_router(api_router, tags=["api"])

# Aset statis dari PUBLIC_DIR di-mount terakhir supaya tidak menutupi /api
PUBLIC_DIR = public_dir()
if PUBLIC_DIR.is_dir():
    app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True), name="public")
else:
    log.warning("PUBLIC_DIR %s not found; static assets disabled", PUBLIC_DIR)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
