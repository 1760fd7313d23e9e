# app/container.py
from fastapi import Depends, Request

from app.application.use_cases import MedicineCatalogUseCase
from app.infra.repo.mongo_client import MongoConnection
from app.infra.repo.mongo_repo import MongoMedicineRepo


# MongoConnection dibuat & ditutup oleh lifespan di main.py, disimpan di app.state
def get_connection(request: Request) -> MongoConnection:
    return request.app.state.mongo

def get_repo(conn: MongoConnection = Depends(get_connection)) -> MongoMedicineRepo:
    return MongoMedicineRepo(conn)

def get_catalog_uc(repo: MongoMedicineRepo = Depends(get_repo)) -> MedicineCatalogUseCase:
    return MedicineCatalogUseCase(repo)
