# tests/conftest.py
import os
from pathlib import Path

import pytest
from bson import Decimal128
from fastapi.testclient import TestClient

from app.container import get_connection
from tests.fakes import (
    ASPIRIN_ID, CALPOL_ID, CROCIN_ID, PARA_ID, PARACIP_ID,
    FakeCollection, FakeConnection,
)

os.environ.setdefault("PUBLIC_DIR", str(Path(__file__).resolve().parent.parent / "public"))


@pytest.fixture
def medicines():
    return [
        {"_id": PARA_ID, "brand_name": "Paracetamol", "composition": "Paracetamol 500mg",
         "composition_key": "paracetamol-500", "manufacturer": "GSK", "dosage_form": "Tablet",
         "price": 10.5, "pack_size": "10 tablets"},
        {"_id": PARACIP_ID, "brand_name": "Paracip 500", "composition": "Paracetamol 500mg",
         "composition_key": "paracetamol-500", "manufacturer": "Cipla", "dosage_form": "Tablet",
         "price": 9.0},
        {"_id": CALPOL_ID, "brand_name": "Calpol", "composition": "Paracetamol 500mg",
         "composition_key": "paracetamol-500", "manufacturer": "GSK", "dosage_form": "Tablet",
         "price": Decimal128("12.50")},
        {"_id": CROCIN_ID, "brand_name": "Crocin", "composition": "Paracetamol 650mg",
         "manufacturer": "GSK", "dosage_form": "Tablet", "price": 15},
        {"_id": ASPIRIN_ID, "brand_name": "Aspirin", "composition": "Acetylsalicylic acid 75mg",
         "composition_key": "aspirin-75", "manufacturer": "Bayer", "dosage_form": "Tablet",
         "price": 4},
        {"_id": "MED-001", "brand_name": "Dolo 500", "composition": "Paracetamol 500mg",
         "composition_key": "paracetamol-500", "manufacturer": "Micro Labs",
         "dosage_form": "Tablet", "price": 11},
    ]


@pytest.fixture
def fake_collection(medicines):
    return FakeCollection(medicines)


@pytest.fixture
def make_client(monkeypatch):
    from main import app

    monkeypatch.setenv("MONGODB_URI", "mongodb://test-host:27017")
    clients = []

    def _make(connection):
        app.dependency_overrides[get_connection] = lambda: connection
        c = TestClient(app)
        c.__enter__()
        clients.append(c)
        return c

    yield _make
    for c in clients:
        c.__exit__(None, None, None)
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client, fake_collection):
    return make_client(FakeConnection(fake_collection))
