from tests.fakes import DownConnection


def test_healthz(client):
    assert client.get("/healthz").json() == {"ok": True}


def test_readyz_ok_with_read_only_user(client, fake_collection):
    res = client.get("/readyz")
    assert res.json() == {"ok": True, "mongo": True}
    assert fake_collection.calls == []


def test_readyz_reports_mongo_down(make_client):
    body = make_client(DownConnection()).get("/readyz").json()
    assert body["ok"] is False
    assert body["mongo"] is False
    assert "Failed to connect" in body["mongo_error"]


def test_static_index_is_served(client):
    res = client.get("/")
    assert res.status_code == 200
    assert "text/html" in res.headers["content-type"]


def test_lifespan_binds_settings(client):
    settings = client.app.state.settings
    assert settings.db_name == "meddb"
    assert settings.collection == "medicines"


def test_public_dir_defaults_to_working_dir(monkeypatch, tmp_path):
    from app.config import public_dir

    monkeypatch.delenv("PUBLIC_DIR", raising=False)
    monkeypatch.chdir(tmp_path)
    assert public_dir() == (tmp_path / "public").resolve()
    monkeypatch.setenv("PUBLIC_DIR", str(tmp_path / "static"))
    assert public_dir() == (tmp_path / "static").resolve()
