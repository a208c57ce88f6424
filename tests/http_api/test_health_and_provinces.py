# tests/http_api/test_health_and_provinces.py
from fastapi.testclient import TestClient


def test_root_banner(client):
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert "is running" in data["message"]
    assert "version" in data and "timestamp" in data


def test_health_reports_loaded_tables(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["provinces"] == 34
    assert data["routes"] == 188
    assert data["rejectedRoutes"] == ["Badghis-Baghlan", "Badghis-Balkh"]


def test_list_provinces_with_localized_names(client):
    response = client.get("/api/provinces")
    assert response.status_code == 200
    provinces = {p["id"]: p for p in response.json()}
    assert len(provinces) == 34
    assert provinces["Kandahar"]["prs"] == "قندهار"
    assert provinces["Kandahar"]["pbt"] == "کندهار"
    assert provinces["Kabul"]["neighborCount"] == 3
    assert set(provinces["Kabul"]) == {"id", "en", "prs", "pbt", "neighborCount"}


def test_lifespan_startup_and_shutdown(app):
    """Entering the client context runs the lifespan hooks (telemetry, table warm-up)."""
    with TestClient(app) as client:
        assert client.get("/api/health").status_code == 200
