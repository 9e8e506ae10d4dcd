import pytest
from fastapi.testclient import TestClient

from engines.inflection import get_inflector
from main import app


@pytest.fixture
def client(inflector):
    app.dependency_overrides[get_inflector] = lambda: inflector
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


def test_inflect_full_name(client):
    resp = client.get("/api/names/inflect", params={"name": "Иванов Иван Иванович", "case": "genitive"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["result"] == "Иванова Ивана Ивановича"
    assert body["gender"] == "androgynous"
    assert "X-Correlation-ID" in resp.headers


def test_inflect_full_name_with_gender(client):
    resp = client.get("/api/names/inflect", params={"name": "Сорока Ольга", "case": "dative", "gender": "female"})
    assert resp.json()["result"] == "Сороке Ольге "


def test_inflect_part(client):
    resp = client.get(
        "/api/names/firstname/inflect",
        params={"name": "Пётр", "case": "instrumental", "gender": "male"},
    )
    assert resp.status_code == 200
    assert resp.json()["result"] == "Петром"


def test_empty_part_is_bad_request(client):
    resp = client.get("/api/names/lastname/inflect", params={"name": "", "case": "genitive"})
    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["code"] == "E2001_REQUIRED_FIELD_MISSING"
    assert error["metadata"]["field"] == "lastname"


def test_unknown_case_is_rejected(client):
    resp = client.get("/api/names/inflect", params={"name": "Иванов", "case": "vocative"})
    assert resp.status_code == 422


def test_unknown_part_is_rejected(client):
    resp = client.get("/api/names/nickname/inflect", params={"name": "Ваня"})
    assert resp.status_code == 422


def test_detect_gender(client):
    assert client.get("/api/names/gender", params={"middlename": "Ильинична"}).json()["gender"] == "female"
    assert client.get("/api/names/gender", params={"middlename": "Али оглы"}).json()["gender"] == "male"


def test_detect_gender_empty(client):
    assert client.get("/api/names/gender", params={"middlename": ""}).status_code == 400


def test_divide(client):
    assert client.get("/api/names/divide", params={"name": "Иванов Иван"}).json() == {
        "lastname": "Иванов",
        "firstname": "Иван",
        "middlename": None,
    }


def test_initial(client):
    assert client.get("/api/names/initial", params={"name": "Иванов Иван Иванович"}).json()["initial"] == "Иванов И. И."
