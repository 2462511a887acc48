import pytest
from fastapi.testclient import TestClient

INVALID_INPUT = {
    "is_success": False,
    "error": "Invalid input. 'data' field must be an array.",
}


def test_process_data(client):
    response = client.post("/bfhl", json={"data": ["a", "1", "334", "4", "R", "$"]})

    assert response.status_code == 200
    assert response.json() == {
        "is_success": True,
        "user_id": "jane_roe_01012000",
        "email": "jane@example.com",
        "roll_number": "XYZ789",
        "odd_numbers": ["1"],
        "even_numbers": ["334", "4"],
        "alphabets": ["A", "R"],
        "special_characters": ["$"],
        "sum": "339",
        "concat_string": "Ra",
    }


def test_process_data_normalizes_json_scalars(client):
    response = client.post("/bfhl", json={"data": [1, 2.0, 3.5, True, None, "x"]})

    assert response.status_code == 200
    data = response.json()
    assert data["odd_numbers"] == ["1", "3.5"]
    assert data["even_numbers"] == ["2"]
    assert data["alphabets"] == ["TRUE", "NULL", "X"]
    assert data["sum"] == "6"


def test_process_data_empty_array(client):
    response = client.post("/bfhl", json={"data": []})

    assert response.status_code == 200
    data = response.json()
    assert data["sum"] == "0"
    assert data["concat_string"] == ""


@pytest.mark.parametrize(
    "body",
    [{}, {"data": {}}, {"data": "abc"}, {"data": None}, {"data": 5}, ["1", "2"]],
)
def test_process_data_rejects_invalid_payload(client, body):
    response = client.post("/bfhl", json=body)

    assert response.status_code == 400
    assert response.json() == INVALID_INPUT


def test_process_data_rejects_non_json_body(client):
    response = client.post(
        "/bfhl", content=b"not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json() == INVALID_INPUT


def test_process_data_internal_failure(client, monkeypatch):
    def boom(tokens):
        raise RuntimeError("secret detail")

    monkeypatch.setattr("app.services.bfhl.classify", boom)
    response = client.post("/bfhl", json={"data": ["1"]})

    assert response.status_code == 500
    assert response.json() == {"is_success": False, "error": "Internal server error"}


def test_operation_code(client):
    response = client.get("/bfhl")

    assert response.status_code == 200
    assert response.json() == {"operation_code": 1, "user_id": "jane_roe_01012000"}


def test_health(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["message"] == "BFHL API is running"
    assert set(response.json()["endpoints"]) == {"POST /bfhl", "GET /bfhl"}


def test_unknown_route(client):
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.json() == {"is_success": False, "error": "Route not found"}


@pytest.mark.parametrize("method", ["put", "delete", "patch"])
def test_unsupported_method_is_route_not_found(client, method):
    response = client.request(method.upper(), "/bfhl")

    assert response.status_code == 404
    assert response.json() == {"is_success": False, "error": "Route not found"}


def test_unhandled_exception_is_generic(app):
    async def explode():
        raise ValueError("secret detail")

    app.add_api_route("/explode", explode)
    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/explode", headers={"Origin": "http://example.com"})

    assert response.status_code == 500
    assert response.json() == {"is_success": False, "error": "Something went wrong!"}
    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_headers(client):
    response = client.options(
        "/bfhl",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
