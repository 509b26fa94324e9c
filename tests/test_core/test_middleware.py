import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from flood_ledger.core.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from flood_ledger.core.middleware import ErrorHandlingMiddleware, LoggingMiddleware


@pytest.fixture
def client():
    app = FastAPI()
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(LoggingMiddleware)

    @app.get("/success")
    async def success():
        return {"message": "success"}

    @app.get("/not-found")
    async def not_found():
        raise ResourceNotFoundException("Item not found", {"id": "123"})

    @app.get("/validation-error")
    async def validation_error():
        raise ValidationException("Invalid input")

    @app.get("/unauthenticated")
    async def unauthenticated():
        raise AuthenticationException("Missing provider identity")

    @app.get("/forbidden")
    async def forbidden():
        raise AuthorizationException("Provider is not authorized")

    @app.get("/unknown-error")
    async def unknown_error():
        raise Exception("Unexpected error")

    with TestClient(app) as client:
        yield client


def test_success(client):
    response = client.get("/success")
    assert response.status_code == 200
    assert response.json() == {"message": "success"}
    assert "X-Request-ID" in response.headers


def test_request_id_is_echoed(client):
    response = client.get("/success", headers={"X-Request-ID": "req-42"})
    assert response.headers["X-Request-ID"] == "req-42"


def test_resource_not_found(client):
    response = client.get("/not-found")
    assert response.status_code == 404
    data = response.json()
    assert data["error"]["message"] == "Item not found"
    assert data["error"]["code"] == "ResourceNotFoundException"
    assert data["error"]["details"] == {"id": "123"}
    assert "'id': '123'" in response.headers["X-Error-Details"]


def test_validation_error(client):
    response = client.get("/validation-error")
    assert response.status_code == 422
    assert response.json()["error"]["message"] == "Invalid input"


def test_authentication_error(client):
    response = client.get("/unauthenticated")
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AuthenticationException"


def test_authorization_error(client):
    response = client.get("/forbidden")
    assert response.status_code == 403
    assert response.json()["error"]["message"] == "Provider is not authorized"


def test_unknown_error(client):
    response = client.get("/unknown-error")
    assert response.status_code == 500
    data = response.json()
    assert data["error"]["message"] == "An unexpected error occurred."
    assert data["error"]["code"] == "InternalServerException"
