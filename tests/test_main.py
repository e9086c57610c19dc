"""Tests for main API endpoints."""

from fastapi.testclient import TestClient


def test_root_endpoint(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to LibHub API"}


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_api_root_endpoint(client: TestClient) -> None:
    response = client.get("/api/v1/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "LibHub API v1"
    assert data["version"] == "0.1.0"


def test_protected_endpoint_requires_token(client: TestClient) -> None:
    response = client.get("/api/v1/loans/me")
    assert response.status_code == 401


def test_garbage_token_is_rejected(client: TestClient) -> None:
    response = client.get("/api/v1/users/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Could not validate credentials"


def test_public_settings_expose_feature_flags(client: TestClient) -> None:
    response = client.get("/api/v1/settings")
    assert response.status_code == 200
    assert response.json() == {
        "featureFlags": {"userRegistrations": True, "remoteCatalog": False}
    }
