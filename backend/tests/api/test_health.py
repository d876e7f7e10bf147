"""Smoke tests for the API blueprint wiring."""

from __future__ import annotations


def test_health_endpoint(client):
    """Health check should return OK payload."""

    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}
    assert "X-Request-ID" in response.headers


def test_unknown_route_is_problem_json(client):
    response = client.get("/api/v1/nope")
    assert response.status_code == 404
    assert response.mimetype == "application/problem+json"
    assert response.get_json()["code"] == "not_found"


def test_request_id_is_fresh_per_request(client):
    first = client.get("/api/v1/health", headers={"X-Request-ID": "req-a"})
    second = client.get("/api/v1/health", headers={"X-Request-ID": "req-b"})
    third = client.get("/api/v1/health")

    assert first.headers["X-Request-ID"] == "req-a"
    assert second.headers["X-Request-ID"] == "req-b"
    assert third.headers["X-Request-ID"] not in {"req-a", "req-b"}
