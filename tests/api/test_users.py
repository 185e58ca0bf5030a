"""
Tests for the user lookup endpoint.

Tests cover:
- GET /users/{user_id} (found, nil id, malformed id, serialization fault)
- Concurrent lookups of different ids
"""

import asyncio
from unittest.mock import patch
from uuid import uuid4

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic_core import PydanticSerializationError

from user_service.models.user import User

EXAMPLE_USER_ID = "550e8400-e29b-41d4-a716-446655440000"
NIL_USER_ID = "00000000-0000-0000-0000-000000000000"


class TestGetUserById:
    """Tests for GET /users/{user_id}."""

    def test_example_user(self, client: TestClient) -> None:
        """Test the documented example id returns the full record."""
        response = client.get(f"/users/{EXAMPLE_USER_ID}")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == {
            "uuid": EXAMPLE_USER_ID,
            "firstName": "Jane",
            "lastName": "Doe",
            "email": "jane.doe@example.com",
            "enabled": True,
            "activated": True,
        }

    def test_uuid_round_trip(self, client: TestClient) -> None:
        """Test the response carries exactly the requested id."""
        for _ in range(10):
            user_id = str(uuid4())
            response = client.get(f"/users/{user_id}")
            assert response.status_code == 200
            assert response.json()["uuid"] == user_id

    def test_nil_uuid_not_found(self, client: TestClient) -> None:
        """Test the all-zero id never resolves to a user."""
        response = client.get(f"/users/{NIL_USER_ID}")

        assert response.status_code == 404
        assert response.text == "User not found"
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.parametrize(
        "user_id",
        ["not-a-uuid", "12345", "550e8400-e29b-41d4-a716-44665544000g"],
    )
    def test_malformed_uuid_rejected(self, client: TestClient, user_id: str) -> None:
        """Test identifiers that do not parse are a client error."""
        response = client.get(f"/users/{user_id}")
        assert 400 <= response.status_code < 500
        assert response.status_code != 404

    def test_serialization_failure(self, client: TestClient) -> None:
        """Test a serialization fault yields a plain-text 500."""
        with patch.object(
            User,
            "to_json",
            side_effect=PydanticSerializationError("boom"),
        ):
            response = client.get(f"/users/{EXAMPLE_USER_ID}")

        assert response.status_code == 500
        assert response.text == "Unknown error"

    def test_value_error_during_serialization(self, client: TestClient) -> None:
        """Test ValueError from the serializer is handled the same way."""
        with patch.object(User, "to_json", side_effect=ValueError("bad value")):
            response = client.get(f"/users/{EXAMPLE_USER_ID}")

        assert response.status_code == 500
        assert response.text == "Unknown error"

    def test_post_not_allowed(self, client: TestClient) -> None:
        """Test only GET is routed."""
        response = client.post(f"/users/{EXAMPLE_USER_ID}")
        assert response.status_code == 405


class TestConcurrentLookups:
    """Concurrent requests never see each other's identifiers."""

    @pytest.mark.asyncio
    async def test_concurrent_requests_isolated(self, app: FastAPI) -> None:
        """Test each concurrent response carries only its own id."""
        user_ids = [str(uuid4()) for _ in range(50)]
        transport = httpx.ASGITransport(app=app)

        async with httpx.AsyncClient(
            transport=transport, base_url="http://testserver"
        ) as client:
            responses = await asyncio.gather(
                *(client.get(f"/users/{user_id}") for user_id in user_ids)
            )

        for user_id, response in zip(user_ids, responses):
            assert response.status_code == 200
            assert response.json()["uuid"] == user_id
