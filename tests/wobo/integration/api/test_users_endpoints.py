"""Integration tests for user management endpoints."""

from datetime import datetime
from uuid import uuid4

from fastapi.testclient import TestClient

from tests.shared.fixtures.factories import JANE, JOHN


def _parse(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class TestCreateUser:
    """Tests for POST /api/v1/users."""

    def test_register_success(self, test_client: TestClient, api_v1_prefix: str):
        """Registration assigns an id and never returns credentials."""
        response = test_client.post(f"{api_v1_prefix}/users", json=JOHN)

        assert response.status_code == 201
        data = response.json()

        assert data["id"]
        assert data["name"] == "John Doe"
        assert data["email"] == "john@test.com"
        assert data["gender"] == "male"
        assert data["created_at"] == data["updated_at"]
        assert "password" not in data
        assert "password_hash" not in data
        assert response.headers["Location"].endswith(
            f"{api_v1_prefix}/users/{data['id']}"
        )

    def test_register_ignores_client_id(self, test_client: TestClient, api_v1_prefix: str):
        client_id = str(uuid4())

        response = test_client.post(
            f"{api_v1_prefix}/users", json={**JOHN, "id": client_id}
        )

        assert response.status_code == 201
        assert response.json()["id"] != client_id

    def test_register_duplicate_email(
        self, test_client: TestClient, api_v1_prefix: str, john
    ):
        response = test_client.post(
            f"{api_v1_prefix}/users", json={**JOHN, "name": "Other John"}
        )

        assert response.status_code == 409
        body = response.json()
        assert body["code"] == "DUPLICATE_EMAIL"
        assert "john@test.com" in body["detail"]

    def test_register_after_duplicate_still_works(
        self, test_client: TestClient, api_v1_prefix: str, john
    ):
        """A rejected write leaves the session usable for later requests."""
        test_client.post(f"{api_v1_prefix}/users", json=JOHN)

        response = test_client.post(f"{api_v1_prefix}/users", json=JANE)

        assert response.status_code == 201

    def test_register_keeps_email_as_sent(
        self, test_client: TestClient, api_v1_prefix: str
    ):
        """The address is stored and returned exactly as submitted."""
        email = "John@Test.COM"

        created = test_client.post(f"{api_v1_prefix}/users", json={**JOHN, "email": email})

        assert created.status_code == 201
        assert created.json()["email"] == email

        login = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": email, "password": JOHN["password"]},
        )
        assert login.status_code == 200
        headers = {"Authorization": f"Bearer {login.json()['token']}"}

        fetched = test_client.get(
            f"{api_v1_prefix}/users/{created.json()['id']}", headers=headers
        )
        assert fetched.json()["email"] == email

    def test_register_validation(self, test_client: TestClient, api_v1_prefix: str):
        invalid_payloads = [
            {**JOHN, "name": "J"},
            {**JOHN, "name": "J" * 101},
            {**JOHN, "email": "not-an-email"},
            {**JOHN, "email": "John Doe <john@test.com>"},
            {**JOHN, "email": "a" * 250 + "@test.com"},
            {**JOHN, "password": "short"},
            {**JOHN, "password": "p" * 101},
            {**JOHN, "gender": "other"},
            {k: v for k, v in JOHN.items() if k != "password"},
        ]

        for payload in invalid_payloads:
            response = test_client.post(f"{api_v1_prefix}/users", json=payload)
            assert response.status_code == 422, payload


class TestReadUsers:
    """Tests for GET /api/v1/users and /api/v1/users/{id}."""

    def test_get_user(self, test_client: TestClient, api_v1_prefix: str, john, auth_headers):
        response = test_client.get(
            f"{api_v1_prefix}/users/{john['id']}", headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json() == john

    def test_get_unknown_user(
        self, test_client: TestClient, api_v1_prefix: str, auth_headers
    ):
        user_id = uuid4()

        response = test_client.get(f"{api_v1_prefix}/users/{user_id}", headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {
            "detail": f"User with id {user_id} not found.",
            "code": "NOT_FOUND",
        }

    def test_get_requires_token(self, test_client: TestClient, api_v1_prefix: str, john):
        response = test_client.get(f"{api_v1_prefix}/users/{john['id']}")

        assert response.status_code == 401

    def test_list_users(
        self, test_client: TestClient, api_v1_prefix: str, john, jane, auth_headers
    ):
        response = test_client.get(f"{api_v1_prefix}/users", headers=auth_headers)

        assert response.status_code == 200
        users = response.json()
        assert {u["email"] for u in users} == {"john@test.com", "jane@test.com"}
        assert all("password_hash" not in u for u in users)

    def test_list_requires_token(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.get(f"{api_v1_prefix}/users")

        assert response.status_code == 401


class TestUpdateUser:
    """Tests for PUT /api/v1/users/{id}."""

    def test_update_success(
        self, test_client: TestClient, api_v1_prefix: str, john, auth_headers
    ):
        payload = {
            "name": "Johnny Doe",
            "email": "johnny@test.com",
            "password": "new_password",
            "gender": "neutral",
        }

        response = test_client.put(
            f"{api_v1_prefix}/users/{john['id']}", json=payload, headers=auth_headers
        )

        assert response.status_code == 204
        assert response.content == b""

        fetched = test_client.get(
            f"{api_v1_prefix}/users/{john['id']}", headers=auth_headers
        ).json()
        assert fetched["id"] == john["id"]
        assert fetched["name"] == "Johnny Doe"
        assert fetched["email"] == "johnny@test.com"
        assert fetched["gender"] == "neutral"
        assert fetched["created_at"] == john["created_at"]
        assert _parse(fetched["updated_at"]) > _parse(john["updated_at"])

    def test_update_changes_password(
        self, test_client: TestClient, api_v1_prefix: str, john, auth_headers
    ):
        test_client.put(
            f"{api_v1_prefix}/users/{john['id']}",
            json={**JOHN, "password": "new_password"},
            headers=auth_headers,
        )

        old = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": JOHN["email"], "password": JOHN["password"]},
        )
        new = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": JOHN["email"], "password": "new_password"},
        )

        assert old.status_code == 401
        assert new.status_code == 200

    def test_update_to_own_email(
        self, test_client: TestClient, api_v1_prefix: str, john, auth_headers
    ):
        response = test_client.put(
            f"{api_v1_prefix}/users/{john['id']}",
            json={**JOHN, "name": "John Q. Doe"},
            headers=auth_headers,
        )

        assert response.status_code == 204

    def test_update_to_other_users_email(
        self, test_client: TestClient, api_v1_prefix: str, john, jane, auth_headers
    ):
        response = test_client.put(
            f"{api_v1_prefix}/users/{john['id']}",
            json={**JOHN, "email": JANE["email"]},
            headers=auth_headers,
        )

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_EMAIL"

        fetched = test_client.get(
            f"{api_v1_prefix}/users/{john['id']}", headers=auth_headers
        ).json()
        assert fetched["email"] == JOHN["email"]

    def test_update_unknown_user(
        self, test_client: TestClient, api_v1_prefix: str, auth_headers
    ):
        response = test_client.put(
            f"{api_v1_prefix}/users/{uuid4()}", json=JANE, headers=auth_headers
        )

        assert response.status_code == 404

    def test_update_requires_token(self, test_client: TestClient, api_v1_prefix: str, john):
        response = test_client.put(f"{api_v1_prefix}/users/{john['id']}", json=JOHN)

        assert response.status_code == 401


class TestDeleteUser:
    """Tests for DELETE /api/v1/users/{id}."""

    def test_delete_then_get(
        self, test_client: TestClient, api_v1_prefix: str, john, jane, auth_headers
    ):
        response = test_client.delete(
            f"{api_v1_prefix}/users/{jane['id']}", headers=auth_headers
        )

        assert response.status_code == 204

        fetched = test_client.get(
            f"{api_v1_prefix}/users/{jane['id']}", headers=auth_headers
        )
        assert fetched.status_code == 404

    def test_delete_unknown_user(
        self, test_client: TestClient, api_v1_prefix: str, auth_headers
    ):
        response = test_client.delete(
            f"{api_v1_prefix}/users/{uuid4()}", headers=auth_headers
        )

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    def test_delete_requires_token(self, test_client: TestClient, api_v1_prefix: str, john):
        response = test_client.delete(f"{api_v1_prefix}/users/{john['id']}")

        assert response.status_code == 401
