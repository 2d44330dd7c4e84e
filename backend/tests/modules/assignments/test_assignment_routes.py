"""
Tests for assignment API endpoints.
"""

import uuid

import pytest


@pytest.fixture
def alice(signup, auth_headers):
    return auth_headers(signup("alice@example.com"))


@pytest.fixture
def bob(signup, auth_headers):
    return auth_headers(signup("bob@example.com"))


def _create(client, headers, **fields):
    body = {"title": "Essay", "subject": "English", **fields}
    response = client.post("/api/assignments", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateAssignment:
    def test_create_with_defaults(self, client, alice):
        data = _create(client, alice)

        assert data["title"] == "Essay"
        assert data["status"] == "pending"
        assert data["priority"] == "medium"
        assert data["dueDate"] is None
        assert {"id", "userId", "createdAt", "updatedAt"} <= set(data)

    def test_create_with_all_fields(self, client, alice):
        data = _create(
            client, alice,
            dueDate="2026-03-05", priority="high", description="Five pages",
        )
        assert data["dueDate"] == "2026-03-05"
        assert data["priority"] == "high"
        assert data["description"] == "Five pages"

    @pytest.mark.parametrize("body", [{"title": "Essay"}, {"subject": "English"}, {}])
    def test_missing_required_fields(self, client, alice, body):
        response = client.post("/api/assignments", json=body, headers=alice)
        assert response.status_code == 400
        assert response.json() == {"message": "Please add all required fields (title, subject)"}

    def test_invalid_priority(self, client, alice):
        response = client.post(
            "/api/assignments",
            json={"title": "Essay", "subject": "English", "priority": "urgent"},
            headers=alice,
        )
        assert response.status_code == 400

    def test_owner_comes_from_token(self, client, alice, bob):
        bob_id = client.get("/api/users/me", headers=bob).json()["id"]
        data = _create(client, alice, userId=bob_id)
        assert data["userId"] != bob_id


class TestListAssignments:
    def test_only_own_newest_first(self, client, alice, bob):
        first = _create(client, alice, title="First")
        _create(client, bob, title="Bob's")
        second = _create(client, alice, title="Second")

        response = client.get("/api/assignments", headers=alice)

        assert response.status_code == 200
        assert [a["id"] for a in response.json()] == [second["id"], first["id"]]

    def test_empty(self, client, alice):
        assert client.get("/api/assignments", headers=alice).json() == []


class TestUpdateAssignment:
    def test_partial_update(self, client, alice):
        created = _create(client, alice, description="Draft")

        response = client.put(
            f"/api/assignments/{created['id']}",
            json={"status": "completed"},
            headers=alice,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "completed"
        assert data["title"] == "Essay"
        assert data["description"] == "Draft"

    def test_other_users_assignment_is_forbidden(self, client, alice, bob):
        created = _create(client, alice)

        response = client.put(
            f"/api/assignments/{created['id']}",
            json={"title": "Hacked"},
            headers=bob,
        )

        assert response.status_code == 403
        assert response.json() == {"message": "Not authorized to update this assignment"}
        titles = [a["title"] for a in client.get("/api/assignments", headers=alice).json()]
        assert titles == ["Essay"]

    def test_unknown_id(self, client, alice):
        response = client.put(f"/api/assignments/{uuid.uuid4()}", json={"title": "x"}, headers=alice)
        assert response.status_code == 404
        assert response.json() == {"message": "Assignment not found"}

    def test_malformed_id(self, client, alice):
        response = client.put("/api/assignments/garbage", json={"title": "x"}, headers=alice)
        assert response.status_code == 404

    def test_empty_title_rejected(self, client, alice):
        created = _create(client, alice)
        response = client.put(f"/api/assignments/{created['id']}", json={"title": ""}, headers=alice)
        assert response.status_code == 400

    @pytest.mark.parametrize("field", ["title", "subject", "status", "priority"])
    def test_required_field_cannot_be_cleared(self, client, alice, field):
        created = _create(client, alice)

        response = client.put(f"/api/assignments/{created['id']}", json={field: None}, headers=alice)

        assert response.status_code == 400
        assert f"{field} cannot be null" in response.json()["message"]
        listed = client.get("/api/assignments", headers=alice).json()
        assert listed[0][field] == created[field]

    def test_optional_fields_can_be_cleared(self, client, alice):
        created = _create(client, alice, dueDate="2026-03-05", description="Draft")

        response = client.put(
            f"/api/assignments/{created['id']}",
            json={"dueDate": None, "description": None},
            headers=alice,
        )

        assert response.status_code == 200
        assert response.json()["dueDate"] is None
        assert response.json()["description"] is None


class TestDeleteAssignment:
    def test_alice_bob_scenario(self, client, alice, bob):
        """B's delete is rejected and A's survives; A's delete works once, then 404."""
        created = _create(client, alice)
        url = f"/api/assignments/{created['id']}"

        rejected = client.delete(url, headers=bob)
        assert rejected.status_code == 403
        assert len(client.get("/api/assignments", headers=alice).json()) == 1

        deleted = client.delete(url, headers=alice)
        assert deleted.status_code == 200
        assert deleted.json() == {"id": created["id"], "message": "Assignment deleted"}

        again = client.delete(url, headers=alice)
        assert again.status_code == 404
        assert again.json() == {"message": "Assignment not found"}

    def test_requires_auth(self, client, alice):
        created = _create(client, alice)
        assert client.delete(f"/api/assignments/{created['id']}").status_code == 401


class TestLegacyAssignments:
    def test_lists_by_user_id(self, legacy_client):
        session = legacy_client.post(
            "/api/auth/signup", json={"email": "a@b.com", "pin": "1234"}
        ).json()
        headers = {"Authorization": f"Bearer {session['token']}"}
        legacy_client.post(
            "/api/assignments", json={"title": "Essay", "subject": "English"}, headers=headers
        )

        response = legacy_client.get(f"/api/legacy/assignments?userId={session['id']}")

        assert response.status_code == 200
        assert [a["title"] for a in response.json()] == ["Essay"]

    def test_missing_user_id(self, legacy_client):
        assert legacy_client.get("/api/legacy/assignments").status_code == 400
