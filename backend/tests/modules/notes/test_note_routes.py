"""
Tests for note API endpoints.
"""

import uuid

import pytest


@pytest.fixture
def alice(signup, auth_headers):
    return auth_headers(signup("alice@example.com"))


@pytest.fixture
def bob(signup, auth_headers):
    return auth_headers(signup("bob@example.com"))


def _create(client, headers, title="Biology", content="Cells divide"):
    response = client.post("/api/notes", json={"title": title, "content": content}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestNotes:
    def test_create_and_list(self, client, alice):
        created = _create(client, alice)

        listed = client.get("/api/notes", headers=alice).json()

        assert listed == [created]
        assert created["content"] == "Cells divide"

    @pytest.mark.parametrize("body", [{"title": "Biology"}, {"content": "Cells"}])
    def test_missing_required_fields(self, client, alice, body):
        response = client.post("/api/notes", json=body, headers=alice)
        assert response.status_code == 400
        assert response.json() == {"message": "Please add all required fields (title, content)"}

    def test_update_own_note(self, client, alice):
        created = _create(client, alice)
        response = client.put(
            f"/api/notes/{created['id']}", json={"content": "Mitosis"}, headers=alice
        )
        assert response.status_code == 200
        assert response.json()["content"] == "Mitosis"
        assert response.json()["title"] == "Biology"

    @pytest.mark.parametrize("field", ["title", "content"])
    def test_field_cannot_be_cleared(self, client, alice, field):
        created = _create(client, alice)

        response = client.put(f"/api/notes/{created['id']}", json={field: None}, headers=alice)

        assert response.status_code == 400
        assert f"{field} cannot be null" in response.json()["message"]
        assert client.get("/api/notes", headers=alice).json() == [created]

    def test_other_users_note(self, client, alice, bob):
        created = _create(client, alice)

        update = client.put(f"/api/notes/{created['id']}", json={"title": "x"}, headers=bob)
        delete = client.delete(f"/api/notes/{created['id']}", headers=bob)

        assert update.status_code == 403
        assert delete.status_code == 403
        assert delete.json() == {"message": "Not authorized to delete this note"}
        assert client.get("/api/notes", headers=bob).json() == []

    def test_delete(self, client, alice):
        created = _create(client, alice)

        response = client.delete(f"/api/notes/{created['id']}", headers=alice)

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], "message": "Note deleted"}
        assert client.get("/api/notes", headers=alice).json() == []

    def test_unknown_note(self, client, alice):
        response = client.delete(f"/api/notes/{uuid.uuid4()}", headers=alice)
        assert response.status_code == 404
        assert response.json() == {"message": "Note not found"}


class TestLegacyNotes:
    def test_lists_by_user_id(self, legacy_client):
        session = legacy_client.post(
            "/api/auth/signup", json={"email": "a@b.com", "pin": "1234"}
        ).json()
        headers = {"Authorization": f"Bearer {session['token']}"}
        legacy_client.post("/api/notes", json={"title": "T", "content": "C"}, headers=headers)

        response = legacy_client.get("/api/legacy/notes", params={"userId": session["id"]})

        assert response.status_code == 200
        assert [n["title"] for n in response.json()] == ["T"]
