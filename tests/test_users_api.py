"""
Tests for the /api/users routes.
"""


class TestUsersAPI:
    """Listing, creating and updating users over HTTP."""

    def test_list_starts_empty(self, client):
        response = client.get("/api/users")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_with_non_object_entries_is_empty(self, client, store):
        store.users.path.write_text("[1, 2]", encoding="utf-8")

        response = client.get("/api/users")

        assert response.status_code == 200
        assert response.json() == []

    def test_create_echoes_fields_with_new_id(self, client):
        """A plain signup body comes back verbatim plus a server id, without orders."""
        body = {"email": "a@x.com", "password": "p", "name": "Ann", "role": "buyer"}

        response = client.post("/api/users", json=body)

        assert response.status_code == 200
        data = response.json()
        assert isinstance(data["id"], int)
        assert "orders" not in data
        assert {k: data[k] for k in body} == body

    def test_create_ignores_client_id(self, client):
        response = client.post("/api/users", json={"id": 1, "email": "a@x.com"})
        assert response.json()["id"] != 1

    def test_create_without_body(self, client):
        response = client.post("/api/users")
        assert response.status_code == 200
        assert list(response.json()) == ["id"]

    def test_created_users_are_listed_in_order(self, client):
        client.post("/api/users", json={"email": "a@x.com"})
        client.post("/api/users", json={"email": "b@x.com"})

        emails = [u["email"] for u in client.get("/api/users").json()]
        assert emails == ["a@x.com", "b@x.com"]

    def test_update_merges_body(self, client):
        user = client.post("/api/users", json={"email": "a@x.com", "name": "Ann"}).json()

        response = client.put(f"/api/users/{user['id']}", json={"bio": "painter", "name": "Anna"})

        assert response.status_code == 200
        assert response.json() == {"email": "a@x.com", "name": "Anna", "bio": "painter", "id": user["id"]}
        assert client.get("/api/users").json() == [response.json()]

    def test_update_unknown_user_is_404(self, client, store):
        client.post("/api/users", json={"email": "a@x.com"})
        before = store.users.path.read_bytes()

        response = client.put("/api/users/999999", json={"name": "Ghost"})

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}
        assert store.users.path.read_bytes() == before

    def test_update_non_numeric_id_is_404(self, client):
        response = client.put("/api/users/abc", json={})
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    def test_update_accepts_trailing_garbage_in_id(self, client):
        user = client.post("/api/users", json={"email": "a@x.com"}).json()
        response = client.put(f"/api/users/{user['id']}xyz", json={"name": "Ann"})
        assert response.status_code == 200
        assert response.json()["name"] == "Ann"

    def test_non_object_body_is_rejected(self, client):
        response = client.post("/api/users", json=[1, 2, 3])
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON body"}

    def test_malformed_json_is_rejected(self, client):
        response = client.post(
            "/api/users", content=b"{oops", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
