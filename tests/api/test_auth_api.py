"""Registration, login and the health endpoints."""

PASSWORD = "s3cret-pass"


class TestAuth:
    def test_register_and_me(self, client, auth_headers):
        response = client.get("/api/v1/auth/me", headers=auth_headers)
        assert response.status_code == 200
        body = response.json()
        assert body["email"] == "ana@routinize.io"
        assert body["is_superuser"] is False
        assert "hashed_password" not in body

    def test_duplicate_email(self, client, auth_headers):
        response = client.post("/api/v1/auth/register",
                               json={"email": "ana@routinize.io", "password": PASSWORD})
        assert response.status_code == 400

    def test_email_is_case_insensitive(self, client, auth_headers):
        duplicate = client.post("/api/v1/auth/register", json={"email": "Ana@Routinize.io", "password": PASSWORD})
        assert duplicate.status_code == 400

        response = client.post("/api/v1/auth/token", json={"email": "ANA@routinize.io", "password": PASSWORD})
        assert response.status_code == 200

    def test_stored_email_is_lowercased(self, client):
        response = client.post("/api/v1/auth/register", json={"email": "Bo@Routinize.io", "password": PASSWORD})
        assert response.status_code == 201
        assert response.json()["email"] == "bo@routinize.io"

    def test_short_password(self, client):
        response = client.post("/api/v1/auth/register", json={"email": "bo@routinize.io", "password": "short"})
        assert response.status_code == 422

    def test_wrong_password(self, client, auth_headers):
        response = client.post("/api/v1/auth/token", json={"email": "ana@routinize.io", "password": "wrong-pass"})
        assert response.status_code == 401

    def test_form_login(self, client, auth_headers):
        response = client.post("/api/v1/auth/login", data={"username": "ana@routinize.io", "password": PASSWORD})
        assert response.status_code == 200
        assert response.json()["token_type"] == "bearer"

    def test_requires_token(self, client):
        assert client.get("/api/v1/sleep/entries").status_code == 401

    def test_invalid_token(self, client):
        response = client.get("/api/v1/sleep/entries", headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == 401

    def test_professional_flag(self, client, professional_headers):
        assert client.get("/api/v1/auth/me", headers=professional_headers).json()["is_superuser"] is True


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
