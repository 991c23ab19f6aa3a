"""Generated and professional-written recommendations."""

BASE = "/api/v1/recommendations"


def _user_id(client, headers):
    return client.get("/api/v1/auth/me", headers=headers).json()["id"]


def _client_rec(**overrides):
    body = {"type": "nutrition", "title": "More protein at breakfast", "description": "Add 20 g of protein.",
            "priority": "high"}
    body.update(overrides)
    return body


class TestGenerate:
    def test_generate_from_empty_history(self, client, auth_headers):
        response = client.post(f"{BASE}/generate", params={"as_of": "2026-03-12"}, headers=auth_headers)
        assert response.status_code == 201
        recs = response.json()

        training = [r for r in recs if r["type"] == "training"]
        recovery = [r for r in recs if r["type"] == "recovery"]
        assert len(training) == 10
        assert "Increase chest volume" in {r["title"] for r in training}
        assert all(r["priority"] == "medium" for r in training)
        assert [r["title"] for r in recovery] == ["Digital curfew"]
        assert all(r["expires_at"] is not None for r in recs)

    def test_open_recommendations_are_not_duplicated(self, client, auth_headers):
        first = client.post(f"{BASE}/generate", params={"as_of": "2026-03-12"}, headers=auth_headers).json()
        second = client.post(f"{BASE}/generate", params={"as_of": "2026-03-12"}, headers=auth_headers).json()
        assert len(first) == 11
        assert second == []
        assert len(client.get(BASE, headers=auth_headers).json()) == 11

    def test_dismissed_recommendation_comes_back(self, client, auth_headers):
        recs = client.post(f"{BASE}/generate", params={"as_of": "2026-03-12"}, headers=auth_headers).json()
        curfew = next(r for r in recs if r["title"] == "Digital curfew")
        assert client.delete(f"{BASE}/{curfew['id']}", headers=auth_headers).status_code == 204

        again = client.post(f"{BASE}/generate", params={"as_of": "2026-03-12"}, headers=auth_headers).json()
        assert [r["title"] for r in again] == ["Digital curfew"]

    def test_filter_by_type(self, client, auth_headers):
        client.post(f"{BASE}/generate", params={"as_of": "2026-03-12"}, headers=auth_headers)
        recovery = client.get(BASE, params={"type": "recovery"}, headers=auth_headers).json()
        assert len(recovery) == 1


class TestProfessional:
    def test_write_and_implement(self, client, auth_headers, professional_headers):
        client_id = _user_id(client, auth_headers)

        response = client.post(f"{BASE}/clients/{client_id}", json=_client_rec(), headers=professional_headers)
        assert response.status_code == 201
        rec = response.json()
        assert rec["user_id"] == client_id
        assert rec["expires_at"] is not None

        own = client.get(BASE, headers=auth_headers).json()
        assert [r["title"] for r in own] == ["More protein at breakfast"]

        response = client.post(f"{BASE}/{rec['id']}/implement", json={"result": "Better satiety"},
                               headers=professional_headers)
        assert response.status_code == 200
        body = response.json()
        assert body["implemented"] is True
        assert body["implemented_by"] == _user_id(client, professional_headers)

        again = client.post(f"{BASE}/{rec['id']}/implement", json={"result": "Again"},
                            headers=professional_headers)
        assert again.status_code == 409

    def test_expired_hidden_from_client_but_visible_to_professional(self, client, auth_headers,
                                                                    professional_headers):
        client_id = _user_id(client, auth_headers)
        client.post(f"{BASE}/clients/{client_id}", json=_client_rec(expires_at="2020-01-01T00:00:00"),
                    headers=professional_headers)

        assert client.get(BASE, headers=auth_headers).json() == []
        assert len(client.get(BASE, params={"include_expired": True}, headers=auth_headers).json()) == 1
        assert len(client.get(f"{BASE}/clients/{client_id}", headers=professional_headers).json()) == 1

    def test_unknown_client(self, client, professional_headers):
        response = client.post(f"{BASE}/clients/999", json=_client_rec(), headers=professional_headers)
        assert response.status_code == 404

    def test_regular_users_are_rejected(self, client, auth_headers):
        client_id = _user_id(client, auth_headers)
        assert client.post(f"{BASE}/clients/{client_id}", json=_client_rec(),
                           headers=auth_headers).status_code == 403
        assert client.get(f"{BASE}/clients/{client_id}", headers=auth_headers).status_code == 403

    def test_recommendations_are_private(self, client, register):
        ana = register("ana@routinize.io")
        bo = register("bo@routinize.io")
        recs = client.post(f"{BASE}/generate", headers=ana).json()
        assert client.get(f"{BASE}/{recs[0]['id']}", headers=bo).status_code == 404
        assert client.delete(f"{BASE}/{recs[0]['id']}", headers=bo).status_code == 404
