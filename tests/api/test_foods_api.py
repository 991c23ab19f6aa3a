"""Food database browsing, alternatives and professional-only edits."""

from app.routinize.food_catalog import seed_food_catalog

BASE = "/api/v1/foods"


def _find(client, headers, name):
    matches = [f for f in client.get(BASE, params={"q": name}, headers=headers).json() if f["name"] == name]
    assert matches, name
    return matches[0]


def _new_food(**overrides):
    body = {"name": "Seitan", "category": "Proteína vegetal", "calories": 120, "protein": 25, "carbs": 4,
            "fat": 2, "supermarkets": ["Carrefour"]}
    body.update(overrides)
    return body


class TestCatalogSeed:
    def test_seed_is_idempotent(self, session, seeded_foods):
        assert seeded_foods == 30
        assert seed_food_catalog(session) == 0


class TestFoodSearch:
    def test_name_search_is_case_insensitive(self, client, auth_headers, seeded_foods):
        names = [f["name"] for f in client.get(BASE, params={"q": "PECHUGA"}, headers=auth_headers).json()]
        assert names == ["Pechuga de pavo", "Pechuga de pollo"]

    def test_filters(self, client, auth_headers, seeded_foods):
        legumes = client.get(BASE, params={"category": "Legumbres"}, headers=auth_headers).json()
        assert len(legumes) == 3

        galicia = client.get(BASE, params={"region": "Galicia"}, headers=auth_headers).json()
        assert {f["name"] for f in galicia} == {"Merluza", "Sardinas"}

        lidl = client.get(BASE, params={"supermarket": "lidl"}, headers=auth_headers).json()
        assert lidl
        assert all("Lidl" in f["supermarkets"] for f in lidl)
        assert "Pechuga de pollo" in {f["name"] for f in lidl}

    def test_limit(self, client, auth_headers, seeded_foods):
        assert len(client.get(BASE, params={"limit": 5}, headers=auth_headers).json()) == 5

    def test_categories(self, client, auth_headers, seeded_foods):
        categories = client.get(f"{BASE}/categories", headers=auth_headers).json()
        assert "Carnes" in categories
        assert "Pescados" in categories
        assert len(categories) == len(set(categories))


class TestFoodAlternatives:
    def test_ranking(self, client, auth_headers, seeded_foods):
        chicken = _find(client, auth_headers, "Pechuga de pollo")
        body = client.get(f"{BASE}/{chicken['id']}/alternatives", headers=auth_headers).json()

        assert body["original"]["id"] == chicken["id"]
        assert body["sort_by"] == "similarity"
        alternatives = body["alternatives"]
        assert len(alternatives) == 20
        assert chicken["id"] not in {alt["food"]["id"] for alt in alternatives}
        scores = [alt["similarity_score"] for alt in alternatives]
        assert scores == sorted(scores)
        assert alternatives[0]["food"]["name"] == "Merluza"
        assert alternatives[0]["nutritional_match"] == "good"

    def test_query_and_sort(self, client, auth_headers, seeded_foods):
        chicken = _find(client, auth_headers, "Pechuga de pollo")
        body = client.get(f"{BASE}/{chicken['id']}/alternatives",
                          params={"q": "pescados", "sort_by": "calories", "limit": 30},
                          headers=auth_headers).json()
        alternatives = body["alternatives"]
        assert alternatives
        assert all(alt["food"]["category"] == "Pescados" for alt in alternatives)
        diffs = [alt["calories_diff"] for alt in alternatives]
        assert diffs == sorted(diffs)

    def test_invalid_sort(self, client, auth_headers, seeded_foods):
        chicken = _find(client, auth_headers, "Pechuga de pollo")
        response = client.get(f"{BASE}/{chicken['id']}/alternatives", params={"sort_by": "price"},
                              headers=auth_headers)
        assert response.status_code == 422

    def test_missing_food(self, client, auth_headers):
        assert client.get(f"{BASE}/999/alternatives", headers=auth_headers).status_code == 404


class TestFoodEditing:
    def test_regular_user_cannot_write(self, client, auth_headers):
        assert client.post(BASE, json=_new_food(), headers=auth_headers).status_code == 403

    def test_professional_crud(self, client, professional_headers):
        response = client.post(BASE, json=_new_food(external_id="pro-1"), headers=professional_headers)
        assert response.status_code == 201
        food = response.json()
        assert food["serving_unit"] == "g"

        duplicate = client.post(BASE, json=_new_food(external_id="pro-1"), headers=professional_headers)
        assert duplicate.status_code == 409

        response = client.put(f"{BASE}/{food['id']}", json={"protein": 24.5}, headers=professional_headers)
        assert response.status_code == 200
        assert response.json()["protein"] == 24.5
        assert response.json()["name"] == "Seitan"

        assert client.delete(f"{BASE}/{food['id']}", headers=professional_headers).status_code == 204
        assert client.get(f"{BASE}/{food['id']}", headers=professional_headers).status_code == 404

    def test_negative_macros_rejected(self, client, professional_headers):
        response = client.post(BASE, json=_new_food(protein=-1), headers=professional_headers)
        assert response.status_code == 422
