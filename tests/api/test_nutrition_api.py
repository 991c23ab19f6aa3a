"""Nutrition diary: food entries, daily goals and stats."""

BASE = "/api/v1/nutrition"


def _entry(date="2026-06-10", meal_type="breakfast", food_name="Avena", calories=300, protein=20, carbs=30,
           fat=10, **overrides):
    body = {"date": date, "meal_type": meal_type, "food_name": food_name, "calories": calories,
            "protein": protein, "carbs": carbs, "fat": fat}
    body.update(overrides)
    return body


def _goal(calories=1800, protein=120, carbs=180, fat=60):
    return {"calories": calories, "protein": protein, "carbs": carbs, "fat": fat}


class TestEntries:
    def test_crud(self, client, auth_headers):
        response = client.post(f"{BASE}/entries", json=_entry(quantity=80, unit="g"), headers=auth_headers)
        assert response.status_code == 201
        entry = response.json()
        assert entry["meal_type"] == "breakfast"
        assert entry["food_id"] is None

        response = client.put(f"{BASE}/entries/{entry['id']}", json={"calories": 320}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["calories"] == 320
        assert response.json()["food_name"] == "Avena"

        assert client.delete(f"{BASE}/entries/{entry['id']}", headers=auth_headers).status_code == 204
        assert client.get(f"{BASE}/entries/{entry['id']}", headers=auth_headers).status_code == 404

    def test_list_filters_and_order(self, client, auth_headers):
        for date, meal in (("2026-06-08", "lunch"), ("2026-06-10", "breakfast"), ("2026-06-10", "dinner"),
                           ("2026-06-09", "lunch")):
            client.post(f"{BASE}/entries", json=_entry(date=date, meal_type=meal), headers=auth_headers)

        dates = [e["date"] for e in client.get(f"{BASE}/entries", headers=auth_headers).json()]
        assert dates == ["2026-06-10", "2026-06-10", "2026-06-09", "2026-06-08"]

        day = client.get(f"{BASE}/entries", params={"date": "2026-06-10"}, headers=auth_headers).json()
        assert {e["meal_type"] for e in day} == {"breakfast", "dinner"}

        lunches = client.get(f"{BASE}/entries", params={"meal_type": "lunch"}, headers=auth_headers).json()
        assert [e["date"] for e in lunches] == ["2026-06-09", "2026-06-08"]

        ranged = client.get(f"{BASE}/entries", params={"start": "2026-06-09", "end": "2026-06-09"},
                            headers=auth_headers).json()
        assert len(ranged) == 1

        assert len(client.get(f"{BASE}/entries", params={"limit": 2}, headers=auth_headers).json()) == 2

    def test_bad_range(self, client, auth_headers):
        response = client.get(f"{BASE}/entries", params={"start": "2026-06-10", "end": "2026-06-01"},
                              headers=auth_headers)
        assert response.status_code == 400

    def test_validation(self, client, auth_headers):
        assert client.post(f"{BASE}/entries", json=_entry(calories=-5), headers=auth_headers).status_code == 422
        assert client.post(f"{BASE}/entries", json=_entry(meal_type="brunch"),
                           headers=auth_headers).status_code == 422

    def test_linked_food_must_exist(self, client, auth_headers):
        response = client.post(f"{BASE}/entries", json=_entry(food_id=999), headers=auth_headers)
        assert response.status_code == 404

    def test_deleting_a_food_detaches_entries(self, client, auth_headers, professional_headers):
        food = client.post("/api/v1/foods", json={
            "name": "Granola", "category": "Cereales", "calories": 450, "protein": 10, "carbs": 60, "fat": 18,
        }, headers=professional_headers).json()
        entry = client.post(f"{BASE}/entries", json=_entry(food_name="Granola", food_id=food["id"]),
                            headers=auth_headers).json()
        assert entry["food_id"] == food["id"]

        assert client.delete(f"/api/v1/foods/{food['id']}", headers=professional_headers).status_code == 204
        assert client.get(f"{BASE}/entries/{entry['id']}", headers=auth_headers).json()["food_id"] is None

    def test_entries_are_private(self, client, register):
        ana = register("ana@routinize.io")
        bo = register("bo@routinize.io")
        entry = client.post(f"{BASE}/entries", json=_entry(), headers=ana).json()
        assert client.get(f"{BASE}/entries/{entry['id']}", headers=bo).status_code == 404
        assert client.put(f"{BASE}/entries/{entry['id']}", json={"fat": 1}, headers=bo).status_code == 404
        assert client.delete(f"{BASE}/entries/{entry['id']}", headers=bo).status_code == 404
        assert client.get(f"{BASE}/entries", headers=bo).json() == []


class TestGoals:
    def test_no_goal(self, client, auth_headers):
        assert client.get(f"{BASE}/goals", headers=auth_headers).status_code == 404

    def test_new_goal_replaces_active_one(self, client, auth_headers):
        first = client.post(f"{BASE}/goals", json=_goal(), headers=auth_headers)
        assert first.status_code == 201
        second = client.post(f"{BASE}/goals", json=_goal(calories=2200), headers=auth_headers).json()

        active = client.get(f"{BASE}/goals", headers=auth_headers).json()
        assert active["id"] == second["id"]
        assert active["calories"] == 2200

        history = client.get(f"{BASE}/goals/history", headers=auth_headers).json()
        assert [g["is_active"] for g in history] == [True, False]

    def test_calories_must_be_positive(self, client, auth_headers):
        assert client.post(f"{BASE}/goals", json=_goal(calories=0), headers=auth_headers).status_code == 422


class TestNutritionStats:
    def test_empty_day(self, client, auth_headers):
        body = client.get(f"{BASE}/stats", params={"date": "2026-06-10"}, headers=auth_headers).json()
        assert body["totals"]["entries"] == 0
        assert body["macro_percentages"] == {"protein": 0.0, "carbs": 0.0, "fat": 0.0}
        assert body["trend"] == []
        assert body["goal"] is None

    def test_daily_stats(self, client, auth_headers):
        client.post(f"{BASE}/entries", json=_entry(), headers=auth_headers)
        client.post(f"{BASE}/entries", json=_entry(meal_type="lunch", calories=600, protein=40, carbs=60, fat=20),
                    headers=auth_headers)
        for date in ("2026-06-05", "2026-06-03", "2026-06-12"):
            client.post(f"{BASE}/entries", json=_entry(date=date), headers=auth_headers)
        client.post(f"{BASE}/goals", json=_goal(), headers=auth_headers)

        body = client.get(f"{BASE}/stats", params={"date": "2026-06-10"}, headers=auth_headers).json()
        assert body["date"] == "2026-06-10"
        assert body["totals"] == {"calories": 900, "protein": 60, "carbs": 90, "fat": 30, "entries": 2}
        assert body["meal_totals"]["lunch"]["calories"] == 600
        assert body["meal_totals"]["dinner"]["count"] == 0
        assert body["macro_percentages"] == {"protein": 27.6, "carbs": 41.4, "fat": 31.0}
        # Window is the 7 days ending on the target date
        assert [p["date"] for p in body["trend"]] == ["2026-06-05", "2026-06-10"]
        assert body["goal_progress"] == {"calories": 50.0, "protein": 50.0, "carbs": 50.0, "fat": 50.0}
