"""Sleep entries, profile, score and goals through the HTTP API."""

import pytest

BASE = "/api/v1/sleep"


@pytest.fixture
def night():
    return {"bed_time": "23:00", "wake_time": "07:00", "quality": 4}


class TestSleepEntries:
    def test_upsert_creates_then_merges(self, client, auth_headers, night):
        response = client.put(f"{BASE}/entries/2026-03-01", json=night, headers=auth_headers)
        assert response.status_code == 201
        assert response.json()["duration_min"] == 480

        response = client.put(f"{BASE}/entries/2026-03-01",
                              json={**night, "quality": 2, "deep_sleep_min": 90}, headers=auth_headers)
        assert response.status_code == 200
        body = response.json()
        assert body["quality"] == 2
        assert body["deep_sleep_min"] == 90

        assert len(client.get(f"{BASE}/entries", headers=auth_headers).json()) == 1

    def test_duration_across_midnight_and_explicit(self, client, auth_headers):
        response = client.put(f"{BASE}/entries/2026-03-02",
                              json={"bed_time": "00:30", "wake_time": "07:00", "quality": 3},
                              headers=auth_headers)
        assert response.json()["duration_min"] == 390

        response = client.put(f"{BASE}/entries/2026-03-03",
                              json={"bed_time": "23:00", "wake_time": "07:00", "quality": 3, "duration_min": 450},
                              headers=auth_headers)
        assert response.json()["duration_min"] == 450

    def test_list_is_most_recent_first_and_filtered(self, client, auth_headers, night):
        for day in ("01", "02", "03"):
            client.put(f"{BASE}/entries/2026-03-{day}", json=night, headers=auth_headers)

        dates = [e["date"] for e in client.get(f"{BASE}/entries", headers=auth_headers).json()]
        assert dates == ["2026-03-03", "2026-03-02", "2026-03-01"]

        response = client.get(f"{BASE}/entries", params={"start": "2026-03-02", "limit": 1}, headers=auth_headers)
        assert [e["date"] for e in response.json()] == ["2026-03-03"]

    def test_get_and_delete(self, client, auth_headers, night):
        client.put(f"{BASE}/entries/2026-03-01", json=night, headers=auth_headers)
        assert client.get(f"{BASE}/entries/2026-03-01", headers=auth_headers).status_code == 200
        assert client.delete(f"{BASE}/entries/2026-03-01", headers=auth_headers).status_code == 204
        assert client.get(f"{BASE}/entries/2026-03-01", headers=auth_headers).status_code == 404
        assert client.delete(f"{BASE}/entries/2026-03-01", headers=auth_headers).status_code == 404

    def test_quality_out_of_range(self, client, auth_headers, night):
        response = client.put(f"{BASE}/entries/2026-03-01", json={**night, "quality": 6}, headers=auth_headers)
        assert response.status_code == 422

    def test_entries_are_private(self, client, register, night):
        ana = register("ana@routinize.io")
        bo = register("bo@routinize.io")
        client.put(f"{BASE}/entries/2026-03-01", json=night, headers=ana)
        assert client.get(f"{BASE}/entries", headers=bo).json() == []
        assert client.get(f"{BASE}/entries/2026-03-01", headers=bo).status_code == 404


class TestSleepStats:
    def test_empty(self, client, auth_headers):
        body = client.get(f"{BASE}/stats", headers=auth_headers).json()
        assert body["total_entries"] == 0
        assert body["sleep_score"] == 0

    def test_score(self, client, auth_headers):
        client.put(f"{BASE}/entries/2026-03-01", json={"bed_time": "23:00", "wake_time": "07:00", "quality": 4},
                   headers=auth_headers)
        client.put(f"{BASE}/entries/2026-03-02", json={"bed_time": "00:00", "wake_time": "07:00", "quality": 4,
                                                        "duration_min": 480}, headers=auth_headers)
        body = client.get(f"{BASE}/stats", headers=auth_headers).json()
        assert body["total_entries"] == 2
        assert body["bedtime_consistency_min"] == 30.0
        assert body["sleep_score"] == 87
        assert [p["date"] for p in body["trend"]] == ["2026-03-01", "2026-03-02"]


class TestSleepProfile:
    def test_default_profile(self, client, auth_headers):
        body = client.get(f"{BASE}/assessment", headers=auth_headers).json()
        assert body["is_default"] is True
        assert body["disruptors"] == ["screen_time"]

    def test_assessment_drives_score_and_recommendations(self, client, auth_headers):
        response = client.post(f"{BASE}/assessment", json={
            "average_sleep_hours": 8, "sleep_latency_min": 5, "sleep_quality": "very_good",
            "wake_up_frequency": "never", "morning_feel": "very_rested", "light_level": "bright",
            "sleep_goal": "fall_asleep_faster",
        }, headers=auth_headers)
        assert response.status_code == 201

        profile = client.get(f"{BASE}/assessment", headers=auth_headers).json()
        assert profile["is_default"] is False
        assert profile["light_level"] == "bright"

        score = client.get(f"{BASE}/score", headers=auth_headers).json()
        # 0.25*100 + 0.3*100 + 0.2*70 + 0.25*100
        assert score["overall"] == 94
        assert score["consistency_source"] == "default"

        titles = [r["title"] for r in client.get(f"{BASE}/recommendations", headers=auth_headers).json()]
        assert titles == ["Darken your bedroom", "Try 4-7-8 breathing"]

    def test_score_uses_recent_nights(self, client, auth_headers):
        for day in ("01", "02"):
            client.put(f"{BASE}/entries/2026-03-{day}", json={"bed_time": "23:00", "wake_time": "07:00",
                                                               "quality": 4}, headers=auth_headers)
        score = client.get(f"{BASE}/score", params={"as_of": "2026-03-05"}, headers=auth_headers).json()
        assert score["consistency_source"] == "entries"
        assert score["consistency"] == 100.0

        score = client.get(f"{BASE}/score", params={"as_of": "2026-04-30"}, headers=auth_headers).json()
        assert score["consistency_source"] == "default"

    def test_invalid_answer(self, client, auth_headers):
        response = client.post(f"{BASE}/assessment", json={"sleep_quality": "amazing"}, headers=auth_headers)
        assert response.status_code == 422


class TestSleepGoal:
    def test_missing_goal(self, client, auth_headers):
        assert client.get(f"{BASE}/goal", headers=auth_headers).status_code == 404

    def test_set_and_replace(self, client, auth_headers):
        response = client.put(f"{BASE}/goal", json={"target_duration_min": 450, "target_bed_time": "22:30",
                                                    "target_wake_time": "06:00"}, headers=auth_headers)
        assert response.status_code == 200
        first_id = response.json()["id"]

        client.put(f"{BASE}/goal", json={"target_duration_min": 480}, headers=auth_headers)
        body = client.get(f"{BASE}/goal", headers=auth_headers).json()
        assert body["id"] == first_id
        assert body["target_duration_min"] == 480
        assert body["target_bed_time"] == "23:00:00"
