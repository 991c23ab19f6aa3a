"""Emotional journal, mood check-ins, wellness activities and stats."""

import logging

import pytest


def _journal(date, title, content="Long day at work", emotion="calm"):
    return {"date": date, "title": title, "content": content, "emotion": emotion}


class TestJournal:
    def test_crud(self, client, auth_headers):
        response = client.post("/api/v1/journal", json=_journal("2026-05-01", "Monday"), headers=auth_headers)
        assert response.status_code == 201
        entry = response.json()

        response = client.put(f"/api/v1/journal/{entry['id']}", json={"emotion": "grateful"}, headers=auth_headers)
        assert response.json()["emotion"] == "grateful"
        assert response.json()["title"] == "Monday"

        assert client.delete(f"/api/v1/journal/{entry['id']}", headers=auth_headers).status_code == 204
        assert client.get(f"/api/v1/journal/{entry['id']}", headers=auth_headers).status_code == 404

    def test_search_and_order(self, client, auth_headers):
        client.post("/api/v1/journal", json=_journal("2026-05-01", "Gym", "Great workout"), headers=auth_headers)
        client.post("/api/v1/journal", json=_journal("2026-05-03", "Family", "Dinner with parents"),
                    headers=auth_headers)
        client.post("/api/v1/journal", json=_journal("2026-05-02", "Work", "Tough WORKOUT at lunch"),
                    headers=auth_headers)

        titles = [e["title"] for e in client.get("/api/v1/journal", headers=auth_headers).json()]
        assert titles == ["Family", "Work", "Gym"]

        response = client.get("/api/v1/journal", params={"search": "workout", "order": "asc"}, headers=auth_headers)
        assert [e["title"] for e in response.json()] == ["Gym", "Work"]

    def test_unknown_emotion(self, client, auth_headers):
        response = client.post("/api/v1/journal", json=_journal("2026-05-01", "x", emotion="bored"),
                               headers=auth_headers)
        assert response.status_code == 422

    def test_entries_are_private(self, client, register):
        ana = register("ana@routinize.io")
        bo = register("bo@routinize.io")
        entry = client.post("/api/v1/journal", json=_journal("2026-05-01", "Mine"), headers=ana).json()
        assert client.get(f"/api/v1/journal/{entry['id']}", headers=bo).status_code == 404
        assert client.put(f"/api/v1/journal/{entry['id']}", json={"title": "x"}, headers=bo).status_code == 404
        assert client.get("/api/v1/journal", headers=bo).json() == []


class TestMood:
    def test_log_update_and_list(self, client, auth_headers):
        for day, mood in (("01", 3), ("02", 4)):
            response = client.post("/api/v1/wellness/mood", json={
                "date": f"2026-05-{day}", "mood": mood, "energy": 3, "stress": 2, "tags": ["work"],
            }, headers=auth_headers)
            assert response.status_code == 201

        entries = client.get("/api/v1/wellness/mood", headers=auth_headers).json()
        assert [e["date"] for e in entries] == ["2026-05-02", "2026-05-01"]

        response = client.put(f"/api/v1/wellness/mood/{entries[0]['id']}", json={"stress": 5}, headers=auth_headers)
        assert response.json()["stress"] == 5
        assert response.json()["mood"] == 4

        filtered = client.get("/api/v1/wellness/mood", params={"end": "2026-05-01"}, headers=auth_headers).json()
        assert len(filtered) == 1

    def test_scale_bounds(self, client, auth_headers):
        response = client.post("/api/v1/wellness/mood", json={"date": "2026-05-01", "mood": 6, "energy": 3,
                                                               "stress": 2}, headers=auth_headers)
        assert response.status_code == 422


class TestActivities:
    def test_log_filter_and_delete(self, client, auth_headers):
        for name, category in (("Meditation", "mental"), ("Walk", "physical"), ("Breathing", "mental")):
            response = client.post("/api/v1/wellness/activities", json={
                "activity_name": name, "category": category, "date": "2026-05-01", "duration_min": 15,
            }, headers=auth_headers)
            assert response.status_code == 201

        mental = client.get("/api/v1/wellness/activities", params={"category": "mental"},
                            headers=auth_headers).json()
        assert {a["activity_name"] for a in mental} == {"Meditation", "Breathing"}

        assert client.delete(f"/api/v1/wellness/activities/{mental[0]['id']}",
                             headers=auth_headers).status_code == 204
        assert len(client.get("/api/v1/wellness/activities", headers=auth_headers).json()) == 2

    def test_duration_must_be_positive(self, client, auth_headers):
        response = client.post("/api/v1/wellness/activities", json={
            "activity_name": "Nap", "category": "physical", "date": "2026-05-01", "duration_min": 0,
        }, headers=auth_headers)
        assert response.status_code == 422


class TestWellnessLogging:
    @pytest.fixture
    def service_log(self, caplog):
        # The "app" logger does not propagate to the root handler caplog installs.
        logger = logging.getLogger("app.services.wellness_service")
        logger.addHandler(caplog.handler)
        yield caplog
        logger.removeHandler(caplog.handler)

    def test_updates_are_logged(self, client, auth_headers, service_log):
        mood = client.post("/api/v1/wellness/mood", json={"date": "2026-05-01", "mood": 3, "energy": 3,
                                                           "stress": 2}, headers=auth_headers).json()
        activity = client.post("/api/v1/wellness/activities", json={
            "activity_name": "Walk", "category": "physical", "date": "2026-05-01", "duration_min": 20,
        }, headers=auth_headers).json()

        client.put(f"/api/v1/wellness/mood/{mood['id']}", json={"mood": 4}, headers=auth_headers)
        client.put(f"/api/v1/wellness/activities/{activity['id']}", json={"duration_min": 30},
                   headers=auth_headers)

        messages = service_log.messages
        assert any(m.startswith(f"Updated mood entry {mood['id']}") for m in messages)
        assert any(m.startswith(f"Updated activity log {activity['id']}") for m in messages)


class TestWellnessStats:
    def test_empty(self, client, auth_headers):
        assert client.get("/api/v1/wellness/stats", headers=auth_headers).json() == {"mood": None,
                                                                                     "activities": None}

    def test_aggregates(self, client, auth_headers):
        for day, mood in (("01", 2), ("02", 4), ("20", 5)):
            client.post("/api/v1/wellness/mood", json={"date": f"2026-05-{day}", "mood": mood, "energy": 3,
                                                       "stress": 3}, headers=auth_headers)
        client.post("/api/v1/wellness/activities", json={
            "activity_name": "Yoga", "category": "physical", "date": "2026-05-02", "duration_min": 45,
        }, headers=auth_headers)

        body = client.get("/api/v1/wellness/stats", params={"start": "2026-05-01", "end": "2026-05-10"},
                          headers=auth_headers).json()
        assert body["mood"]["total_entries"] == 2
        assert body["mood"]["avg_mood"] == 3.0
        assert [p["date"] for p in body["mood"]["trend"]] == ["2026-05-01", "2026-05-02"]
        assert body["activities"]["total_duration_min"] == 45
        assert body["activities"]["by_category"] == {"physical": 1}

    def test_bad_range(self, client, auth_headers):
        response = client.get("/api/v1/wellness/stats", params={"start": "2026-05-10", "end": "2026-05-01"},
                              headers=auth_headers)
        assert response.status_code == 400
