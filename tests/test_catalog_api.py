def test_muscle_groups(client):
    groups = client.get("/api/v1/catalog/muscle-groups").json()
    assert groups[0] == "Abdominals"
    assert groups[-1] == "Other"
    assert "Lower back" in groups


def test_exercise_options_merged(client, catalog, custom_store):
    catalog.by_group = {"Biceps": ["Curl", "Hammer Curl"]}
    custom_store.by_group = {"Biceps": ["21s"]}
    r = client.get("/api/v1/catalog/exercises", params={"muscle_group": "Biceps", "pinned": "Hammer Curl"})
    assert r.status_code == 200, r.text
    assert r.json() == {
        "muscle_group": "Biceps",
        "options": [
            {"name": "Hammer Curl", "source": "catalog"},
            {"name": "Curl", "source": "catalog"},
            {"name": "21s", "source": "custom"},
        ],
    }


def test_exercise_options_other_is_empty(client, catalog):
    r = client.get("/api/v1/catalog/exercises", params={"muscle_group": "Other"})
    assert r.json()["options"] == []
    assert catalog.calls == []


def test_exercise_options_catalog_down(client, catalog, custom_store):
    catalog.failing = {"Chest"}
    custom_store.by_group = {"Chest": ["Svend Press"]}
    r = client.get("/api/v1/catalog/exercises", params={"muscle_group": "Chest", "pinned": "Bench Press"})
    assert r.status_code == 200
    assert r.json()["options"] == [
        {"name": "Bench Press", "source": "pinned"},
        {"name": "Svend Press", "source": "custom"},
    ]


def test_create_custom_exercise_is_idempotent(client, custom_store):
    payload = {"muscle_group": "Biceps", "exercise_name": " 21s "}
    first = client.post("/api/v1/catalog/custom-exercises", json=payload)
    assert first.status_code == 201, first.text
    assert first.json() == {"muscle_group": "Biceps", "exercise_name": "21s", "created": True}

    again = client.post("/api/v1/catalog/custom-exercises", json=payload)
    assert again.status_code == 200
    assert again.json()["created"] is False

    assert client.get("/api/v1/catalog/custom-exercises").json() == {"Biceps": ["21s"]}


def test_create_custom_exercise_unknown_group(client):
    r = client.post("/api/v1/catalog/custom-exercises", json={"muscle_group": "Wings", "exercise_name": "Flap"})
    assert r.status_code == 400


def test_create_custom_exercise_blank_name(client):
    r = client.post("/api/v1/catalog/custom-exercises", json={"muscle_group": "Chest", "exercise_name": "   "})
    assert r.status_code == 400


def test_prefill_from_session(client, catalog, custom_store):
    catalog.by_group = {"Chest": ["Bench Press", "Dips"]}
    custom_store.by_group = {"Chest": ["Svend Press"]}
    session = {
        "date": "2024-01-01T18:00:00.000Z",
        "exercises": [
            {"muscleGroup": "Chest", "exercise": "Floor Press", "sets": [{"reps": 8, "weight": 80}]},
            {"muscleGroup": "Other", "exercise": "Sled Push", "sets": [{"reps": 1, "weight": 100}]},
        ],
    }
    r = client.post("/api/v1/catalog/prefill", json=session)
    assert r.status_code == 200, r.text
    rows = r.json()
    assert [o["name"] for o in rows[0]["options"]] == ["Floor Press", "Bench Press", "Dips", "Svend Press"]
    assert rows[0]["sets"] == [{"reps": 8, "weight": 80.0}]
    assert rows[1]["exercise_name"] == "Sled Push"
    assert rows[1]["options"] == []


def test_health(client):
    body = client.get("/api/v1/health").json()
    assert body["status"] == "ok"
    assert "exercise_catalog_configured" in body
