import os

os.environ["ARENA_LOG_FILE"] = ""

from fastapi.testclient import TestClient

from api.app import app

client = TestClient(app)


def _start(config=None):
    response = client.post("/start", json={"config": config})
    assert response.status_code == 200
    return response.json()


def test_status_without_match():
    client.post("/lobby")
    assert client.get("/status").json() == {"active": False}


def test_full_turn_over_http():
    body = _start()
    assert body["phase_text"] == "Turn 1 • Player 1 is planning"
    assert body["affordances"]["A"]["attack"] is True
    assert body["affordances"]["B"]["attack"] is False

    body = client.post("/select", json={"side": "A", "kind": "ATTACK"}).json()
    assert body["applied"] is True
    body = client.post("/confirm", json={"side": "A"}).json()
    assert body["both_confirmed"] is False

    body = client.post("/select", json={"side": "B", "kind": "MOVE"}).json()
    assert body["applied"] is True
    assert sorted(body["valid_moves"]["B"]) == [[3, 1], [4, 0], [4, 2], [5, 1]]
    body = client.post("/move-target", json={"side": "B", "x": 4, "y": 0}).json()
    assert body["applied"] is True
    body = client.post("/confirm", json={"side": "B"}).json()
    assert body["both_confirmed"] is True
    assert body["ready_to_resolve"] is True

    frame = client.post("/resolve").json()
    assert frame["logs"] == [
        "Player 2 moved to (5, 1)",
        "Player 1 fired into the void - target not in line of fire",
    ]
    assert frame["outcome"]["result"] == "IN_PROGRESS"
    assert frame["match"]["turn"] == 2

    status = client.get("/status").json()
    assert status["active"] is True
    assert status["turn"] == 2


def test_noop_planning_is_reported_not_raised():
    _start()

    body = client.post("/select", json={"side": "B", "kind": "ATTACK"}).json()

    assert body["applied"] is False
    assert body["error_code"] == "NOT_ACTIVE_SIDE"


def test_resolve_before_confirm_conflicts():
    _start()

    response = client.post("/resolve")

    assert response.status_code == 409


def test_bad_payloads_are_rejected():
    _start()

    assert client.post("/select", json={"side": "C", "kind": "ATTACK"}).status_code == 422
    assert client.post("/select", json={"side": "A", "kind": "FLY"}).status_code == 422
    assert client.post("/start", json={"config": {"health": 0}}).status_code == 422
    assert client.post("/start", json={"config": {"health": "x"}}).status_code == 422
    assert client.post("/start", json={"config": {"names": "Ann"}}).status_code == 422
    assert client.post("/start", json={"config": {"start_positions": {"A": [1, 1, 1]}}}).status_code == 422
    assert client.post("/start", json={"config": {"shields": {"C": 1}}}).status_code == 422


def test_lobby_ends_the_match():
    _start({"names": {"A": "Ann"}})

    assert client.post("/lobby").json() == {"success": True}
    assert client.get("/state").status_code == 400
    assert client.post("/lobby").status_code == 400


def test_start_after_lobby_begins_a_fresh_match():
    _start()
    client.post("/select", json={"side": "A", "kind": "RELOAD"})
    client.post("/confirm", json={"side": "A"})
    client.post("/lobby")

    body = _start({"names": {"B": "Bo"}, "start_positions": {"B": [5, 2]}})

    assert body["match"]["turn"] == 1
    assert body["match"]["combatants"][0]["confirmed"] is False
    assert body["match"]["combatants"][1]["name"] == "Bo"
    assert body["match"]["combatants"][1]["pos"] == [5, 2]


def test_no_ui_route_is_served():
    assert client.get("/").status_code == 404
