import pytest
from fastapi.testclient import TestClient

from engine.game import GameEngine
from web.app import app


@pytest.fixture
def client():
    app.state.engine = GameEngine()
    with TestClient(app) as c:
        yield c


def cell(body, x, y):
    return body["cells"][3 * y + x]


def test_newgame_returns_empty_board(client):
    resp = client.get("/newgame")
    assert resp.status_code == 200
    body = resp.json()
    assert body["winner"] == "no winner yet"
    assert body["error"] is None
    assert body["cells"] == [
        {"text": "", "playable": True, "x": x, "y": y} for y in range(3) for x in range(3)
    ]


def test_play_marks_cell(client):
    client.get("/newgame")
    body = client.get("/play", params={"x": 0, "y": 0}).json()
    assert cell(body, 0, 0) == {"text": "X", "playable": False, "x": 0, "y": 0}
    assert body["winner"] == "no winner yet"
    assert body["error"] is None
    assert app.state.engine.current_turn.name == "SECOND"


def test_row_win_then_undo(client):
    client.get("/newgame")
    for x, y in [(0, 0), (0, 1), (1, 0), (0, 2)]:
        client.get("/play", params={"x": x, "y": y})
    body = client.get("/play", params={"x": 2, "y": 0}).json()
    assert body["winner"] == "X"
    assert all(not c["playable"] for c in body["cells"])

    body = client.get("/undo").json()
    assert body["winner"] == "no winner yet"
    assert body["error"] is None
    marked = {(c["x"], c["y"]) for c in body["cells"] if c["text"]}
    assert marked == {(0, 0), (0, 1), (1, 0), (0, 2)}
    assert app.state.engine.current_turn.name == "FIRST"


@pytest.mark.parametrize(
    "params",
    [
        {"x": 5, "y": 5},
        {"x": "a", "y": "1"},
        {"x": "1"},
        {},
        {"x": "-1", "y": "0"},
        {"x": "0_1", "y": "0"},
        {"x": "\uff11", "y": "0"},
        {"x": " 1 ", "y": "0"},
        {"x": "+1", "y": "0"},
        {"x": "01", "y": "0"},
    ],
)
def test_bad_coordinates_return_unchanged_state(client, params):
    client.get("/play", params={"x": 1, "y": 1})
    before = client.get("/state").json()
    resp = client.get("/play", params=params)
    assert resp.status_code == 200
    body = resp.json()
    assert body["error"] == "OutOfRange"
    assert body["cells"] == before["cells"]
    assert body["winner"] == before["winner"]


def test_occupied_cell_is_reported(client):
    client.get("/play", params={"x": 1, "y": 1})
    body = client.get("/play", params={"x": 1, "y": 1}).json()
    assert body["error"] == "CellOccupied"
    assert cell(body, 1, 1)["text"] == "X"


def test_play_after_game_over_is_reported(client):
    for x, y in [(0, 0), (0, 1), (1, 0), (0, 2), (2, 0)]:
        client.get("/play", params={"x": x, "y": y})
    body = client.get("/play", params={"x": 2, "y": 2}).json()
    assert body["error"] == "GameAlreadyOver"
    assert cell(body, 2, 2)["text"] == ""


def test_undo_with_no_history_is_reported(client):
    body = client.get("/undo").json()
    assert body["error"] == "NothingToUndo"
    assert all(c["playable"] for c in body["cells"])


def test_state_does_not_mutate(client):
    client.get("/play", params={"x": 2, "y": 2})
    first = client.get("/state").json()
    second = client.get("/state").json()
    assert first == second
    assert len(app.state.engine.history) == 1


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
