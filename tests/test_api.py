import csv
from io import StringIO

import pytest
from httpx import ASGITransport, AsyncClient

from squadstats.api import create_app
from squadstats.persistence import PlayerStore


@pytest.fixture
async def client(store: PlayerStore):
    app = create_app(store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


async def _seed_roster(client: AsyncClient) -> None:
    resp = await client.post(
        "/coaches/c1/players",
        json={"player_id": "a", "name": "A", "email": "a@x.com", "sport": "cricket"},
    )
    assert resp.status_code == 201
    resp = await client.post(
        "/coaches/c1/players",
        json={"player_id": "b", "name": "Doe, John", "email": "b@x.com", "sport": "football"},
    )
    assert resp.status_code == 201
    for score in (70, 80):
        resp = await client.post("/players/a/matches", json={"score": score})
        assert resp.status_code == 200


def _registration(**overrides) -> dict:
    payload = {
        "name": "Jane Doe",
        "email": "jane@x.com",
        "password": "secret1",
        "confirm_password": "secret1",
        "role": "player",
        "sport": "cricket",
    }
    payload.update(overrides)
    return payload


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_roster_and_match_entry(client: AsyncClient):
    await _seed_roster(client)

    resp = await client.get("/coaches/c1/players")
    assert resp.status_code == 200
    players = resp.json()["players"]
    assert [player["player_id"] for player in players] == ["a", "b"]
    assert players[0]["match_count"] == 2
    assert players[0]["average_score"] == 75
    assert players[0]["current_score"] == 80


@pytest.mark.anyio
async def test_match_for_unknown_player(client: AsyncClient):
    resp = await client.post("/players/ghost/matches", json={"score": 50})
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_summary_endpoint(client: AsyncClient):
    await _seed_roster(client)

    resp = await client.get("/coaches/c1/summary")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_players"] == 2
    assert body["total_matches"] == 2
    assert body["average_score"] == 75
    assert body["top_performer"]["name"] == "A"


@pytest.mark.anyio
async def test_summary_for_empty_roster(client: AsyncClient):
    resp = await client.get("/coaches/nobody/summary")
    assert resp.json() == {
        "total_players": 0,
        "average_score": 0.0,
        "total_matches": 0,
        "top_performer": None,
    }


@pytest.mark.anyio
async def test_report_export(client: AsyncClient):
    await _seed_roster(client)

    resp = await client.get(
        "/coaches/c1/report.csv",
        params={"coach_name": "Coach Carla", "report_date": "2026-10-16"},
    )

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    assert resp.headers["content-disposition"] == "attachment; filename=team-report-2026-10-16.csv"
    rows = list(csv.reader(StringIO(resp.text)))
    assert rows[1] == ["Coach Name", "Coach Carla"]
    assert rows[8] == ["Top Performer", "A"]
    assert rows[12] == ["A", "a@x.com", "cricket", "80", "Excellent", "2", "75"]
    assert rows[13] == ["Doe, John", "b@x.com", "football", "0", "Needs Improvement", "0", "0"]
    assert '"Doe, John"' in resp.text


@pytest.mark.anyio
async def test_register_accepts_valid_candidate(client: AsyncClient):
    resp = await client.post("/register", json=_registration())
    assert resp.status_code == 201
    assert resp.json()["user_id"]


@pytest.mark.anyio
async def test_register_reports_field_errors(client: AsyncClient):
    resp = await client.post(
        "/register",
        json=_registration(name="A", email="bad", password="123", confirm_password="1234", sport=""),
    )

    assert resp.status_code == 422
    assert set(resp.json()["errors"]) == {"name", "email", "password", "confirm_password", "sport"}


@pytest.mark.anyio
async def test_register_coach_ignores_sport(client: AsyncClient):
    resp = await client.post("/register", json=_registration(role="coach", sport=""))
    assert resp.status_code == 201


@pytest.mark.anyio
async def test_register_unknown_role_is_unset(client: AsyncClient):
    resp = await client.post("/register", json=_registration(role="admin"))
    assert resp.status_code == 422
    assert resp.json()["errors"] == {"role": "Please select your role"}


@pytest.mark.anyio
async def test_register_duplicate_email(client: AsyncClient):
    first = await client.post("/register", json=_registration())
    assert first.status_code == 201

    resp = await client.post("/register", json=_registration())
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Email already registered"
