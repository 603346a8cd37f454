import pytest

from squadstats.models import PlayerRecord
from squadstats.persistence import PlayerStore


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def store(tmp_path) -> PlayerStore:
    return PlayerStore(tmp_path / "squadstats.sqlite")


@pytest.fixture
def sample_roster() -> list[PlayerRecord]:
    return [
        PlayerRecord(
            player_id="a",
            name="A",
            email="a@x.com",
            sport="cricket",
            current_score=85,
            match_count=2,
            total_score=150,
            average_score=75,
        ),
        PlayerRecord(
            player_id="b",
            name="B",
            email="b@x.com",
            sport="football",
            match_count=0,
            total_score=0,
            average_score=0,
        ),
    ]
