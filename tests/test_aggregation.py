import logging

import pytest

from squadstats.models import PlayerRecord, TeamSummary
from squadstats.stats import aggregate, round2


def _player(player_id: str, **fields) -> PlayerRecord:
    return PlayerRecord(player_id=player_id, name=fields.pop("name", player_id.upper()), **fields)


def test_empty_roster_yields_zero_summary():
    assert aggregate([]) == TeamSummary(total_players=0, average_score=0, total_matches=0, top_performer=None)


def test_example_roster(sample_roster):
    summary = aggregate(sample_roster)

    assert summary.total_players == 2
    assert summary.total_matches == 2
    assert summary.average_score == 75
    assert summary.top_performer is not None
    assert summary.top_performer.name == "A"


def test_team_average_is_weighted_by_matches():
    roster = [
        _player("a", match_count=1, total_score=90, average_score=90),
        _player("b", match_count=3, total_score=150, average_score=50),
    ]

    summary = aggregate(roster)

    assert summary.average_score == 60
    assert summary.top_performer.player_id == "a"


def test_team_average_rounds_to_two_places():
    roster = [_player("a", match_count=3, total_score=200, average_score=66.67)]
    assert aggregate(roster).average_score == 66.67


def test_no_matches_means_no_top_performer():
    roster = [
        _player("a", match_count=0, current_score=99, average_score=95),
        _player("b", current_score=88, average_score=91),
    ]

    summary = aggregate(roster)

    assert summary.total_players == 2
    assert summary.total_matches == 0
    assert summary.average_score == 0
    assert summary.top_performer is None


def test_tie_keeps_first_record():
    roster = [
        _player("first", match_count=1, total_score=80, average_score=80),
        _player("second", match_count=4, total_score=320, average_score=80),
    ]
    assert aggregate(roster).top_performer.player_id == "first"


def test_missing_averages_tie_to_first_qualifying_record():
    roster = [
        _player("idle", match_count=0),
        _player("first", match_count=2, total_score=100),
        _player("second", match_count=1, total_score=70),
    ]
    assert aggregate(roster).top_performer.player_id == "first"


def test_later_strictly_better_record_wins():
    roster = [
        _player("a", match_count=1, average_score=70),
        _player("b", match_count=1, average_score=70.5),
        _player("c", match_count=1, average_score=70.5),
    ]
    assert aggregate(roster).top_performer.player_id == "b"


def test_malformed_numbers_are_coerced_not_rejected(caplog):
    # Partial records are tolerated: bad numerics count as zero.
    with caplog.at_level(logging.WARNING):
        roster = [
            _player("a", match_count="two", total_score="lots", average_score="high"),
            _player("b", match_count=2, total_score=130, average_score=65),
        ]

    summary = aggregate(roster)

    assert summary.total_matches == 2
    assert summary.average_score == 65
    assert summary.top_performer.player_id == "b"
    assert "Invalid number for match_count" in caplog.text


def test_round2_rounds_halves_away_from_zero():
    assert round2(0.125) == 0.13
    assert round2(-0.125) == -0.13
    assert round2(75) == 75
    assert round2(2 / 3) == 0.67


def test_round2_scales_in_float_arithmetic():
    # 201 / 200 is stored just under 1.005, so it rounds down.
    assert round2(201 / 200) == 1.0
    roster = [_player("a", match_count=200, total_score=201)]
    assert aggregate(roster).average_score == 1.0


def test_huge_totals_do_not_raise():
    roster = [_player("a", match_count=1, total_score=1e30, average_score=1e30)]
    assert aggregate(roster).average_score == pytest.approx(1e30)


def test_overflowing_totals_average_to_zero():
    roster = [
        _player("a", match_count=1, total_score=1.7e308),
        _player("b", match_count=1, total_score=1.7e308),
    ]

    summary = aggregate(roster)

    assert summary.total_matches == 2
    assert summary.average_score == 0
    assert summary.top_performer.player_id == "a"


def test_round2_non_finite_values():
    assert round2(float("inf")) == 0
    assert round2(float("-inf")) == 0
    assert round2(float("nan")) == 0
    assert round2(1.7e308) == 1.7e308
