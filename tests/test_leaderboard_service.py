"""Tests for the leaderboard aggregation over the contribution store."""

from __future__ import annotations

from datetime import date
from unittest.mock import patch

import pytest

from contriboard.services import leaderboard_service
from contriboard.services.contribution_service import upsert_daily_contributions
from contriboard.services.leaderboard_service import build_leaderboard, resolve_range
from contriboard.utils.exceptions import DataAccessError, ValidationError


def test_end_to_end_single_user(session, make_profile):
    make_profile("U1", "octocat")
    upsert_daily_contributions(session, "U1", {"2024-03-10": 3, "2024-03-11": 0, "2024-03-12": 7})

    board = build_leaderboard(session, "2024-03-10", "2024-03-12")

    assert board.dates == ["2024-03-10", "2024-03-11", "2024-03-12"]
    assert len(board.users) == 1
    entry = board.users[0]
    assert entry.user_id == "U1"
    assert entry.total_in_range == 10
    assert entry.per_day_breakdown == {"2024-03-10": 3, "2024-03-11": 0, "2024-03-12": 7}


def test_sparse_days_are_densified(session, make_profile):
    make_profile("u1", "octocat")
    upsert_daily_contributions(session, "u1", {"2024-03-01": 2, "2024-03-05": 4})

    board = build_leaderboard(session, "2024-03-01", "2024-03-05")

    assert board.users[0].per_day_breakdown == {
        "2024-03-01": 2,
        "2024-03-02": 0,
        "2024-03-03": 0,
        "2024-03-04": 0,
        "2024-03-05": 4,
    }


def test_zero_activity_users_are_dropped(session, make_profile):
    make_profile("active", "octocat")
    make_profile("idle", "hubot")
    make_profile("absent", "ghost")
    upsert_daily_contributions(session, "active", {"2024-03-10": 1})
    upsert_daily_contributions(session, "idle", {"2024-03-10": 0, "2024-03-11": 0})

    board = build_leaderboard(session, "2024-03-10", "2024-03-11")

    assert [e.user_id for e in board.users] == ["active"]


def test_ranked_by_total_descending(session, make_profile):
    for user_id, total in (("a", 10), ("b", 30), ("c", 5)):
        make_profile(user_id, f"user-{user_id}")
        upsert_daily_contributions(session, user_id, {"2024-03-10": total})

    board = build_leaderboard(session, "2024-03-10", "2024-03-10")

    assert [e.total_in_range for e in board.users] == [30, 10, 5]
    assert [e.user_id for e in board.users] == ["b", "a", "c"]


def test_ties_broken_by_user_id(session, make_profile):
    for user_id in ("zed", "amy", "max"):
        make_profile(user_id, user_id)
        upsert_daily_contributions(session, user_id, {"2024-03-10": 4})

    board = build_leaderboard(session, "2024-03-10", "2024-03-10")

    assert [e.user_id for e in board.users] == ["amy", "max", "zed"]


def test_rows_outside_range_do_not_count(session, make_profile):
    make_profile("u1", "octocat")
    upsert_daily_contributions(session, "u1", {"2024-03-09": 50, "2024-03-10": 1, "2024-03-13": 50})

    board = build_leaderboard(session, "2024-03-10", "2024-03-12")

    assert board.users[0].total_in_range == 1


def test_default_range_is_week_before_today(session):
    board = build_leaderboard(session, today=date(2024, 3, 15))

    assert board.dates == [
        "2024-03-08",
        "2024-03-09",
        "2024-03-10",
        "2024-03-11",
        "2024-03-12",
        "2024-03-13",
        "2024-03-14",
    ]


def test_default_range_excludes_today(session, make_profile):
    make_profile("u1", "octocat")
    upsert_daily_contributions(session, "u1", {"2024-03-15": 9, "2024-03-14": 2})

    board = build_leaderboard(session, today=date(2024, 3, 15))

    assert board.users[0].total_in_range == 2
    assert "2024-03-15" not in board.users[0].per_day_breakdown


def test_empty_store_gives_dates_and_no_users(session):
    board = build_leaderboard(session, "2024-03-10", "2024-03-12")

    assert board.users == []
    assert board.to_dict() == {"dates": ["2024-03-10", "2024-03-11", "2024-03-12"], "users": []}


def test_entry_serialization(session, make_profile):
    make_profile("u1", "octocat", display_username="The Octocat", website_url="https://octo.example")
    upsert_daily_contributions(session, "u1", {"2024-03-10": 2})

    payload = build_leaderboard(session, "2024-03-10", "2024-03-10").to_dict()

    assert payload["users"] == [
        {
            "user_id": "u1",
            "github_username": "octocat",
            "display_username": "The Octocat",
            "display_name": "The Octocat",
            "avatar_url": None,
            "website_url": "https://octo.example",
            "total_in_range": 2,
            "per_day_breakdown": {"2024-03-10": 2},
        }
    ]


def test_store_errors_propagate(session):
    error = DataAccessError("Failed to query contributions")
    with patch.object(leaderboard_service, "query_range", side_effect=error):
        with pytest.raises(DataAccessError) as excinfo:
            build_leaderboard(session, "2024-03-10", "2024-03-12")

    assert excinfo.value is error


class TestResolveRange:
    def test_explicit_range(self):
        assert resolve_range("2024-03-10", "2024-03-12") == (date(2024, 3, 10), date(2024, 3, 12))

    def test_only_one_bound_rejected(self):
        with pytest.raises(ValidationError):
            resolve_range("2024-03-10", None)

    def test_reversed_range_rejected(self):
        with pytest.raises(ValidationError):
            resolve_range("2024-03-12", "2024-03-10")

    def test_range_longer_than_limit_rejected(self):
        with pytest.raises(ValidationError) as excinfo:
            resolve_range("2024-01-01", "2024-01-31", max_days=30)

        assert excinfo.value.details == {"max_days": 30}

    def test_default_crosses_month_boundary(self):
        assert resolve_range(today=date(2024, 3, 3)) == (date(2024, 2, 25), date(2024, 3, 2))
