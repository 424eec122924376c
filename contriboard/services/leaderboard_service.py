from dataclasses import dataclass, field
from datetime import date

from contriboard.services.contribution_service import query_range
from contriboard.utils.dates import date_range, parse_iso_date, trailing_week
from contriboard.utils.exceptions import ValidationError

DEFAULT_MAX_DAYS = 366


@dataclass
class LeaderboardEntry:
    user_id: str
    github_username: str
    display_username: str | None = None
    avatar_url: str | None = None
    website_url: str | None = None
    total_in_range: int = 0
    per_day_breakdown: dict = field(default_factory=dict)

    @property
    def display_name(self):
        return self.display_username or self.github_username

    def to_dict(self):
        return {
            "user_id": self.user_id,
            "github_username": self.github_username,
            "display_username": self.display_username,
            "display_name": self.display_name,
            "avatar_url": self.avatar_url,
            "website_url": self.website_url,
            "total_in_range": self.total_in_range,
            "per_day_breakdown": dict(self.per_day_breakdown),
        }


@dataclass
class Leaderboard:
    dates: list
    users: list

    def to_dict(self):
        return {
            "dates": list(self.dates),
            "users": [entry.to_dict() for entry in self.users],
        }


def resolve_range(start_date=None, end_date=None, today=None, max_days=DEFAULT_MAX_DAYS):
    """Return ``(start, end)``; with no bounds, the week before ``today``."""
    if start_date is None and end_date is None:
        return trailing_week(today or date.today())

    if start_date is None or end_date is None:
        raise ValidationError(
            "startDate and endDate must be given together",
            details={"startDate": start_date, "endDate": end_date},
        )

    start = parse_iso_date(start_date, "startDate")
    end = parse_iso_date(end_date, "endDate")
    if end < start:
        raise ValidationError(
            "endDate must not be before startDate",
            details={"startDate": start.isoformat(), "endDate": end.isoformat()},
        )
    if max_days and (end - start).days + 1 > max_days:
        raise ValidationError(
            f"Date range may span at most {max_days} days",
            details={"max_days": max_days},
        )
    return start, end


def build_leaderboard(session, start_date=None, end_date=None, today=None, max_days=DEFAULT_MAX_DAYS):
    start, end = resolve_range(start_date, end_date, today=today, max_days=max_days)
    dates = date_range(start, end)

    entries = {}
    for row in query_range(session, start, end):
        entry = entries.get(row.user_id)
        if entry is None:
            entry = entries[row.user_id] = LeaderboardEntry(
                user_id=row.user_id,
                github_username=row.github_username,
                display_username=row.display_username,
                avatar_url=row.avatar_url,
                website_url=row.website_url,
                per_day_breakdown=dict.fromkeys(dates, 0),
            )
        entry.per_day_breakdown[row.date.isoformat()] = row.count
        entry.total_in_range += row.count

    # ties broken by user id so output is reproducible
    ranked = sorted(
        (entry for entry in entries.values() if entry.total_in_range > 0),
        key=lambda entry: (-entry.total_in_range, entry.user_id),
    )
    return Leaderboard(dates=dates, users=ranked)
