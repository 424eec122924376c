"""Durable per-user, per-day contribution counts.

Every operation takes the SQLAlchemy session explicitly; route handlers pass
``db.session``.
"""
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError

from contriboard.models.daily_contribution import DailyContribution
from contriboard.models.profile import Profile
from contriboard.utils.dates import parse_iso_date
from contriboard.utils.exceptions import DataAccessError, ValidationError

logger = logging.getLogger(__name__)

_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


@dataclass(frozen=True)
class ContributionRow:
    user_id: str
    date: date
    count: int
    github_username: str
    display_username: str | None
    avatar_url: str | None
    website_url: str | None

    @property
    def display_identity(self):
        return self.display_username or self.github_username


def _dialect_insert(session):
    dialect = session.get_bind().dialect.name
    try:
        return _INSERTS[dialect]
    except KeyError:
        raise DataAccessError(
            "Upserts are not supported on this database",
            details={"dialect": dialect},
        )


def _coerce_count(day, count):
    if count is None or count == 0:
        return 0
    if isinstance(count, int) and not isinstance(count, bool):
        return count
    if isinstance(count, float) and count.is_integer():
        return int(count)
    raise ValidationError(
        "Contribution counts must be integers",
        details={"date": day, "count": str(count)},
    )


def normalize_series(series, user_id=None):
    """Validated ``{date: count}`` copy of an upstream series."""
    if not isinstance(series, Mapping):
        raise ValidationError(
            "Contributions must map dates to counts",
            details={"user_id": user_id, "type": type(series).__name__},
        )
    return {
        parse_iso_date(day, "date"): _coerce_count(day, count)
        for day, count in series.items()
    }


def upsert_daily_contributions(session, user_id, series):
    """Write-or-replace one row per ``(user_id, date)`` in ``series``.

    The whole series goes out as a single ``INSERT ... ON CONFLICT DO UPDATE``
    statement so it is applied entirely or not at all. The commit also covers
    anything the caller flushed beforehand. Returns the number of rows
    written; an empty series is a no-op.
    """
    rows = [
        {
            "user_id": user_id,
            "date": day,
            "count": count,
            "updated_at": datetime.utcnow(),
        }
        for day, count in normalize_series(series, user_id).items()
    ]

    if not rows:
        logger.warning("No contributions to upsert for user %s", user_id)
        return 0

    insert = _dialect_insert(session)
    stmt = insert(DailyContribution).values(rows)
    stmt = stmt.on_conflict_do_update(
        index_elements=["user_id", "date"],
        set_={
            "count": stmt.excluded["count"],
            "updated_at": stmt.excluded["updated_at"],
        },
    )

    try:
        session.execute(stmt)
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Error upserting daily contributions for user %s: %s", user_id, exc)
        raise DataAccessError(
            "Failed to upsert daily contributions",
            details={"user_id": user_id},
        ) from exc

    logger.info("Upserted %d daily contributions for user %s", len(rows), user_id)
    return len(rows)


def query_range(session, start_date, end_date):
    """Stored rows with ``start_date <= date <= end_date`` joined with profiles.

    Sorted by ascending date, then user id.
    """
    start = parse_iso_date(start_date, "startDate")
    end = parse_iso_date(end_date, "endDate")
    if end < start:
        raise ValidationError(
            "endDate must not be before startDate",
            details={"startDate": start.isoformat(), "endDate": end.isoformat()},
        )

    q = (
        session.query(
            DailyContribution.user_id,
            DailyContribution.date,
            DailyContribution.count,
            Profile.github_username,
            Profile.display_username,
            Profile.avatar_url,
            Profile.website_url,
        )
        .join(Profile, Profile.id == DailyContribution.user_id)
        .filter(DailyContribution.date >= start, DailyContribution.date <= end)
        .order_by(DailyContribution.date.asc(), DailyContribution.user_id.asc())
    )

    try:
        results = q.all()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Error querying contributions %s..%s: %s", start, end, exc)
        raise DataAccessError("Failed to query contributions") from exc

    # unpacked positionally: Row.count is the tuple method, not the column
    return [
        ContributionRow(
            user_id=user_id,
            date=day,
            count=int(count or 0),
            github_username=github_username,
            display_username=display_username,
            avatar_url=avatar_url,
            website_url=website_url,
        )
        for user_id, day, count, github_username, display_username, avatar_url, website_url in results
    ]
