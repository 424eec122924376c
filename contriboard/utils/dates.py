import re
from datetime import date, timedelta

from contriboard.utils.exceptions import ValidationError

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value, field="date") -> date:
    """Accept a ``date`` or a strict ``YYYY-MM-DD`` string."""
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not ISO_DATE_RE.match(value):
        raise ValidationError(
            f"{field} must be a YYYY-MM-DD date",
            details={"field": field, "value": str(value)},
        )
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationError(
            f"{field} is not a valid calendar date",
            details={"field": field, "value": value},
        )


def date_range(start: date, end: date) -> list[str]:
    """Every calendar day in [start, end], ascending, as ISO strings."""
    days = (end - start).days
    return [(start + timedelta(days=i)).isoformat() for i in range(days + 1)]


def trailing_week(today: date) -> tuple[date, date]:
    # the 7 days before today, today excluded
    return today - timedelta(days=7), today - timedelta(days=1)
