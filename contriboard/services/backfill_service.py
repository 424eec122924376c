"""One-off maintenance passes over legacy profile data."""
import json
import logging

from sqlalchemy.exc import SQLAlchemyError

from contriboard.models.profile import Profile
from contriboard.services.contribution_service import upsert_daily_contributions
from contriboard.utils.exceptions import DataAccessError, ServiceError

logger = logging.getLogger(__name__)


def backfill_daily_contributions(session):
    """Copy every legacy ``contributions_data`` series into daily rows.

    One upsert per user; a failing user is recorded and the run goes on.
    """
    try:
        profiles = (
            session.query(Profile.id, Profile.github_username, Profile.contributions_data)
            .filter(Profile.contributions_data.isnot(None))
            .order_by(Profile.created_at.asc(), Profile.id.asc())
            .all()
        )
    except SQLAlchemyError as exc:
        session.rollback()
        raise DataAccessError("Failed to fetch profiles") from exc

    logger.info("Found %d profiles with contributions_data", len(profiles))

    migrated = failed = skipped = 0
    errors = []
    for user_id, username, series in profiles:
        if not series:
            logger.info("Skipping %s - no contributions data", username)
            skipped += 1
            continue

        try:
            upsert_daily_contributions(session, user_id, series)
        except ServiceError as exc:
            failed += 1
            errors.append({"user_id": user_id, "username": username, "error": exc.message})
            logger.error("Failed to migrate contributions for %s: %s", username, exc.message)
            continue

        migrated += 1
        logger.info("Migrated %d days for %s", len(series), username)

    return {
        "migrated": migrated,
        "failed": failed,
        "skipped": skipped,
        "total": len(profiles),
        "errors": errors,
    }


def normalize_legacy_website_urls(session):
    """Move JSON arrays stored in ``website_url`` into ``other_urls``.

    Older rows kept every URL as a JSON string in ``website_url``; after this
    pass ``website_url`` holds the first one. Returns the number of rows fixed.
    """
    try:
        profiles = session.query(Profile).filter(Profile.website_url.like("[%")).all()
    except SQLAlchemyError as exc:
        session.rollback()
        raise DataAccessError("Failed to fetch profiles") from exc

    fixed = 0
    for profile in profiles:
        try:
            urls = json.loads(profile.website_url)
        except ValueError:
            logger.warning("Profile %s has an unparseable website_url, left as is", profile.id)
            continue
        if not isinstance(urls, list):
            continue

        urls = [u for u in urls if isinstance(u, str) and u]
        profile.other_urls = urls
        profile.website_url = urls[0] if urls else None
        fixed += 1

    try:
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        raise DataAccessError("Failed to normalize website urls") from exc

    logger.info("Normalized website_url on %d profiles", fixed)
    return fixed
