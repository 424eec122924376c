from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from contriboard.models.profile import Profile
from contriboard.services.contribution_service import normalize_series, upsert_daily_contributions
from contriboard.utils.exceptions import DataAccessError, ServiceError

UPDATABLE_FIELDS = ("display_username", "website_url", "other_urls")


def get_profile_by_github_id(session, github_id):
    profile = session.query(Profile).filter_by(github_id=str(github_id)).first()
    if not profile:
        raise ServiceError(code="NOT_FOUND", message="Profile not found", status=404)
    return profile


def update_profile(session, user_id, github_id, changes):
    profile = (
        session.query(Profile)
        .filter_by(github_id=str(github_id), id=user_id)
        .first()
    )
    if not profile:
        raise ServiceError(code="NOT_FOUND", message="Profile not found", status=404)

    for key in UPDATABLE_FIELDS:
        if key in changes:
            setattr(profile, key, changes[key])
    if "other_urls" in changes and profile.other_urls is None:
        profile.other_urls = []

    try:
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        raise DataAccessError("Failed to update profile", details={"user_id": user_id}) from exc
    return profile


def sync_profile_contributions(session, user_id, github_username, series, github_id=None, avatar_url=None):
    """Refresh a profile from the provider and store its daily series.

    The profile changes are only flushed; the daily upsert commits or rolls
    back both together. Returns ``(profile, first_time)``; ``first_time`` is
    true only when this call created the profile row.
    """
    counts = normalize_series(series, user_id)

    profile = session.get(Profile, user_id)
    first_time = profile is None
    if first_time:
        profile = Profile(id=user_id)
        session.add(profile)

    profile.github_username = github_username
    if github_id is not None:
        profile.github_id = str(github_id)
    if avatar_url is not None:
        profile.avatar_url = avatar_url
    profile.total_contributions = sum(counts.values())
    profile.last_updated = datetime.utcnow()

    try:
        session.flush()
    except SQLAlchemyError as exc:
        session.rollback()
        raise DataAccessError("Failed to save profile", details={"user_id": user_id}) from exc

    try:
        written = upsert_daily_contributions(session, user_id, series)
    except ServiceError:
        session.rollback()
        raise
    if not written:
        # empty series: nothing committed the profile yet
        try:
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            raise DataAccessError("Failed to save profile", details={"user_id": user_id}) from exc
    return profile, first_time
