from datetime import datetime

from flask import Blueprint, request
from marshmallow import ValidationError as SchemaValidationError

from contriboard.extensions import db
from contriboard.schemas.profile_schema import ContributionSyncSchema
from contriboard.services.backfill_service import (
    backfill_daily_contributions,
    normalize_legacy_website_urls,
)
from contriboard.services.profile_service import sync_profile_contributions
from contriboard.utils.auth_utils import require_admin_secret
from contriboard.utils.exceptions import ValidationError
from contriboard.utils.response_formatter import success_response

bp = Blueprint("admin", __name__, url_prefix="/api/v1/admin")

contribution_sync_schema = ContributionSyncSchema()

@bp.before_request
def check_secret():
    require_admin_secret()


@bp.route("/migrate-daily-contributions", methods=["POST"])
def migrate_daily_contributions():
    summary = backfill_daily_contributions(db.session)
    return success_response(
        dict(summary, timestamp=datetime.utcnow().isoformat() + "Z"),
        message=(
            f"Migration completed: {summary['migrated']} profiles migrated, "
            f"{summary['failed']} failed"
        ),
    )


@bp.route("/normalize-website-urls", methods=["POST"])
def normalize_website_urls():
    fixed = normalize_legacy_website_urls(db.session)
    return success_response({"normalized": fixed})


@bp.route("/users/<user_id>/contributions", methods=["PUT"])
def sync_contributions(user_id):
    try:
        data = contribution_sync_schema.load(request.get_json(silent=True) or {})
    except SchemaValidationError as err:
        raise ValidationError("Invalid contribution payload", details=err.messages)

    profile, first_time = sync_profile_contributions(
        db.session,
        user_id,
        data["github_username"],
        data["contributions"],
        github_id=data["github_id"],
        avatar_url=data["avatar_url"],
    )
    return success_response(
        {
            "profile": profile.to_dict(),
            "first_time": first_time,
            "days": len(data["contributions"]),
        },
        status=201 if first_time else 200,
    )
