import logging

from flask import Blueprint, request
from flask_jwt_extended import jwt_required, get_jwt_identity
from marshmallow import ValidationError as SchemaValidationError

from contriboard.extensions import db
from contriboard.schemas.profile_schema import ProfileUpdateSchema
from contriboard.services.profile_service import get_profile_by_github_id, update_profile
from contriboard.utils.exceptions import ValidationError
from contriboard.utils.response_formatter import success_response

logger = logging.getLogger(__name__)

bp = Blueprint("profiles", __name__, url_prefix="/api/v1/users")

profile_update_schema = ProfileUpdateSchema()

@bp.route("/<github_id>", methods=["GET"])
def get_profile(github_id):
    profile = get_profile_by_github_id(db.session, github_id)
    return success_response({"profile": profile.to_dict()})


@bp.route("/<github_id>", methods=["PATCH"])
@jwt_required()
def patch_profile(github_id):
    uid = get_jwt_identity()
    try:
        changes = profile_update_schema.load(request.get_json(silent=True) or {})
    except SchemaValidationError as err:
        raise ValidationError("Invalid profile update", details=err.messages)

    profile = update_profile(db.session, uid, github_id, changes)
    logger.info("Profile %s updated fields %s", uid, sorted(changes))
    return success_response({"profile": profile.to_dict()})
