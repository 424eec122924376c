from flask import Blueprint, current_app, jsonify, request
from marshmallow import ValidationError as SchemaValidationError

from contriboard.extensions import db
from contriboard.schemas.leaderboard_schema import StatsQuerySchema
from contriboard.services.leaderboard_service import build_leaderboard
from contriboard.utils.exceptions import ValidationError

bp = Blueprint("leaderboard", __name__, url_prefix="/api/v1")

stats_query_schema = StatsQuerySchema()

@bp.route("/stats", methods=["GET"])
def stats():
    try:
        args = stats_query_schema.load(request.args)
    except SchemaValidationError as err:
        raise ValidationError("Invalid date range", details=err.messages)

    leaderboard = build_leaderboard(
        db.session,
        start_date=args["start_date"],
        end_date=args["end_date"],
        max_days=current_app.config.get("LEADERBOARD_MAX_DAYS"),
    )
    # plain {dates, users} body, no envelope
    return jsonify(leaderboard.to_dict()), 200
