from flask import Blueprint

from contriboard.extensions import db
from contriboard.schemas.sponsor_schema import SponsorPublicSchema
from contriboard.services.sponsor_service import list_active_sponsors
from contriboard.utils.response_formatter import success_response

bp = Blueprint("sponsors", __name__, url_prefix="/api/v1")

sponsors_schema = SponsorPublicSchema(many=True)

@bp.route("/sponsors", methods=["GET"])
def sponsors():
    return success_response({"sponsors": sponsors_schema.dump(list_active_sponsors(db.session))})
