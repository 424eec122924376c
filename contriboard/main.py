import logging
import os

from flask import Flask

from .config import CONFIGS
from .extensions import db, migrate, jwt, ma, cors
from .utils.exceptions import ConfigurationError, ServiceError

REQUIRED_SETTINGS = ("SQLALCHEMY_DATABASE_URI", "JWT_SECRET_KEY")


def create_app(config_name=None):
    app = Flask(__name__, instance_relative_config=False)
    env = config_name or os.getenv("FLASK_ENV", "development")
    if env not in CONFIGS:
        raise ConfigurationError(f"Unknown configuration '{env}'")
    app.config.from_object(CONFIGS[env])

    missing = [key for key in REQUIRED_SETTINGS if not app.config.get(key)]
    if missing:
        raise ConfigurationError(
            "Missing required settings", details={"missing": missing}
        )

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    ma.init_app(app)
    origins = [o.strip() for o in app.config["CORS_ORIGINS"].split(",")]
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": origins}},
        supports_credentials=True,
        allow_headers=["Content-Type", "Authorization"],
        methods=["GET", "POST", "PUT", "PATCH", "OPTIONS"],
    )

    # models must be imported before create_all / migrations see them
    from contriboard.models import daily_contribution, profile, sponsor  # noqa: F401

    # register blueprints
    from contriboard.routes.leaderboard_routes import bp as leaderboard_bp
    from contriboard.routes.profile_routes import bp as profile_bp
    from contriboard.routes.sponsor_routes import bp as sponsor_bp
    from contriboard.routes.admin_routes import bp as admin_bp

    app.register_blueprint(leaderboard_bp)
    app.register_blueprint(profile_bp)
    app.register_blueprint(sponsor_bp)
    app.register_blueprint(admin_bp)

    # error handlers to match required error format
    from contriboard.utils.response_formatter import error_response, service_error_response

    @app.errorhandler(ServiceError)
    def service_error(e):
        return service_error_response(e)

    @app.errorhandler(400)
    def bad_request(e):
        return error_response("BAD_REQUEST", str(e), status=400)

    @app.errorhandler(401)
    def unauthorized(e):
        return error_response("UNAUTHORIZED", str(e), status=401)

    @app.errorhandler(404)
    def not_found(e):
        return error_response("NOT_FOUND", "Resource not found", status=404)

    @app.errorhandler(500)
    def server_error(e):
        return error_response("SERVER_ERROR", "Internal server error", status=500)

    return app
