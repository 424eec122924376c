import hmac

from flask import current_app, request

from contriboard.utils.exceptions import ConfigurationError, ServiceError


def require_admin_secret():
    """Reject the request unless it carries ``Bearer <MIGRATION_SECRET>``."""
    secret = current_app.config.get("MIGRATION_SECRET")
    if not secret:
        raise ConfigurationError("MIGRATION_SECRET is not configured")

    header = request.headers.get("Authorization", "")
    if not hmac.compare_digest(header.encode(), f"Bearer {secret}".encode()):
        raise ServiceError(code="UNAUTHORIZED", message="Unauthorized", status=401)
