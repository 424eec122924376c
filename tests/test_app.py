from __future__ import annotations

import pytest

from contriboard.config import TestingConfig
from contriboard.main import create_app
from contriboard.utils.exceptions import ConfigurationError


def test_missing_database_url_is_fatal(monkeypatch):
    monkeypatch.setattr(TestingConfig, "SQLALCHEMY_DATABASE_URI", None)

    with pytest.raises(ConfigurationError) as excinfo:
        create_app("testing")

    assert excinfo.value.details == {"missing": ["SQLALCHEMY_DATABASE_URI"]}


def test_unknown_config_name():
    with pytest.raises(ConfigurationError):
        create_app("staging")


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/api/v1/nope")

    assert resp.status_code == 404
    assert resp.get_json() == {
        "error": {"code": "NOT_FOUND", "message": "Resource not found", "details": {}}
    }
