"""Shared fixtures: an app on in-memory SQLite, its session and client."""

from __future__ import annotations

import pytest
from flask_jwt_extended import create_access_token

from contriboard.extensions import db
from contriboard.main import create_app
from contriboard.models.profile import Profile
from contriboard.models.sponsor import Sponsor


@pytest.fixture()
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def session(app):
    return db.session


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_profile(session):
    """Insert and commit a profile row."""

    def _make(user_id, github_username, **fields):
        fields.setdefault("github_id", f"gh-{user_id}")
        profile = Profile(id=user_id, github_username=github_username, **fields)
        session.add(profile)
        session.commit()
        return profile

    return _make


@pytest.fixture()
def make_sponsor(session):
    def _make(**fields):
        fields.setdefault("email", "billing@example.com")
        sponsor = Sponsor(**fields)
        session.add(sponsor)
        session.commit()
        return sponsor

    return _make


@pytest.fixture()
def auth_headers(app):
    def _headers(user_id):
        token = create_access_token(identity=user_id)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture()
def admin_headers(app):
    return {"Authorization": f"Bearer {app.config['MIGRATION_SECRET']}"}
