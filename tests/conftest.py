"""Shared fixtures for the test suite."""

import time

import jwt
import pytest
from bs4 import BeautifulSoup

from platapay import create_app, db
from platapay.config import TestingConfig
from platapay.models import Agent, Profile
from platapay.widget import InProcessChannel


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------
@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------
@pytest.fixture
def make_token():
    """Builds a Supabase-style access token signed with the test secret."""
    def _make(user_id="user-1", email="agent@example.com", name=None, expires_in=3600,
              audience="authenticated", secret=TestingConfig.SUPABASE_JWT_SECRET):
        payload = {
            "sub": user_id,
            "email": email,
            "aud": audience,
            "exp": int(time.time()) + expires_in,
            "user_metadata": {"name": name} if name else {},
        }
        return jwt.encode(payload, secret, algorithm="HS256")
    return _make


@pytest.fixture
def auth_headers(make_token):
    def _headers(**kwargs):
        return {"Authorization": f"Bearer {make_token(**kwargs)}"}
    return _headers


@pytest.fixture
def admin_headers(app, auth_headers):
    db.session.add(Profile(user_id="admin-1", email="admin@platapay.test", role="admin"))
    db.session.commit()
    return auth_headers(user_id="admin-1", email="admin@platapay.test")


# ---------------------------------------------------------------------------
# Data
# ---------------------------------------------------------------------------
@pytest.fixture
def application_payload():
    return {
        "name": "Maria Santos",
        "email": "maria@example.com",
        "phone": "+63 912 345 6789",
        "address": "123 Rizal St, Makati",
        "business_name": "Santos Sari-Sari",
        "business_type": "sari-sari",
        "location": {"latitude": 14.5547, "longitude": 121.0244},
    }


@pytest.fixture
def make_agent(app):
    counter = {"n": 0}

    def _make(status="pending", **overrides):
        counter["n"] += 1
        fields = dict(
            application_id=f"APP{counter['n']:05d}",
            name=f"Agent {counter['n']}",
            email=f"agent{counter['n']}@example.com",
            phone="0917",
            address="Somewhere",
            business_name="Store",
            business_type="sari-sari",
            latitude=14.0,
            longitude=121.0,
            status=status,
        )
        fields.update(overrides)
        agent = Agent(**fields)
        db.session.add(agent)
        db.session.commit()
        return agent
    return _make


# ---------------------------------------------------------------------------
# Widget protocol
# ---------------------------------------------------------------------------
@pytest.fixture
def host_channel():
    return InProcessChannel(window_origin="https://partner.example")


@pytest.fixture
def host_page():
    """Parses a host page body into a document."""
    def _parse(body):
        return BeautifulSoup(f"<html><body>{body}</body></html>", "html.parser")
    return _parse
