"""Pytest configuration and fixtures."""

import pytest

from portfolio_builder import create_app
from portfolio_builder.extensions import db


# ============================================================================
# App Fixtures
# ============================================================================

@pytest.fixture
def app():
    """Flask app on an in-memory SQLite database."""
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


# ============================================================================
# Auth Fixtures
# ============================================================================

def register(client, email, password="s3cret-pass", first_name="Ada", last_name="Lovelace"):
    response = client.post(
        "/api/register",
        json={
            "email": email,
            "password": password,
            "firstName": first_name,
            "lastName": last_name,
        },
    )
    assert response.status_code == 201, response.get_json()
    return response.get_json()


@pytest.fixture
def alice(app):
    """Registered user with bearer headers.

    Registered through a separate client so `client` carries no cookie.
    """
    data = register(app.test_client(), "alice@example.com")
    return {
        "user": data["user"],
        "headers": {"Authorization": f"Bearer {data['accessToken']}"},
    }


@pytest.fixture
def bob(app):
    """Second registered user."""
    data = register(app.test_client(), "bob@example.com", first_name="Bob", last_name="Builder")
    return {
        "user": data["user"],
        "headers": {"Authorization": f"Bearer {data['accessToken']}"},
    }


@pytest.fixture
def register_user(app):
    """Factory registering extra users; returns (user, headers)."""
    def _register(email, password="s3cret-pass"):
        data = register(app.test_client(), email, password=password)
        return data["user"], {"Authorization": f"Bearer {data['accessToken']}"}
    return _register


# ============================================================================
# Document Fixtures
# ============================================================================

@pytest.fixture
def sample_layout():
    """Layout with one of most component types."""
    return {
        "components": [
            {"id": "c1", "type": "header", "props": {"name": "Ada Lovelace", "title": "Analyst"}},
            {"id": "c2", "type": "hero", "props": {"title": "Hello", "subtitle": "World"}},
            {
                "id": "c3",
                "type": "projects",
                "props": {
                    "title": "Work",
                    "projects": [
                        {
                            "title": "Engine",
                            "description": "Analytical engine notes",
                            "technologies": ["Punch cards"],
                            "link": "https://example.com/engine",
                        }
                    ],
                },
            },
            {"id": "c4", "type": "skills", "props": {"skills": ["Math", "Poetry"]}},
            {"id": "c5", "type": "contact", "props": {"email": "ada@example.com", "showForm": False}},
        ],
        "theme": {"primaryColor": "#ff0066", "fontFamily": "Georgia, serif"},
    }
