"""
Pytest fixtures for frontend/Flask tests.
"""

import pytest


@pytest.fixture
def app():
    """Flask app fixture with test configuration."""
    from frontend.app import app
    app.config['TESTING'] = True
    app.config['SECRET_KEY'] = 'test-secret-key'
    return app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()
