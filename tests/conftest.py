"""
Shared fixtures for community board tests.

Provides sample API records for each resource, a mocked `requests` module
and a helper for building mock HTTP responses.
"""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

# Set environment variables BEFORE importing the app or config
os.environ.setdefault("FLASK_SECRET_KEY", "test-secret-key")
os.environ.setdefault("COMMUNITY_API_URL", "https://api.example.test")

# Project root on sys.path so `src`, `frontend` and `version` import
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

API_URL = "https://api.example.test"


def create_mock_response(status_code, json_data=None, json_error=False):
    """Helper to create a mock Response object."""
    mock_resp = MagicMock()
    mock_resp.status_code = status_code
    if json_error:
        mock_resp.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        mock_resp.json.return_value = json_data
    return mock_resp


@pytest.fixture(autouse=True)
def api_url(monkeypatch):
    """Point every config-built client at the test API."""
    from src.common.config import Config
    monkeypatch.setattr(Config, "COMMUNITY_API_URL", API_URL)
    monkeypatch.setattr(Config, "COMMUNITY_API_TIMEOUT", None)
    return API_URL


@pytest.fixture
def mock_requests_module(mocker):
    """Mock the requests module for all HTTP methods."""
    return {
        "get": mocker.patch("src.board.client.requests.get"),
        "post": mocker.patch("src.board.client.requests.post"),
        "put": mocker.patch("src.board.client.requests.put"),
        "delete": mocker.patch("src.board.client.requests.delete"),
    }


@pytest.fixture
def job_payload():
    """A job posting exactly as the API returns it."""
    return {
        "_id": "64b7f0c2a1b2c3d4e5f60718",
        "serviceType": "Plumber",
        "description": "Fix leaking kitchen pipes",
        "lastDate": "2025-01-01T00:00:00.000Z",
        "location": "Pune",
        "contactName": "Asha",
        "contactPhone": "9876543210",
        "salary": 5000,
        "imageUrl": "https://img.example.test/pipe.jpg",
        "poster": "60d5f2f5c7b9e10015f4e2a0",
        "createdAt": "2024-12-01T10:00:00.000Z",
    }


@pytest.fixture
def alert_payload():
    """A local alert exactly as the API returns it."""
    return {
        "_id": "64b7f0c2a1b2c3d4e5f60719",
        "message": "Water supply cut",
        "description": "Maintenance on the main line",
        "location": "Kothrud",
        "date": "2025-02-10T00:00:00.000Z",
    }


@pytest.fixture
def event_payload():
    """A community event exactly as the API returns it."""
    return {
        "_id": "64b7f0c2a1b2c3d4e5f6071a",
        "title": "Lake clean-up drive",
        "eventType": "Volunteer",
        "description": "Bring gloves, we provide bags",
        "imageUrl": "",
        "date": "2025-03-15T00:00:00.000Z",
        "location": "Pashan Lake",
        "organizer": "60d7bbf96e7e8b2e2c5e8b1c",
    }


@pytest.fixture
def make_response():
    """Factory fixture wrapping create_mock_response."""
    return create_mock_response
