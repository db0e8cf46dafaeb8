# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Swaps the Supabase client for an in-memory fake
# - Provides an HTTP test client for the FastAPI app
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from lib.supabase_client import SupabaseClient
from tests.fake_supabase import FakeSupabase


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_db(monkeypatch):
    """In-memory Supabase installed as the shared client."""
    fake = FakeSupabase()
    monkeypatch.setattr(SupabaseClient, "_instance", fake)
    return fake


@pytest.fixture
def client(fake_db):
    """HTTP client against the app, backed by the in-memory Supabase."""
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_album_data():
    """Valid album create payload (camelCase, as the admin UI sends it)."""
    return {
        "title": "Ni Forever",
        "description": "Released 2021",
        "image": "https://test-project.supabase.co/storage/v1/object/public/media/images/albums/cover.jpg",
        "hoverImage": "https://test-project.supabase.co/storage/v1/object/public/media/images/albums/hover.jpg",
        "link": "https://open.spotify.com/album/ni-forever",
    }


@pytest.fixture
def sample_tour_data():
    """Valid tour create payload."""
    return {
        "title": "Live in Kigali",
        "location": "BK Arena, Kigali",
        "date": "2026-01-01",
        "ticketUrl": "https://tickets.example.com/kigali",
    }
