"""
Pytest configuration and fixtures
Shared test setup for all test modules
"""

import pytest
from datetime import datetime, timezone

from checkboard.core.config import Settings

REFERENCE_TIME = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def check() -> dict:
    """Check metadata row as stored in the catalog"""
    return {
        "id": 1,
        "default_priority_group": "P1",
        "details_url": "https://example.com",
    }


@pytest.fixture
def projects() -> list:
    return [{"id": 1}, {"id": 2}]


@pytest.fixture
def organizations() -> list:
    """Three organizations across two projects, all with 2FA enabled"""
    return [
        {"project_id": 1, "login": "org1", "two_factor_requirement_enabled": True},
        {"project_id": 1, "login": "org2", "two_factor_requirement_enabled": True},
        {"project_id": 2, "login": "org3", "two_factor_requirement_enabled": True},
    ]


@pytest.fixture
def reference_time() -> datetime:
    return REFERENCE_TIME


@pytest.fixture
def trainings() -> list:
    """One same-day training per project"""
    return [
        {"project_id": 1, "training_date": REFERENCE_TIME.isoformat()},
        {"project_id": 2, "training_date": REFERENCE_TIME.isoformat()},
    ]


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None)
