"""
Test fixtures for the marketplace shell, store and API
"""

import pytest
from fastapi.testclient import TestClient

from parttime_jobs.core.auth import resolve
from parttime_jobs.core.config import Settings
from parttime_jobs.db.local_store import LocalStore
from parttime_jobs.main import app
from parttime_jobs.schemas.schemas import AuthRequest, JobDraft
from parttime_jobs.services.shell import ApplicationShell, get_shell


@pytest.fixture
def settings(tmp_path):
    """Zero-latency settings writing into a temporary directory"""
    return Settings(
        storage_dir=tmp_path / "storage",
        api_base_url="http://localhost:3001",
        auth_delay_seconds=0,
        job_post_delay_seconds=0,
        profile_sync_delay_seconds=0,
        text_generation_api_key="",
        accept_unverified_logins=False,
        prefer_dark_mode=False,
    )


@pytest.fixture
def store(settings):
    return LocalStore(settings.storage_dir)


@pytest.fixture
def shell(store, settings):
    return ApplicationShell(store, settings)


@pytest.fixture
def student_user(settings):
    return resolve(AuthRequest(email="user1", password="toms1902"), is_signup=False, settings=settings)


@pytest.fixture
def employer_user(settings):
    return resolve(AuthRequest(email="user2", password="toms1902"), is_signup=False, settings=settings)


@pytest.fixture
def job_draft():
    """Valid create-job form contents"""
    return JobDraft(
        title="Student Barista",
        location="Dublin 2",
        deadline="2026-12-01",
        description="Pull shots and chat with regulars. Flexible hours around lectures.",
        salary_min=12.5,
        salary_max=15.0,
        responsibilities=["Make coffee", "", "  ", "Keep the bar tidy"],
    )


@pytest.fixture
def client(shell):
    """API client bound to the test shell"""
    app.dependency_overrides[get_shell] = lambda: shell
    yield TestClient(app)
    app.dependency_overrides.clear()
