"""
Backend API Client (stub)

Placeholder for the backend that would sit in front of the real database.
Every call logs what it would do, waits, and returns a canned result.

Contract kept for a future real backend:
- every call is async
- success and failure are distinguishable (bool / Optional)
- nothing raises: failures are captured and converted to False / None
"""

import asyncio
from typing import Optional

from parttime_jobs.core.config import Settings, get_settings
from parttime_jobs.core.log import get_logger
from parttime_jobs.schemas.schemas import JobDraft, JobListing, StudentProfile, User

log = get_logger(__name__)


class BackendApiClient:

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        if not self.settings.api_base_url:
            log.warning(
                "API_BASE_URL not configured. Using local development URL %s. "
                "For production, set API_BASE_URL in your .env file.",
                self.settings.resolved_api_base_url
            )
        self.base_url = self.settings.resolved_api_base_url

    async def _latency(self, seconds: float) -> None:
        if seconds > 0:
            await asyncio.sleep(seconds)

    async def login(self, email: str, password: str) -> Optional[User]:
        """Authenticate against the users table. No backend yet: always None."""
        log.info("API: Authenticating %s against %s/auth/login", email, self.base_url)
        return None

    async def save_student_profile(self, profile: StudentProfile) -> bool:
        """Persist profile and work experience rows."""
        log.info("API: Saving profile %s to %s/profile", profile.id, self.base_url)
        try:
            await self._latency(self.settings.profile_sync_delay_seconds)
            return True
        except Exception as e:
            log.error("API: Profile sync failed: %s", e)
            return False

    async def post_job(self, job: JobDraft) -> Optional[JobListing]:
        """Insert a job record. No backend yet: always None, the local copy wins."""
        log.info("API: Inserting job '%s' via %s/jobs", job.title, self.base_url)
        return None

    async def test_connection(self) -> bool:
        """The stub is always reachable."""
        return True


# Singleton instance
_api_client: BackendApiClient = None


def get_api_client() -> BackendApiClient:
    """Get or create the backend client (singleton pattern)"""
    global _api_client
    if _api_client is None:
        _api_client = BackendApiClient()
    return _api_client
