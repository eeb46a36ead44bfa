"""
Application Shell - owns all top-level state and wires the pieces together.

State: current user, mode toggle, requested screen, theme, overlays
(auth modal, job details), jobs, messages and the profile draft.

- The rendered screen is never stored: current_screen re-runs the role router
  over (user, requested screen, mode) on every read.
- Jobs, messages and the user are written through to the local store on
  every mutation, before the in-memory copy is replaced.
- Slow mocked calls run through PendingOperations, scoped to the view that
  started them. Leaving the view cancels them, so no stale result lands.
"""

import asyncio
import math
from datetime import datetime
from typing import List, Optional, Tuple

from parttime_jobs.core.auth import new_id, resolve
from parttime_jobs.core.config import Settings, get_settings
from parttime_jobs.core.constants import SEED_APPLICATIONS, SEED_JOBS
from parttime_jobs.core.errors import (
    OperationCancelled, PermissionDenied, SyncFailure, ValidationError
)
from parttime_jobs.core.log import get_logger
from parttime_jobs.db.local_store import (
    LocalStore, get_local_store, jobs_key, messages_key, user_key
)
from parttime_jobs.schemas.schemas import (
    Application, AuthRequest, ExperienceUpdate, JobDraft, JobListing, JobStatus,
    Message, ProfileUpdate, SaveStatus, Screen, ShellState, StudentProfile, User, UserMode
)
from parttime_jobs.services import profile_service
from parttime_jobs.services.api_client import BackendApiClient
from parttime_jobs.services.pending import PendingOperations
from parttime_jobs.services.profile_service import ProfileEditor
from parttime_jobs.services.role_router import default_screen, guest_screen, resolve_screen
from parttime_jobs.services.screen_registry import navigation_for, shows_chrome, view_name
from parttime_jobs.services.text_generation import TextGenerationClient

log = get_logger(__name__)

# Scope for the auth modal; screens use their own value as scope
AUTH_MODAL_SCOPE = "auth-modal"


class ApplicationShell:

    def __init__(self, store: LocalStore, settings: Optional[Settings] = None,
                 api_client: Optional[BackendApiClient] = None,
                 text_client: Optional[TextGenerationClient] = None):
        self.settings = settings or get_settings()
        self.store = store
        self.prefix = self.settings.storage_prefix
        self.api = api_client or BackendApiClient(self.settings)
        self.text = text_client or TextGenerationClient(self.settings)
        self.pending = PendingOperations()

        self.user: Optional[User] = None
        self.mode: UserMode = UserMode.student
        self.requested_screen: Screen = Screen.feed
        self.dark_mode: bool = self.settings.prefer_dark_mode
        self.show_auth_modal: bool = False
        self.selected_job_id: Optional[str] = None
        self.jobs: List[JobListing] = []
        self.messages: List[Message] = []
        self.profile_editor: Optional[ProfileEditor] = None

        self.load()

    # ========================================================
    # Startup
    # ========================================================

    def load(self) -> None:
        """Restore user, jobs and messages from the local store."""
        user = self.store.load_model(user_key(self.prefix), User)
        if user is not None:
            self.user = user
            self.mode = user.mode
            self.requested_screen = default_screen(user.mode)

        jobs = self.store.load_models(jobs_key(self.prefix), JobListing)
        self.jobs = jobs if jobs is not None else [JobListing.model_validate(j) for j in SEED_JOBS]

        messages = self.store.load_models(messages_key(self.prefix), Message)
        self.messages = messages if messages is not None else []

        log.info(
            "Shell loaded: user=%s jobs=%d messages=%d screen=%s",
            user.email if user else None, len(self.jobs), len(self.messages),
            self.current_screen.value
        )

    # ========================================================
    # Navigation
    # ========================================================

    @property
    def current_screen(self) -> Screen:
        return resolve_screen(self.user, self.requested_screen, self.mode)

    @property
    def view(self) -> str:
        return view_name(self.user, self.mode, self.current_screen)

    def _settle(self, before: Screen) -> None:
        """Tear down whatever belonged to the screen we just left."""
        after = self.current_screen
        if after == before:
            return
        cancelled = self.pending.cancel_scope(before.value)
        if cancelled:
            log.info("Left %s, cancelled %d pending operation(s)", before.value, cancelled)
        if before == Screen.profile:
            self.profile_editor = None
        log.debug("Screen %s -> %s", before.value, after.value)

    def request_screen(self, screen: Screen) -> Screen:
        before = self.current_screen
        self.requested_screen = screen
        self._settle(before)
        return self.current_screen

    def switch_mode(self, mode: UserMode) -> Screen:
        """Guest mode toggle (Find Job / Hire Talent). Signed-in users keep their role."""
        if self.user is not None:
            log.debug("Ignoring mode switch to %s for signed-in user", mode.value)
            return self.current_screen
        before = self.current_screen
        self.mode = mode
        self.requested_screen = guest_screen(mode)
        self._settle(before)
        return self.current_screen

    def toggle_theme(self) -> bool:
        self.dark_mode = not self.dark_mode
        return self.dark_mode

    # ========================================================
    # Overlays
    # ========================================================

    def open_auth_modal(self) -> None:
        self.show_auth_modal = True

    def close_auth_modal(self) -> None:
        self.show_auth_modal = False
        self.pending.cancel_scope(AUTH_MODAL_SCOPE)

    def select_job(self, job_id: str) -> Optional[JobListing]:
        job = self.find_job(job_id)
        if job is not None:
            self.selected_job_id = job_id
        return job

    def close_job(self) -> None:
        self.selected_job_id = None

    @property
    def selected_job(self) -> Optional[JobListing]:
        if self.selected_job_id is None:
            return None
        return self.find_job(self.selected_job_id)

    @property
    def can_message(self) -> bool:
        return self.user is not None and self.user.mode == UserMode.student

    # ========================================================
    # Session
    # ========================================================

    def login(self, user: User) -> Screen:
        before = self.current_screen
        self.store.save_model(user_key(self.prefix), user)
        self.user = user
        self.mode = user.mode
        self.requested_screen = default_screen(user.mode)
        self.show_auth_modal = False
        self._settle(before)
        log.info("Logged in %s as %s", user.email, user.mode.value)
        return self.current_screen

    def logout(self) -> Screen:
        self.pending.cancel_all()
        self.store.remove(user_key(self.prefix))
        email = self.user.email if self.user else None
        self.user = None
        self.mode = UserMode.student
        self.requested_screen = Screen.feed
        self.selected_job_id = None
        self.profile_editor = None
        log.info("Logged out %s", email)
        return self.current_screen

    async def authenticate(self, request: AuthRequest, is_signup: bool = False) -> User:
        """Auth modal submit: delay, backend stub, decision table, then login."""
        self.open_auth_modal()

        async def attempt() -> User:
            await self._latency(self.settings.auth_delay_seconds)
            await self.api.login(request.email, request.password)
            return resolve(request, is_signup, self.settings)

        user = await self.pending.run("auth", AUTH_MODAL_SCOPE, attempt())
        if not self.show_auth_modal:
            raise OperationCancelled("The action was cancelled.")
        self.login(user)
        return user

    # ========================================================
    # Jobs
    # ========================================================

    def find_job(self, job_id: str) -> Optional[JobListing]:
        return next((j for j in self.jobs if j.id == job_id), None)

    def feed(self, search: Optional[str] = None) -> List[JobListing]:
        """Active listings, optionally matching search in title, company or location."""
        jobs = [j for j in self.jobs if j.status == JobStatus.active]
        if search:
            needle = search.strip().lower()
            jobs = [
                j for j in jobs
                if needle in j.title.lower() or needle in j.company.lower() or needle in j.location.lower()
            ]
        return jobs

    def employer_jobs(self) -> List[JobListing]:
        """Dashboard listings: those posted under the employer's company name."""
        employer = self._require_employer()
        return [j for j in self.jobs if j.company == employer.first_name]

    def _company_name(self) -> str:
        return (self.user.first_name if self.user else None) or "Company"

    def _require_employer(self) -> User:
        if self.user is None or self.user.mode != UserMode.employer:
            raise PermissionDenied("Employers only.")
        return self.user

    def _require_student(self) -> User:
        if self.user is None or self.user.mode != UserMode.student:
            raise PermissionDenied("Students only.")
        return self.user

    @staticmethod
    def validate_draft(draft: JobDraft) -> None:
        required = (draft.title, draft.location, draft.deadline, draft.description)
        if not all(value.strip() for value in required):
            raise ValidationError("Please fill in all required fields.")
        if not (math.isfinite(draft.salary_min) and math.isfinite(draft.salary_max)):
            raise ValidationError("Pay must be a valid amount.")
        if draft.salary_min > draft.salary_max:
            raise ValidationError("Minimum pay cannot be greater than maximum pay.")

    def post_job(self, draft: JobDraft) -> JobListing:
        """Validate, prepend, persist and return to the dashboard."""
        self._require_employer()
        self.validate_draft(draft)

        job = JobListing(
            id=new_id(),
            title=draft.title.strip(),
            company=self._company_name(),
            location=draft.location.strip(),
            logo=f"https://picsum.photos/seed/{new_id()}/200",
            salary_min=draft.salary_min,
            salary_max=draft.salary_max,
            tags=["New"],
            description=draft.description.strip(),
            responsibilities=[r for r in draft.responsibilities if r.strip()],
            skills=draft.skills,
            status=JobStatus.active,
            deadline=draft.deadline,
            contact=draft.contact,
            applicant_count=0,
            posted_at="Just now",
        )
        jobs = [job] + self.jobs
        self.store.save_models(jobs_key(self.prefix), jobs)
        self.jobs = jobs

        before = self.current_screen
        self.requested_screen = Screen.dashboard
        self._settle(before)
        log.info("Posted job %s '%s' for %s", job.id, job.title, job.company)
        return job

    async def submit_job(self, draft: JobDraft) -> JobListing:
        """Create-job form submit: validate now, post after the artificial delay."""
        self._require_employer()
        self.request_screen(Screen.create_job)
        self.validate_draft(draft)

        async def attempt() -> None:
            await self._latency(self.settings.job_post_delay_seconds)
            await self.api.post_job(draft)

        await self.pending.run("post-job", Screen.create_job.value, attempt())
        if self.current_screen != Screen.create_job:
            raise OperationCancelled("The action was cancelled.")
        return self.post_job(draft)

    async def draft_description(self, title: str) -> str:
        """AI draft for the create-job description field."""
        self._require_employer()
        self.request_screen(Screen.create_job)
        if not title.strip():
            raise ValidationError("Enter a job title first so AI can help!")
        return await self.pending.run(
            "draft-description", Screen.create_job.value,
            asyncio.to_thread(self.text.generate_job_description, title.strip(), self._company_name())
        )

    # ========================================================
    # Messages
    # ========================================================

    def send_message(self, text: str) -> Optional[Message]:
        """
        Message the employer of the selected job.

        Returns None without changing anything when there is no signed-in
        student or no selected job.
        """
        job_id = self.selected_job_id
        if not self.can_message or job_id is None:
            log.debug("send_message ignored: user=%s job=%s", self.user, job_id)
            return None
        if not text.strip():
            raise ValidationError("Please enter a message before sending.")

        message = Message(
            id=new_id(),
            job_id=job_id,
            student_id=self.user.student_id or "anon",
            student_name=self.user.first_name or "Anonymous Student",
            text=text,
            timestamp=datetime.now().strftime("%d/%m/%Y, %H:%M:%S"),
            is_read=False,
        )
        messages = [message] + self.messages
        self.store.save_models(messages_key(self.prefix), messages)
        self.messages = messages
        log.info("Message %s sent for job %s", message.id, job_id)
        return message

    def inbox(self) -> List[Tuple[Message, Optional[JobListing]]]:
        """Every message with its job looked up; the job may no longer exist."""
        self._require_employer()
        return [(m, self.find_job(m.job_id)) for m in self.messages]

    # ========================================================
    # Tracker
    # ========================================================

    def tracker(self) -> List[Application]:
        self._require_student()
        self.request_screen(Screen.tracker)
        return [Application.model_validate(a) for a in SEED_APPLICATIONS]

    # ========================================================
    # Profile
    # ========================================================

    def open_profile(self) -> StudentProfile:
        """Show the profile screen, loading the stored or seeded profile once."""
        user = self._require_student()
        self.request_screen(Screen.profile)
        if self.profile_editor is None:
            self.profile_editor = ProfileEditor(profile_service.load_profile(self.store, user, self.prefix))
        return self.profile_editor.profile

    def _editor(self) -> ProfileEditor:
        self.open_profile()
        return self.profile_editor

    def update_profile(self, changes: ProfileUpdate) -> StudentProfile:
        return self._editor().update(changes)

    def add_experience(self) -> StudentProfile:
        return self._editor().add_experience()

    def update_experience(self, index: int, changes: ExperienceUpdate) -> StudentProfile:
        return self._editor().update_experience(index, changes)

    def remove_experience(self, index: int) -> StudentProfile:
        return self._editor().remove_experience(index)

    async def save_profile(self) -> SaveStatus:
        """
        Save & sync. The local write always happens first.

        Raises SyncFailure when the backend rejects the profile; the locally
        saved copy stays as it is.
        """
        profile = self._editor().profile
        profile_service.save_profile(self.store, profile, self.prefix)
        synced = await self.pending.run(
            "save-profile", Screen.profile.value, self.api.save_student_profile(profile)
        )
        if not synced:
            raise SyncFailure("Failed to sync with server.")
        return SaveStatus(type="success", text="Profile saved successfully!")

    async def improve_bio(self) -> StudentProfile:
        """Refine the draft bio with AI. Empty bios are left alone."""
        editor = self._editor()
        bio = editor.profile.bio
        if not bio.strip():
            raise ValidationError("Write a short bio first.")
        improved = await self.pending.run(
            "improve-bio", Screen.profile.value, asyncio.to_thread(self.text.improve_bio, bio)
        )
        if self.profile_editor is not editor:
            raise OperationCancelled("The action was cancelled.")
        return editor.set_bio(improved)

    # ========================================================
    # Snapshot
    # ========================================================

    def snapshot(self) -> ShellState:
        screen = self.current_screen
        return ShellState(
            user=self.user,
            mode=self.mode,
            screen=screen,
            view=self.view,
            dark_mode=self.dark_mode,
            show_auth_modal=self.show_auth_modal,
            show_chrome=shows_chrome(screen),
            selected_job_id=self.selected_job_id,
            can_message=self.can_message,
            navigation=navigation_for(self.user, self.mode, screen),
            pending=self.pending.pending_keys(),
        )

    async def _latency(self, seconds: float) -> None:
        if seconds > 0:
            await asyncio.sleep(seconds)


# Singleton instance
_shell: ApplicationShell = None


def get_shell() -> ApplicationShell:
    """Get or create the application shell (singleton pattern)"""
    global _shell
    if _shell is None:
        _shell = ApplicationShell(get_local_store(), get_settings())
    return _shell
