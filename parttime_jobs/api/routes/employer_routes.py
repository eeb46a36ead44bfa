"""
Employer Routes

GET /employers/jobs - Dashboard: listings posted under the employer's company
GET /employers/inbox - Messages from students, with the job they refer to
"""

from fastapi import APIRouter, Depends

from parttime_jobs.api.deps import get_current_employer
from parttime_jobs.services.shell import ApplicationShell, get_shell
from parttime_jobs.schemas.schemas import (
    InboxEntry, InboxResponse, JobListResponse, Screen, User
)

router = APIRouter(prefix="/employers", tags=["Employers"])


@router.get("/jobs", response_model=JobListResponse)
async def get_employer_jobs(employer: User = Depends(get_current_employer), shell: ApplicationShell = Depends(get_shell)):
    """Get the employer's own listings, newest first."""
    shell.request_screen(Screen.dashboard)
    jobs = shell.employer_jobs()
    return JobListResponse(jobs=jobs, total=len(jobs))


@router.get("/inbox", response_model=InboxResponse)
async def get_inbox(employer: User = Depends(get_current_employer), shell: ApplicationShell = Depends(get_shell)):
    """Messages newest first. job is null when the listing no longer exists."""
    shell.request_screen(Screen.inbox)
    entries = [InboxEntry(message=message, job=job) for message, job in shell.inbox()]
    return InboxResponse(entries=entries, total=len(entries))
