"""
Job Routes

GET /jobs - Job feed (active listings, optional search)
POST /jobs - Post a job (employer only)
POST /jobs/draft-description - AI draft of a description (employer only)
DELETE /jobs/selected - Close the job-detail overlay
POST /jobs/selected/messages - Message the employer of the open job (student only)
GET /jobs/{job_id} - Open a job in the detail overlay
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Depends, Query

from parttime_jobs.api.deps import get_current_employer, get_current_student
from parttime_jobs.core.errors import (
    OperationCancelled, OperationPending, PermissionDenied, ValidationError
)
from parttime_jobs.services.shell import ApplicationShell, get_shell
from parttime_jobs.schemas.schemas import (
    DescriptionDraftRequest, GeneratedText, JobDraft, JobListing, JobListResponse,
    Message, MessageCreate, StatusResponse, User
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.get("", response_model=JobListResponse)
async def list_jobs(
    search: Optional[str] = Query(None, description="Search in title, company and location"),
    shell: ApplicationShell = Depends(get_shell)
):
    """List active job postings, newest first."""
    jobs = shell.feed(search)
    return JobListResponse(jobs=jobs, total=len(jobs))


@router.post("", response_model=JobListing, status_code=201)
async def create_job(
    draft: JobDraft,
    employer: User = Depends(get_current_employer),
    shell: ApplicationShell = Depends(get_shell)
):
    """Post a job. Lands the employer back on the dashboard."""
    try:
        return await shell.submit_job(draft)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except PermissionDenied as e:
        raise HTTPException(status_code=403, detail=str(e))
    except (OperationPending, OperationCancelled) as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/draft-description", response_model=GeneratedText)
async def draft_description(
    request: DescriptionDraftRequest,
    employer: User = Depends(get_current_employer),
    shell: ApplicationShell = Depends(get_shell)
):
    """Draft a description from the title and company. Falls back to a fixed notice."""
    try:
        text = await shell.draft_description(request.title)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except (OperationPending, OperationCancelled) as e:
        raise HTTPException(status_code=409, detail=str(e))
    return GeneratedText(text=text)


@router.delete("/selected", response_model=StatusResponse)
async def close_job(shell: ApplicationShell = Depends(get_shell)):
    shell.close_job()
    return StatusResponse(message="Job closed")


@router.post("/selected/messages", response_model=Message, status_code=201)
async def send_message(
    request: MessageCreate,
    student: User = Depends(get_current_student),
    shell: ApplicationShell = Depends(get_shell)
):
    """Send a message about the open job. A job must be open first."""
    try:
        message = shell.send_message(request.text)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if message is None:
        raise HTTPException(status_code=409, detail="Open a job before sending a message")
    return message


@router.get("/{job_id}", response_model=JobListing)
async def get_job(job_id: str, shell: ApplicationShell = Depends(get_shell)):
    """Get details of a specific job and open it in the overlay."""
    job = shell.select_job(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail="Job not found")
    return job
