"""
Student Routes

GET /students/profile - Open own profile (stored or seeded)
PATCH /students/profile - Edit profile fields (draft only)
POST /students/profile/experience - Add a blank position
PATCH /students/profile/experience/{index} - Edit a position
DELETE /students/profile/experience/{index} - Remove a position
POST /students/profile/save - Save locally and sync
POST /students/profile/improve-bio - Refine the bio with AI
GET /students/applications - Application tracker
"""

from typing import List

from fastapi import APIRouter, HTTPException, Depends

from parttime_jobs.api.deps import get_current_student
from parttime_jobs.core.errors import (
    OperationCancelled, OperationPending, SyncFailure, ValidationError
)
from parttime_jobs.services.shell import ApplicationShell, get_shell
from parttime_jobs.schemas.schemas import (
    Application, ExperienceUpdate, ProfileUpdate, SaveStatus, StudentProfile, User
)

router = APIRouter(prefix="/students", tags=["Students"])


@router.get("/profile", response_model=StudentProfile)
async def get_profile(student: User = Depends(get_current_student), shell: ApplicationShell = Depends(get_shell)):
    """Get current student's profile draft."""
    return shell.open_profile()


@router.patch("/profile", response_model=StudentProfile)
async def update_profile(
    data: ProfileUpdate,
    student: User = Depends(get_current_student),
    shell: ApplicationShell = Depends(get_shell)
):
    """Update profile draft. Only provided fields are updated; nothing is saved yet."""
    return shell.update_profile(data)


@router.post("/profile/experience", response_model=StudentProfile)
async def add_experience(student: User = Depends(get_current_student), shell: ApplicationShell = Depends(get_shell)):
    return shell.add_experience()


@router.patch("/profile/experience/{index}", response_model=StudentProfile)
async def update_experience(
    index: int,
    data: ExperienceUpdate,
    student: User = Depends(get_current_student),
    shell: ApplicationShell = Depends(get_shell)
):
    try:
        return shell.update_experience(index, data)
    except ValidationError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/profile/experience/{index}", response_model=StudentProfile)
async def remove_experience(
    index: int,
    student: User = Depends(get_current_student),
    shell: ApplicationShell = Depends(get_shell)
):
    try:
        return shell.remove_experience(index)
    except ValidationError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/profile/save", response_model=SaveStatus)
async def save_profile(student: User = Depends(get_current_student), shell: ApplicationShell = Depends(get_shell)):
    """
    Save & sync. The profile is stored locally even when the sync fails.
    """
    try:
        return await shell.save_profile()
    except SyncFailure as e:
        raise HTTPException(status_code=502, detail=str(e))
    except (OperationPending, OperationCancelled) as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/profile/improve-bio", response_model=StudentProfile)
async def improve_bio(student: User = Depends(get_current_student), shell: ApplicationShell = Depends(get_shell)):
    try:
        return await shell.improve_bio()
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except (OperationPending, OperationCancelled) as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/applications", response_model=List[Application])
async def get_applications(student: User = Depends(get_current_student), shell: ApplicationShell = Depends(get_shell)):
    """Get my applications."""
    return shell.tracker()
