"""
Route dependencies - shell access and role gates.

Usage:
    @router.get("/protected")
    async def route(user: User = Depends(get_current_student)):
        return user
"""

from fastapi import Depends, HTTPException, status

from parttime_jobs.schemas.schemas import User, UserMode
from parttime_jobs.services.shell import ApplicationShell, get_shell


async def get_current_user(shell: ApplicationShell = Depends(get_shell)) -> User:
    """Dependency - Require a signed-in user."""
    if shell.user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Please log in first"
        )
    return shell.user


async def get_current_student(user: User = Depends(get_current_user)) -> User:
    """Dependency - Require student role."""
    if user.mode != UserMode.student:
        raise HTTPException(status_code=403, detail="Students only")
    return user


async def get_current_employer(user: User = Depends(get_current_user)) -> User:
    """Dependency - Require employer role."""
    if user.mode != UserMode.employer:
        raise HTTPException(status_code=403, detail="Employers only")
    return user
