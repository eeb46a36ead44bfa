"""
Authentication Routes

POST /auth/login - Login (demo accounts: user1 / user2)
POST /auth/signup - Create a student or employer account
POST /auth/logout - Clear the session
POST /auth/modal - Open the auth modal
DELETE /auth/modal - Close the auth modal (cancels a pending login)
GET /auth/me - Current user and token status
GET /auth/universities - Universities offered on the student signup form
"""

from typing import List

from fastapi import APIRouter, HTTPException, Depends

from parttime_jobs.core.auth import decode_token
from parttime_jobs.core.constants import UNIVERSITIES
from parttime_jobs.core.errors import (
    AuthError, OperationCancelled, OperationPending, ValidationError
)
from parttime_jobs.services.shell import ApplicationShell, get_shell
from parttime_jobs.schemas.schemas import (
    AuthRequest, SessionResponse, ShellState, StatusResponse
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


async def _authenticate(request: AuthRequest, is_signup: bool, shell: ApplicationShell) -> ShellState:
    try:
        await shell.authenticate(request, is_signup=is_signup)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except AuthError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except (OperationPending, OperationCancelled) as e:
        raise HTTPException(status_code=409, detail=str(e))
    return shell.snapshot()


@router.post("/login", response_model=ShellState)
async def login(request: AuthRequest, shell: ApplicationShell = Depends(get_shell)):
    """
    Login and land on the role's default screen.

    Only the demo accounts succeed unless ACCEPT_UNVERIFIED_LOGINS is set.
    """
    return await _authenticate(request, False, shell)


@router.post("/signup", response_model=ShellState, status_code=201)
async def signup(request: AuthRequest, shell: ApplicationShell = Depends(get_shell)):
    """Create an account. Students need a university, employers a company name."""
    return await _authenticate(request, True, shell)


@router.post("/logout", response_model=ShellState)
async def logout(shell: ApplicationShell = Depends(get_shell)):
    shell.logout()
    return shell.snapshot()


@router.post("/modal", response_model=StatusResponse)
async def open_modal(shell: ApplicationShell = Depends(get_shell)):
    shell.open_auth_modal()
    return StatusResponse(message="Auth modal opened")


@router.delete("/modal", response_model=StatusResponse)
async def close_modal(shell: ApplicationShell = Depends(get_shell)):
    shell.close_auth_modal()
    return StatusResponse(message="Auth modal closed")


@router.get("/me", response_model=SessionResponse)
async def get_me(shell: ApplicationShell = Depends(get_shell)):
    """Get current user's info."""
    if shell.user is None:
        return SessionResponse()
    claims = decode_token(shell.user.token, shell.settings)
    return SessionResponse(user=shell.user, token_valid=claims is not None)


@router.get("/universities", response_model=List[str])
async def universities():
    return UNIVERSITIES
