"""
Shell Routes - navigation state

GET /shell - Current screen, overlays, navigation items
POST /shell/screen - Request a screen (filtered by the role router)
POST /shell/mode - Guest mode toggle (Find Job / Hire Talent)
POST /shell/theme - Toggle dark mode
"""

from fastapi import APIRouter, Depends

from parttime_jobs.services.shell import ApplicationShell, get_shell
from parttime_jobs.schemas.schemas import ModeRequest, ScreenRequest, ShellState

router = APIRouter(prefix="/shell", tags=["Shell"])


@router.get("", response_model=ShellState)
async def get_state(shell: ApplicationShell = Depends(get_shell)):
    return shell.snapshot()


@router.post("/screen", response_model=ShellState)
async def request_screen(request: ScreenRequest, shell: ApplicationShell = Depends(get_shell)):
    """
    Ask for a screen. Screens outside the caller's role resolve to the role
    default instead of failing.
    """
    shell.request_screen(request.screen)
    return shell.snapshot()


@router.post("/mode", response_model=ShellState)
async def switch_mode(request: ModeRequest, shell: ApplicationShell = Depends(get_shell)):
    shell.switch_mode(request.mode)
    return shell.snapshot()


@router.post("/theme", response_model=ShellState)
async def toggle_theme(shell: ApplicationShell = Depends(get_shell)):
    shell.toggle_theme()
    return shell.snapshot()
