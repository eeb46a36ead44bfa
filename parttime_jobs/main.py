"""
Part-Time Jobs Marketplace - Main Application

FastAPI surface over a single-user application shell:
- Local JSON store in place of browser storage
- Mock authentication (demo accounts user1 / user2)
- Stubbed backend and AI text generation

Run: uvicorn parttime_jobs.main:app --reload
"""

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from parttime_jobs.api.routes import api_router
from parttime_jobs.core.config import get_settings
from parttime_jobs.core.log import get_logger
from parttime_jobs.services.shell import ApplicationShell, get_shell

settings = get_settings()
log = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Part-Time Jobs Marketplace",
    description="""
    Student / employer job marketplace prototype.

    ## Features
    - **Authentication**: mock login and signup for students and employers
    - **Students**: job feed, job details and messaging, profile editor
    - **Employers**: dashboard, job posting with AI drafts, inbox
    - **Navigation**: role-aware screen routing

    ## Storage
    - Local JSON key-value store (current user, jobs, messages, profiles)
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Load persisted state so the first request sees it."""
    shell = get_shell()
    log.info("Starting on screen %s", shell.current_screen.value)


@app.get("/", tags=["Health"])
async def root(shell: ApplicationShell = Depends(get_shell)):
    return {"status": "healthy", "app": "Part-Time Jobs Marketplace", "screen": shell.current_screen.value}


@app.get("/health", tags=["Health"])
async def health_check(shell: ApplicationShell = Depends(get_shell)):
    """Detailed health check."""
    return {
        "status": "healthy",
        "storage": "writable" if shell.store.test_writable() else "read-only",
        "text_generation": "configured" if shell.text.configured else "not configured"
    }
