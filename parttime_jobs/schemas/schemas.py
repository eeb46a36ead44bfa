"""
Pydantic Schemas - Domain records and Request/Response Validation

All schemas in one file for simplicity. Domain records (User, JobListing,
Message, StudentProfile) are also the persisted shape written to local storage.
"""

from pydantic import BaseModel, Field, model_validator
from typing import Optional, List
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class UserMode(str, Enum):
    student = "student"
    employer = "employer"


class Screen(str, Enum):
    feed = "feed"
    profile = "profile"
    tracker = "tracker"
    dashboard = "dashboard"
    create_job = "create-job"
    inbox = "inbox"


class JobStatus(str, Enum):
    active = "active"
    closed = "closed"


class ApplicationStatus(str, Enum):
    applied = "applied"
    review = "review"
    interview = "interview"
    offer = "offer"
    rejected = "rejected"


# ============================================================
# DOMAIN RECORDS (persisted)
# ============================================================

class User(BaseModel):
    mode: UserMode
    email: str
    student_id: Optional[str] = None
    employer_id: Optional[str] = None
    token: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    university: Optional[str] = None
    company_name: Optional[str] = None


class JobListing(BaseModel):
    id: str
    title: str
    company: str
    location: str
    logo: str
    salary_min: float = Field(allow_inf_nan=False)
    salary_max: float = Field(allow_inf_nan=False)
    tags: List[str] = []
    description: str
    responsibilities: List[str] = []
    skills: List[str] = []
    status: JobStatus = JobStatus.active
    deadline: str
    contact: str = ""
    applicant_count: int = 0
    posted_at: str

    @model_validator(mode="after")
    def check_salary_range(self):
        if self.salary_min > self.salary_max:
            raise ValueError("salary_min cannot be greater than salary_max")
        return self


class Message(BaseModel):
    id: str
    job_id: str
    student_id: str
    student_name: str
    text: str
    timestamp: str
    is_read: bool = False


class Experience(BaseModel):
    role: str = ""
    company: str = ""
    period: str = ""


class StudentProfile(BaseModel):
    id: str
    first_name: str
    last_name: str
    dob: str = ""
    email: str
    phone: str = ""
    university: str = ""
    degree: str = ""
    bio: str = ""
    skills: List[str] = []
    experience: List[Experience] = []
    portfolio_url: str = ""
    linkedin_url: str = ""


class Application(BaseModel):
    id: str
    job_id: str
    student_id: str
    status: ApplicationStatus
    applied_date: str
    job_title: str
    company_name: str
    location: str
    logo: str


# ============================================================
# AUTH SCHEMAS
# ============================================================

class AuthRequest(BaseModel):
    email: str
    password: str
    mode: UserMode = UserMode.student
    confirm_password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    university: Optional[str] = None
    company_name: Optional[str] = None


class SessionResponse(BaseModel):
    user: Optional[User] = None
    token_valid: bool = False


# ============================================================
# SHELL / NAVIGATION SCHEMAS
# ============================================================

class NavItem(BaseModel):
    icon: str
    label: str
    action: str  # screen value, "mode:<mode>" or "auth"
    active: bool = False


class ScreenRequest(BaseModel):
    screen: Screen


class ModeRequest(BaseModel):
    mode: UserMode


class ShellState(BaseModel):
    user: Optional[User] = None
    mode: UserMode
    screen: Screen
    view: str
    dark_mode: bool
    show_auth_modal: bool
    show_chrome: bool
    selected_job_id: Optional[str] = None
    can_message: bool = False
    navigation: List[NavItem] = []
    pending: List[str] = []


# ============================================================
# JOB SCHEMAS
# ============================================================

class JobDraft(BaseModel):
    """Create-job form contents. Required fields are checked by the shell."""
    title: str = ""
    location: str = ""
    deadline: str = ""
    description: str = ""
    salary_min: float = 12.50
    salary_max: float = 15.00
    responsibilities: List[str] = [""]
    skills: List[str] = []
    contact: str = ""


class DescriptionDraftRequest(BaseModel):
    title: str


class GeneratedText(BaseModel):
    text: str


class JobListResponse(BaseModel):
    jobs: List[JobListing]
    total: int


# ============================================================
# MESSAGE SCHEMAS
# ============================================================

class MessageCreate(BaseModel):
    text: str


class InboxEntry(BaseModel):
    message: Message
    job: Optional[JobListing] = None


class InboxResponse(BaseModel):
    entries: List[InboxEntry]
    total: int


# ============================================================
# PROFILE SCHEMAS
# ============================================================

class ProfileUpdate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    dob: Optional[str] = None
    phone: Optional[str] = None
    university: Optional[str] = None
    degree: Optional[str] = None
    bio: Optional[str] = None
    portfolio_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    skills_text: Optional[str] = Field(None, description="Comma separated skills")


class ExperienceUpdate(BaseModel):
    role: Optional[str] = None
    company: Optional[str] = None
    period: Optional[str] = None


class SaveStatus(BaseModel):
    type: str  # "success" | "error"
    text: str


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class StatusResponse(BaseModel):
    message: str
    success: bool = True
