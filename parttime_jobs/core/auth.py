"""
Authentication Utility - mock credential resolution and JWT handling.

Provides:
- resolve(): the mock login/signup decision table (no backend, no storage)
- JWT token creation/verification for the session token carried by User

Decision table, first match wins:
1. demo username + demo password  -> canned user, role implied by the account
2. login with a demo username      -> IncorrectPassword
3. email without '@'               -> InvalidCredentials
4. signup                          -> password/confirmation/mode field checks
5. login, anything else            -> InvalidCredentials, unless
                                      accept_unverified_logins is enabled
"""

import secrets
import string
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt

from parttime_jobs.core.config import Settings, get_settings
from parttime_jobs.core.constants import DEMO_ACCOUNTS, DEMO_PASSWORD, MIN_PASSWORD_LENGTH
from parttime_jobs.core.errors import (
    IncorrectPassword, InvalidCredentials, ValidationError
)
from parttime_jobs.core.log import get_logger
from parttime_jobs.schemas.schemas import AuthRequest, User, UserMode

log = get_logger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def new_id(length: int = 9) -> str:
    """Short random identifier, e.g. 'k3x9q0a1b'."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None,
                        settings: Optional[Settings] = None) -> str:
    """Create JWT access token."""
    settings = settings or get_settings()
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: Optional[Settings] = None) -> Optional[dict]:
    """Decode and verify JWT token."""
    settings = settings or get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def is_demo_login(email: str, password: str) -> bool:
    return email in DEMO_ACCOUNTS and password == DEMO_PASSWORD


def _build_user(mode: UserMode, email: str, settings: Settings, first_name: Optional[str] = None,
                last_name: Optional[str] = None, university: Optional[str] = None,
                company_name: Optional[str] = None) -> User:
    """Synthesize a user with an identifier scoped to its mode."""
    student_id = f"s-{new_id(5)}" if mode == UserMode.student else None
    employer_id = f"e-{new_id(5)}" if mode == UserMode.employer else None
    if mode == UserMode.student:
        display_name = first_name or "Student"
    else:
        # Employers are shown (and their listings matched) by company name
        display_name = company_name or "Employer"

    token = create_access_token(
        data={"sub": email, "mode": mode.value, "uid": student_id or employer_id},
        settings=settings
    )
    return User(
        mode=mode, email=email, student_id=student_id, employer_id=employer_id,
        token=token, first_name=display_name, last_name=last_name,
        university=university, company_name=company_name
    )


def _demo_user(email: str, settings: Settings) -> User:
    account = DEMO_ACCOUNTS[email]
    return _build_user(
        UserMode(account["mode"]), email, settings,
        first_name=account["first_name"], last_name=account["last_name"],
        university=account.get("university"), company_name=account.get("company_name")
    )


def _check_password_length(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.")


def resolve(request: AuthRequest, is_signup: bool, settings: Optional[Settings] = None) -> User:
    """
    Decide a login or signup attempt and produce the resulting user.

    Pure: nothing is persisted here, the caller owns the returned user.

    Raises:
        IncorrectPassword: demo username with the wrong password
        InvalidCredentials: malformed email, or a non-demo login
        ValidationError: signup form problems
    """
    settings = settings or get_settings()
    email = request.email.strip()

    if is_demo_login(email, request.password):
        log.info("Demo login for %s", email)
        return _demo_user(email, settings)

    if not is_signup and email in DEMO_ACCOUNTS:
        raise IncorrectPassword("Incorrect password.")

    if "@" not in email:
        raise InvalidCredentials("Please enter a valid email address.")

    if is_signup:
        _check_password_length(request.password)
        if request.password != request.confirm_password:
            raise ValidationError("Passwords do not match.")
        if request.mode == UserMode.student and not request.university:
            raise ValidationError("Please select your university.")
        if request.mode == UserMode.employer and not request.company_name:
            raise ValidationError("Please enter your company name.")

        log.info("Signed up %s as %s", email, request.mode.value)
        return _build_user(
            request.mode, email, settings,
            first_name=request.first_name, last_name=request.last_name,
            university=request.university, company_name=request.company_name
        )

    if not settings.accept_unverified_logins:
        raise InvalidCredentials("Invalid login credentials.")

    _check_password_length(request.password)
    log.info("Unverified login accepted for %s", email)
    return _build_user(
        request.mode, email, settings,
        first_name=request.first_name, last_name=request.last_name,
        university=request.university, company_name=request.company_name
    )
