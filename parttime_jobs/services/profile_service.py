"""
Profile Service - student profile draft, editing and local persistence.

The editor works on an in-memory draft. Nothing is written until save();
the local write happens first and is authoritative; the backend sync after it
only decides whether a sync failure is reported.
"""

from typing import List

from parttime_jobs.core.constants import DEFAULT_PROFILE
from parttime_jobs.core.errors import ValidationError
from parttime_jobs.core.log import get_logger
from parttime_jobs.db.local_store import LocalStore, profile_key
from parttime_jobs.schemas.schemas import (
    Experience, ExperienceUpdate, ProfileUpdate, StudentProfile, User
)

log = get_logger(__name__)


def parse_skills(text: str) -> List[str]:
    """'Python, SQL, , python' -> ['Python', 'SQL']; case-insensitive de-dup, order kept."""
    seen = set()
    skills = []
    for raw in text.split(","):
        skill = raw.strip()
        if skill and skill.lower() not in seen:
            seen.add(skill.lower())
            skills.append(skill)
    return skills


def default_profile(user: User) -> StudentProfile:
    """Seeded profile for a student who has never saved one."""
    return StudentProfile(
        id=user.student_id or "1",
        first_name=user.first_name or DEFAULT_PROFILE["first_name"],
        last_name=user.last_name or DEFAULT_PROFILE["last_name"],
        dob=DEFAULT_PROFILE["dob"],
        email=user.email,
        phone=DEFAULT_PROFILE["phone"],
        university=user.university or DEFAULT_PROFILE["university"],
        degree=DEFAULT_PROFILE["degree"],
        bio=DEFAULT_PROFILE["bio"],
        skills=list(DEFAULT_PROFILE["skills"]),
        experience=[],
    )


def load_profile(store: LocalStore, user: User, prefix: str = "ptj") -> StudentProfile:
    """Stored profile for user, or the seeded default."""
    stored = store.load_model(profile_key(user.email, prefix), StudentProfile)
    if stored is not None:
        return stored
    log.debug("No stored profile for %s, using defaults", user.email)
    return default_profile(user)


def save_profile(store: LocalStore, profile: StudentProfile, prefix: str = "ptj") -> None:
    store.save_model(profile_key(profile.email, prefix), profile)


class ProfileEditor:
    """
    Field-by-field editing of one student's profile draft.
    """

    def __init__(self, profile: StudentProfile):
        self.profile = profile

    def update(self, changes: ProfileUpdate) -> StudentProfile:
        """Apply every field that was provided; skills come as comma text."""
        data = changes.model_dump(exclude_unset=True, exclude_none=True)
        skills_text = data.pop("skills_text", None)
        if skills_text is not None:
            data["skills"] = parse_skills(skills_text)
        self.profile = self.profile.model_copy(update=data)
        return self.profile

    def set_bio(self, bio: str) -> StudentProfile:
        self.profile = self.profile.model_copy(update={"bio": bio})
        return self.profile

    def add_experience(self) -> StudentProfile:
        """Append a blank position row."""
        rows = self.profile.experience + [Experience()]
        self.profile = self.profile.model_copy(update={"experience": rows})
        return self.profile

    def update_experience(self, index: int, changes: ExperienceUpdate) -> StudentProfile:
        rows = list(self.profile.experience)
        self._check_index(index, rows)
        rows[index] = rows[index].model_copy(update=changes.model_dump(exclude_none=True))
        self.profile = self.profile.model_copy(update={"experience": rows})
        return self.profile

    def remove_experience(self, index: int) -> StudentProfile:
        rows = list(self.profile.experience)
        self._check_index(index, rows)
        del rows[index]
        self.profile = self.profile.model_copy(update={"experience": rows})
        return self.profile

    @staticmethod
    def _check_index(index: int, rows: List[Experience]) -> None:
        if not 0 <= index < len(rows):
            raise ValidationError(f"No experience entry at position {index}.")

