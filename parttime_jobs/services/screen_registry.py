"""
Screen Registry - the fixed set of views and the controls that request them.

Navigation is built per audience:
- guest:    Find Job / Hire Talent (mode toggle) / Login
- student:  Explore / My Apps / Profile
- employer: Console / Inbox / Post
"""

from typing import List, Optional

from parttime_jobs.schemas.schemas import NavItem, Screen, User, UserMode
from parttime_jobs.services.role_router import default_screen, is_employer_preview

EMPLOYER_PREVIEW_VIEW = "employer-preview"

# (icon, label, screen) in display order
_STUDENT_NAV = [
    ("search", "Explore", Screen.feed),
    ("assignment", "My Apps", Screen.tracker),
    ("person", "Profile", Screen.profile),
]

_EMPLOYER_NAV = [
    ("dashboard", "Console", Screen.dashboard),
    ("mail", "Inbox", Screen.inbox),
    ("add_box", "Post", Screen.create_job),
]


def navigation_for(user: Optional[User], guest_mode: UserMode, current: Screen) -> List[NavItem]:
    """Bottom navigation for the current audience."""
    if user is None:
        return [
            NavItem(icon="search", label="Find Job", action=f"mode:{UserMode.student.value}",
                    active=guest_mode == UserMode.student),
            NavItem(icon="business", label="Hire Talent", action=f"mode:{UserMode.employer.value}",
                    active=guest_mode == UserMode.employer),
            NavItem(icon="login", label="Login", action="auth"),
        ]

    entries = _STUDENT_NAV if user.mode == UserMode.student else _EMPLOYER_NAV
    return [
        NavItem(icon=icon, label=label, action=screen.value, active=current == screen)
        for icon, label, screen in entries
    ]


def home_screen(user: Optional[User]) -> Screen:
    """Where the logo click leads."""
    if user is None:
        return Screen.feed
    return default_screen(user.mode)


def shows_chrome(screen: Screen) -> bool:
    """Header and navigation are hidden while the create-job form is open."""
    return screen != Screen.create_job


def view_name(user: Optional[User], guest_mode: UserMode, screen: Screen) -> str:
    """Name of the view actually rendered for a resolved screen."""
    if is_employer_preview(user, guest_mode):
        return EMPLOYER_PREVIEW_VIEW
    return screen.value
