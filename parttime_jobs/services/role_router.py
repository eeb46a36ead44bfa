"""
Role Router - decides which screen is actually rendered.

Students and employers have disjoint screen sets. A request outside the
caller's set silently resolves to that role's default; guests only ever get
the default of the active mode toggle. Every (user, requested screen, mode)
combination maps to exactly one screen.
"""

from typing import Dict, FrozenSet, Optional

from parttime_jobs.schemas.schemas import Screen, User, UserMode


ROLE_SCREENS: Dict[UserMode, FrozenSet[Screen]] = {
    UserMode.student: frozenset({Screen.feed, Screen.profile, Screen.tracker}),
    UserMode.employer: frozenset({Screen.dashboard, Screen.inbox, Screen.create_job}),
}

DEFAULT_SCREEN: Dict[UserMode, Screen] = {
    UserMode.student: Screen.feed,
    UserMode.employer: Screen.dashboard,
}


def allowed_screens(mode: UserMode) -> FrozenSet[Screen]:
    return ROLE_SCREENS[mode]


def default_screen(mode: UserMode) -> Screen:
    return DEFAULT_SCREEN[mode]


def guest_screen(guest_mode: UserMode) -> Screen:
    """Screen shown to a signed-out visitor for the active mode toggle."""
    return DEFAULT_SCREEN[guest_mode]


def resolve_screen(user: Optional[User], requested: Screen,
                   guest_mode: UserMode = UserMode.student) -> Screen:
    """Map a screen request to the screen the current audience may see."""
    if user is None:
        return guest_screen(guest_mode)
    if requested in ROLE_SCREENS[user.mode]:
        return requested
    return DEFAULT_SCREEN[user.mode]


def is_employer_preview(user: Optional[User], guest_mode: UserMode) -> bool:
    """Guests browsing in employer mode see the hiring call-to-action panel."""
    return user is None and guest_mode == UserMode.employer
