"""
Error taxonomy.

Every error is terminal at the component that detects it: services raise,
routes translate to HTTPException, state is left as it was.
"""


class AppError(Exception):
    """Base for all application errors. str(err) is the user-facing text."""


class ValidationError(AppError):
    """Missing or malformed required input."""


class AuthError(AppError):
    """Login or signup rejected."""


class InvalidCredentials(AuthError):
    pass


class IncorrectPassword(AuthError):
    pass


class PermissionDenied(AuthError):
    """Signed-in role may not perform the action."""


class SyncFailure(AppError):
    """Mocked backend save failed. The local copy stays authoritative."""


class GenerationFailure(AppError):
    """Text generation failed. Never escapes the text generation client."""


class OperationPending(AppError):
    """Same operation already in flight (double submission)."""


class OperationCancelled(AppError):
    """Operation was cancelled because its view was dismissed."""


class CorruptEntryError(AppError):
    """Stored value is not valid JSON."""
