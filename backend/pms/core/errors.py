"""Domain error taxonomy.

Every error carries the HTTP status it maps to; the API installs one handler
that renders ``{"detail": message}``. Services raise these, routers never
translate them by hand.
"""

from fastapi import status


class PMSError(Exception):
    """Base class for user-facing domain errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(PMSError):
    """Missing required field or out-of-range value."""


class AuthenticationError(PMSError):
    status_code = status.HTTP_401_UNAUTHORIZED


class PermissionDeniedError(PMSError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(PMSError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"{resource} not found")
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(PMSError):
    status_code = status.HTTP_409_CONFLICT


class InvalidTransitionError(ConflictError):
    """A status change the workflow does not allow."""

    def __init__(self, resource: str, current: str, target: str):
        super().__init__(f"Cannot move {resource} from {current} to {target}")
        self.current = current
        self.target = target


class StoreCorruptionError(PMSError):
    """Persisted record could not be read; the store fell back to the seed.

    Recorded on the store for inspection, never raised to API callers.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
