"""Request authentication and role guards.

The default ``EmailHeaderAuthenticator`` trusts an ``X-User-Email`` header and
looks the account up: it identifies, it does not verify. Deployments that need
credential checks use ``FirebaseAuthenticator``, which verifies a Firebase ID
token before the lookup.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import firebase_admin
from fastapi import Depends, Request
from firebase_admin import auth, credentials

from pms.core.config import AuthProvider, Settings, get_settings
from pms.core.errors import AuthenticationError, PermissionDeniedError
from pms.models import User
from pms.models.enums import UserRole
from pms.services.store import RecordStore, get_record_store
from pms.services.users import ACCOUNT_NOT_FOUND

logger = logging.getLogger(__name__)


class Authenticator(ABC):
    """Resolves the user behind a request."""

    @abstractmethod
    def authenticate(self, request: Request, store: RecordStore) -> User:
        pass

    @staticmethod
    def _lookup(store: RecordStore, email: Optional[str]) -> User:
        if not email:
            raise AuthenticationError("Authentication required")
        user = store.load().find_user_by_email(email)
        if user is None:
            raise AuthenticationError(ACCOUNT_NOT_FOUND)
        return user


class EmailHeaderAuthenticator(Authenticator):
    """Placeholder login: the caller names itself by email."""

    def __init__(self, header_name: str = "X-User-Email"):
        self.header_name = header_name

    def authenticate(self, request: Request, store: RecordStore) -> User:
        return self._lookup(store, request.headers.get(self.header_name))


class FirebaseAuthenticator(Authenticator):
    """Verifies a Firebase ID token (Bearer) and maps its email to a user.

    This never mints tokens, it only verifies tokens issued by Firebase.
    """

    def __init__(self, project_id: str, credentials_path: Optional[str] = None):
        if not firebase_admin._apps:
            if credentials_path:
                firebase_admin.initialize_app(
                    credentials.Certificate(credentials_path), {"projectId": project_id}
                )
            else:
                firebase_admin.initialize_app(options={"projectId": project_id})

    def authenticate(self, request: Request, store: RecordStore) -> User:
        header = request.headers.get("Authorization", "")
        scheme, _, token = header.partition(" ")
        if scheme.lower() != "bearer" or not token:
            raise AuthenticationError("Authentication required")

        try:
            decoded_token = auth.verify_id_token(token)
        except auth.ExpiredIdTokenError:
            raise AuthenticationError("Token has expired")
        except (auth.InvalidIdTokenError, ValueError) as e:
            raise AuthenticationError(f"Invalid authentication token: {e}")

        return self._lookup(store, decoded_token.get("email"))


def build_authenticator(settings: Settings) -> Authenticator:
    if settings.auth_provider == AuthProvider.FIREBASE:
        return FirebaseAuthenticator(
            project_id=settings.firebase_project_id,
            credentials_path=settings.google_application_credentials,
        )
    return EmailHeaderAuthenticator(settings.auth_header_user_email)


_authenticator: Optional[Authenticator] = None


def get_authenticator() -> Authenticator:
    global _authenticator
    if _authenticator is None:
        _authenticator = build_authenticator(get_settings())
    return _authenticator


async def get_current_user(
    request: Request,
    authenticator: Authenticator = Depends(get_authenticator),
    store: RecordStore = Depends(get_record_store),
) -> User:
    """Resolve the calling user for this request."""
    return authenticator.authenticate(request, store)


def require_staff(current_user: User = Depends(get_current_user)) -> User:
    """Require an agent or admin."""
    if not current_user.is_staff:
        raise PermissionDeniedError("Agent or admin privileges required")
    return current_user


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != UserRole.ADMIN:
        raise PermissionDeniedError("Admin privileges required")
    return current_user


def require_tenant(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != UserRole.TENANT:
        raise PermissionDeniedError("Tenant account required")
    return current_user
