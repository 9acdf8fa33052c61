"""Account registration, login lookup and profile edits."""

import logging
import secrets
import string
from typing import Optional

from pms.core.errors import AuthenticationError, ConflictError, InvalidInputError, NotFoundError
from pms.models import User
from pms.models.base import new_id
from pms.models.enums import UserRole
from pms.services.store import RecordStore

logger = logging.getLogger(__name__)

ACCOUNT_NOT_FOUND = "Account not found. Please register or check details."
MISSING_FIELDS = "Please fill in all mandatory fields."
EMAIL_TAKEN = "This email is already registered."

_AGENT_ID_ALPHABET = string.ascii_uppercase + string.digits


def new_user_id(role: UserRole) -> str:
    """Agents get a shareable ``AGT-XXXXXX`` code applicants route to."""
    if role == UserRole.AGENT:
        return "AGT-" + "".join(secrets.choice(_AGENT_ID_ALPHABET) for _ in range(6))
    return new_id("u")


class UserService:
    """User accounts.

    Login is an unauthenticated email lookup; credential checks belong to the
    configured ``Authenticator``.
    """

    def __init__(self, store: RecordStore):
        self.store = store

    def get(self, user_id: str) -> User:
        user = self.store.load().find_user(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def find_by_email(self, email: str) -> Optional[User]:
        return self.store.load().find_user_by_email(email)

    def login(self, email: str) -> User:
        if not email or not email.strip():
            raise InvalidInputError(MISSING_FIELDS)
        user = self.find_by_email(email)
        if user is None:
            raise AuthenticationError(ACCOUNT_NOT_FOUND)
        logger.info("User logged in", extra={"user_id": user.id})
        return user

    def register(
        self,
        name: str,
        email: str,
        password: str,
        role: UserRole = UserRole.TENANT,
        phone: Optional[str] = None,
    ) -> User:
        # The password is only required, never stored.
        if not (name or "").strip() or not (email or "").strip() or not password:
            raise InvalidInputError(MISSING_FIELDS)

        with self.store.transaction() as state:
            if state.find_user_by_email(email):
                raise ConflictError(EMAIL_TAKEN)

            user_id = new_user_id(role)
            while state.find_user(user_id):
                user_id = new_user_id(role)

            user = User(
                id=user_id,
                name=name.strip(),
                email=email.strip(),
                role=role,
                phone=phone or "",
            )
            state.users.append(user)

        logger.info(f"Registered {role.value} account", extra={"user_id": user.id})
        return user

    def social_login(self, provider: str) -> User:
        """Simulated social sign-in: one tenant account per provider."""
        provider = (provider or "").strip()
        if not provider:
            raise InvalidInputError("Provider is required")

        email = f"social_{provider.lower()}@example.com"
        with self.store.transaction() as state:
            user = state.find_user_by_email(email)
            if user is None:
                user = User(
                    id=new_id("u_social_"),
                    name=f"{provider.capitalize()} Profile",
                    email=email,
                    role=UserRole.TENANT,
                    phone="",
                )
                state.users.append(user)
        return user

    def update_profile(
        self,
        user: User,
        name: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> User:
        if name is not None and not name.strip():
            raise InvalidInputError("Name cannot be empty")

        with self.store.transaction() as state:
            record = state.find_user(user.id)
            if record is None:
                raise NotFoundError("User", user.id)
            if name is not None:
                record.name = name.strip()
            if phone is not None:
                record.phone = phone
        return record
