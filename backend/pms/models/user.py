"""User record."""

from typing import Optional

from pms.models.base import RecordModel
from pms.models.enums import UserRole


class User(RecordModel):
    """A person using the suite: admin, agent or tenant."""

    id: str
    name: str
    email: str
    role: UserRole
    phone: Optional[str] = None
    # Tenant's current unit
    assigned_property_id: Optional[str] = None

    @property
    def is_staff(self) -> bool:
        return self.role in (UserRole.ADMIN, UserRole.AGENT)
