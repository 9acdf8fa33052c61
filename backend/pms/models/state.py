"""The whole application record."""

from typing import Optional

from pydantic import Field

from pms.models.agreement import Agreement
from pms.models.application import TenantApplication
from pms.models.base import RecordModel
from pms.models.maintenance import MaintenanceTicket
from pms.models.notification import Notification
from pms.models.payment import Payment
from pms.models.property import Property
from pms.models.user import User


class AppState(RecordModel):
    """Every collection, persisted as one JSON document."""

    users: list[User] = Field(default_factory=list)
    properties: list[Property] = Field(default_factory=list)
    agreements: list[Agreement] = Field(default_factory=list)
    payments: list[Payment] = Field(default_factory=list)
    tickets: list[MaintenanceTicket] = Field(default_factory=list)
    notifications: list[Notification] = Field(default_factory=list)
    applications: list[TenantApplication] = Field(default_factory=list)

    def find_user(self, user_id: Optional[str]) -> Optional[User]:
        return next((u for u in self.users if u.id == user_id), None)

    def find_user_by_email(self, email: str) -> Optional[User]:
        wanted = email.strip().lower()
        return next((u for u in self.users if u.email.lower() == wanted), None)

    def find_property(self, property_id: Optional[str]) -> Optional[Property]:
        return next((p for p in self.properties if p.id == property_id), None)

    def find_application(self, application_id: str) -> Optional[TenantApplication]:
        return next((a for a in self.applications if a.id == application_id), None)

    def find_agreement(self, agreement_id: str) -> Optional[Agreement]:
        return next((a for a in self.agreements if a.id == agreement_id), None)

    def find_payment(self, payment_id: str) -> Optional[Payment]:
        return next((p for p in self.payments if p.id == payment_id), None)

    def find_ticket(self, ticket_id: str) -> Optional[MaintenanceTicket]:
        return next((t for t in self.tickets if t.id == ticket_id), None)

    def find_notification(self, notification_id: str) -> Optional[Notification]:
        return next((n for n in self.notifications if n.id == notification_id), None)
