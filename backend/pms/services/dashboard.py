"""Per-role dashboard statistics."""

from dataclasses import dataclass, field
from typing import Optional, Union

from pms.models import Notification, User
from pms.models.enums import PaymentStatus, PropertyStatus, TicketStatus
from pms.services.access import (
    visible_notifications,
    visible_payments,
    visible_properties,
    visible_tickets,
)
from pms.services.store import RecordStore

NOT_AVAILABLE = "N/A"


@dataclass
class StaffDashboard:
    total_properties: int
    occupied_properties: int
    open_tickets: int
    collected_revenue: float
    recent_notifications: list[Notification] = field(default_factory=list)


@dataclass
class TenantDashboard:
    property_name: str
    rent_status: str
    active_tickets: int
    lease_expiry: str
    recent_notifications: list[Notification] = field(default_factory=list)


def build_dashboard(user: User, store: RecordStore, recent: int = 3) -> Union[StaffDashboard, TenantDashboard]:
    state = store.load()
    notifications = visible_notifications(user, state)[:recent]

    if user.is_staff:
        properties = visible_properties(user, state)
        return StaffDashboard(
            total_properties=len(properties),
            occupied_properties=sum(1 for p in properties if p.status == PropertyStatus.OCCUPIED),
            open_tickets=sum(1 for t in visible_tickets(user, state) if t.status == TicketStatus.OPEN),
            collected_revenue=sum(
                p.amount for p in visible_payments(user, state) if p.status == PaymentStatus.PAID
            ),
            recent_notifications=notifications,
        )

    prop = state.find_property(user.assigned_property_id)
    payments = visible_payments(user, state)
    tickets = visible_tickets(user, state)
    agreements = [a for a in state.agreements if a.tenant_id == user.id]
    latest: Optional[str] = None
    if agreements:
        latest = max(agreements, key=lambda a: a.start_date).end_date.isoformat()

    return TenantDashboard(
        property_name=prop.name if prop else NOT_AVAILABLE,
        rent_status="Pending" if any(p.status == PaymentStatus.PENDING for p in payments) else "Paid",
        active_tickets=sum(1 for t in tickets if t.status != TicketStatus.RESOLVED),
        lease_expiry=latest or NOT_AVAILABLE,
        recent_notifications=notifications,
    )
