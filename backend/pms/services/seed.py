"""Default demo record used when no record has been persisted yet."""

from datetime import date, datetime
from typing import Optional

from pms.models import (
    Agreement,
    AppState,
    MaintenanceTicket,
    Notification,
    Payment,
    Property,
    User,
)
from pms.models.enums import (
    NotificationType,
    PaymentStatus,
    PropertyCategory,
    PropertyStatus,
    PropertyType,
    TicketPriority,
    TicketStatus,
    UserRole,
)


def build_seed_state(now: Optional[datetime] = None) -> AppState:
    """Build a fresh copy of the demo record.

    One agent with three properties (one occupied), two tenants, one admin,
    a signed agreement, three rent payments and one open ticket.
    """
    now = now or datetime.utcnow()

    return AppState(
        users=[
            User(id="u1", name="Alex Agent", email="agent@example.com",
                 role=UserRole.AGENT, phone="+1 (555) 999-0001"),
            User(id="u2", name="Terry Tenant", email="tenant@example.com",
                 role=UserRole.TENANT, assigned_property_id="p1", phone="+1 (555) 123-4567"),
            User(id="u3", name="Bob Buyer", email="buyer@example.com",
                 role=UserRole.TENANT, phone="+1 (555) 444-5555"),
            User(id="u4", name="Sarah Admin", email="admin@example.com",
                 role=UserRole.ADMIN, phone="+1 (555) 000-0000"),
        ],
        properties=[
            Property(id="p1", name="Sunset Apartments #402", location="123 Sky Ln, Miami",
                     rent=2500, status=PropertyStatus.OCCUPIED, agent_id="u1", tenant_id="u2",
                     category=PropertyCategory.RESIDENTIAL, type=PropertyType.APARTMENT),
            Property(id="p2", name="Downtown Loft", location="55 Main St, Chicago",
                     rent=3200, status=PropertyStatus.VACANT, agent_id="u1",
                     category=PropertyCategory.RESIDENTIAL, type=PropertyType.STUDIO),
            Property(id="p3", name="Oak Ridge Villa", location="88 Forest Rd, Seattle",
                     rent=4500, status=PropertyStatus.LISTED, agent_id="u1",
                     category=PropertyCategory.RESIDENTIAL, type=PropertyType.DETACHED_HOUSE),
        ],
        agreements=[
            Agreement(id="a1", property_id="p1", tenant_id="u2", version=1,
                      start_date=date(2023, 1, 1), end_date=date(2024, 12, 31),
                      document_url="https://example.com/lease_v1.pdf"),
        ],
        payments=[
            Payment(id="pay1", property_id="p1", tenant_id="u2", amount=2500,
                    date=datetime(2023, 11, 1), status=PaymentStatus.PAID),
            Payment(id="pay2", property_id="p1", tenant_id="u2", amount=2500,
                    date=datetime(2023, 12, 1), status=PaymentStatus.PENDING),
            Payment(id="pay3", property_id="p1", tenant_id="u2", amount=2500,
                    date=datetime(2024, 1, 1), status=PaymentStatus.PENDING),
        ],
        tickets=[
            MaintenanceTicket(id="t1", property_id="p1", tenant_id="u2",
                              issue="Leaking faucet in kitchen", status=TicketStatus.OPEN,
                              priority=TicketPriority.MEDIUM, created_at=now),
        ],
        notifications=[
            Notification(id="n1", user_id="u1", title="Rent Overdue",
                         message="Terry Tenant is 5 days late on rent for Sunset Apartments #402.",
                         type=NotificationType.WARNING, timestamp=now, link_to="payments"),
            Notification(id="n2", user_id="u2", title="Rent Reminder",
                         message="Your rent of $2,500 is due in 3 days.",
                         type=NotificationType.INFO, timestamp=now, link_to="payments"),
        ],
        applications=[],
    )
