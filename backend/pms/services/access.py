"""Role-scoped view filters.

Pure functions deriving what a user may see from the full record.

    Role    Properties           Applications     Tickets / Payments / Agreements
    ADMIN   all                  all              all
    AGENT   agent_id == self     agent_id == self all
    TENANT  id == assigned unit  user_id == self  tenant_id == self

Agents see every ticket, payment and agreement, not only those on their own
properties.
"""

from typing import Optional

from pms.models import (
    Agreement,
    AppState,
    MaintenanceTicket,
    Notification,
    Payment,
    Property,
    TenantApplication,
    User,
)
from pms.models.enums import ApplicationStatus, PropertyStatus, UserRole


def visible_properties(user: User, state: AppState) -> list[Property]:
    if user.role == UserRole.ADMIN:
        return list(state.properties)
    if user.role == UserRole.AGENT:
        return [p for p in state.properties if p.agent_id == user.id]
    if not user.assigned_property_id:
        return []
    return [p for p in state.properties if p.id == user.assigned_property_id]


def visible_applications(user: User, state: AppState) -> list[TenantApplication]:
    if user.role == UserRole.ADMIN:
        return list(state.applications)
    if user.role == UserRole.AGENT:
        return [a for a in state.applications if a.agent_id == user.id]
    return [a for a in state.applications if a.user_id == user.id]


def visible_tickets(user: User, state: AppState) -> list[MaintenanceTicket]:
    if user.is_staff:
        return list(state.tickets)
    return [t for t in state.tickets if t.tenant_id == user.id]


def visible_payments(user: User, state: AppState) -> list[Payment]:
    if user.is_staff:
        return list(state.payments)
    return [p for p in state.payments if p.tenant_id == user.id]


def visible_agreements(user: User, state: AppState) -> list[Agreement]:
    if user.is_staff:
        return list(state.agreements)
    return [a for a in state.agreements if a.tenant_id == user.id]


def visible_notifications(
    user: User,
    state: AppState,
    search: Optional[str] = None,
) -> list[Notification]:
    """The user's own notifications, newest first."""
    rows = [n for n in state.notifications if n.user_id == user.id]
    if search:
        needle = search.strip().lower()
        rows = [n for n in rows if needle in n.title.lower() or needle in n.message.lower()]
    return sorted(rows, key=lambda n: n.timestamp, reverse=True)


def can_manage_property(user: User, prop: Property) -> bool:
    """Admins manage everything; agents manage the properties they own."""
    if user.role == UserRole.ADMIN:
        return True
    return user.role == UserRole.AGENT and prop.agent_id == user.id


def available_properties_for_agent(state: AppState, agent_id: str) -> list[Property]:
    """Properties an applicant routing to ``agent_id`` may pick from."""
    wanted = agent_id.strip().lower()
    return [
        p for p in state.properties
        if p.agent_id.lower() == wanted
        and p.status not in (PropertyStatus.OCCUPIED, PropertyStatus.ARCHIVED)
    ]


def unassigned_tenants(state: AppState) -> list[User]:
    return [u for u in state.users if u.role == UserRole.TENANT and not u.assigned_property_id]


def approved_application_for(state: AppState, user_id: str) -> Optional[TenantApplication]:
    """The applicant's most recent APPROVED application, if any."""
    approved = [
        a for a in state.applications
        if a.user_id == user_id and a.status == ApplicationStatus.APPROVED
    ]
    if not approved:
        return None
    return max(approved, key=lambda a: a.submission_date)


def approved_unassigned_tenants(state: AppState) -> list[User]:
    """Tenants who can be handed a property right now."""
    return [u for u in unassigned_tenants(state) if approved_application_for(state, u.id)]
