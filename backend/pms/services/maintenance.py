"""Maintenance tickets: tenant filing with automated triage, staff status updates."""

import logging
from datetime import datetime
from typing import Callable, Optional

from pms.core.errors import InvalidInputError, NotFoundError, PermissionDeniedError
from pms.models import MaintenanceTicket, User
from pms.models.base import new_id
from pms.models.enums import TicketStatus, UserRole
from pms.services.access import visible_tickets
from pms.services.assessment import AssessmentClient, DisabledAssessmentClient
from pms.services.notifications import NotificationEmitter
from pms.services.store import RecordStore

logger = logging.getLogger(__name__)


class MaintenanceService:
    """Maintenance ticket workflow.

    GUARDRAILS:
    - Triage is advisory; it sets the initial priority only
    - A failed triage never blocks filing a ticket
    """

    def __init__(
        self,
        store: RecordStore,
        assessor: Optional[AssessmentClient] = None,
        emitter: Optional[NotificationEmitter] = None,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.store = store
        self.assessor = assessor or DisabledAssessmentClient()
        self.clock = clock
        self.emitter = emitter or NotificationEmitter(clock)

    def list_for(self, user: User, status: Optional[TicketStatus] = None) -> list[MaintenanceTicket]:
        tickets = visible_tickets(user, self.store.load())
        if status:
            tickets = [t for t in tickets if t.status == status]
        return sorted(tickets, key=lambda t: t.created_at, reverse=True)

    def get_for(self, user: User, ticket_id: str) -> MaintenanceTicket:
        ticket = next((t for t in visible_tickets(user, self.store.load()) if t.id == ticket_id), None)
        if ticket is None:
            raise NotFoundError("Ticket", ticket_id)
        return ticket

    async def create(self, user: User, issue: str, image_url: Optional[str] = None) -> MaintenanceTicket:
        """File a ticket against the tenant's assigned property."""
        if user.role != UserRole.TENANT:
            raise PermissionDeniedError("Only tenants can file maintenance requests")
        issue = (issue or "").strip()
        if not issue:
            raise InvalidInputError("Describe the issue")

        state = self.store.load()
        tenant = state.find_user(user.id)
        if tenant is None or not tenant.assigned_property_id:
            raise InvalidInputError("You need an assigned property to file a maintenance request")

        # Triage runs outside the transaction; the record is re-read after it
        triage = await self.assessor.classify_maintenance(issue)

        with self.store.transaction() as state:
            prop = state.find_property(tenant.assigned_property_id)
            if prop is None:
                raise NotFoundError("Property", tenant.assigned_property_id)

            ticket = MaintenanceTicket(
                id=new_id("t"),
                tenant_id=user.id,
                property_id=prop.id,
                issue=issue,
                status=TicketStatus.OPEN,
                priority=triage.priority,
                created_at=self.clock(),
                image_url=image_url,
                ai_assessment=triage.assessment,
            )
            state.tickets.insert(0, ticket)
            self.emitter.ticket_logged(state, prop.agent_id, prop.name)

        logger.info(
            f"Ticket filed with {ticket.priority.value} priority",
            extra={"ticket_id": ticket.id, "property_id": ticket.property_id, "user_id": user.id},
        )
        return ticket

    def update_status(self, user: User, ticket_id: str, new_status: TicketStatus) -> MaintenanceTicket:
        """Move a ticket to any status; the tenant hears about every change."""
        if not user.is_staff:
            raise PermissionDeniedError("Agent or admin privileges required")

        current = self.store.load().find_ticket(ticket_id)
        if current is None:
            raise NotFoundError("Ticket", ticket_id)
        if current.status == new_status:
            return current

        with self.store.transaction() as state:
            ticket = state.find_ticket(ticket_id)
            if ticket is None:
                raise NotFoundError("Ticket", ticket_id)
            ticket.status = new_status
            self.emitter.ticket_status_changed(
                state, ticket.tenant_id, ticket.id, new_status.value.replace("_", " ")
            )

        logger.info(
            f"Ticket moved to {new_status.value}",
            extra={"ticket_id": ticket_id, "user_id": user.id},
        )
        return ticket
