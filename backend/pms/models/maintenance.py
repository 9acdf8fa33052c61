"""MaintenanceTicket record."""

from datetime import datetime
from typing import Optional

from pms.models.base import RecordModel
from pms.models.enums import TicketPriority, TicketStatus


class MaintenanceTicket(RecordModel):
    """A repair request filed by a tenant."""

    id: str
    tenant_id: str
    property_id: str
    issue: str
    status: TicketStatus = TicketStatus.OPEN
    priority: TicketPriority = TicketPriority.MEDIUM
    created_at: datetime
    image_url: Optional[str] = None
    ai_assessment: Optional[str] = None
