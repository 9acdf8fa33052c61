"""Maintenance router."""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from pms.core.security import get_current_user, require_staff, require_tenant
from pms.models import MaintenanceTicket, User
from pms.models.enums import TicketStatus
from pms.routers.deps import get_maintenance_service
from pms.schemas.maintenance import TicketCreate, TicketStatusUpdate
from pms.services.maintenance import MaintenanceService

router = APIRouter(prefix="/maintenance", tags=["maintenance"])


@router.post("", response_model=MaintenanceTicket, status_code=status.HTTP_201_CREATED)
async def create_ticket(
    data: TicketCreate,
    current_user: User = Depends(require_tenant),
    maintenance: MaintenanceService = Depends(get_maintenance_service),
):
    """File a ticket; priority comes from automated triage when available."""
    return await maintenance.create(current_user, data.issue, image_url=data.image_url)


@router.get("", response_model=List[MaintenanceTicket])
async def list_tickets(
    status: Optional[TicketStatus] = None,
    current_user: User = Depends(get_current_user),
    maintenance: MaintenanceService = Depends(get_maintenance_service),
):
    return maintenance.list_for(current_user, status=status)


@router.get("/{ticket_id}", response_model=MaintenanceTicket)
async def get_ticket(
    ticket_id: str,
    current_user: User = Depends(get_current_user),
    maintenance: MaintenanceService = Depends(get_maintenance_service),
):
    return maintenance.get_for(current_user, ticket_id)


@router.put("/{ticket_id}/status", response_model=MaintenanceTicket)
async def update_ticket_status(
    ticket_id: str,
    data: TicketStatusUpdate,
    current_user: User = Depends(require_staff),
    maintenance: MaintenanceService = Depends(get_maintenance_service),
):
    return maintenance.update_status(current_user, ticket_id, data.status)
