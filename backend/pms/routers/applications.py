"""Applications (screenings) router."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from pms.core.security import get_current_user, require_staff, require_tenant
from pms.models import TenantApplication, User
from pms.routers.deps import get_application_service
from pms.schemas.application import ApplicationDecision, ApplicationEdit, ApplicationSubmit
from pms.services.applications import ApplicationService

router = APIRouter(prefix="/applications", tags=["applications"])


@router.get("", response_model=List[TenantApplication])
async def list_applications(
    search: Optional[str] = Query(None, description="Match applicant name or application id"),
    current_user: User = Depends(get_current_user),
    applications: ApplicationService = Depends(get_application_service),
):
    return applications.list_for(current_user, search=search)


@router.post("", response_model=TenantApplication, status_code=status.HTTP_201_CREATED)
async def submit_application(
    data: ApplicationSubmit,
    current_user: User = Depends(require_tenant),
    applications: ApplicationService = Depends(get_application_service),
):
    """Submit a dossier to an agent; the agent is notified."""
    return applications.submit(
        current_user,
        agent_id=data.agent_id,
        details=data.details,
        preferred_property_id=data.preferred_property_id,
    )


@router.get("/{application_id}", response_model=TenantApplication)
async def get_application(
    application_id: str,
    current_user: User = Depends(get_current_user),
    applications: ApplicationService = Depends(get_application_service),
):
    return applications.get_for(current_user, application_id)


@router.put("/{application_id}", response_model=TenantApplication)
async def edit_application(
    application_id: str,
    data: ApplicationEdit,
    current_user: User = Depends(require_tenant),
    applications: ApplicationService = Depends(get_application_service),
):
    return applications.edit(
        current_user,
        application_id,
        details=data.details,
        agent_id=data.agent_id,
        recompute_risk=data.recompute_risk,
    )


@router.post("/{application_id}/decision", response_model=TenantApplication)
async def decide_application(
    application_id: str,
    data: ApplicationDecision,
    current_user: User = Depends(require_staff),
    applications: ApplicationService = Depends(get_application_service),
):
    """Approve or reject a pending application."""
    return applications.decide(current_user, application_id, data.status)
