"""Properties router."""

from typing import List

from fastapi import APIRouter, Depends, status

from pms.core.security import get_current_user, require_staff
from pms.models import Property, User
from pms.routers.deps import get_property_service
from pms.schemas.property import (
    PropertyCreate,
    PropertyStatusUpdate,
    PropertyUpdate,
    TenantAssignRequest,
    TenantAssignResponse,
)
from pms.services.access import approved_unassigned_tenants, available_properties_for_agent
from pms.services.properties import PropertyService

router = APIRouter(prefix="/properties", tags=["properties"])


@router.get("", response_model=List[Property])
async def list_properties(
    current_user: User = Depends(get_current_user),
    properties: PropertyService = Depends(get_property_service),
):
    """Properties the caller can see: all, owned, or the tenant's own unit."""
    return properties.list_for(current_user)


@router.post("", response_model=Property, status_code=status.HTTP_201_CREATED)
async def create_property(
    data: PropertyCreate,
    current_user: User = Depends(require_staff),
    properties: PropertyService = Depends(get_property_service),
):
    return properties.create(
        current_user,
        name=data.name,
        location=data.location,
        rent=data.rent,
        description=data.description,
        category=data.category,
        type=data.type,
        status=data.status,
        agent_id=data.agent_id,
    )


@router.get("/available/{agent_id}", response_model=List[Property])
async def list_available_for_agent(
    agent_id: str,
    current_user: User = Depends(get_current_user),
    properties: PropertyService = Depends(get_property_service),
):
    """Units an applicant routing to ``agent_id`` can express interest in."""
    return available_properties_for_agent(properties.store.load(), agent_id)


@router.get("/assignable-tenants", response_model=List[User])
async def list_assignable_tenants(
    current_user: User = Depends(require_staff),
    properties: PropertyService = Depends(get_property_service),
):
    """Tenants with an approved application and no unit yet."""
    return approved_unassigned_tenants(properties.store.load())


@router.get("/{property_id}", response_model=Property)
async def get_property(
    property_id: str,
    current_user: User = Depends(get_current_user),
    properties: PropertyService = Depends(get_property_service),
):
    return properties.get_for(current_user, property_id)


@router.patch("/{property_id}", response_model=Property)
async def update_property(
    property_id: str,
    data: PropertyUpdate,
    current_user: User = Depends(require_staff),
    properties: PropertyService = Depends(get_property_service),
):
    return properties.update(current_user, property_id, data.model_dump(exclude_unset=True))


@router.put("/{property_id}/status", response_model=Property)
async def set_property_status(
    property_id: str,
    data: PropertyStatusUpdate,
    current_user: User = Depends(require_staff),
    properties: PropertyService = Depends(get_property_service),
):
    return properties.set_status(current_user, property_id, data.status)


@router.post("/{property_id}/assign", response_model=TenantAssignResponse)
async def assign_tenant(
    property_id: str,
    data: TenantAssignRequest,
    current_user: User = Depends(require_staff),
    properties: PropertyService = Depends(get_property_service),
):
    """Assign an approved tenant and open a one-year lease."""
    prop, agreement = properties.assign_tenant(current_user, property_id, data.tenant_id)
    return TenantAssignResponse(property=prop, agreement=agreement)
