"""Property record."""

from datetime import date
from typing import Optional

from pydantic import Field

from pms.models.base import RecordModel
from pms.models.enums import PropertyCategory, PropertyStatus, PropertyType


class Property(RecordModel):
    """A rentable unit managed by an agent.

    ``rent`` is the annual amount. OCCUPIED holds exactly when ``tenant_id`` is
    set and that tenant's ``assigned_property_id`` points back here.
    """

    id: str
    name: str
    location: str
    rent: float = Field(ge=0)
    status: PropertyStatus = PropertyStatus.VACANT
    agent_id: str
    tenant_id: Optional[str] = None
    category: PropertyCategory = PropertyCategory.RESIDENTIAL
    type: PropertyType = PropertyType.APARTMENT
    description: Optional[str] = None
    rent_start_date: Optional[date] = None
    rent_expiry_date: Optional[date] = None
