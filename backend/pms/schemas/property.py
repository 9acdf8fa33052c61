"""Property schemas."""

from typing import Optional

from pydantic import Field, field_validator

from pms.models import Agreement, Property
from pms.models.enums import PropertyCategory, PropertyStatus, PropertyType
from pms.schemas.base import BaseSchema


class PropertyCreate(BaseSchema):
    """Create a property."""

    name: str = Field(..., min_length=1, max_length=255)
    location: str = Field(..., min_length=1)
    rent: float = Field(..., gt=0)
    description: Optional[str] = None
    category: PropertyCategory = PropertyCategory.RESIDENTIAL
    type: PropertyType = PropertyType.APARTMENT
    status: PropertyStatus = PropertyStatus.VACANT
    # Admins may create on behalf of an agent
    agent_id: Optional[str] = None


class PropertyUpdate(BaseSchema):
    """Edit descriptive fields; unset fields are left alone."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    location: Optional[str] = Field(None, min_length=1)
    rent: Optional[float] = Field(None, gt=0)
    description: Optional[str] = None
    category: Optional[PropertyCategory] = None
    type: Optional[PropertyType] = None

    @field_validator("name", "location", "rent", "category", "type")
    @classmethod
    def not_null(cls, value):
        # Omit a field to leave it unchanged; only description may be cleared
        if value is None:
            raise ValueError("must not be null")
        return value


class PropertyStatusUpdate(BaseSchema):
    status: PropertyStatus


class TenantAssignRequest(BaseSchema):
    tenant_id: str


class TenantAssignResponse(BaseSchema):
    property: Property
    agreement: Agreement
