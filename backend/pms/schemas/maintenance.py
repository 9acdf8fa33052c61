"""Maintenance schemas."""

from typing import Optional

from pydantic import Field

from pms.models.enums import TicketStatus
from pms.schemas.base import BaseSchema


class TicketCreate(BaseSchema):
    """File a maintenance ticket against the tenant's unit."""

    issue: str = Field(..., min_length=1)
    image_url: Optional[str] = None


class TicketStatusUpdate(BaseSchema):
    status: TicketStatus
