"""Tenant application schemas."""

from typing import Optional

from pms.models import ApplicationDetails
from pms.models.enums import ApplicationStatus
from pms.schemas.base import BaseSchema


class ApplicationSubmit(BaseSchema):
    """Submit a dossier to the agent identified by ``agent_id``."""

    agent_id: str
    details: ApplicationDetails
    preferred_property_id: Optional[str] = None


class ApplicationEdit(BaseSchema):
    details: ApplicationDetails
    agent_id: Optional[str] = None
    recompute_risk: bool = False


class ApplicationDecision(BaseSchema):
    status: ApplicationStatus
