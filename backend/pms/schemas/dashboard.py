"""Dashboard schemas."""

from typing import Optional

from pms.models import Notification
from pms.schemas.base import BaseSchema
from pms.schemas.payment import PaymentStatsResponse


class DashboardResponse(BaseSchema):
    """Role-shaped overview; staff and tenant fields are mutually exclusive."""

    role: str
    # Agent/admin
    total_properties: Optional[int] = None
    occupied_properties: Optional[int] = None
    open_tickets: Optional[int] = None
    collected_revenue: Optional[float] = None
    # Tenant
    property_name: Optional[str] = None
    rent_status: Optional[str] = None
    active_tickets: Optional[int] = None
    lease_expiry: Optional[str] = None

    payments: PaymentStatsResponse
    recent_notifications: list[Notification] = []
