"""Dashboard router - per-role overview."""

from fastapi import APIRouter, Depends

from pms.core.security import get_current_user
from pms.models import User
from pms.schemas.dashboard import DashboardResponse
from pms.schemas.payment import PaymentStatsResponse
from pms.services.dashboard import StaffDashboard, build_dashboard
from pms.services.payments import PaymentService
from pms.services.store import RecordStore, get_record_store

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    current_user: User = Depends(get_current_user),
    store: RecordStore = Depends(get_record_store),
):
    """Get the caller's overview.

    Returns:
    - Agent/admin: property, occupancy, open ticket and revenue totals
    - Tenant: unit name, rent status, active tickets and lease expiry
    - Payment stats and the three most recent notifications
    """
    overview = build_dashboard(current_user, store)
    stats = PaymentService(store).stats_for(current_user)
    payments = PaymentStatsResponse(
        total_paid=stats.total_paid,
        outstanding=stats.outstanding,
        pending_count=stats.pending_count,
    )

    if isinstance(overview, StaffDashboard):
        return DashboardResponse(
            role=current_user.role.value,
            total_properties=overview.total_properties,
            occupied_properties=overview.occupied_properties,
            open_tickets=overview.open_tickets,
            collected_revenue=overview.collected_revenue,
            payments=payments,
            recent_notifications=overview.recent_notifications,
        )
    return DashboardResponse(
        role=current_user.role.value,
        property_name=overview.property_name,
        rent_status=overview.rent_status,
        active_tickets=overview.active_tickets,
        lease_expiry=overview.lease_expiry,
        payments=payments,
        recent_notifications=overview.recent_notifications,
    )
