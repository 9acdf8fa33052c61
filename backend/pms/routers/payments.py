"""Payments router."""

from typing import List

from fastapi import APIRouter, Depends

from pms.core.security import get_current_user, require_tenant
from pms.models import Payment, User
from pms.routers.deps import get_payment_service
from pms.schemas.payment import PaymentStatsResponse
from pms.services.payments import PaymentService

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("", response_model=List[Payment])
async def list_payments(
    current_user: User = Depends(get_current_user),
    payments: PaymentService = Depends(get_payment_service),
):
    return payments.list_for(current_user)


@router.get("/stats", response_model=PaymentStatsResponse)
async def payment_stats(
    current_user: User = Depends(get_current_user),
    payments: PaymentService = Depends(get_payment_service),
):
    stats = payments.stats_for(current_user)
    return PaymentStatsResponse(
        total_paid=stats.total_paid,
        outstanding=stats.outstanding,
        pending_count=stats.pending_count,
    )


@router.post("/{payment_id}/settle", response_model=Payment)
async def settle_payment(
    payment_id: str,
    current_user: User = Depends(require_tenant),
    payments: PaymentService = Depends(get_payment_service),
):
    """Pay a pending bill in full."""
    return payments.settle(current_user, payment_id)
