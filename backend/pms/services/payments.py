"""Rent payments: listing, stats and settlement."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable

from pms.core.errors import InvalidTransitionError, NotFoundError, PermissionDeniedError
from pms.models import Payment, User
from pms.models.enums import PaymentStatus, UserRole
from pms.services.access import visible_payments
from pms.services.store import RecordStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaymentStats:
    total_paid: float
    outstanding: float
    pending_count: int


def payment_stats(payments: Iterable[Payment]) -> PaymentStats:
    payments = list(payments)
    pending = [p for p in payments if p.status == PaymentStatus.PENDING]
    return PaymentStats(
        total_paid=sum(p.amount for p in payments if p.status == PaymentStatus.PAID),
        outstanding=sum(p.amount for p in pending),
        pending_count=len(pending),
    )


class PaymentService:
    """No partial payments, refunds or late fees; pending -> paid is the only move."""

    def __init__(self, store: RecordStore, clock: Callable[[], datetime] = datetime.utcnow):
        self.store = store
        self.clock = clock

    def list_for(self, user: User) -> list[Payment]:
        return sorted(visible_payments(user, self.store.load()), key=lambda p: p.date, reverse=True)

    def stats_for(self, user: User) -> PaymentStats:
        return payment_stats(visible_payments(user, self.store.load()))

    def settle(self, user: User, payment_id: str) -> Payment:
        """Pay a pending bill; stamps the settlement time, keeps the amount."""
        if user.role != UserRole.TENANT:
            raise PermissionDeniedError("Only the tenant can settle a payment")

        with self.store.transaction() as state:
            payment = state.find_payment(payment_id)
            if payment is None or payment.tenant_id != user.id:
                raise NotFoundError("Payment", payment_id)
            if payment.status != PaymentStatus.PENDING:
                raise InvalidTransitionError("payment", payment.status.value, PaymentStatus.PAID.value)

            payment.status = PaymentStatus.PAID
            payment.date = self.clock()

        logger.info(
            f"Payment of {payment.amount} settled",
            extra={"payment_id": payment_id, "user_id": user.id, "property_id": payment.property_id},
        )
        return payment
