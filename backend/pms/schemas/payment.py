"""Payment schemas."""

from pms.schemas.base import BaseSchema


class PaymentStatsResponse(BaseSchema):
    total_paid: float
    outstanding: float
    pending_count: int
