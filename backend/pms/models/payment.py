"""Rent payment record."""

from datetime import datetime

from pydantic import Field

from pms.models.base import RecordModel
from pms.models.enums import PaymentStatus


class Payment(RecordModel):
    id: str
    tenant_id: str
    property_id: str
    amount: float = Field(ge=0)
    # Due date while pending, settlement time once paid
    date: datetime
    status: PaymentStatus = PaymentStatus.PENDING
