"""Lease agreement record."""

from datetime import date
from typing import Optional

from pms.models.base import RecordModel
from pms.models.enums import AgreementStatus


class Agreement(RecordModel):
    """A lease created once per tenant assignment."""

    id: str
    property_id: str
    tenant_id: str
    version: int = 1
    start_date: date
    end_date: date
    status: AgreementStatus = AgreementStatus.ACTIVE
    document_url: Optional[str] = None
