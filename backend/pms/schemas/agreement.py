"""Agreement schemas."""

from pydantic import Field

from pms.schemas.base import BaseSchema


class DocumentAttach(BaseSchema):
    document_url: str = Field(..., min_length=1)


class SummaryResponse(BaseSchema):
    agreement_id: str
    summary: str
