"""Agreements router."""

from typing import List

from fastapi import APIRouter, Depends

from pms.core.security import get_current_user, require_staff
from pms.models import Agreement, User
from pms.routers.deps import get_agreement_service
from pms.schemas.agreement import DocumentAttach, SummaryResponse
from pms.services.agreements import AgreementService

router = APIRouter(prefix="/agreements", tags=["agreements"])


@router.get("", response_model=List[Agreement])
async def list_agreements(
    current_user: User = Depends(get_current_user),
    agreements: AgreementService = Depends(get_agreement_service),
):
    return agreements.list_for(current_user)


@router.get("/{agreement_id}", response_model=Agreement)
async def get_agreement(
    agreement_id: str,
    current_user: User = Depends(get_current_user),
    agreements: AgreementService = Depends(get_agreement_service),
):
    return agreements.get_for(current_user, agreement_id)


@router.put("/{agreement_id}/document", response_model=Agreement)
async def attach_document(
    agreement_id: str,
    data: DocumentAttach,
    current_user: User = Depends(require_staff),
    agreements: AgreementService = Depends(get_agreement_service),
):
    return agreements.attach_document(current_user, agreement_id, data.document_url)


@router.post("/{agreement_id}/summary", response_model=SummaryResponse)
async def summarize_agreement(
    agreement_id: str,
    current_user: User = Depends(get_current_user),
    agreements: AgreementService = Depends(get_agreement_service),
):
    """Plain-language summary of a lease. Falls back to a fixed message."""
    summary = await agreements.summarize(current_user, agreement_id)
    return SummaryResponse(agreement_id=agreement_id, summary=summary)
