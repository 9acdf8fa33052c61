"""Lease agreements: listing, document attachment and summaries."""

import logging
from typing import Optional

from pms.core.errors import InvalidInputError, NotFoundError, PermissionDeniedError
from pms.models import Agreement, AppState, User
from pms.services.access import visible_agreements
from pms.services.assessment import AssessmentClient, DisabledAssessmentClient
from pms.services.store import RecordStore

logger = logging.getLogger(__name__)


def lease_text(state: AppState, agreement: Agreement) -> str:
    """Plain-text rendering of an agreement for summarization."""
    prop = state.find_property(agreement.property_id)
    tenant = state.find_user(agreement.tenant_id)
    parts = [
        f"Lease agreement version {agreement.version} for "
        f"{prop.name if prop else 'property ' + agreement.property_id}",
    ]
    if prop:
        parts.append(f"Location: {prop.location}")
        parts.append(f"Annual rent: {prop.rent:,.2f}")
    if tenant:
        parts.append(f"Tenant: {tenant.name}")
    parts.append(f"Term: {agreement.start_date.isoformat()} to {agreement.end_date.isoformat()}")
    parts.append(f"Status: {agreement.status.value}")
    return ". ".join(parts) + "."


class AgreementService:
    def __init__(self, store: RecordStore, assessor: Optional[AssessmentClient] = None):
        self.store = store
        self.assessor = assessor or DisabledAssessmentClient()

    def list_for(self, user: User) -> list[Agreement]:
        return visible_agreements(user, self.store.load())

    def get_for(self, user: User, agreement_id: str) -> Agreement:
        agreement = next(
            (a for a in visible_agreements(user, self.store.load()) if a.id == agreement_id),
            None,
        )
        if agreement is None:
            raise NotFoundError("Agreement", agreement_id)
        return agreement

    def attach_document(self, user: User, agreement_id: str, document_url: str) -> Agreement:
        """Record where the signed lease document lives."""
        if not user.is_staff:
            raise PermissionDeniedError("Agent or admin privileges required")
        if not (document_url or "").strip():
            raise InvalidInputError("Document URL is required")

        with self.store.transaction() as state:
            agreement = state.find_agreement(agreement_id)
            if agreement is None:
                raise NotFoundError("Agreement", agreement_id)
            agreement.document_url = document_url.strip()

        logger.info(f"Document attached to agreement {agreement_id}", extra={"user_id": user.id})
        return agreement

    async def summarize(self, user: User, agreement_id: str) -> str:
        agreement = self.get_for(user, agreement_id)
        return await self.assessor.summarize_lease(lease_text(self.store.load(), agreement))
