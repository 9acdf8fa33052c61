from __future__ import annotations

import asyncio

from pms.models.enums import TicketStatus
from pms.services.agreements import AgreementService, lease_text
from pms.services.assessment import FALLBACK_SUMMARY, KeywordAssessmentClient
from pms.services.dashboard import NOT_AVAILABLE, StaffDashboard, TenantDashboard, build_dashboard


def test_staff_dashboard(store, agent):
    overview = build_dashboard(agent, store)
    assert isinstance(overview, StaffDashboard)
    assert overview.total_properties == 3
    assert overview.occupied_properties == 1
    assert overview.open_tickets == 1
    assert overview.collected_revenue == 2500
    assert [n.id for n in overview.recent_notifications] == ["n1"]


def test_tenant_dashboard(store, tenant):
    overview = build_dashboard(tenant, store)
    assert isinstance(overview, TenantDashboard)
    assert overview.property_name == "Sunset Apartments #402"
    assert overview.rent_status == "Pending"
    assert overview.active_tickets == 1
    assert overview.lease_expiry == "2024-12-31"


def test_unassigned_tenant_dashboard(store, applicant):
    overview = build_dashboard(applicant, store)
    assert overview.property_name == NOT_AVAILABLE
    assert overview.rent_status == "Paid"
    assert overview.lease_expiry == NOT_AVAILABLE


def test_resolved_tickets_are_not_active(store, tenant):
    with store.transaction() as state:
        state.find_ticket("t1").status = TicketStatus.RESOLVED
    assert build_dashboard(tenant, store).active_tickets == 0


def test_lease_text_and_summary(store, tenant, agent):
    state = store.load()
    text = lease_text(state, state.find_agreement("a1"))
    assert text.startswith("Lease agreement version 1 for Sunset Apartments #402")
    assert "2023-01-01 to 2024-12-31" in text

    summary = asyncio.run(AgreementService(store, KeywordAssessmentClient()).summarize(tenant, "a1"))
    assert summary.splitlines()[0] == "- Lease agreement version 1 for Sunset Apartments #402."

    assert asyncio.run(AgreementService(store).summarize(agent, "a1")) == FALLBACK_SUMMARY


def test_attach_document(store, agent):
    agreement = AgreementService(store).attach_document(agent, "a1", " https://example.com/lease_v2.pdf ")
    assert agreement.document_url == "https://example.com/lease_v2.pdf"
