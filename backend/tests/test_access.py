from __future__ import annotations

from pms.models.enums import PropertyStatus
from pms.services.access import (
    approved_unassigned_tenants,
    available_properties_for_agent,
    can_manage_property,
    unassigned_tenants,
    visible_notifications,
    visible_payments,
    visible_properties,
    visible_tickets,
)


def test_admin_sees_every_property(store, admin):
    assert {p.id for p in visible_properties(admin, store.load())} == {"p1", "p2", "p3"}


def test_agent_sees_owned_properties_only(store, agent):
    state = store.load()
    state.properties[2].agent_id = "AGT-OTHER1"
    assert {p.id for p in visible_properties(agent, state)} == {"p1", "p2"}


def test_tenant_sees_assigned_unit_only(store, tenant, applicant):
    state = store.load()
    assert [p.id for p in visible_properties(tenant, state)] == ["p1"]
    assert visible_properties(applicant, state) == []


def test_tenant_payments_and_tickets_are_own(store, tenant, applicant, agent):
    state = store.load()
    assert {p.id for p in visible_payments(tenant, state)} == {"pay1", "pay2", "pay3"}
    assert visible_payments(applicant, state) == []
    assert visible_tickets(applicant, state) == []
    # Agents see every ticket, not only those on their own properties
    assert [t.id for t in visible_tickets(agent, state)] == ["t1"]


def test_notifications_are_recipient_only(store, agent, tenant):
    state = store.load()
    assert [n.id for n in visible_notifications(agent, state)] == ["n1"]
    assert [n.id for n in visible_notifications(tenant, state, search="reminder")] == ["n2"]
    assert visible_notifications(tenant, state, search="overdue") == []


def test_can_manage_property(store, agent, admin, tenant):
    prop = store.load().find_property("p2")
    assert can_manage_property(agent, prop)
    assert can_manage_property(admin, prop)
    assert not can_manage_property(tenant, prop)


def test_available_properties_skip_occupied_and_archived(store):
    state = store.load()
    state.find_property("p3").status = PropertyStatus.ARCHIVED
    assert [p.id for p in available_properties_for_agent(state, "U1")] == ["p2"]


def test_unassigned_tenants(store):
    state = store.load()
    assert [u.id for u in unassigned_tenants(state)] == ["u3"]
    assert approved_unassigned_tenants(state) == []
