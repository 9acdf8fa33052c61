from __future__ import annotations

from datetime import date

import pytest

from pms.core.errors import (
    ConflictError,
    InvalidInputError,
    InvalidTransitionError,
    PermissionDeniedError,
)
from pms.models.enums import (
    ApplicationStatus,
    NotificationType,
    PropertyStatus,
    PropertyType,
)
from pms.services.applications import ApplicationService
from pms.services.properties import DEFAULT_DESCRIPTION, PropertyService, lease_end_date
from pms.services.risk import IncomeRatioRiskScorer

from conftest import fixed_clock, make_details


def _approve(store, emitter, applicant, agent):
    apps = ApplicationService(store, scorer=IncomeRatioRiskScorer(), emitter=emitter, clock=fixed_clock)
    application = apps.submit(applicant, "u1", make_details())
    apps.decide(agent, application.id, ApplicationStatus.APPROVED)
    return application


@pytest.fixture
def properties(store, emitter):
    return PropertyService(store, emitter=emitter, clock=fixed_clock)


def test_lease_end_date():
    assert lease_end_date(date(2025, 1, 1)) == date(2025, 12, 31)
    assert lease_end_date(date(2025, 6, 15)) == date(2026, 6, 14)
    assert lease_end_date(date(2024, 2, 29)) == date(2025, 2, 28)


def test_agent_creates_property(properties, agent):
    prop = properties.create(agent, name="  Harbor View  ", location="1 Pier Rd", rent=1800,
                             type=PropertyType.PENTHOUSE)
    assert prop.agent_id == "u1"
    assert prop.name == "Harbor View"
    assert prop.status == PropertyStatus.VACANT
    assert prop.description == DEFAULT_DESCRIPTION
    assert properties.store.load().find_property(prop.id) is not None


def test_create_rejects_bad_input(properties, agent, tenant):
    with pytest.raises(InvalidInputError):
        properties.create(agent, name="", location="x", rent=100)
    with pytest.raises(InvalidInputError):
        properties.create(agent, name="x", location="x", rent=100, status=PropertyStatus.OCCUPIED)
    with pytest.raises(PermissionDeniedError):
        properties.create(tenant, name="x", location="x", rent=100)
    with pytest.raises(PermissionDeniedError):
        properties.create(agent, name="x", location="x", rent=100, agent_id="u4")


def test_admin_creates_for_agent(properties, admin):
    prop = properties.create(admin, name="Corner Shop", location="2 High St", rent=900,
                             type=PropertyType.SHOP, agent_id="u1")
    assert prop.agent_id == "u1"


def test_update_fields(properties, agent):
    prop = properties.update(agent, "p2", {"rent": 3300, "description": "Top floor"})
    assert prop.rent == 3300
    assert prop.description == "Top floor"
    with pytest.raises(InvalidInputError):
        properties.update(agent, "p2", {"status": PropertyStatus.OCCUPIED})


def test_status_cannot_touch_occupied(properties, agent):
    assert properties.set_status(agent, "p2", PropertyStatus.LISTED).status == PropertyStatus.LISTED
    with pytest.raises(InvalidTransitionError):
        properties.set_status(agent, "p2", PropertyStatus.OCCUPIED)
    with pytest.raises(InvalidTransitionError):
        properties.set_status(agent, "p1", PropertyStatus.VACANT)


def test_assign_tenant_applies_all_effects(store, emitter, properties, agent, applicant):
    application = _approve(store, emitter, applicant, agent)

    prop, agreement = properties.assign_tenant(agent, "p2", "u3")

    state = store.load()
    assert prop.tenant_id == "u3"
    assert state.find_property("p2").status == PropertyStatus.OCCUPIED
    assert state.find_property("p2").rent_start_date == date(2025, 1, 1)
    assert state.find_property("p2").rent_expiry_date == date(2025, 12, 31)
    assert state.find_user("u3").assigned_property_id == "p2"
    assert state.find_application(application.id).property_id == "p2"

    assert agreement.version == 1
    assert agreement.start_date == date(2025, 1, 1)
    assert agreement.end_date == date(2025, 12, 31)
    assert state.find_agreement(agreement.id).tenant_id == "u3"

    latest = state.notifications[0]
    assert latest.user_id == "u3"
    assert latest.type == NotificationType.SUCCESS
    assert latest.link_to == "agreements"


def test_assign_requires_approved_application(store, properties, agent):
    before = store.load()
    with pytest.raises(ConflictError):
        properties.assign_tenant(agent, "p2", "u3")
    after = store.load()
    assert after.find_property("p2").status == PropertyStatus.VACANT
    assert len(after.agreements) == len(before.agreements)


def test_occupied_property_cannot_be_reassigned(store, emitter, properties, agent, applicant):
    _approve(store, emitter, applicant, agent)
    with pytest.raises(ConflictError):
        properties.assign_tenant(agent, "p1", "u3")


def test_tenant_cannot_hold_two_units(store, emitter, properties, agent, applicant):
    _approve(store, emitter, applicant, agent)
    properties.assign_tenant(agent, "p2", "u3")
    with pytest.raises(ConflictError):
        properties.assign_tenant(agent, "p3", "u3")


def test_update_refuses_null_fields(properties, agent):
    with pytest.raises(InvalidInputError):
        properties.update(agent, "p2", {"category": None})
    with pytest.raises(InvalidInputError):
        properties.update(agent, "p2", {"type": None})
    assert properties.update(agent, "p2", {"description": None}).description is None
