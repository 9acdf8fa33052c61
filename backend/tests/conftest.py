from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from pms.core.security import EmailHeaderAuthenticator, get_authenticator
from pms.main import create_app
from pms.models import ApplicationDetails, EmploymentInfo, PersonalInfo
from pms.services.assessment import KeywordAssessmentClient, get_assessment_client
from pms.services.notifications import NotificationEmitter
from pms.services.risk import IncomeRatioRiskScorer, get_risk_scorer
from pms.services.seed import build_seed_state
from pms.services.store import MemoryBackend, RecordStore, get_record_store

NOW = datetime(2025, 1, 1, 9, 30)


def fixed_clock() -> datetime:
    return NOW


def make_details(full_name: str = "Bob Buyer", monthly_income: float = 1200) -> ApplicationDetails:
    return ApplicationDetails(
        personal_info=PersonalInfo(full_name=full_name, phone="+1 (555) 444-5555"),
        employment=EmploymentInfo(employer="Acme", job_title="Engineer", monthly_income=monthly_income),
    )


@pytest.fixture
def store() -> RecordStore:
    return RecordStore(MemoryBackend(), seed_factory=lambda: build_seed_state(NOW))


@pytest.fixture
def emitter() -> NotificationEmitter:
    return NotificationEmitter(fixed_clock)


@pytest.fixture
def agent(store):
    return store.load().find_user("u1")


@pytest.fixture
def tenant(store):
    """Seed tenant assigned to p1."""
    return store.load().find_user("u2")


@pytest.fixture
def applicant(store):
    """Seed tenant with no unit."""
    return store.load().find_user("u3")


@pytest.fixture
def admin(store):
    return store.load().find_user("u4")


@pytest.fixture
def client(store):
    app = create_app()
    app.dependency_overrides[get_record_store] = lambda: store
    app.dependency_overrides[get_authenticator] = lambda: EmailHeaderAuthenticator()
    app.dependency_overrides[get_assessment_client] = lambda: KeywordAssessmentClient()
    app.dependency_overrides[get_risk_scorer] = lambda: IncomeRatioRiskScorer()
    with TestClient(app) as c:
        yield c


def as_user(email: str) -> dict[str, str]:
    return {"X-User-Email": email}
