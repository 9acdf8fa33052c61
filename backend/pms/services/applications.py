"""Tenant applications (screenings): submission, edits and decisions."""

import logging
from datetime import datetime
from typing import Callable, Optional

from pms.core.errors import (
    InvalidInputError,
    InvalidTransitionError,
    NotFoundError,
    PermissionDeniedError,
)
from pms.models import AppState, ApplicationDetails, TenantApplication, User
from pms.models.base import new_id
from pms.models.enums import PENDING_PROPERTY_ID, ApplicationStatus, UserRole
from pms.services.access import visible_applications
from pms.services.notifications import NotificationEmitter
from pms.services.risk import RandomRiskScorer, RiskScorer
from pms.services.store import RecordStore

logger = logging.getLogger(__name__)

# Status decisions available to agents; every other edge is rejected.
ALLOWED_DECISIONS = {
    ApplicationStatus.PENDING: frozenset({ApplicationStatus.APPROVED, ApplicationStatus.REJECTED}),
}


def _routed_agent(state: AppState, agent_id: str) -> User:
    wanted = (agent_id or "").strip().lower()
    agent = next(
        (u for u in state.users if u.id.lower() == wanted and u.role == UserRole.AGENT),
        None,
    )
    if agent is None:
        raise InvalidInputError(f"No agent found with id {agent_id}")
    return agent


def _monthly_rent_hint(state: AppState, property_id: Optional[str]) -> Optional[float]:
    prop = state.find_property(property_id) if property_id else None
    return prop.rent / 12 if prop else None


class ApplicationService:
    def __init__(
        self,
        store: RecordStore,
        scorer: Optional[RiskScorer] = None,
        emitter: Optional[NotificationEmitter] = None,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.store = store
        self.scorer = scorer or RandomRiskScorer()
        self.clock = clock
        self.emitter = emitter or NotificationEmitter(clock)

    def list_for(self, user: User, search: Optional[str] = None) -> list[TenantApplication]:
        rows = visible_applications(user, self.store.load())
        if search:
            needle = search.strip().lower()
            rows = [
                a for a in rows
                if needle in a.personal_info.full_name.lower() or needle in a.id.lower()
            ]
        return rows

    def get_for(self, user: User, application_id: str) -> TenantApplication:
        for application in self.list_for(user):
            if application.id == application_id:
                return application
        raise NotFoundError("Application", application_id)

    def submit(
        self,
        user: User,
        agent_id: str,
        details: ApplicationDetails,
        preferred_property_id: Optional[str] = None,
    ) -> TenantApplication:
        """File a dossier routed to ``agent_id``.

        ``preferred_property_id`` only informs the risk score; the
        application's property stays PENDING until the tenant is assigned.
        """
        if user.role != UserRole.TENANT:
            raise PermissionDeniedError("Only tenants can submit applications")
        if not details.personal_info.full_name.strip():
            raise InvalidInputError("Full name is required")

        with self.store.transaction() as state:
            agent = _routed_agent(state, agent_id)
            risk = self.scorer.score(details, monthly_rent=_monthly_rent_hint(state, preferred_property_id))

            application = TenantApplication(
                id=new_id("app"),
                user_id=user.id,
                property_id=PENDING_PROPERTY_ID,
                agent_id=agent.id,
                status=ApplicationStatus.PENDING,
                submission_date=self.clock(),
                risk_score=risk.score,
                ai_recommendation=risk.recommendation,
                **details.model_dump(),
            )
            state.applications.append(application)
            self.emitter.application_received(state, agent.id, user.name)

        logger.info(
            f"Application routed to agent {agent.id}",
            extra={"application_id": application.id, "user_id": user.id},
        )
        return application

    def edit(
        self,
        user: User,
        application_id: str,
        details: ApplicationDetails,
        agent_id: Optional[str] = None,
        recompute_risk: bool = False,
    ) -> TenantApplication:
        """Replace the applicant's field groups while the dossier is PENDING."""
        with self.store.transaction() as state:
            application = state.find_application(application_id)
            if application is None or application.user_id != user.id:
                raise NotFoundError("Application", application_id)
            if application.status != ApplicationStatus.PENDING:
                raise InvalidTransitionError("application", application.status.value, "edited")

            if agent_id:
                application.agent_id = _routed_agent(state, agent_id).id

            for field, value in details:
                setattr(application, field, value)

            if recompute_risk:
                risk = self.scorer.score(details)
                application.risk_score = risk.score
                application.ai_recommendation = risk.recommendation

        return application

    def decide(self, user: User, application_id: str, new_status: ApplicationStatus) -> TenantApplication:
        """Approve or reject a PENDING dossier and tell the applicant."""
        with self.store.transaction() as state:
            application = state.find_application(application_id)
            if application is None:
                raise NotFoundError("Application", application_id)
            if user.role == UserRole.AGENT and application.agent_id != user.id:
                raise NotFoundError("Application", application_id)
            if not user.is_staff:
                raise PermissionDeniedError("Agent or admin privileges required")

            allowed = ALLOWED_DECISIONS.get(application.status, frozenset())
            if new_status not in allowed:
                raise InvalidTransitionError("application", application.status.value, new_status.value)

            application.status = new_status
            self.emitter.application_decided(
                state,
                application.user_id,
                application.id,
                approved=new_status == ApplicationStatus.APPROVED,
            )

        logger.info(
            f"Application marked {new_status.value}",
            extra={"application_id": application_id, "user_id": user.id},
        )
        return application
