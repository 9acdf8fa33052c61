"""Services for PMS."""

from pms.services.agreements import AgreementService
from pms.services.applications import ApplicationService
from pms.services.assessment import AssessmentClient, get_assessment_client
from pms.services.dashboard import build_dashboard
from pms.services.maintenance import MaintenanceService
from pms.services.notifications import NotificationEmitter, NotificationService
from pms.services.payments import PaymentService
from pms.services.properties import PropertyService
from pms.services.risk import RiskScorer, get_risk_scorer
from pms.services.store import RecordStore, get_record_store
from pms.services.users import UserService

__all__ = [
    "AgreementService",
    "ApplicationService",
    "AssessmentClient",
    "get_assessment_client",
    "build_dashboard",
    "MaintenanceService",
    "NotificationEmitter",
    "NotificationService",
    "PaymentService",
    "PropertyService",
    "RiskScorer",
    "get_risk_scorer",
    "RecordStore",
    "get_record_store",
    "UserService",
]
