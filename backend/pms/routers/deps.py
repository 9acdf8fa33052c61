"""Service dependencies shared by the routers."""

from fastapi import Depends

from pms.services.agreements import AgreementService
from pms.services.applications import ApplicationService
from pms.services.assessment import AssessmentClient, get_assessment_client
from pms.services.maintenance import MaintenanceService
from pms.services.notifications import NotificationService
from pms.services.payments import PaymentService
from pms.services.properties import PropertyService
from pms.services.risk import RiskScorer, get_risk_scorer
from pms.services.store import RecordStore, get_record_store
from pms.services.users import UserService


def get_user_service(store: RecordStore = Depends(get_record_store)) -> UserService:
    return UserService(store)


def get_property_service(store: RecordStore = Depends(get_record_store)) -> PropertyService:
    return PropertyService(store)


def get_application_service(
    store: RecordStore = Depends(get_record_store),
    scorer: RiskScorer = Depends(get_risk_scorer),
) -> ApplicationService:
    return ApplicationService(store, scorer=scorer)


def get_agreement_service(
    store: RecordStore = Depends(get_record_store),
    assessor: AssessmentClient = Depends(get_assessment_client),
) -> AgreementService:
    return AgreementService(store, assessor=assessor)


def get_payment_service(store: RecordStore = Depends(get_record_store)) -> PaymentService:
    return PaymentService(store)


def get_maintenance_service(
    store: RecordStore = Depends(get_record_store),
    assessor: AssessmentClient = Depends(get_assessment_client),
) -> MaintenanceService:
    return MaintenanceService(store, assessor=assessor)


def get_notification_service(store: RecordStore = Depends(get_record_store)) -> NotificationService:
    return NotificationService(store)
