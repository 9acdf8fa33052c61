"""Tenant application (dossier) record."""

from datetime import datetime

from pydantic import Field

from pms.models.base import RecordModel
from pms.models.enums import ApplicationStatus, PENDING_PROPERTY_ID


class PersonalInfo(RecordModel):
    full_name: str = ""
    gender: str = ""
    dob: str = ""
    marital_status: str = ""
    dependents: int = Field(default=0, ge=0)
    nationality: str = ""
    state_of_origin: str = ""
    permanent_address: str = ""
    current_address: str = ""
    phone: str = ""


class IdentityInfo(RecordModel):
    id_type: str = "NIN"
    id_number: str = ""
    nin: str = ""
    id_url_front: str = ""
    id_url_back: str = ""
    selfie_url: str = ""


class EmploymentInfo(RecordModel):
    status: str = "Employed"
    employer: str = ""
    office_address: str = ""
    work_phone: str = ""
    job_title: str = ""
    monthly_income: float = Field(default=0, ge=0)
    income_proof_url: str = ""


class RentalHistory(RecordModel):
    previous_landlord: str = ""
    landlord_phone: str = ""
    duration: str = ""
    monthly_rent: float = Field(default=0, ge=0)
    reason_for_leaving: str = ""
    paid_on_time: bool = True


class EmergencyContact(RecordModel):
    name: str = ""
    phone: str = ""
    relationship: str = ""


class GuarantorInfo(RecordModel):
    name: str = ""
    phone: str = ""
    occupation: str = ""
    address: str = ""
    id_url: str = ""


class ApplicationDetails(RecordModel):
    """The applicant-editable field groups of a dossier."""

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    identity: IdentityInfo = Field(default_factory=IdentityInfo)
    employment: EmploymentInfo = Field(default_factory=EmploymentInfo)
    rental_history: RentalHistory = Field(default_factory=RentalHistory)
    emergency: EmergencyContact = Field(default_factory=EmergencyContact)
    guarantor: GuarantorInfo = Field(default_factory=GuarantorInfo)


class TenantApplication(ApplicationDetails):
    """A screening dossier routed to an agent.

    ``risk_score`` and ``ai_recommendation`` are narrative metadata set at
    submission; status decisions never recompute them.
    """

    id: str
    user_id: str
    property_id: str = PENDING_PROPERTY_ID
    agent_id: str
    status: ApplicationStatus = ApplicationStatus.PENDING
    submission_date: datetime
    risk_score: int = Field(ge=0, le=100)
    ai_recommendation: str = ""
