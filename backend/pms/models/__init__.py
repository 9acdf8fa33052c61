"""Domain records for PMS.

Records are pydantic models persisted together as one ``AppState`` document;
``RecordDocument`` is the SQLAlchemy table the SQL backend writes it to.
"""

from pms.models.agreement import Agreement
from pms.models.application import (
    ApplicationDetails,
    EmergencyContact,
    EmploymentInfo,
    GuarantorInfo,
    IdentityInfo,
    PersonalInfo,
    RentalHistory,
    TenantApplication,
)
from pms.models.document import RecordDocument
from pms.models.maintenance import MaintenanceTicket
from pms.models.notification import Notification
from pms.models.payment import Payment
from pms.models.property import Property
from pms.models.state import AppState
from pms.models.user import User

__all__ = [
    "Agreement",
    "ApplicationDetails",
    "AppState",
    "EmergencyContact",
    "EmploymentInfo",
    "GuarantorInfo",
    "IdentityInfo",
    "MaintenanceTicket",
    "Notification",
    "Payment",
    "PersonalInfo",
    "Property",
    "RecordDocument",
    "RentalHistory",
    "TenantApplication",
    "User",
]
