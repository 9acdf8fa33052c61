"""Enumeration types for the PMS domain model."""

from enum import Enum


class UserRole(str, Enum):
    """Role of a user account."""
    ADMIN = "ADMIN"
    AGENT = "AGENT"
    TENANT = "TENANT"


class PropertyStatus(str, Enum):
    """Lifecycle status of a property."""
    DRAFT = "DRAFT"
    LISTED = "LISTED"
    VACANT = "VACANT"
    OCCUPIED = "OCCUPIED"
    ARCHIVED = "ARCHIVED"


class PropertyCategory(str, Enum):
    RESIDENTIAL = "RESIDENTIAL"
    COMMERCIAL = "COMMERCIAL"


class PropertyType(str, Enum):
    """Unit type."""
    APARTMENT = "APARTMENT"
    DUPLEX = "DUPLEX"
    BUNGALOW = "BUNGALOW"
    DETACHED_HOUSE = "DETACHED_HOUSE"
    TERRACE = "TERRACE"
    SELF_CONTAIN = "SELF_CONTAIN"
    STUDIO = "STUDIO"
    PENTHOUSE = "PENTHOUSE"
    OFFICE = "OFFICE"
    SHOP = "SHOP"
    WAREHOUSE = "WAREHOUSE"


class ApplicationStatus(str, Enum):
    """Status of a tenant application (dossier).

    REVIEWING and MORE_INFO_REQUIRED are accepted in stored records but no
    transition leads to them.
    """
    PENDING = "PENDING"
    REVIEWING = "REVIEWING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    MORE_INFO_REQUIRED = "MORE_INFO_REQUIRED"


class AgreementStatus(str, Enum):
    ACTIVE = "active"
    EXPIRED = "expired"
    TERMINATED = "terminated"


class PaymentStatus(str, Enum):
    PAID = "paid"
    PENDING = "pending"
    LATE = "late"


class TicketStatus(str, Enum):
    """Status of a maintenance ticket."""
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"


class TicketPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    EMERGENCY = "EMERGENCY"


class NotificationType(str, Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    SUCCESS = "SUCCESS"


# Placeholder property id carried by an application until its tenant is assigned.
PENDING_PROPERTY_ID = "PENDING"

# Statuses from which a property can be handed to a tenant.
ASSIGNABLE_PROPERTY_STATUSES = frozenset(
    {PropertyStatus.VACANT, PropertyStatus.LISTED, PropertyStatus.DRAFT}
)
