"""Property lifecycle: creation, edits, status changes and tenant assignment."""

import logging
from datetime import date, datetime, timedelta
from typing import Any, Callable, Optional

from pms.core.errors import (
    ConflictError,
    InvalidInputError,
    InvalidTransitionError,
    NotFoundError,
    PermissionDeniedError,
)
from pms.models import Agreement, AppState, Property, User
from pms.models.base import new_id
from pms.models.enums import (
    ASSIGNABLE_PROPERTY_STATUSES,
    AgreementStatus,
    PropertyCategory,
    PropertyStatus,
    PropertyType,
    UserRole,
)
from pms.services.access import approved_application_for, can_manage_property, visible_properties
from pms.services.notifications import NotificationEmitter
from pms.services.store import RecordStore

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = "Modern living space with premium amenities."

# Fields an owner may edit directly; status has its own operation.
EDITABLE_FIELDS = ("name", "location", "rent", "description", "category", "type")


def lease_end_date(start: date) -> date:
    """One calendar year minus one day: 2025-01-01 -> 2025-12-31.

    A lease starting on 29 February ends on 28 February of the next year.
    """
    try:
        anniversary = start.replace(year=start.year + 1)
    except ValueError:
        anniversary = date(start.year + 1, 3, 1)
    return anniversary - timedelta(days=1)


def get_manageable_property(state: AppState, user: User, property_id: str) -> Property:
    prop = state.find_property(property_id)
    if prop is None:
        raise NotFoundError("Property", property_id)
    if not can_manage_property(user, prop):
        raise PermissionDeniedError("You do not manage this property")
    return prop


class PropertyService:
    """Agent/admin operations on properties."""

    def __init__(
        self,
        store: RecordStore,
        emitter: Optional[NotificationEmitter] = None,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.store = store
        self.clock = clock
        self.emitter = emitter or NotificationEmitter(clock)

    def list_for(self, user: User) -> list[Property]:
        return visible_properties(user, self.store.load())

    def get_for(self, user: User, property_id: str) -> Property:
        for prop in self.list_for(user):
            if prop.id == property_id:
                return prop
        raise NotFoundError("Property", property_id)

    def create(
        self,
        user: User,
        name: str,
        location: str,
        rent: float,
        description: Optional[str] = None,
        category: PropertyCategory = PropertyCategory.RESIDENTIAL,
        type: PropertyType = PropertyType.APARTMENT,
        status: PropertyStatus = PropertyStatus.VACANT,
        agent_id: Optional[str] = None,
    ) -> Property:
        """Create a property owned by the calling agent (or an agent an admin names)."""
        if not user.is_staff:
            raise PermissionDeniedError("Agent or admin privileges required")
        if not (name or "").strip() or not (location or "").strip() or rent is None or rent <= 0:
            raise InvalidInputError("Name, location and a positive rent are required")
        if status == PropertyStatus.OCCUPIED:
            raise InvalidInputError("A new property cannot start out occupied")

        owner_id = user.id
        if agent_id and agent_id != user.id:
            if user.role != UserRole.ADMIN:
                raise PermissionDeniedError("Only admins can create properties for other agents")
            owner_id = agent_id

        with self.store.transaction() as state:
            owner = state.find_user(owner_id)
            if owner is None or not owner.is_staff:
                raise InvalidInputError(f"Unknown agent {owner_id}")

            prop = Property(
                id=new_id("p"),
                name=name.strip(),
                location=location.strip(),
                rent=rent,
                description=(description or "").strip() or DEFAULT_DESCRIPTION,
                category=category,
                type=type,
                status=status,
                agent_id=owner_id,
            )
            state.properties.append(prop)

        logger.info("Property created", extra={"property_id": prop.id, "user_id": user.id})
        return prop

    def update(self, user: User, property_id: str, changes: dict[str, Any]) -> Property:
        """Edit descriptive fields of a property."""
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise InvalidInputError(f"Cannot edit fields: {', '.join(sorted(unknown))}")
        cleared = sorted(f for f, v in changes.items() if v is None and f != "description")
        if cleared:
            raise InvalidInputError(f"Fields cannot be empty: {', '.join(cleared)}")
        if "name" in changes and not (changes["name"] or "").strip():
            raise InvalidInputError("Name cannot be empty")
        if "location" in changes and not (changes["location"] or "").strip():
            raise InvalidInputError("Location cannot be empty")
        if "rent" in changes and (changes["rent"] is None or changes["rent"] <= 0):
            raise InvalidInputError("Rent must be positive")

        with self.store.transaction() as state:
            prop = get_manageable_property(state, user, property_id)
            for field, value in changes.items():
                setattr(prop, field, value)
        return prop

    def set_status(self, user: User, property_id: str, new_status: PropertyStatus) -> Property:
        """Move a property among DRAFT, LISTED, VACANT and ARCHIVED.

        OCCUPIED is only entered through ``assign_tenant`` and never left by
        hand while a tenant is in place.
        """
        with self.store.transaction() as state:
            prop = get_manageable_property(state, user, property_id)
            if new_status == PropertyStatus.OCCUPIED or prop.status == PropertyStatus.OCCUPIED:
                if new_status != prop.status:
                    raise InvalidTransitionError("property", prop.status.value, new_status.value)
            prop.status = new_status

        logger.info(
            f"Property status set to {new_status.value}",
            extra={"property_id": property_id, "user_id": user.id},
        )
        return prop

    def assign_tenant(self, user: User, property_id: str, tenant_id: str) -> tuple[Property, Agreement]:
        """Hand a vacant property to an approved, unassigned tenant.

        Applied as one unit: property tenancy and rent dates, the tenant's
        assigned unit, the approved application's property, a version 1
        agreement and a SUCCESS notification to the tenant.
        """
        with self.store.transaction() as state:
            prop = get_manageable_property(state, user, property_id)
            if prop.status not in ASSIGNABLE_PROPERTY_STATUSES or prop.tenant_id:
                raise ConflictError(f"Property {prop.name} is not available for assignment ({prop.status.value})")

            tenant = state.find_user(tenant_id)
            if tenant is None or tenant.role != UserRole.TENANT:
                raise NotFoundError("Tenant", tenant_id)
            if tenant.assigned_property_id:
                raise ConflictError(f"{tenant.name} is already assigned to a property")

            application = approved_application_for(state, tenant.id)
            if application is None:
                raise ConflictError(f"{tenant.name} has no approved application")

            start = self.clock().date()
            end = lease_end_date(start)

            prop.tenant_id = tenant.id
            prop.status = PropertyStatus.OCCUPIED
            prop.rent_start_date = start
            prop.rent_expiry_date = end
            tenant.assigned_property_id = prop.id
            application.property_id = prop.id

            agreement = Agreement(
                id=new_id("a"),
                property_id=prop.id,
                tenant_id=tenant.id,
                version=1,
                start_date=start,
                end_date=end,
                status=AgreementStatus.ACTIVE,
            )
            state.agreements.append(agreement)
            self.emitter.property_assigned(state, tenant.id, prop.name)

        logger.info(
            f"Tenant {tenant_id} assigned, lease {start} to {end}",
            extra={"property_id": property_id, "user_id": user.id},
        )
        return prop, agreement
