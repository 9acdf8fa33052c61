"""API Routers for PMS."""

from pms.routers.agreements import router as agreements_router
from pms.routers.applications import router as applications_router
from pms.routers.auth import router as auth_router
from pms.routers.dashboard import router as dashboard_router
from pms.routers.maintenance import router as maintenance_router
from pms.routers.notifications import router as notifications_router
from pms.routers.payments import router as payments_router
from pms.routers.properties import router as properties_router

__all__ = [
    "auth_router",
    "properties_router",
    "applications_router",
    "agreements_router",
    "payments_router",
    "maintenance_router",
    "notifications_router",
    "dashboard_router",
]
