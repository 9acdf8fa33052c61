"""Notification emitter and inbox operations."""

import logging
from datetime import datetime
from typing import Callable, Optional

from pms.core.errors import NotFoundError
from pms.models import AppState, Notification, User
from pms.models.base import new_id
from pms.models.enums import NotificationType
from pms.services.access import visible_notifications
from pms.services.store import RecordStore

logger = logging.getLogger(__name__)


class NotificationEmitter:
    """Builds notifications and prepends them to the record (newest first)."""

    def __init__(self, clock: Callable[[], datetime] = datetime.utcnow):
        self.clock = clock

    def emit(
        self,
        state: AppState,
        recipient_user_id: str,
        title: str,
        message: str,
        type: NotificationType = NotificationType.INFO,
        link_to: Optional[str] = None,
    ) -> Notification:
        """Create a notification for ``recipient_user_id``."""
        notification = Notification(
            id=new_id("n"),
            user_id=recipient_user_id,
            title=title,
            message=message,
            type=type,
            timestamp=self.clock(),
            is_read=False,
            link_to=link_to,
        )
        state.notifications.insert(0, notification)
        logger.debug("Notification %s queued for %s", notification.id, recipient_user_id)
        return notification

    def property_assigned(self, state: AppState, tenant_id: str, property_name: str) -> Notification:
        return self.emit(
            state,
            tenant_id,
            title="Property Assigned",
            message=f"You have been assigned to {property_name}. Your lease agreement is now active.",
            type=NotificationType.SUCCESS,
            link_to="agreements",
        )

    def application_received(
        self, state: AppState, agent_id: str, applicant_name: str
    ) -> Notification:
        return self.emit(
            state,
            agent_id,
            title="New Application Received",
            message=f"A new application has been submitted by {applicant_name}.",
            type=NotificationType.INFO,
            link_to="screenings",
        )

    def application_decided(
        self, state: AppState, applicant_id: str, application_id: str, approved: bool
    ) -> Notification:
        verdict = "approved" if approved else "rejected"
        return self.emit(
            state,
            applicant_id,
            title="Application Update",
            message=f"Your application {application_id} has been marked as {verdict}.",
            type=NotificationType.SUCCESS if approved else NotificationType.INFO,
            link_to="applications",
        )

    def ticket_logged(self, state: AppState, agent_id: str, property_name: str) -> Notification:
        return self.emit(
            state,
            agent_id,
            title="Maintenance Logged",
            message=f"A new repair request has been filed for {property_name}.",
            type=NotificationType.INFO,
            link_to="maintenance",
        )

    def ticket_status_changed(
        self, state: AppState, tenant_id: str, ticket_id: str, status_label: str
    ) -> Notification:
        return self.emit(
            state,
            tenant_id,
            title="Ticket Status Updated",
            message=f"Request #{ticket_id} is now {status_label}.",
            type=NotificationType.INFO,
            link_to="maintenance",
        )


class NotificationService:
    """Inbox operations; only the recipient can touch a notification."""

    def __init__(self, store: RecordStore):
        self.store = store

    def list_for(self, user: User, search: Optional[str] = None) -> list[Notification]:
        return visible_notifications(user, self.store.load(), search=search)

    def unread_count(self, user: User) -> int:
        state = self.store.load()
        return sum(1 for n in state.notifications if n.user_id == user.id and not n.is_read)

    def recent(self, user: User, limit: int = 3) -> list[Notification]:
        return self.list_for(user)[:limit]

    def mark_read(self, user: User, notification_id: str) -> Notification:
        with self.store.transaction() as state:
            notification = self._own(state, user, notification_id)
            notification.is_read = True
        return notification

    def mark_all_read(self, user: User) -> int:
        """Mark every notification of ``user`` read; returns how many changed."""
        changed = 0
        with self.store.transaction() as state:
            for notification in state.notifications:
                if notification.user_id == user.id and not notification.is_read:
                    notification.is_read = True
                    changed += 1
        return changed

    def delete(self, user: User, notification_id: str) -> None:
        with self.store.transaction() as state:
            notification = self._own(state, user, notification_id)
            state.notifications.remove(notification)

    @staticmethod
    def _own(state: AppState, user: User, notification_id: str) -> Notification:
        notification = state.find_notification(notification_id)
        # Other users' notifications are indistinguishable from missing ones
        if notification is None or notification.user_id != user.id:
            raise NotFoundError("Notification", notification_id)
        return notification
