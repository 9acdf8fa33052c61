"""Notification record."""

from datetime import datetime
from typing import Optional

from pms.models.base import RecordModel
from pms.models.enums import NotificationType


class Notification(RecordModel):
    id: str
    user_id: str
    title: str
    message: str
    type: NotificationType = NotificationType.INFO
    timestamp: datetime
    is_read: bool = False
    # Target view for deep links, e.g. "payments"
    link_to: Optional[str] = None
