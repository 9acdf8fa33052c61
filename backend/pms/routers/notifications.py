"""Notifications router - the caller's own inbox."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from pms.core.security import get_current_user
from pms.models import Notification, User
from pms.routers.deps import get_notification_service
from pms.schemas.notification import MarkAllReadResponse, UnreadCount
from pms.services.notifications import NotificationService

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=List[Notification])
async def list_notifications(
    search: Optional[str] = Query(None),
    current_user: User = Depends(get_current_user),
    notifications: NotificationService = Depends(get_notification_service),
):
    """Newest first."""
    return notifications.list_for(current_user, search=search)


@router.get("/unread-count", response_model=UnreadCount)
async def unread_count(
    current_user: User = Depends(get_current_user),
    notifications: NotificationService = Depends(get_notification_service),
):
    return UnreadCount(unread=notifications.unread_count(current_user))


@router.post("/read-all", response_model=MarkAllReadResponse)
async def mark_all_read(
    current_user: User = Depends(get_current_user),
    notifications: NotificationService = Depends(get_notification_service),
):
    return MarkAllReadResponse(updated=notifications.mark_all_read(current_user))


@router.post("/{notification_id}/read", response_model=Notification)
async def mark_read(
    notification_id: str,
    current_user: User = Depends(get_current_user),
    notifications: NotificationService = Depends(get_notification_service),
):
    return notifications.mark_read(current_user, notification_id)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_notification(
    notification_id: str,
    current_user: User = Depends(get_current_user),
    notifications: NotificationService = Depends(get_notification_service),
):
    notifications.delete(current_user, notification_id)
