"""Notification schemas."""

from pms.schemas.base import BaseSchema


class UnreadCount(BaseSchema):
    unread: int


class MarkAllReadResponse(BaseSchema):
    updated: int
