"""Notification use cases."""

from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
)
from .mark_all_read import MarkAllReadRequest, MarkAllReadResponse, MarkAllReadUseCase
from .mark_notification_read import (
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
)
from .unread_count import UnreadCountRequest, UnreadCountResponse, UnreadCountUseCase

__all__ = [
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkAllReadRequest",
    "MarkAllReadResponse",
    "MarkAllReadUseCase",
    "MarkNotificationReadRequest",
    "MarkNotificationReadUseCase",
    "UnreadCountRequest",
    "UnreadCountResponse",
    "UnreadCountUseCase",
]
