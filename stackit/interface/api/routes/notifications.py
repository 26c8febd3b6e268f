"""Notification routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from stackit.application.projection import NotificationView
from stackit.application.usecase.auth import GetCurrentUserUseCase
from stackit.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllReadRequest,
    MarkAllReadResponse,
    MarkAllReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
    UnreadCountRequest,
    UnreadCountResponse,
    UnreadCountUseCase,
)
from stackit.domain.error import DomainError
from stackit.interface.api.auth import authenticate
from stackit.interface.api.errors import http_error

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """List the current user's most recent notifications, newest first."""
    user = await authenticate(get_current_user_use_case, authorization, auth_token)
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(user_id=user.user_id)
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
async def unread_count(
    unread_count_use_case: FromDishka[UnreadCountUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> UnreadCountResponse:
    """Number of unread notifications of the current user."""
    user = await authenticate(get_current_user_use_case, authorization, auth_token)
    return await unread_count_use_case.execute(
        UnreadCountRequest(user_id=user.user_id)
    )


@router.put("/read-all", response_model=MarkAllReadResponse)
async def mark_all_read(
    mark_all_read_use_case: FromDishka[MarkAllReadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> MarkAllReadResponse:
    """Mark every notification of the current user as read."""
    user = await authenticate(get_current_user_use_case, authorization, auth_token)
    return await mark_all_read_use_case.execute(
        MarkAllReadRequest(user_id=user.user_id)
    )


@router.put("/{notification_id}/read", response_model=NotificationView)
async def mark_notification_read(
    notification_id: UUID,
    mark_notification_read_use_case: FromDishka[MarkNotificationReadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> NotificationView:
    """Mark one notification as read. Only its recipient may do so."""
    user = await authenticate(get_current_user_use_case, authorization, auth_token)

    try:
        return await mark_notification_read_use_case.execute(
            MarkNotificationReadRequest(
                notification_id=str(notification_id), user_id=user.user_id
            )
        )
    except DomainError as e:
        logfire.warn(
            "Mark notification read rejected",
            notification_id=str(notification_id),
            error=str(e),
        )
        raise http_error(e)
