"""
Notification inbox endpoints.
"""

from fastapi import APIRouter, Query

from skillswapper.api.dependencies import CurrentUserIdDep, ManageNotificationsDep
from skillswapper.api.schemas.common import ApiResponse, clamp, ok
from skillswapper.config.settings import settings

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=ApiResponse, response_model_exclude_none=True)
async def list_notifications(
    user_id: CurrentUserIdDep,
    use_case: ManageNotificationsDep,
    limit: int = Query(settings.NOTIFICATIONS_DEFAULT_LIMIT),
    offset: int = Query(0),
    unread_only: bool = Query(False, alias="unreadOnly"),
):
    """The current user's notifications, newest first."""
    page = await use_case.list(
        user_id,
        limit=clamp(limit, 1, settings.NOTIFICATIONS_MAX_LIMIT),
        offset=max(offset, 0),
        unread_only=unread_only,
    )
    return ok(page.to_dict())


@router.get("/unread-count", response_model=ApiResponse, response_model_exclude_none=True)
async def unread_count(user_id: CurrentUserIdDep, use_case: ManageNotificationsDep):
    return ok({"unreadCount": await use_case.unread_count(user_id)})


@router.put("/mark-all-read", response_model=ApiResponse, response_model_exclude_none=True)
async def mark_all_read(user_id: CurrentUserIdDep, use_case: ManageNotificationsDep):
    updated = await use_case.mark_all_read(user_id)
    return ok({"updated": updated}, message="All notifications marked as read")


@router.put("/{notification_id}/read", response_model=ApiResponse, response_model_exclude_none=True)
async def mark_read(
    notification_id: int, user_id: CurrentUserIdDep, use_case: ManageNotificationsDep
):
    await use_case.mark_read(user_id, notification_id)
    return ok(message="Notification marked as read")


@router.delete("/{notification_id}", response_model=ApiResponse, response_model_exclude_none=True)
async def delete_notification(
    notification_id: int, user_id: CurrentUserIdDep, use_case: ManageNotificationsDep
):
    await use_case.delete(user_id, notification_id)
    return ok(message="Notification deleted")
