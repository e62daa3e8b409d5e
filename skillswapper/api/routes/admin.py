"""
Admin endpoints.

Admin access is granted by a token issued from the configured admin
credentials, never by a flag on a user account.
"""

from typing import Optional

from fastapi import APIRouter, Query

from skillswapper.api.dependencies import AdminDep, AdministerUsersDep, AuthenticateUserDep
from skillswapper.api.schemas.admin import WarningSchema
from skillswapper.api.schemas.auth import AdminLoginRequestSchema
from skillswapper.api.schemas.common import ApiResponse, clamp, ok
from skillswapper.config.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/login", response_model=ApiResponse, response_model_exclude_none=True)
async def admin_login(payload: AdminLoginRequestSchema, use_case: AuthenticateUserDep):
    token = use_case.admin_login(payload.email, payload.password)
    return ok({"token": token, "role": "admin"}, message="Admin login successful")


@router.get("/users", response_model=ApiResponse, response_model_exclude_none=True)
async def list_users(
    _: AdminDep,
    use_case: AdministerUsersDep,
    search: Optional[str] = None,
    page: int = Query(1),
    limit: int = Query(20),
):
    data = await use_case.list_users(
        search=search.strip() if search else None, page=max(page, 1), limit=clamp(limit, 1, 100)
    )
    return ok(data)


@router.get("/users/{user_id}", response_model=ApiResponse, response_model_exclude_none=True)
async def user_detail(user_id: int, _: AdminDep, use_case: AdministerUsersDep):
    return ok({"user": await use_case.user_detail(user_id)})


@router.delete("/users/{user_id}", response_model=ApiResponse, response_model_exclude_none=True)
async def delete_user(user_id: int, claims: AdminDep, use_case: AdministerUsersDep):
    await use_case.delete_user(user_id)
    logger.info("Admin deleted user", user_id=user_id, admin=claims.get("sub"))
    return ok(message="User deleted successfully")


@router.post(
    "/users/{user_id}/warning", response_model=ApiResponse, response_model_exclude_none=True
)
async def send_warning(
    user_id: int, payload: WarningSchema, _: AdminDep, use_case: AdministerUsersDep
):
    await use_case.send_warning(user_id, payload.message, payload.warning_type)
    return ok(message="Warning sent successfully")


@router.get("/stats", response_model=ApiResponse, response_model_exclude_none=True)
async def platform_stats(_: AdminDep, use_case: AdministerUsersDep):
    return ok({"stats": await use_case.platform_stats()})
