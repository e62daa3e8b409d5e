"""
User profile endpoints.
"""

from fastapi import APIRouter

from skillswapper.api.dependencies import CurrentUserIdDep, ManageProfileDep
from skillswapper.api.schemas.common import ApiResponse, ok
from skillswapper.api.schemas.users import ProfileUpdateSchema

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=ApiResponse, response_model_exclude_none=True)
async def get_my_profile(user_id: CurrentUserIdDep, use_case: ManageProfileDep):
    profile = await use_case.get(user_id)
    return ok({"user": profile.to_dict(include_email=True)})


@router.put("/me", response_model=ApiResponse, response_model_exclude_none=True)
async def update_my_profile(
    payload: ProfileUpdateSchema, user_id: CurrentUserIdDep, use_case: ManageProfileDep
):
    changes = payload.model_dump(exclude_unset=True)
    if changes.get("name") is None:
        changes.pop("name", None)
    profile = await use_case.update(user_id, changes)
    return ok({"user": profile.to_dict(include_email=True)}, message="Profile updated successfully")


@router.get("/{user_id}", response_model=ApiResponse, response_model_exclude_none=True)
async def get_public_profile(user_id: int, use_case: ManageProfileDep):
    """Public profile with skills. Email is never included."""
    profile = await use_case.get(user_id)
    return ok({"user": profile.to_dict()})
