"""
Skill catalog and user skill endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Query

from skillswapper.api.dependencies import CurrentUserIdDep, ManageSkillsDep
from skillswapper.api.schemas.common import ApiResponse, clamp, ok
from skillswapper.api.schemas.skills import (
    AddSkillsSchema,
    UpdateProficiencySchema,
    UpdateUrgencySchema,
)

router = APIRouter(prefix="/skills", tags=["skills"])

CATALOG_MAX_LIMIT = 500


def _skills_payload(profile) -> dict:
    return {
        "skills_have": [s.to_dict() for s in profile.skills_have],
        "skills_want": [s.to_dict() for s in profile.skills_want],
    }


@router.get("", response_model=ApiResponse, response_model_exclude_none=True)
async def list_skills(
    use_case: ManageSkillsDep,
    search: Optional[str] = None,
    popular: bool = False,
    limit: int = Query(100),
):
    """Skill catalog, alphabetical or by popularity."""
    skills = await use_case.list_catalog(
        search=search, popular=popular, limit=clamp(limit, 1, CATALOG_MAX_LIMIT)
    )
    return ok(
        {
            "skills": [
                {
                    "id": s.id,
                    "skill_name": s.skill_name,
                    "category": s.category,
                    "usage_count": s.user_count,
                    "created_at": s.created_at,
                }
                for s in skills
            ],
            "meta": {"total": len(skills), "searchTerm": search, "popular": popular},
        }
    )


@router.post("/add-to-have", response_model=ApiResponse, response_model_exclude_none=True)
async def add_to_have(payload: AddSkillsSchema, user_id: CurrentUserIdDep, use_case: ManageSkillsDep):
    profile = await use_case.add_have(user_id, payload.to_have_inputs())
    return ok(_skills_payload(profile), message="Skills added to your have list")


@router.post("/add-to-want", response_model=ApiResponse, response_model_exclude_none=True)
async def add_to_want(payload: AddSkillsSchema, user_id: CurrentUserIdDep, use_case: ManageSkillsDep):
    profile = await use_case.add_want(user_id, payload.to_want_inputs())
    return ok(_skills_payload(profile), message="Skills added to your want list")


@router.delete(
    "/remove-from-have/{skill_id}", response_model=ApiResponse, response_model_exclude_none=True
)
async def remove_from_have(skill_id: int, user_id: CurrentUserIdDep, use_case: ManageSkillsDep):
    profile = await use_case.remove_have(user_id, skill_id)
    return ok(_skills_payload(profile), message="Skill removed from your have list")


@router.delete(
    "/remove-from-want/{skill_id}", response_model=ApiResponse, response_model_exclude_none=True
)
async def remove_from_want(skill_id: int, user_id: CurrentUserIdDep, use_case: ManageSkillsDep):
    profile = await use_case.remove_want(user_id, skill_id)
    return ok(_skills_payload(profile), message="Skill removed from your want list")


@router.put("/update-proficiency", response_model=ApiResponse, response_model_exclude_none=True)
async def update_proficiency(
    payload: UpdateProficiencySchema, user_id: CurrentUserIdDep, use_case: ManageSkillsDep
):
    profile = await use_case.update_proficiency(
        user_id, payload.skill_id, payload.proficiency_level
    )
    return ok(_skills_payload(profile), message="Proficiency level updated")


@router.put("/update-urgency", response_model=ApiResponse, response_model_exclude_none=True)
async def update_urgency(
    payload: UpdateUrgencySchema, user_id: CurrentUserIdDep, use_case: ManageSkillsDep
):
    profile = await use_case.update_urgency(user_id, payload.skill_id, payload.urgency_level)
    return ok(_skills_payload(profile), message="Urgency level updated")
