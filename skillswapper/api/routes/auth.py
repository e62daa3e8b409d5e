"""
Authentication endpoints.
"""

from fastapi import APIRouter, status

from skillswapper.api.dependencies import AuthenticateUserDep
from skillswapper.api.schemas.auth import (
    LoginRequestSchema,
    RegisterRequestSchema,
    VerifyTokenRequestSchema,
)
from skillswapper.api.schemas.common import ApiResponse, ok
from skillswapper.application.use_cases.authenticate_user import RegisterRequest
from skillswapper.config.logging import get_logger
from skillswapper.domain.value_objects.skill_input import SkillInput

logger = get_logger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def register(payload: RegisterRequestSchema, use_case: AuthenticateUserDep):
    """Create an account and return an access token."""
    request = RegisterRequest(
        name=payload.name,
        email=payload.email,
        password=payload.password,
        bio=payload.bio or None,
        location=payload.location or None,
        skills_have=[SkillInput.for_have(raw) for raw in payload.skills_have],
        skills_want=[SkillInput.for_want(raw) for raw in payload.skills_want],
    )
    result = await use_case.register(request)
    return ok(
        {"token": result.token, "user": result.profile.to_dict(include_email=True)},
        message="User registered successfully",
    )


@router.post("/login", response_model=ApiResponse, response_model_exclude_none=True)
async def login(payload: LoginRequestSchema, use_case: AuthenticateUserDep):
    """Exchange credentials for an access token."""
    result = await use_case.login(payload.email, payload.password)
    return ok(
        {"token": result.token, "user": result.profile.to_dict(include_email=True)},
        message="Login successful",
    )


@router.post("/verify", response_model=ApiResponse, response_model_exclude_none=True)
async def verify(payload: VerifyTokenRequestSchema, use_case: AuthenticateUserDep):
    """Check a token and return the user it belongs to."""
    profile = await use_case.verify(payload.token)
    return ok({"user": profile.to_dict(include_email=True)}, message="Token is valid")
