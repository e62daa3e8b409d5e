"""
Match discovery and connection workflow endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from skillswapper.api.dependencies import (
    AnalyzeMatchDep,
    CurrentUserIdDep,
    FindMatchesDep,
    ListConnectionsDep,
    MatchStatisticsDep,
    ProposeConnectionDep,
    RespondToConnectionDep,
)
from skillswapper.api.middleware.error_handler import error_body
from skillswapper.api.schemas.common import ApiResponse, clamp, ok
from skillswapper.api.schemas.matches import RespondToMatchSchema, SaveMatchSchema
from skillswapper.application.services.skill_matcher import MatchFilters
from skillswapper.application.use_cases.connection_outcome import (
    ConnectionFailure,
    ConnectionOutcome,
)
from skillswapper.config.settings import settings
from skillswapper.domain.value_objects.connection_status import ConnectionStatus

router = APIRouter(prefix="/matches", tags=["matches"])

FAILURE_STATUS = {
    ConnectionFailure.SELF_REFERENCE: 400,
    ConnectionFailure.INVALID_TARGET: 400,
    ConnectionFailure.NOT_FOUND: 404,
}


def _failure_response(outcome: ConnectionOutcome, not_found_message: str, self_message: str):
    messages = {
        ConnectionFailure.SELF_REFERENCE: self_message,
        ConnectionFailure.INVALID_TARGET: "Valid user ID is required",
        ConnectionFailure.NOT_FOUND: not_found_message,
    }
    return JSONResponse(
        status_code=FAILURE_STATUS[outcome.failure],
        content=error_body(messages[outcome.failure]),
    )


@router.get("", response_model=ApiResponse, response_model_exclude_none=True)
async def find_matches(
    user_id: CurrentUserIdDep,
    use_case: FindMatchesDep,
    location: Optional[str] = None,
    skill: Optional[str] = None,
    min_score: int = Query(1, alias="minScore"),
    limit: int = Query(settings.MATCHES_DEFAULT_LIMIT),
    offset: int = Query(0),
):
    """Reciprocal skill-swap candidates, best first."""
    filters = MatchFilters(
        location=location.strip() if location and location.strip() else None,
        skill=skill.strip() if skill and skill.strip() else None,
        min_score=max(min_score, 1),
        limit=clamp(limit, 1, settings.MATCHES_MAX_LIMIT),
        offset=max(offset, 0),
    )
    page = await use_case.execute(user_id, filters)
    return ok(
        {
            "matches": [candidate.to_dict() for candidate in page.candidates],
            "pagination": page.pagination(),
            "filters": filters.to_dict(),
        }
    )


@router.get("/saved", response_model=ApiResponse, response_model_exclude_none=True)
async def saved_matches(
    user_id: CurrentUserIdDep,
    use_case: ListConnectionsDep,
    status: Optional[ConnectionStatus] = None,
    limit: int = Query(settings.CONNECTIONS_DEFAULT_LIMIT),
    offset: int = Query(0),
):
    """Connections the current user takes part in, newest first."""
    page = await use_case.execute(
        user_id,
        status=status,
        limit=clamp(limit, 1, settings.CONNECTIONS_MAX_LIMIT),
        offset=max(offset, 0),
    )
    return ok(
        {
            "savedMatches": [view.to_dict() for view in page.items],
            "pagination": page.pagination(),
        }
    )


@router.get("/statistics", response_model=ApiResponse, response_model_exclude_none=True)
async def match_statistics(user_id: CurrentUserIdDep, use_case: MatchStatisticsDep):
    statistics = await use_case.execute(user_id)
    return ok({"statistics": statistics})


@router.get("/detailed/{target_id}", response_model=ApiResponse, response_model_exclude_none=True)
async def detailed_match(target_id: int, user_id: CurrentUserIdDep, use_case: AnalyzeMatchDep):
    """Pairwise analysis between the current user and another user."""
    analysis = await use_case.execute(user_id, target_id)
    return ok(analysis.to_dict())


@router.post("/save", response_model=ApiResponse, response_model_exclude_none=True)
async def save_match(payload: SaveMatchSchema, user_id: CurrentUserIdDep, use_case: ProposeConnectionDep):
    """Propose a connection to another user."""
    outcome = await use_case.execute(user_id, payload.user2Id, note=payload.note)
    if not outcome.succeeded:
        return _failure_response(
            outcome,
            not_found_message="User not found",
            self_message="Cannot save match with yourself",
        )

    connection = outcome.connection
    return ok(
        {
            "matchId": connection.id,
            "matchedWith": {"id": outcome.counterpart.id, "name": outcome.counterpart.name},
            "matchDetails": connection.skills_for(user_id).to_dict(),
            "status": connection.status.value,
            "created": outcome.created,
        },
        message="Match saved successfully",
    )


@router.post("/accept", response_model=ApiResponse, response_model_exclude_none=True)
async def accept_match(
    payload: RespondToMatchSchema, user_id: CurrentUserIdDep, use_case: RespondToConnectionDep
):
    outcome = await use_case.accept(user_id, payload.userId)
    if not outcome.succeeded:
        return _failure_response(
            outcome,
            not_found_message="No pending request found",
            self_message="Cannot accept a request from yourself",
        )
    return ok(
        {
            "matchId": outcome.connection.id,
            "status": outcome.connection.status.value,
            "emailsSent": outcome.emails_sent,
        },
        message="Connection request accepted",
    )


@router.post("/decline", response_model=ApiResponse, response_model_exclude_none=True)
async def decline_match(
    payload: RespondToMatchSchema, user_id: CurrentUserIdDep, use_case: RespondToConnectionDep
):
    outcome = await use_case.decline(user_id, payload.userId)
    if not outcome.succeeded:
        return _failure_response(
            outcome,
            not_found_message="No pending request found",
            self_message="Cannot decline a request from yourself",
        )
    return ok(
        {"matchId": outcome.connection.id, "status": outcome.connection.status.value},
        message="Connection request declined",
    )
