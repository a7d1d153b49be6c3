"""Reminder endpoints, scoped to the caller resolved from the session cookie."""

from fastapi import APIRouter, Depends, Query, status

from fanclub.api.deps import get_current_session, get_reminder_service
from fanclub.schemas.auth import SessionUser
from fanclub.schemas.common import SuccessResponse
from fanclub.schemas.reminder import (
    ReminderCreate,
    ReminderListResult,
    ReminderResponse,
    ReminderResult,
    ReminderUpdate,
)
from fanclub.services.reminder import ReminderService

router = APIRouter(prefix="/reminders", tags=["reminders"])


@router.get(
    "",
    response_model=ReminderListResult,
    summary="List reminders",
    description="All reminders of the signed-in user, soonest reminder date first.",
    responses={401: {"description": "Not authenticated"}},
)
async def list_reminders(
    session_user: SessionUser = Depends(get_current_session),
    service: ReminderService = Depends(get_reminder_service),
) -> ReminderListResult:
    reminders = await service.list_reminders(session_user.id)
    return ReminderListResult(
        reminders=[ReminderResponse.model_validate(r) for r in reminders]
    )


@router.post(
    "",
    response_model=ReminderResult,
    status_code=status.HTTP_201_CREATED,
    summary="Create reminder",
    description="""
    Create a reminder for a match.

    Only one reminder per match is allowed; a second attempt returns 409 and
    the client should switch to editing the existing one.
    """,
    responses={
        400: {"description": "Missing fields or reminder date outside the window"},
        401: {"description": "Not authenticated"},
        409: {"description": "Reminder already exists for this match"},
    },
)
async def create_reminder(
    data: ReminderCreate,
    session_user: SessionUser = Depends(get_current_session),
    service: ReminderService = Depends(get_reminder_service),
) -> ReminderResult:
    reminder = await service.create_reminder(session_user.id, data)
    return ReminderResult(
        message="Reminder created successfully",
        reminder=ReminderResponse.model_validate(reminder),
    )


@router.put(
    "",
    response_model=ReminderResult,
    summary="Update reminder",
    description="Change the title, note and reminder date. Match details cannot change.",
    responses={
        400: {"description": "Missing fields or reminder date outside the window"},
        401: {"description": "Not authenticated"},
        404: {"description": "Reminder not found"},
    },
)
async def update_reminder(
    data: ReminderUpdate,
    session_user: SessionUser = Depends(get_current_session),
    service: ReminderService = Depends(get_reminder_service),
) -> ReminderResult:
    reminder = await service.update_reminder(session_user.id, data)
    return ReminderResult(
        message="Reminder updated successfully",
        reminder=ReminderResponse.model_validate(reminder),
    )


@router.delete(
    "",
    response_model=SuccessResponse,
    summary="Delete reminder",
    responses={
        400: {"description": "Match ID is required"},
        401: {"description": "Not authenticated"},
        404: {"description": "Reminder not found"},
    },
)
async def delete_reminder(
    match_id: str = Query(..., alias="matchId", min_length=1, description="Match ID"),
    session_user: SessionUser = Depends(get_current_session),
    service: ReminderService = Depends(get_reminder_service),
) -> SuccessResponse:
    await service.delete_reminder(session_user.id, match_id)
    return SuccessResponse(message="Reminder deleted successfully")
