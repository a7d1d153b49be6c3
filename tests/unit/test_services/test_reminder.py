"""Unit tests for the reminder date window and reminder service rules."""

from datetime import date, timedelta
from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from fanclub.core.exceptions import ConflictError, InvalidInputError, NotFoundError
from fanclub.models.reminder import Reminder
from fanclub.schemas.reminder import ReminderCreate, ReminderUpdate
from fanclub.services.reminder import (
    REMINDER_AFTER_MATCH,
    REMINDER_IN_PAST,
    ReminderService,
    check_reminder_window,
)

TODAY = date(2025, 5, 20)
GAME_DATE = date(2025, 6, 1)


class TestReminderWindow:
    """Boundaries of today <= reminderDate <= gameDate."""

    def test_today_accepted(self):
        check_reminder_window(TODAY, GAME_DATE, TODAY)

    def test_game_date_accepted(self):
        check_reminder_window(GAME_DATE, GAME_DATE, TODAY)

    def test_day_before_today_rejected(self):
        with pytest.raises(InvalidInputError) as exc_info:
            check_reminder_window(TODAY - timedelta(days=1), GAME_DATE, TODAY)

        assert exc_info.value.error_code == "VAL_002"
        assert exc_info.value.http_status == 400
        assert exc_info.value.field_errors == {"reminderDate": [REMINDER_IN_PAST]}

    def test_day_after_game_rejected(self):
        with pytest.raises(InvalidInputError) as exc_info:
            check_reminder_window(GAME_DATE + timedelta(days=1), GAME_DATE, TODAY)

        assert exc_info.value.field_errors == {"reminderDate": [REMINDER_AFTER_MATCH]}

    def test_match_already_played_rejects_every_date(self):
        past_game = TODAY - timedelta(days=3)

        with pytest.raises(InvalidInputError) as exc_info:
            check_reminder_window(past_game, past_game, TODAY)

        assert exc_info.value.field_errors["reminderDate"] == [REMINDER_IN_PAST]


def _create_payload(**overrides) -> ReminderCreate:
    data = {
        "matchId": "123",
        "homeTeam": "Arsenal FC",
        "awayTeam": "Chelsea FC",
        "league": "Premier League",
        "gameDate": GAME_DATE.isoformat(),
        "reminderTitle": "Derby day",
        "reminderDate": (GAME_DATE - timedelta(days=1)).isoformat(),
    }
    data.update(overrides)
    return ReminderCreate.model_validate(data)


@pytest.fixture
def repo():
    repo = Mock()
    repo.exists_for_user = AsyncMock(return_value=False)
    repo.get_by_user_and_match = AsyncMock(return_value=None)
    repo.create = AsyncMock(side_effect=lambda reminder: reminder)
    repo.save = AsyncMock()
    repo.remove = AsyncMock()
    repo.rollback = AsyncMock()
    return repo


@pytest.fixture
def service(repo):
    return ReminderService(repo, today=lambda: TODAY)


class TestCreateReminder:
    @pytest.mark.asyncio
    async def test_defaults_for_optional_fields(self, service, repo):
        user_id = uuid4()

        reminder = await service.create_reminder(user_id, _create_payload())

        assert reminder.user_id == user_id
        assert reminder.game_time == "TBD"
        assert reminder.reminder_note == ""
        repo.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_existing_pair_conflicts(self, service, repo):
        repo.exists_for_user.return_value = True

        with pytest.raises(ConflictError):
            await service.create_reminder(uuid4(), _create_payload())

        repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duplicate_key_from_store_becomes_conflict(self, service, repo):
        repo.create.side_effect = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))

        with pytest.raises(ConflictError) as exc_info:
            await service.create_reminder(uuid4(), _create_payload())

        assert exc_info.value.http_status == 409
        repo.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_foreign_key_violation_is_not_a_conflict(self, service, repo):
        repo.create.side_effect = IntegrityError(
            "INSERT", {}, Exception('insert on table "reminders" violates foreign key constraint')
        )

        with pytest.raises(IntegrityError):
            await service.create_reminder(uuid4(), _create_payload())

        repo.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_date_window_checked_before_store(self, service, repo):
        payload = _create_payload(reminderDate=(GAME_DATE + timedelta(days=1)).isoformat())

        with pytest.raises(InvalidInputError):
            await service.create_reminder(uuid4(), payload)

        repo.exists_for_user.assert_not_awaited()
        repo.create.assert_not_awaited()


class TestUpdateAndDelete:
    @pytest.mark.asyncio
    async def test_update_missing_is_not_found(self, service, repo):
        payload = ReminderUpdate(match_id="123", reminder_title="t", reminder_date=TODAY)

        with pytest.raises(NotFoundError):
            await service.update_reminder(uuid4(), payload)

        repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_checks_stored_game_date(self, service, repo):
        repo.get_by_user_and_match.return_value = Reminder(match_id="123", game_date=GAME_DATE)
        payload = ReminderUpdate(
            match_id="123", reminder_title="t", reminder_date=GAME_DATE + timedelta(days=1)
        )

        with pytest.raises(InvalidInputError):
            await service.update_reminder(uuid4(), payload)

        repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_only_touches_mutable_fields(self, service, repo):
        stored = Reminder(match_id="123", game_date=GAME_DATE)
        repo.get_by_user_and_match.return_value = stored
        payload = ReminderUpdate(match_id="123", reminder_title="New title", reminder_date=TODAY)

        await service.update_reminder(uuid4(), payload)

        repo.save.assert_awaited_once_with(
            stored,
            {"reminder_title": "New title", "reminder_note": "", "reminder_date": TODAY},
        )

    @pytest.mark.asyncio
    async def test_delete_missing_is_not_found(self, service, repo):
        with pytest.raises(NotFoundError):
            await service.delete_reminder(uuid4(), "123")

        repo.remove.assert_not_awaited()
