"""Football data endpoints backed by football-data.org."""

from datetime import date, timedelta

from fastapi import APIRouter, Depends, Query

from fanclub.api.deps import get_football_client
from fanclub.config import settings
from fanclub.core.exceptions import InvalidInputError
from fanclub.core.leagues import get_league_by_code, get_league_by_id
from fanclub.schemas.football import FixturesResult
from fanclub.services.football import FootballDataClient

router = APIRouter(prefix="/football", tags=["football"])

UPSTREAM_ERRORS = {
    403: {"description": "API token has no access to this competition"},
    404: {"description": "Competition not found upstream"},
    429: {"description": "Upstream rate limit exceeded"},
    502: {"description": "Upstream failure"},
    504: {"description": "Upstream timeout"},
}


@router.get(
    "/teams",
    summary="Teams of a league",
    description="Teams of one supported competition, as returned by football-data.org.",
    responses={400: {"description": "Unsupported league code"}, **UPSTREAM_ERRORS},
)
async def get_teams(
    code: str = Query(..., min_length=1, description="Competition code: PL, PD, SA or BL1"),
    client: FootballDataClient = Depends(get_football_client),
) -> dict:
    league = get_league_by_code(code)
    if league is None:
        raise InvalidInputError(
            error_code="LEAGUE_001",
            field_errors={"code": [f"Invalid league code: {code}"]},
        )
    return await client.get_teams(league.code)


@router.get(
    "/fixtures",
    response_model=FixturesResult,
    summary="Fixtures of a league",
    description="Matches of one supported competition; defaults to the next seven days.",
    responses={400: {"description": "Unsupported league or bad date window"}, **UPSTREAM_ERRORS},
)
async def get_fixtures(
    league_id: str = Query(..., alias="leagueId", min_length=1, description="League id, e.g. 4328"),
    date_from: date | None = Query(None, alias="dateFrom"),
    date_to: date | None = Query(None, alias="dateTo"),
    client: FootballDataClient = Depends(get_football_client),
) -> FixturesResult:
    league = get_league_by_id(league_id)
    if league is None:
        raise InvalidInputError(
            error_code="LEAGUE_001",
            field_errors={"leagueId": [f"Invalid league ID: {league_id}"]},
        )

    start = date_from or date.today()
    end = date_to or start + timedelta(days=settings.fixtures_window_days)
    if end < start:
        raise InvalidInputError(field_errors={"dateTo": ["dateTo must not be before dateFrom"]})

    matches = await client.get_matches(league.code, start, end)
    return FixturesResult(
        league_code=league.code,
        league_name=league.name,
        date_from=start,
        date_to=end,
        matches=matches,
    )
