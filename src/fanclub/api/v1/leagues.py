"""League catalog, league details and standings endpoints."""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Query

from fanclub.api.deps import get_football_client
from fanclub.api.v1.football import UPSTREAM_ERRORS
from fanclub.core.exceptions import InvalidInputError
from fanclub.core.leagues import LEAGUES, League, get_league_by_id, parse_season
from fanclub.schemas.football import (
    LeagueDetailResult,
    LeagueListResult,
    LeagueResponse,
    StandingsResult,
)
from fanclub.services.football import FootballDataClient

router = APIRouter(prefix="/leagues", tags=["leagues"])


def _require_league(league_id: str) -> League:
    league = get_league_by_id(league_id)
    if league is None:
        raise InvalidInputError(
            error_code="LEAGUE_001",
            field_errors={"leagueId": [f"Invalid league ID: {league_id}"]},
        )
    return league


@router.get("", response_model=LeagueListResult, summary="Supported leagues")
async def list_leagues() -> LeagueListResult:
    return LeagueListResult(leagues=[LeagueResponse(**asdict(league)) for league in LEAGUES])


@router.get(
    "/{league_id}",
    response_model=LeagueDetailResult,
    summary="League details",
    description="Catalog entry together with the competition record from football-data.org.",
    responses={400: {"description": "Unsupported league"}, **UPSTREAM_ERRORS},
)
async def get_league(
    league_id: str,
    client: FootballDataClient = Depends(get_football_client),
) -> LeagueDetailResult:
    league = _require_league(league_id)
    competition = await client.get_competition(league.code)
    return LeagueDetailResult(league=LeagueResponse(**asdict(league)), competition=competition)


@router.get(
    "/{league_id}/standings",
    response_model=StandingsResult,
    summary="League standings",
    description="""
    League tables for one season.

    `season` is written `2024-2025` (or just the starting year); the current
    season is used when it is omitted.
    """,
    responses={400: {"description": "Unsupported league or malformed season"}, **UPSTREAM_ERRORS},
)
async def get_standings(
    league_id: str,
    season: str | None = Query(None, description="Season, e.g. 2024-2025"),
    client: FootballDataClient = Depends(get_football_client),
) -> StandingsResult:
    league = _require_league(league_id)

    start_year = label = None
    if season is not None:
        parsed = parse_season(season)
        if parsed is None:
            raise InvalidInputError(
                field_errors={"season": ["Season must look like 2024-2025"]},
            )
        start_year, label = parsed

    standings = await client.get_standings(league.code, start_year)
    return StandingsResult(
        league_code=league.code,
        league_name=league.name,
        season=label,
        standings=standings,
    )
