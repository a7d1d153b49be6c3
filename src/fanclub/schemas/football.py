"""Pydantic schemas for league catalog and football data endpoints."""

from datetime import date
from typing import Any

from fanclub.schemas.common import CamelModel


class LeagueResponse(CamelModel):
    id: str
    code: str
    name: str
    country: str
    clubs: int
    founded: int
    champions_league_titles: int


class LeagueListResult(CamelModel):
    leagues: list[LeagueResponse]


class FixturesResult(CamelModel):
    """Upstream matches for one competition and date window."""

    league_code: str
    league_name: str
    date_from: date
    date_to: date
    matches: list[dict[str, Any]]


class LeagueDetailResult(CamelModel):
    """Catalog entry plus the upstream competition record."""

    league: LeagueResponse
    competition: dict[str, Any]


class StandingsResult(CamelModel):
    """Upstream league tables for one competition and season."""

    league_code: str
    league_name: str
    season: str | None
    standings: list[dict[str, Any]]
