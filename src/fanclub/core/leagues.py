"""Catalog of supported competitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class League:
    id: str
    code: str
    name: str
    country: str
    clubs: int
    founded: int
    champions_league_titles: int


LEAGUES: Final[tuple[League, ...]] = (
    League("4328", "PL", "Premier League", "England", 20, 1992, 5),
    League("4335", "PD", "LaLiga", "Spain", 20, 1929, 4),
    League("4332", "SA", "Serie A", "Italy", 20, 1898, 4),
    League("4331", "BL1", "Bundesliga", "Germany", 18, 1963, 4),
)

_BY_ID: Final[dict[str, League]] = {league.id: league for league in LEAGUES}
_BY_CODE: Final[dict[str, League]] = {league.code: league for league in LEAGUES}


def get_league_by_id(league_id: str | None) -> League | None:
    if not league_id:
        return None
    return _BY_ID.get(league_id.strip())


def get_league_by_code(code: str | None) -> League | None:
    if not code:
        return None
    return _BY_CODE.get(code.strip().upper())


def parse_season(value: str | None) -> tuple[int, str] | None:
    """
    Read a season label such as ``2024-2025`` (or just ``2024``).

    Returns:
        (starting year, ``YYYY-YYYY`` label), or None when the label is malformed
    """
    if value is None:
        return None
    parts = value.strip().split("-")
    if not all(len(part) == 4 and part.isdigit() for part in parts) or len(parts) > 2:
        return None
    start = int(parts[0])
    if len(parts) == 2 and int(parts[1]) != start + 1:
        return None
    return start, f"{start}-{start + 1}"
