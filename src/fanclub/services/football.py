"""
football-data.org HTTP client

Single shared AsyncClient opened in the application lifespan; outside the
lifespan (scripts, tests) a per-request client is used instead. Every call is
bounded by the configured timeout and is never retried here: the caller
decides whether to try again.
"""

import asyncio
import logging
from datetime import date
from typing import Any, Optional

import httpx

from fanclub.config import settings
from fanclub.core.exceptions import UnavailableError, UpstreamError, UpstreamTimeoutError

logger = logging.getLogger(__name__)

# Upstream statuses passed through to the client with their own message
UPSTREAM_STATUS_CODES = {
    403: "EXT_003",
    404: "EXT_004",
    429: "EXT_005",
}


class FootballDataClient:
    """
    HTTP client for the football-data.org v4 API.

    Lifecycle:
        - Call start() during app startup (FastAPI lifespan)
        - Call stop() during app shutdown
    """

    MAX_CONNECTIONS = 20
    MAX_KEEPALIVE = 5

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.football_api_url).rstrip("/")
        self.token = token if token is not None else settings.football_api_token
        self.timeout = timeout if timeout is not None else settings.football_api_timeout_seconds
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _client_kwargs(self) -> dict[str, Any]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["X-Auth-Token"] = self.token
        kwargs: dict[str, Any] = {
            "base_url": self.base_url,
            "headers": headers,
            "timeout": httpx.Timeout(self.timeout),
        }
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return kwargs

    async def start(self):
        """Initialize the shared HTTP client."""
        if self._client is not None:
            logger.warning("FootballDataClient already started")
            return

        limits = httpx.Limits(
            max_connections=self.MAX_CONNECTIONS,
            max_keepalive_connections=self.MAX_KEEPALIVE,
        )
        self._client = httpx.AsyncClient(limits=limits, **self._client_kwargs())
        logger.info(f"FootballDataClient started: base_url={self.base_url}, timeout={self.timeout}s")

    async def stop(self):
        """Close the HTTP client and release resources."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("FootballDataClient stopped")

    async def _send(self, endpoint: str, params: dict[str, Any] | None) -> httpx.Response:
        if self._client:
            return await self._client.get(endpoint, params=params)
        async with httpx.AsyncClient(**self._client_kwargs()) as client:
            return await client.get(endpoint, params=params)

    async def _get(self, endpoint: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """GET an endpoint and return the decoded JSON object."""
        try:
            # Overall bound on top of httpx's per-phase timeouts.
            response = await asyncio.wait_for(self._send(endpoint, params), timeout=self.timeout)
            response.raise_for_status()
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.error(f"Football API timed out after {self.timeout}s calling {endpoint}")
            raise UpstreamTimeoutError(details={"endpoint": endpoint})
        except httpx.HTTPStatusError as e:
            upstream_status = e.response.status_code
            logger.error(f"Football API error calling {endpoint}: {upstream_status}")
            if upstream_status in UPSTREAM_STATUS_CODES:
                raise UpstreamError(
                    error_code=UPSTREAM_STATUS_CODES[upstream_status],
                    http_status=upstream_status,
                    details={"endpoint": endpoint},
                )
            raise UnavailableError(details={"endpoint": endpoint, "upstream_status": upstream_status})
        except httpx.RequestError as e:
            logger.error(f"Request error calling football API {endpoint}: {type(e).__name__}")
            raise UnavailableError(details={"endpoint": endpoint})

        try:
            payload = response.json()
        except ValueError:
            raise UnavailableError(error_code="EXT_006", details={"endpoint": endpoint})
        if not isinstance(payload, dict):
            raise UnavailableError(error_code="EXT_006", details={"endpoint": endpoint})
        return payload

    async def get_teams(self, league_code: str) -> dict[str, Any]:
        """Teams of a competition, as returned upstream."""
        payload = await self._get(f"/competitions/{league_code}/teams")
        if not isinstance(payload.get("teams"), list):
            raise UnavailableError(error_code="EXT_006", details={"league_code": league_code})
        return payload

    async def get_matches(self, league_code: str, date_from: date, date_to: date) -> list[dict[str, Any]]:
        """Matches of a competition within an inclusive date window."""
        payload = await self._get(
            f"/competitions/{league_code}/matches",
            params={"dateFrom": date_from.isoformat(), "dateTo": date_to.isoformat()},
        )
        matches = payload.get("matches")
        return matches if isinstance(matches, list) else []

    async def get_competition(self, league_code: str) -> dict[str, Any]:
        """Competition details (area, current season, emblem), as returned upstream."""
        return await self._get(f"/competitions/{league_code}")

    async def get_standings(self, league_code: str, season: int | None = None) -> list[dict[str, Any]]:
        """
        League tables of a competition.

        Args:
            league_code: Competition code
            season: Starting year of the season; the current season when None

        Returns:
            Upstream standings list (one entry per table type), empty when absent
        """
        params = {"season": season} if season is not None else None
        payload = await self._get(f"/competitions/{league_code}/standings", params=params)
        standings = payload.get("standings")
        return standings if isinstance(standings, list) else []


football_client = FootballDataClient()
