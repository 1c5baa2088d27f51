"""HTTP client for the SpaceX launches collection."""

import logging
from typing import Any, Dict, List, Optional

import httpx

from launchlist.core.errors import LaunchSourceError
from launchlist.core.models import Launch

logger = logging.getLogger("LaunchList.LaunchClient")

DEFAULT_BASE_URL = "https://api.spacexdata.com/v3"


class SpaceXLaunchClient:
    """Read-only client for ``GET /launches``.

    Args:
        base_url: API root, without the ``/launches`` path.
        timeout: Per-request timeout in seconds.
        transport: Optional httpx transport (used by tests).
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def fetch_page(self, offset: int, limit: int) -> List[Launch]:
        """Fetch one window of launches.

        Returns:
            Up to ``limit`` launches; an empty list means no more data.
        """
        return await self._get_launches({"limit": limit, "offset": offset})

    async def fetch_all(self, limit: int) -> List[Launch]:
        """Fetch a bulk snapshot of up to ``limit`` launches."""
        return await self._get_launches({"limit": limit})

    async def _get_launches(self, params: Dict[str, Any]) -> List[Launch]:
        logger.debug(f"GET {self.base_url}/launches {params}")
        try:
            response = await self._client.get("/launches", params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            raise LaunchSourceError(f"Request for launches failed: {e}") from e
        except ValueError as e:
            raise LaunchSourceError(f"Launches response is not JSON: {e}") from e

        if not isinstance(data, list):
            raise LaunchSourceError(
                f"Expected a JSON array of launches, got {type(data).__name__}"
            )
        return [Launch.from_api(item) for item in data]

    async def aclose(self) -> None:
        await self._client.aclose()
