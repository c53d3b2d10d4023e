"""NWS API client: single-shot JSON GETs, no retries and no cache."""

import logging

import httpx

from relay.config.schema import DEFAULT_USER_AGENT, NWS_BASE_URL
from relay.models.errors import UpstreamError

logger = logging.getLogger(__name__)


class NwsClient:
    def __init__(
        self,
        base_url: str = NWS_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent

    def _headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, "Accept": "application/geo+json"}

    def points_url(self, latitude: float, longitude: float) -> str:
        return f"{self.base_url}/points/{latitude:.4f},{longitude:.4f}"

    def alerts_url(self, state_code: str) -> str:
        return f"{self.base_url}/alerts?area={state_code}"

    async def get_json(self, url: str) -> dict:
        """GET a URL from the NWS API and return the parsed JSON body.

        Raises UpstreamError on transport failure, a non-2xx status,
        or a body that is not JSON.
        """
        try:
            async with httpx.AsyncClient(headers=self._headers()) as client:
                resp = await client.get(url)
        except httpx.RequestError as e:
            logger.error("NWS request failed: GET %s -> %s", url, e)
            raise UpstreamError(f"Request failed: {e}") from e

        if not resp.is_success:
            logger.error("NWS API %d: GET %s", resp.status_code, url)
            raise UpstreamError(
                f"NWS API returned HTTP {resp.status_code}", resp.status_code
            )

        try:
            return resp.json()
        except ValueError as e:
            logger.error("NWS API returned invalid JSON: GET %s", url)
            raise UpstreamError("NWS API returned invalid JSON", resp.status_code) from e
