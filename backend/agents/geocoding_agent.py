import logging

import httpx

from agents.base_agent import BaseAgent
from config import settings
from models.schemas import GeocodeResult

logger = logging.getLogger(__name__)

UNKNOWN_LOCATION = "Unknown Location"


class GeocodingError(Exception):
    """The geocoding service was unreachable or sent something unusable."""


class GeocodingAgent(BaseAgent):
    """Forward and reverse geocoding against a Nominatim instance.

    As a pipeline step it fills in ``place_name`` by reverse geocoding when
    the context does not already carry one.
    """

    requires = ("lat", "lon")

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._transport = transport

    @property
    def name(self) -> str:
        return "geocoding"

    async def run(self, context: dict) -> dict:
        if context.get("place_name"):
            return {}
        name = await self.reverse(context["lat"], context["lon"])
        return {"place_name": name or UNKNOWN_LOCATION}

    async def search(self, query: str) -> list[GeocodeResult]:
        data = await self._get("/search", {"format": "json", "q": query})
        if not isinstance(data, list):
            raise GeocodingError(f"unexpected search payload for {query!r}")

        try:
            return [
                GeocodeResult(
                    lat=float(item["lat"]),
                    lon=float(item["lon"]),
                    display_name=item["display_name"],
                )
                for item in data
            ]
        except (KeyError, TypeError, ValueError) as exc:
            raise GeocodingError(f"malformed search result for {query!r}") from exc

    async def reverse(self, lat: float, lon: float) -> str | None:
        data = await self._get("/reverse", {"format": "json", "lat": lat, "lon": lon})
        if not isinstance(data, dict):
            raise GeocodingError(f"unexpected reverse payload for ({lat}, {lon})")
        # Nominatim answers a miss with {"error": "Unable to geocode"}
        return data.get("display_name") or None

    async def _get(self, path: str, params: dict):
        try:
            async with httpx.AsyncClient(
                base_url=settings.nominatim_url,
                headers={"User-Agent": settings.geocoding_user_agent},
                timeout=settings.geocoding_timeout,
                transport=self._transport,
            ) as client:
                resp = await client.get(path, params=params)
                resp.raise_for_status()
                return resp.json()
        except httpx.HTTPError as exc:
            logger.error("Geocoding request %s failed: %s", path, exc)
            raise GeocodingError(str(exc)) from exc
        except ValueError as exc:
            logger.error("Geocoding response from %s is not JSON", path)
            raise GeocodingError("invalid JSON from geocoding service") from exc
