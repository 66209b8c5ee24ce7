import logging
import random

from agents.base_agent import BaseAgent
from agents.geocoding_agent import GeocodingAgent
from agents.hazard_agent import HazardAgent
from agents.population_agent import PopulationAgent
from agents.resilience_agent import ResilienceAgent
from models.schemas import LocationReport

logger = logging.getLogger(__name__)

INFRASTRUCTURE_LABEL = "Moderate"


class Orchestrator:
    """Run agents sequentially, accumulating results in a shared context.

    Order matters: resilience reads the hazards written before it, and
    population reads the place name the geocoder resolved.
    """

    def __init__(self, agents: list[BaseAgent]) -> None:
        self._agents = agents

    async def run(self, context: dict) -> dict:
        context = dict(context)
        for agent in self._agents:
            missing = agent.missing(context)
            if missing:
                raise ValueError(f"{agent.name} needs {missing} in context")
            result = await agent.run(context)
            logger.debug("%s -> %s", agent.name, sorted(result))
            context.update(result)
        return context


class LocationAnalyzer:
    def __init__(self, geocoder: GeocodingAgent, rng: random.Random | None = None) -> None:
        self._orchestrator = Orchestrator(
            [
                geocoder,
                HazardAgent(rng),
                PopulationAgent(rng),
                ResilienceAgent(),
            ]
        )

    async def analyze(self, lat: float, lon: float, place_name: str | None = None) -> LocationReport:
        """Build a report for a coordinate, reverse geocoding when no name is given.

        Raises ``GeocodingError`` if the reverse lookup fails.
        """
        ctx = await self._orchestrator.run({"lat": lat, "lon": lon, "place_name": place_name})
        return LocationReport(
            name=ctx["place_name"],
            lat=lat,
            lon=lon,
            coordinates=f"{lat:.4f}°, {lon:.4f}°",
            population_estimate=ctx["population_estimate"],
            hazards=ctx["hazards"],
            infrastructure=INFRASTRUCTURE_LABEL,
            resilience_score=ctx["resilience_score"],
        )
