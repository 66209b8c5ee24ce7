import random

from agents.base_agent import BaseAgent
from models.schemas import Hazard, HazardLevel, HazardName

# Reference latitudes for the Metro Manila and Cebu fault systems
FAULT_LATITUDES = (14.5995, 10.3157)
FAULT_BAND_DEGREES = 2

# Longitude band exposed to Pacific typhoon tracks
TYPHOON_BAND = (121, 126)


def identify_hazards(lat: float, lon: float, rng: random.Random | None = None) -> list[Hazard]:
    """Classify a coordinate into an ordered hazard assessment.

    Earthquake, Typhoon and Flooding are always present. Tsunami stands in
    for missing coastline data and is gated on ``rng``; pass a seeded
    ``random.Random`` to pin it.
    """
    rng = rng or random
    hazards: list[Hazard] = []

    if any(abs(lat - fault) < FAULT_BAND_DEGREES for fault in FAULT_LATITUDES):
        hazards.append(Hazard(name=HazardName.earthquake, level=HazardLevel.high))
    else:
        hazards.append(Hazard(name=HazardName.earthquake, level=HazardLevel.moderate))

    if TYPHOON_BAND[0] < lon < TYPHOON_BAND[1]:
        hazards.append(Hazard(name=HazardName.typhoon, level=HazardLevel.high))
    else:
        hazards.append(Hazard(name=HazardName.typhoon, level=HazardLevel.moderate))

    if 10 < lat < 15:
        hazards.append(Hazard(name=HazardName.flooding, level=HazardLevel.moderate))
    else:
        hazards.append(Hazard(name=HazardName.flooding, level=HazardLevel.low))

    if rng.random() > 0.5:
        hazards.append(Hazard(name=HazardName.tsunami, level=HazardLevel.moderate))

    # Cordillera in the north, central Mindanao highlands in the south
    if lat > 16 or 6 < lat < 10:
        hazards.append(Hazard(name=HazardName.landslide, level=HazardLevel.moderate))

    return hazards


class HazardAgent(BaseAgent):
    requires = ("lat", "lon")

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng

    @property
    def name(self) -> str:
        return "hazards"

    async def run(self, context: dict) -> dict:
        return {"hazards": identify_hazards(context["lat"], context["lon"], self._rng)}
