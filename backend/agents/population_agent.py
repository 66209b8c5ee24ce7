import random

from agents.base_agent import BaseAgent

UNKNOWN_POPULATION = "Unknown"

# Checked in order; "Quezon City, Metro Manila" resolves to Metro Manila
_CITY_POPULATIONS = [
    (("metro manila", "manila"), "~13.5M"),
    (("quezon city",), "~2.9M"),
    (("cebu",), "~950K"),
    (("davao",), "~1.6M"),
    (("camarines",), "~580K"),
]

FALLBACK_BUCKETS = ["50K-100K", "100K-250K", "250K-500K", "20K-50K"]


def estimate_population(place_name: str | None, rng: random.Random | None = None) -> str:
    if not place_name:
        return UNKNOWN_POPULATION

    lower = place_name.lower()
    for names, bucket in _CITY_POPULATIONS:
        if any(name in lower for name in names):
            return bucket

    return (rng or random).choice(FALLBACK_BUCKETS)


class PopulationAgent(BaseAgent):
    requires = ("place_name",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng

    @property
    def name(self) -> str:
        return "population"

    async def run(self, context: dict) -> dict:
        return {"population_estimate": estimate_population(context.get("place_name"), self._rng)}
