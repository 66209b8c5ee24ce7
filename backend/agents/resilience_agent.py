from agents.base_agent import BaseAgent
from models.schemas import Hazard, HazardLevel

MIN_SCORE = 30
MAX_SCORE = 100

_PENALTIES = {
    HazardLevel.high: 20,
    HazardLevel.moderate: 10,
    HazardLevel.low: 0,
}


def calculate_resilience(hazards: list[Hazard]) -> int:
    score = MAX_SCORE - sum(_PENALTIES[h.level] for h in hazards)
    return max(MIN_SCORE, min(MAX_SCORE, score))


class ResilienceAgent(BaseAgent):
    requires = ("hazards",)

    @property
    def name(self) -> str:
        return "resilience"

    async def run(self, context: dict) -> dict:
        return {"resilience_score": calculate_resilience(context["hazards"])}
