import random
from typing import Callable

from agents.base_agent import BaseAgent
from agents.hazard_agent import identify_hazards
from agents.population_agent import estimate_population
from models.schemas import CurrentLocation

ASSISTANT_NAME = "AI VISION"

WEATHER_REPLY = (
    "Current weather conditions:\n"
    "- Temperature: 28°C\n"
    "- Humidity: 75%\n"
    "- Wind: 15 km/h NE\n"
    "- Conditions: Partly cloudy\n\n"
    "7-Day Forecast: Mixed conditions with possible rain showers on Feb 8-9. "
    "No tropical cyclones currently threatening the area.\n\n"
    "Would you like detailed impact analysis on local infrastructure?"
)

VOLCANO_REPLY = (
    "Active Volcano Status:\n\n"
    "**Mayon Volcano**: Alert Level 2 (Increasing unrest)\n"
    "- Distance from you: ~245 km\n"
    "- Last activity: Minor ash emission Feb 4, 2026\n"
    "- Danger zone: 6km radius\n\n"
    "**Taal Volcano**: Alert Level 1 (Abnormal)\n"
    "- Distance from you: ~180 km\n"
    "- Last activity: Phreatic eruption Jan 2026\n"
    "- Danger zone: Crater area\n\n"
    "Recommendations: Monitor PHIVOLCS bulletins, prepare evacuation plans for "
    "communities within 10km."
)

EARTHQUAKE_REPLY = (
    "Recent Seismic Activity:\n\n"
    "**Latest Event**: Magnitude 4.2\n"
    "- Location: 15km NE of Mindoro\n"
    "- Depth: 10km\n"
    "- Time: Feb 6, 2026 08:15 AM\n"
    "- Intensity: III (Weak)\n\n"
    "**Fault Lines Nearby**:\n"
    "- West Valley Fault: 35km\n"
    "- East Valley Fault: 42km\n"
    "- Marikina Fault: 28km\n\n"
    "Risk Assessment: Moderate seismic risk. Buildings should comply with "
    "NSCP 2015 earthquake-resistant standards."
)

DEFAULT_REPLY = (
    f"I'm {ASSISTANT_NAME}, your intelligent spatial analysis assistant. I can help you with:\n\n"
    "• Population and demographic data\n"
    "• Hazard and risk assessments\n"
    "• Infrastructure solutions and recommendations\n"
    "• Weather forecasts and disaster monitoring\n"
    "• Volcanic and seismic activity tracking\n"
    "• 3D architectural planning\n\n"
    "Click anywhere on the map or ask me a specific question about any location "
    "in the Philippines!"
)

SOLUTIONS_TEMPLATE = (
    "For {place}, I recommend the following solutions:\n\n"
    "1. **Flood Mitigation**: Install improved drainage systems with 2.5m deep "
    "channels, capacity for 150mm/hour rainfall\n\n"
    "2. **Earthquake Resilience**: Retrofit critical buildings with base isolation "
    "systems, estimated cost ₱2.5M per structure\n\n"
    "3. **Evacuation Infrastructure**: Establish 3 evacuation centers within 500m "
    "radius, capacity 500 people each\n\n"
    "4. **Early Warning System**: Deploy IoT sensors for real-time monitoring, "
    "estimated setup ₱850K\n\n"
    "Would you like 3D architectural mockups for any of these solutions?"
)

Responder = Callable[[CurrentLocation | None, random.Random | None], str]


def _population_reply(location, rng):
    if location is None:
        return "To provide population data, please click on a specific location on the map first."
    return (
        f"Based on available data, the estimated population in {location.place_name or 'this area'} "
        f"is approximately {estimate_population(location.place_name, rng)}. This is an estimate "
        "based on regional census data and recent demographic trends."
    )


def _hazard_reply(location, rng):
    if location is None:
        return "Please select a location on the map to analyze hazard risks."
    hazards = identify_hazards(location.lat, location.lon, rng)
    hazard_list = ", ".join(f"{h.name.value} ({h.level.value} risk)" for h in hazards)
    return (
        f"The primary hazards identified for this location include: {hazard_list}. "
        "I recommend implementing structural reinforcements, early warning systems, and "
        "community preparedness programs. Would you like detailed architectural solutions "
        "for specific hazards?"
    )


def _solutions_reply(location, rng):
    if location is None:
        return "Please select a specific location to receive tailored solutions."
    return SOLUTIONS_TEMPLATE.format(place=location.place_name or "this location")


def _fixed(text: str) -> Responder:
    return lambda location, rng: text


# First match wins, so order matters: "population at risk" is a population question.
RULES: list[tuple[tuple[str, ...], Responder]] = [
    (("population", "people", "ppl"), _population_reply),
    (("hazard", "risk", "danger", "safe"), _hazard_reply),
    (("solution", "fix", "improve", "help"), _solutions_reply),
    (("weather", "forecast", "rain", "typhoon"), _fixed(WEATHER_REPLY)),
    (("volcano", "eruption", "mayon", "taal"), _fixed(VOLCANO_REPLY)),
    (("earthquake", "seismic", "quake"), _fixed(EARTHQUAKE_REPLY)),
]


def generate_reply(
    message: str,
    location: CurrentLocation | None = None,
    rng: random.Random | None = None,
) -> str:
    """Pick a canned reply by keyword, filling in live values for ``location``."""
    lower = message.lower()
    for triggers, responder in RULES:
        if any(trigger in lower for trigger in triggers):
            return responder(location, rng)
    return DEFAULT_REPLY


class AssistantAgent(BaseAgent):
    requires = ("message",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng

    @property
    def name(self) -> str:
        return "assistant"

    async def run(self, context: dict) -> dict:
        reply = generate_reply(context["message"], context.get("current_location"), self._rng)
        return {"reply": reply}
