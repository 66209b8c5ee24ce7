import asyncio

import pytest

from agents.assistant_agent import (
    DEFAULT_REPLY,
    EARTHQUAKE_REPLY,
    VOLCANO_REPLY,
    WEATHER_REPLY,
    AssistantAgent,
    generate_reply,
)
from models.schemas import CurrentLocation

CEBU = CurrentLocation(lat=10.3157, lon=123.8854, place_name="Cebu City")


def test_population_reply_uses_location():
    reply = generate_reply("How many people live here?", CEBU)
    assert "Cebu City" in reply
    assert "~950K" in reply


def test_population_beats_hazard():
    reply = generate_reply("What population is at risk?", CEBU)
    assert reply.startswith("Based on available data")


def test_hazard_reply_lists_levels(inland_rng):
    reply = generate_reply("Is it SAFE to build here?", CEBU, inland_rng)
    assert "Earthquake (high risk), Typhoon (high risk), Flooding (moderate risk)" in reply
    assert "Tsunami" not in reply


def test_solutions_fall_back_to_generic_place():
    reply = generate_reply("how can we improve drainage", CurrentLocation(lat=12.0, lon=122.0))
    assert reply.startswith("For this location, I recommend")


def test_unnamed_location_population():
    reply = generate_reply("ppl count?", CurrentLocation(lat=12.0, lon=122.0))
    assert "in this area is approximately Unknown" in reply


@pytest.mark.parametrize(
    "message, expected",
    [
        ("population?", "To provide population data, please click on a specific location on the map first."),
        ("any danger nearby", "Please select a location on the map to analyze hazard risks."),
        ("I need help", "Please select a specific location to receive tailored solutions."),
    ],
)
def test_location_bound_topics_without_location(message, expected):
    assert generate_reply(message) == expected


@pytest.mark.parametrize(
    "message, expected",
    [
        ("Will it rain tomorrow?", WEATHER_REPLY),
        ("typhoon and earthquake news", WEATHER_REPLY),
        ("Is Taal active?", VOLCANO_REPLY),
        ("recent quake activity", EARTHQUAKE_REPLY),
        ("hello there", DEFAULT_REPLY),
    ],
)
def test_fixed_replies(message, expected):
    assert generate_reply(message, CEBU) == expected


def test_agent_reads_message_and_location():
    result = asyncio.run(AssistantAgent().run({"message": "population", "current_location": None}))
    assert result["reply"].startswith("To provide population data")
