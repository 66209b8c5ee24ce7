import asyncio

import httpx
import pytest

from agents.geocoding_agent import GeocodingAgent, GeocodingError


def test_search_parses_candidates(transport):
    results = asyncio.run(GeocodingAgent(transport).search("Manila"))
    assert len(results) == 1
    assert results[0].lat == pytest.approx(14.5995)
    assert results[0].lon == pytest.approx(120.9842)
    assert results[0].display_name.startswith("Manila")


def test_search_sends_query_and_user_agent():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        seen["agent"] = request.headers["user-agent"]
        return httpx.Response(200, json=[])

    results = asyncio.run(GeocodingAgent(httpx.MockTransport(handler)).search("Quezon City"))
    assert results == []
    assert seen["params"] == {"format": "json", "q": "Quezon City"}
    assert seen["agent"].startswith("geovision")


def test_empty_search_is_not_an_error(transport):
    assert asyncio.run(GeocodingAgent(transport).search("Nowhere")) == []


def test_server_error_raises(transport):
    with pytest.raises(GeocodingError):
        asyncio.run(GeocodingAgent(transport).search("boom"))


def test_malformed_payload_raises():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=[{"lat": "x"}]))
    with pytest.raises(GeocodingError):
        asyncio.run(GeocodingAgent(transport).search("Manila"))


def test_blank_display_name_raises(transport):
    with pytest.raises(GeocodingError):
        asyncio.run(GeocodingAgent(transport).search("blank"))


def test_non_json_raises():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>busy</html>"))
    with pytest.raises(GeocodingError):
        asyncio.run(GeocodingAgent(transport).search("Manila"))


def test_reverse(transport):
    agent = GeocodingAgent(transport)
    assert asyncio.run(agent.reverse(10.3157, 123.8854)) == "Cebu City, Central Visayas, Philippines"
    assert asyncio.run(agent.reverse(0.0, 0.0)) is None


def test_reverse_connection_failure(transport):
    with pytest.raises(GeocodingError):
        asyncio.run(GeocodingAgent(transport).reverse(-1.0, 0.0))


def test_run_keeps_existing_place_name():
    def handler(request):
        raise AssertionError("no request expected")

    agent = GeocodingAgent(httpx.MockTransport(handler))
    assert asyncio.run(agent.run({"lat": 1.0, "lon": 2.0, "place_name": "Davao"})) == {}


def test_run_falls_back_to_unknown_location(transport):
    result = asyncio.run(GeocodingAgent(transport).run({"lat": 0.0, "lon": 0.0, "place_name": None}))
    assert result == {"place_name": "Unknown Location"}
