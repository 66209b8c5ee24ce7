import httpx
import pytest


class StubRandom:
    """Stands in for random.Random with a fixed draw."""

    def __init__(self, value: float = 0.9, index: int = 0) -> None:
        self.value = value
        self.index = index

    def random(self) -> float:
        return self.value

    def choice(self, seq):
        return seq[self.index]


MANILA = {
    "lat": "14.5995",
    "lon": "120.9842",
    "display_name": "Manila, Capital District, Metro Manila, Philippines",
}


def nominatim(request: httpx.Request) -> httpx.Response:
    params = request.url.params
    if request.url.path == "/search":
        if params["q"] == "Nowhere":
            return httpx.Response(200, json=[])
        if params["q"] == "blank":
            return httpx.Response(200, json=[{"lat": "1", "lon": "2", "display_name": ""}])
        if params["q"] == "boom":
            return httpx.Response(500, text="upstream down")
        return httpx.Response(200, json=[MANILA])
    if request.url.path == "/reverse":
        if float(params["lat"]) == 0:
            return httpx.Response(200, json={"error": "Unable to geocode"})
        if float(params["lat"]) < 0:
            raise httpx.ConnectError("no route to host", request=request)
        return httpx.Response(200, json={"display_name": "Cebu City, Central Visayas, Philippines"})
    return httpx.Response(404)


@pytest.fixture
def transport() -> httpx.MockTransport:
    return httpx.MockTransport(nominatim)


@pytest.fixture
def coastal_rng() -> StubRandom:
    return StubRandom(0.9)


@pytest.fixture
def inland_rng() -> StubRandom:
    return StubRandom(0.1)
