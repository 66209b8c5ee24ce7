from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HazardName(str, Enum):
    earthquake = "Earthquake"
    typhoon = "Typhoon"
    flooding = "Flooding"
    tsunami = "Tsunami"
    landslide = "Landslide"


class HazardLevel(str, Enum):
    low = "low"
    moderate = "moderate"
    high = "high"


class Hazard(BaseModel):
    name: HazardName
    level: HazardLevel


class CurrentLocation(BaseModel):
    lat: float
    lon: float
    place_name: str | None = None


class LocationReport(BaseModel):
    name: str
    lat: float
    lon: float
    coordinates: str
    population_estimate: str
    hazards: list[Hazard]
    infrastructure: str = "Moderate"
    resilience_score: int = Field(ge=30, le=100)


class Role(str, Enum):
    user = "user"
    assistant = "assistant"


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class GeocodeResult(BaseModel):
    lat: float
    lon: float
    display_name: str = Field(min_length=1)


class Marker(BaseModel):
    lat: float
    lon: float
    label: str | None = None


class MapView(BaseModel):
    center: tuple[float, float]
    zoom: int


class HazardZone(BaseModel):
    name: str
    lat: float
    lon: float
    radius: int  # metres
    level: HazardLevel
    color: str


class ActiveHazard(BaseModel):
    type: str
    name: str
    status: str
    location: str
    distance: str
    magnitude: str | None = None
    updated: str


class TileLayer(BaseModel):
    name: str
    url: str
    attribution: str
    max_zoom: int = 19


class LayerState(BaseModel):
    name: str
    active: bool


class MapConfig(BaseModel):
    view: MapView
    base_layer: TileLayer
    satellite_layer: TileLayer
    layers: list[LayerState]


class SearchRequest(BaseModel):
    query: str


class ClickRequest(BaseModel):
    lat: float
    lon: float


class ChatRequest(BaseModel):
    message: str


class AnalysisResponse(BaseModel):
    view: MapView | None = None
    marker: Marker
    report: LocationReport


class ChatResponse(BaseModel):
    reply: ChatMessage


class ImageAnalysisResponse(BaseModel):
    image: str  # data: URL
    analysis: ChatMessage
