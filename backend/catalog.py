"""Static overlays and feeds served to the map.

Placeholders for PHIVOLCS/PAGASA data until real hazard polygons and
bulletins are wired in.
"""

from models.schemas import ActiveHazard, HazardLevel, HazardZone, TileLayer

LEVEL_COLORS = {
    HazardLevel.high: "#d9534f",
    HazardLevel.moderate: "#f0ad4e",
    HazardLevel.low: "#5cb85c",
}


def _zone(name: str, lat: float, lon: float, radius: int, level: HazardLevel) -> HazardZone:
    return HazardZone(name=name, lat=lat, lon=lon, radius=radius, level=level, color=LEVEL_COLORS[level])


HAZARD_ZONES = [
    _zone("Metro Manila Earthquake Zone", 14.5995, 120.9842, 50_000, HazardLevel.high),
    _zone("Bicol Volcanic Zone", 13.4145, 123.4135, 40_000, HazardLevel.high),
    _zone("Cebu Fault Line", 10.3157, 123.8854, 35_000, HazardLevel.moderate),
    _zone("Davao Seismic Zone", 7.0731, 125.6128, 30_000, HazardLevel.moderate),
]

ACTIVE_HAZARDS = [
    ActiveHazard(
        type="Volcano",
        name="Mayon Volcano",
        status="Alert Level 2",
        location="Albay",
        distance="245 km",
        updated="Feb 6, 2026 10:30 AM",
    ),
    ActiveHazard(
        type="Earthquake",
        name="Recent Seismic Activity",
        status="Magnitude 4.2",
        location="Mindoro",
        distance="180 km",
        magnitude="4.2",
        updated="Feb 6, 2026 08:15 AM",
    ),
    ActiveHazard(
        type="Typhoon",
        name="Tropical Depression",
        status="Signal No. 1",
        location="Eastern Visayas",
        distance="320 km",
        updated="Feb 6, 2026 06:00 AM",
    ),
]

BASE_LAYER = TileLayer(
    name="OpenStreetMap",
    url="https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png",
    attribution="© OpenStreetMap contributors",
)

SATELLITE_LAYER = TileLayer(
    name="Esri World Imagery",
    url="https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}",
    attribution="Tiles © Esri",
)

IMAGE_ANALYSIS_PLACEHOLDER = (
    "Based on the image analysis, this appears to be an urban area with mixed residential "
    "and commercial development. Structural analysis indicates standard concrete construction. "
    "I've identified potential drainage issues and recommend installing retention basins. "
    "Coordinates estimated at approximately 14.5995°N, 120.9842°E (Metro Manila area). "
    "Would you like detailed infrastructure recommendations?"
)
