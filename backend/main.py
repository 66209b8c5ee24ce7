import asyncio
import base64
import logging
import random

from fastapi import Depends, FastAPI, File, HTTPException, Response, UploadFile
from fastapi.middleware.cors import CORSMiddleware

import catalog
from agents.assistant_agent import AssistantAgent
from agents.geocoding_agent import GeocodingAgent, GeocodingError
from config import settings
from models.schemas import (
    ActiveHazard,
    AnalysisResponse,
    ChatMessage,
    ChatRequest,
    ChatResponse,
    ClickRequest,
    CurrentLocation,
    HazardZone,
    ImageAnalysisResponse,
    LayerState,
    MapConfig,
    MapView,
    Role,
    SearchRequest,
)
from orchestrator import LocationAnalyzer
from session import SessionState

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("geovision")

app = FastAPI(title="geovision")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

session = SessionState()
geocoder = GeocodingAgent()
rng = random.Random(settings.random_seed)


def get_session() -> SessionState:
    return session


def get_geocoder() -> GeocodingAgent:
    return geocoder


def get_rng() -> random.Random:
    return rng


@app.get("/api/map", response_model=MapConfig)
async def map_config(state: SessionState = Depends(get_session)) -> MapConfig:
    return MapConfig(
        view=MapView(center=settings.default_center, zoom=settings.default_zoom),
        base_layer=catalog.BASE_LAYER,
        satellite_layer=catalog.SATELLITE_LAYER,
        layers=state.layers(),
    )


@app.get("/api/hazard-zones", response_model=list[HazardZone])
async def hazard_zones() -> list[HazardZone]:
    return catalog.HAZARD_ZONES


@app.get("/api/active-hazards", response_model=list[ActiveHazard])
async def active_hazards() -> list[ActiveHazard]:
    await asyncio.sleep(settings.active_hazards_delay)
    return catalog.ACTIVE_HAZARDS


@app.post("/api/search", response_model=AnalysisResponse)
async def search(
    req: SearchRequest,
    state: SessionState = Depends(get_session),
    geo: GeocodingAgent = Depends(get_geocoder),
    rand: random.Random = Depends(get_rng),
):
    query = req.query.strip()
    if not query:
        return Response(status_code=204)

    try:
        results = await geo.search(query)
    except GeocodingError:
        logger.exception("Search for %r failed", query)
        raise HTTPException(status_code=502, detail="Error performing search. Please try again.")

    if not results:
        logger.info("No results for %r", query)
        raise HTTPException(status_code=404, detail="Location not found. Please try a different search term.")

    hit = results[0]
    logger.info("Search %r -> %s (%.4f, %.4f)", query, hit.display_name, hit.lat, hit.lon)
    try:
        report = await LocationAnalyzer(geo, rand).analyze(hit.lat, hit.lon, hit.display_name)
    except GeocodingError:
        logger.exception("Analysis of search hit for %r failed", query)
        raise HTTPException(status_code=502, detail="Error performing search. Please try again.")

    marker = state.add_marker(hit.lat, hit.lon, hit.display_name)
    state.set_location(hit.lat, hit.lon, hit.display_name)

    return AnalysisResponse(
        view=MapView(center=(hit.lat, hit.lon), zoom=settings.search_zoom),
        marker=marker,
        report=report,
    )


@app.post("/api/click", response_model=AnalysisResponse)
async def click(
    req: ClickRequest,
    state: SessionState = Depends(get_session),
    geo: GeocodingAgent = Depends(get_geocoder),
    rand: random.Random = Depends(get_rng),
) -> AnalysisResponse:
    state.clear_markers()
    marker = state.add_marker(req.lat, req.lon)
    location = state.set_location(req.lat, req.lon)

    try:
        report = await LocationAnalyzer(geo, rand).analyze(req.lat, req.lon)
    except GeocodingError:
        logger.exception("Analysis of (%.4f, %.4f) failed", req.lat, req.lon)
        raise HTTPException(status_code=502, detail="Error loading location information")

    state.resolve_place_name(location, report.name)
    return AnalysisResponse(marker=marker, report=report)


@app.get("/api/location", response_model=CurrentLocation | None)
async def current_location(state: SessionState = Depends(get_session)) -> CurrentLocation | None:
    return state.current_location


@app.get("/api/chat", response_model=list[ChatMessage])
async def chat_history(state: SessionState = Depends(get_session)) -> list[ChatMessage]:
    return list(state.conversation.all())


@app.post("/api/chat", response_model=ChatResponse)
async def chat(
    req: ChatRequest,
    state: SessionState = Depends(get_session),
    rand: random.Random = Depends(get_rng),
):
    message = req.message.strip()
    if not message:
        return Response(status_code=204)

    state.conversation.append(ChatMessage(role=Role.user, content=message))
    result = await AssistantAgent(rand).run({"message": message, "current_location": state.current_location})
    reply = ChatMessage(role=Role.assistant, content=result["reply"])
    state.conversation.append(reply)
    return ChatResponse(reply=reply)


@app.post("/api/chat/image", response_model=ImageAnalysisResponse)
async def chat_image(
    image: UploadFile = File(...),
    state: SessionState = Depends(get_session),
):
    data = await image.read()
    if not data:
        return Response(status_code=204)

    content_type = image.content_type or "application/octet-stream"
    payload = f"data:{content_type};base64,{base64.b64encode(data).decode('ascii')}"
    logger.info("Received image %s (%d bytes)", image.filename, len(data))

    await asyncio.sleep(settings.image_analysis_delay)
    analysis = ChatMessage(role=Role.assistant, content=catalog.IMAGE_ANALYSIS_PLACEHOLDER)
    state.conversation.append(analysis)
    return ImageAnalysisResponse(image=payload, analysis=analysis)


@app.get("/api/layers", response_model=list[LayerState])
async def layers(state: SessionState = Depends(get_session)) -> list[LayerState]:
    return state.layers()


@app.post("/api/layers/{name}/toggle", response_model=LayerState)
async def toggle_layer(name: str, state: SessionState = Depends(get_session)) -> LayerState:
    try:
        active = state.toggle_layer(name)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown layer: {name}")
    return LayerState(name=name, active=active)
