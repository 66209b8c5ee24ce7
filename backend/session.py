from models.schemas import ChatMessage, CurrentLocation, LayerState, Marker


class ConversationStore:
    """Append-only chat log, kept in arrival order for the life of the process."""

    def __init__(self) -> None:
        self._messages: list[ChatMessage] = []

    def append(self, message: ChatMessage) -> None:
        self._messages.append(message)

    def all(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)


DEFAULT_LAYERS = {
    "hazards": True,
    "satellite": False,
    "buildings_3d": False,
}


class SessionState:
    """The viewer's mutable state: selection, markers, overlays and chat."""

    def __init__(self) -> None:
        self.current_location: CurrentLocation | None = None
        self.conversation = ConversationStore()
        self._markers: list[Marker] = []
        self._layers = dict(DEFAULT_LAYERS)

    def set_location(self, lat: float, lon: float, place_name: str | None = None) -> CurrentLocation:
        self.current_location = CurrentLocation(lat=lat, lon=lon, place_name=place_name)
        return self.current_location

    def resolve_place_name(self, location: CurrentLocation, place_name: str) -> None:
        # A newer click or search may have replaced the selection meanwhile
        if self.current_location is location:
            self.current_location = location.model_copy(update={"place_name": place_name})

    def add_marker(self, lat: float, lon: float, label: str | None = None) -> Marker:
        marker = Marker(lat=lat, lon=lon, label=label)
        self._markers.append(marker)
        return marker

    def clear_markers(self) -> None:
        self._markers = []

    @property
    def markers(self) -> list[Marker]:
        return list(self._markers)

    def toggle_layer(self, name: str) -> bool:
        if name not in self._layers:
            raise KeyError(name)
        self._layers[name] = not self._layers[name]
        return self._layers[name]

    def layers(self) -> list[LayerState]:
        return [LayerState(name=name, active=active) for name, active in self._layers.items()]
