from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    nominatim_url: str = "https://nominatim.openstreetmap.org"
    geocoding_user_agent: str = "geovision/0.1"
    geocoding_timeout: float = 10.0

    cors_origins: list[str] = ["http://localhost:5173"]

    default_center: tuple[float, float] = (12.8797, 121.7740)  # Philippines
    default_zoom: int = 6
    search_zoom: int = 13

    # Seconds; stand-ins for the feed loader and image analysis
    active_hazards_delay: float = 1.0
    image_analysis_delay: float = 2.0

    random_seed: int | None = None
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
