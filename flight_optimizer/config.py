"""Centralised application settings loaded from environment / .env file."""

from typing import Optional

from pydantic_settings import BaseSettings

from flight_optimizer.domain.metrics import COST_PER_KM, CRUISE_SPEED_KMH


class Settings(BaseSettings):
    # Derived metrics
    cruise_speed_kmh: float = CRUISE_SPEED_KMH  # km / h
    cost_per_km: float = COST_PER_KM  # USD / km

    # Network dataset (JSON); the bundled network is used when unset
    network_file: Optional[str] = None

    # HTTP
    host: str = "0.0.0.0"
    port: int = 8080
    cors_allow_origins: list[str] = ["*"]
    rate_limit: str = "100/minute"

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
