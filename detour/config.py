"""Centralised settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Geometry
    earth_radius_km: float = 6_371.0

    # Boundary checks (lat in [-90, 90], lon in [-180, 180])
    validate_coordinates: bool = True

    model_config = {"env_file": ".env", "env_prefix": "DETOUR_", "extra": "ignore"}


settings = Settings()
