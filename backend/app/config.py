from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # V-World (국토교통부 공간정보 오픈플랫폼)
    vworld_key: str = ""
    vworld_domain: str = "localhost"
    vworld_timeout: float = 10.0
    land_use_buffer_m: int = 1  # primary zoning layer
    land_use_fallback_buffer_m: int = 10

    redis_url: str = ""  # empty disables lookup caching

    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
