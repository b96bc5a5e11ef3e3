# app/core/config.py
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List, Optional


class Settings(BaseSettings):
    # ===================================
    # APPLICATION SETTINGS
    # ===================================
    APP_NAME: str = "Claims Intake Service"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # ===================================
    # SERVER
    # ===================================
    HOST: str = "127.0.0.1"
    PORT: int = 8080
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # ===================================
    # STORAGE
    # ===================================
    STORAGE_BACKEND: str = "neo4j"  # Options: "neo4j", "memory"

    # ===================================
    # NEO4J (Document Store)
    # ===================================
    NEO4J_URI: str = "bolt://localhost:7687"
    NEO4J_USER: str = "neo4j"
    NEO4J_PASSWORD: str = "password"
    NEO4J_DATABASE: Optional[str] = None  # None = server default database

    # ===================================
    # GOOGLE MAPS / PLACES
    # ===================================
    GOOGLE_KEY: str = "xxxx-xxxx"
    PLACES_KEY: str = "xxxx-xxxx"
    STATIC_MAPS_URL: str = "https://maps.googleapis.com/maps/api/staticmap"
    PLACE_AUTOCOMPLETE_URL: str = "https://maps.googleapis.com/maps/api/place/autocomplete/json"
    MAP_ZOOM: int = 15
    MAP_SIZE: str = "400x250"

    # ===================================
    # AUTHENTICATION
    # ===================================
    JWT_SECRET: Optional[str] = None  # Required, checked at startup
    JWT_ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "jwt"
    SESSION_MAX_AGE_SECONDS: int = 60 * 60 * 24  # one day
    BCRYPT_ROUNDS: int = 10

    # ===================================
    # COMPUTED PROPERTIES
    # ===================================
    @property
    def uses_placeholder_keys(self) -> bool:
        return "xxxx-xxxx" in (self.GOOGLE_KEY, self.PLACES_KEY)

    # ===================================
    # PYDANTIC CONFIG
    # ===================================
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "allow"  # Allow extra fields from .env


# ===================================
# SINGLETON PATTERN
# ===================================
@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
