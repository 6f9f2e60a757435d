"""
Configuration management for the Specialist Router server.
Supports environment variables and a .env file.
"""
import os
from typing import Optional
from pydantic_settings import BaseSettings

from .specialist_router.schemas import RoutingPolicy


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = True

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = "specialist_server.log"

    # Registry source: JSON file, or the built-in Unity catalog when unset
    router_registry_path: Optional[str] = os.getenv("ROUTER_REGISTRY_PATH", None)
    router_fallback_id: str = os.getenv("ROUTER_FALLBACK_ID", "generalist")

    # Routing policy
    router_min_primary_score: float = float(os.getenv("ROUTER_MIN_PRIMARY_SCORE", 2.0))
    router_min_secondary_score: float = float(os.getenv("ROUTER_MIN_SECONDARY_SCORE", 1.0))
    router_max_secondary: int = int(os.getenv("ROUTER_MAX_SECONDARY", 3))
    router_ambiguity_epsilon: float = float(os.getenv("ROUTER_AMBIGUITY_EPSILON", 0.5))
    router_prerequisite_demotion: float = float(os.getenv("ROUTER_PREREQUISITE_DEMOTION", 0.5))

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    def routing_policy(self) -> RoutingPolicy:
        """Build the router's policy from the current settings."""
        return RoutingPolicy(
            min_primary_score=self.router_min_primary_score,
            min_secondary_score=self.router_min_secondary_score,
            max_secondary=self.router_max_secondary,
            ambiguity_epsilon=self.router_ambiguity_epsilon,
            prerequisite_demotion=self.router_prerequisite_demotion,
        )


settings = Settings()
