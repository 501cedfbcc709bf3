import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Storage
    server_root: str = os.getenv("SERVER_ROOT", "./serverroot")
    server_files: str = os.getenv("SERVER_FILES", "./serverfiles")
    not_found_page: str = os.getenv("NOT_FOUND_PAGE", "404.html")
    index_file: str = os.getenv("INDEX_FILE", "index.html")

    # Cache
    cache_capacity: int = int(os.getenv("CACHE_CAPACITY", "10"))  # 0 = unbounded

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "3490"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def capacity_limit(self) -> int | None:
        """Cache capacity as seen by the cache itself.

        Returns:
            The maximum entry count, or None when the cache is unbounded
        """
        if self.cache_capacity <= 0:
            return None
        return self.cache_capacity

    @property
    def not_found_path(self) -> str:
        """Full path of the not-found asset."""
        return f"{self.server_files}/{self.not_found_page}"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not isinstance(self.cache_capacity, int) or isinstance(self.cache_capacity, bool):
            raise ValueError(f"CACHE_CAPACITY must be an integer, got {self.cache_capacity!r}")

        if not 0 < self.api_port < 65536:
            raise ValueError(f"API_PORT must be between 1 and 65535, got {self.api_port}")

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"LOG_LEVEL is not a known logging level: {self.log_level}")

        if not self.index_file or "/" in self.index_file:
            raise ValueError(f"INDEX_FILE must be a bare file name, got {self.index_file!r}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
