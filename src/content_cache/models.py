from dataclasses import dataclass


@dataclass
class ResolutionMetrics:
    """Track outcomes of request resolution."""

    total_requests: int = 0
    served_from_cache: int = 0
    loaded_from_storage: int = 0
    index_fallbacks: int = 0
    not_found: int = 0
    rejected: int = 0
    total_lookup_time_ms: float = 0.0

    @property
    def hit_rate(self) -> float:
        """Calculate the share of requests served from cache."""
        if self.total_requests == 0:
            return 0.0
        return self.served_from_cache / self.total_requests

    @property
    def avg_lookup_time_ms(self) -> float:
        """Calculate average resolution time."""
        if self.total_requests == 0:
            return 0.0
        return self.total_lookup_time_ms / self.total_requests

    def record_hit(self, lookup_time_ms: float) -> None:
        """Record a request served from cache."""
        self.total_requests += 1
        self.served_from_cache += 1
        self.total_lookup_time_ms += lookup_time_ms

    def record_load(self, lookup_time_ms: float, fallback: bool = False) -> None:
        """Record a request served after reading storage."""
        self.total_requests += 1
        self.loaded_from_storage += 1
        if fallback:
            self.index_fallbacks += 1
        self.total_lookup_time_ms += lookup_time_ms

    def record_not_found(self, lookup_time_ms: float, rejected: bool = False) -> None:
        """Record a request that resolved to nothing."""
        self.total_requests += 1
        self.not_found += 1
        if rejected:
            self.rejected += 1
        self.total_lookup_time_ms += lookup_time_ms

    def to_dict(self) -> dict[str, float | int]:
        """Convert metrics to dictionary."""
        return {
            "total_requests": self.total_requests,
            "served_from_cache": self.served_from_cache,
            "loaded_from_storage": self.loaded_from_storage,
            "index_fallbacks": self.index_fallbacks,
            "not_found": self.not_found,
            "rejected": self.rejected,
            "hit_rate": self.hit_rate,
            "avg_lookup_time_ms": self.avg_lookup_time_ms,
        }
