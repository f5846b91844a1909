"""
Configuration metrics and health monitoring for Rift Core.

Purpose
-------
Tracks counters for ConfigManager reads, override writes, default fallbacks
and errors, and derives hit rates and latencies for snapshots.

Non-Responsibilities
--------------------
- Configuration storage or retrieval (handled by ConfigManager)
- Configuration validation (handled by validator module)

Architecture Notes
------------------
- Metrics stored in a dataclass with slots
- Derived metrics calculated on demand from raw counters
- The core is single-threaded, so counters are updated without locking
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(slots=True)
class ConfigMetrics:
    """
    Typed metrics container for ConfigManager observability.

    Tracks reads, writes, override hits, default fallbacks, errors and
    latencies.
    """

    # Operation counts
    gets: int = 0
    sets: int = 0
    override_hits: int = 0
    default_hits: int = 0
    misses: int = 0
    yaml_files_loaded: int = 0
    errors: int = 0

    # Latency tracking (milliseconds)
    total_get_time_ms: float = 0.0
    total_set_time_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert metrics to dictionary for logging/export.

        Example
        -------
        >>> metrics = ConfigMetrics()
        >>> logger.info("Config metrics", extra=metrics.to_dict())
        """
        return asdict(self)

    def record_get(self, elapsed_ms: float, source: str) -> None:
        """
        Record a GET operation.

        Parameters
        ----------
        elapsed_ms:
            Operation duration in milliseconds.
        source:
            ``"override"``, ``"default"`` or ``"missing"``.
        """
        self.gets += 1
        self.total_get_time_ms += elapsed_ms
        if source == "override":
            self.override_hits += 1
        elif source == "default":
            self.default_hits += 1
        else:
            self.misses += 1

    def record_set(self, elapsed_ms: float) -> None:
        self.sets += 1
        self.total_set_time_ms += elapsed_ms

    def record_error(self) -> None:
        self.errors += 1

    def get_override_hit_rate(self) -> float:
        """Share of reads answered by a runtime override, as a percentage."""
        if self.gets == 0:
            return 0.0
        return (self.override_hits / self.gets) * 100.0

    def get_avg_get_time_ms(self) -> float:
        if self.gets == 0:
            return 0.0
        return self.total_get_time_ms / self.gets

    def get_avg_set_time_ms(self) -> float:
        if self.sets == 0:
            return 0.0
        return self.total_set_time_ms / self.sets

    def reset(self) -> None:
        """
        Reset all metrics counters to zero.

        Example
        -------
        >>> metrics = ConfigMetrics()
        >>> metrics.reset()
        """
        self.gets = 0
        self.sets = 0
        self.override_hits = 0
        self.default_hits = 0
        self.misses = 0
        self.yaml_files_loaded = 0
        self.errors = 0
        self.total_get_time_ms = 0.0
        self.total_set_time_ms = 0.0


def get_metrics_snapshot(
    metrics: ConfigMetrics,
    initialized: bool,
    default_keys: int,
    override_keys: int,
) -> Dict[str, Any]:
    """
    Generate a metrics snapshot for monitoring.

    Includes raw counters, derived metrics and the manager's state.

    Example
    -------
    >>> snapshot = get_metrics_snapshot(metrics, True, default_keys=3, override_keys=0)
    >>> logger.info("Config metrics snapshot", extra=snapshot)
    """
    metrics_dict = metrics.to_dict()

    metrics_dict.update({
        "override_hit_rate": round(metrics.get_override_hit_rate(), 2),
        "avg_get_time_ms": round(metrics.get_avg_get_time_ms(), 4),
        "avg_set_time_ms": round(metrics.get_avg_set_time_ms(), 4),
        "initialized": initialized,
        "default_keys": default_keys,
        "override_keys": override_keys,
    })

    return metrics_dict


def get_health_snapshot(
    initialized: bool,
    default_keys: int,
    errors: int,
) -> Dict[str, Any]:
    """
    Generate a compact health snapshot.

    Example
    -------
    >>> health = get_health_snapshot(initialized=True, default_keys=3, errors=0)
    >>> health["status"]
    'healthy'
    """
    is_healthy = initialized and default_keys > 0 and errors < 10

    status = "healthy" if is_healthy else "degraded"
    if not initialized:
        status = "not_initialized"
    elif errors > 50:
        status = "unhealthy"

    return {
        "initialized": initialized,
        "default_keys": default_keys,
        "errors": errors,
        "is_healthy": is_healthy,
        "status": status,
    }


__all__ = [
    "ConfigMetrics",
    "get_metrics_snapshot",
    "get_health_snapshot",
]
