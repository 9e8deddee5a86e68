"""
Prometheus metrics for address normalization.

Defines module-level metric objects (singletons, thread-safe) shared by
every [ComponentNormalizer][jidkit.core.prep.ComponentNormalizer] that has
metrics enabled. Exposition is left to the hosting application, which
typically already serves the default ``prometheus_client`` registry.

Architecture:
    PREP_CACHE_LOOKUPS:    Fast-path hits and misses, per component kind.
    PREP_CACHE_EVICTIONS:  Entries dropped by FIFO eviction, per kind.
    PREP_REJECTIONS:       Components refused by a profile or by the
                           length ceiling, per kind and reason.
"""

from __future__ import annotations

from prometheus_client import Counter
from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class MetricsConfig(BaseModel):
    """Whether normalizers record Prometheus metrics."""

    enabled: bool = Field(default=False, description="Enable metrics collection")


# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------

PREP_CACHE_LOOKUPS = Counter(
    "jid_prep_cache_lookups",
    "Normalization cache lookups by component kind and result (hit/miss)",
    ["kind", "result"],
)

PREP_CACHE_EVICTIONS = Counter(
    "jid_prep_cache_evictions",
    "Normalization cache entries evicted by component kind",
    ["kind"],
)

PREP_REJECTIONS = Counter(
    "jid_prep_rejections",
    "Components rejected by kind and reason (normalization/length)",
    ["kind", "reason"],
)
