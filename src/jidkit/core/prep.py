"""
Component normalization with fixed-point caching.

[ComponentNormalizer][jidkit.core.prep.ComponentNormalizer] turns a raw node,
domain or resource into its normalized form:

1. Empty node and resource values are treated as absent.
2. If the raw value is a known fixed point (it is in the kind's
   [NormalizationCache][jidkit.core.cache.NormalizationCache]), it is
   returned unchanged without running the profile.
3. Otherwise the profile function runs. The default one is
   [apply_profile()][jidkit.utils.profiles.apply_profile]; domains always go
   through IDNA ToASCII first.
4. The normalized value must fit in ``max_component_bytes`` UTF-8 bytes.
5. The normalized value is added to the cache, so that the next raw value
   equal to it takes the fast path.

The cache is probed with raw input and filled with normalized output; it
only saves work for input that is already normalized, which is the common
case for addresses that travel between servers.

A process-wide default normalizer backs [JID][jidkit.models.jid.JID]
construction. It is created on first use from default settings; hosting
applications install their own with
[configure()][jidkit.core.prep.configure] or
[set_default_normalizer()][jidkit.core.prep.set_default_normalizer].

Examples:
    ```python
    normalizer = ComponentNormalizer.from_yaml("config/jidkit.yaml")
    normalizer.nodeprep("User")          # 'user'
    normalizer.domainprep("EXAMPLE.com") # 'example.com'
    normalizer.resourceprep("")          # None
    ```
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import TYPE_CHECKING, Any, Self

from pydantic import BaseModel, Field, ValidationError

from jidkit.models.constants import MAX_COMPONENT_BYTES, ComponentKind
from jidkit.utils.profiles import apply_profile

from .cache import CacheConfig, PrepCaches
from .exceptions import ConfigurationError, LengthExceededError, NormalizationError
from .logger import Logger
from .metrics import PREP_CACHE_EVICTIONS, PREP_CACHE_LOOKUPS, PREP_REJECTIONS, MetricsConfig
from .yaml import load_yaml


if TYPE_CHECKING:
    from collections.abc import Callable

    ProfileFunction = Callable[[ComponentKind, str], str]


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class PrepConfig(BaseModel):
    """Settings for a [ComponentNormalizer][jidkit.core.prep.ComponentNormalizer].

    Example YAML:

    ```yaml
    caches:
      node: 10000
      domain: 500
      resource: 10000
    max_component_bytes: 1023
    metrics:
      enabled: true
    json_logs: false
    ```
    """

    caches: CacheConfig = Field(
        default_factory=CacheConfig,
        description="Per-kind normalization cache capacities",
    )
    max_component_bytes: int = Field(
        default=MAX_COMPONENT_BYTES,
        ge=1,
        le=MAX_COMPONENT_BYTES,
        description="Maximum UTF-8 size of a normalized component",
    )
    metrics: MetricsConfig = Field(
        default_factory=MetricsConfig,
        description="Prometheus metrics configuration",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit normalizer log records as JSON objects instead of key=value pairs",
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Validate *data* into a config.

        Raises:
            ConfigurationError: If a value is missing, mistyped or out of range.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid jidkit configuration: {e}") from e

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Self:
        """Load and validate a YAML configuration file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigurationError: If the file or its values are invalid.
        """
        return cls.from_dict(load_yaml(config_path))


# ---------------------------------------------------------------------------
# Normalizer
# ---------------------------------------------------------------------------


class ComponentNormalizer:
    """Normalizes address components through a profile function and caches.

    Args:
        caches: Per-kind fixed-point caches. Defaults to fresh caches sized
            from ``config``.
        profile: Function ``(kind, value) -> normalized`` raising
            ``UnicodeError`` on rejection.
        config: Size ceiling, cache capacities, metrics switch and log
            output format.

    Note:
        No lock is held while the profile function runs; only the cache
        bookkeeping is serialized. Two threads normalizing the same new
        value may both run the profile, and both insert the same result.
    """

    def __init__(
        self,
        caches: PrepCaches | None = None,
        profile: ProfileFunction = apply_profile,
        config: PrepConfig | None = None,
    ) -> None:
        self._config = config or PrepConfig()
        self._caches = caches or PrepCaches.from_config(self._config.caches)
        self._profile = profile
        self._max_bytes = self._config.max_component_bytes
        self._metrics = self._config.metrics.enabled
        self._logger = Logger("jidkit.prep", json_output=self._config.json_logs)
        self._logger.info(
            "normalizer_initialized",
            node_cache=self._caches.node.capacity,
            domain_cache=self._caches.domain.capacity,
            resource_cache=self._caches.resource.capacity,
            max_component_bytes=self._max_bytes,
        )

    @classmethod
    def from_config(cls, config: PrepConfig, profile: ProfileFunction = apply_profile) -> Self:
        return cls(config=config, profile=profile)

    @classmethod
    def from_dict(cls, data: dict[str, Any], profile: ProfileFunction = apply_profile) -> Self:
        return cls(config=PrepConfig.from_dict(data), profile=profile)

    @classmethod
    def from_yaml(cls, config_path: str | Path, profile: ProfileFunction = apply_profile) -> Self:
        return cls(config=PrepConfig.from_yaml(config_path), profile=profile)

    @property
    def caches(self) -> PrepCaches:
        return self._caches

    @property
    def config(self) -> PrepConfig:
        return self._config

    def prepare(self, kind: ComponentKind, value: str | None) -> str | None:
        """Return the normalized form of *value* for *kind*.

        Args:
            kind: Which profile and cache to use.
            value: Raw component. ``None`` or ``""`` means absent for node
                and resource.

        Returns:
            The normalized component, or ``None`` for an absent node or
            resource.

        Raises:
            NormalizationError: If the profile rejects the value, or the
                domain is missing or normalizes to an empty string.
            LengthExceededError: If the normalized value is over the
                byte ceiling.
        """
        if not value:
            if kind != ComponentKind.DOMAIN:
                return None
            self._reject(kind, value, "normalization")
            raise NormalizationError("Domain cannot be empty", kind, value)

        cache = self._caches.for_kind(kind)
        if cache.contains(value):
            self._record_lookup(kind, "hit")
            return value
        self._record_lookup(kind, "miss")

        try:
            result = self._profile(kind, value)
        except UnicodeError as e:
            self._reject(kind, value, "normalization", error=e)
            raise NormalizationError(f"Invalid {kind}: {e}", kind, value) from e
        except NormalizationError as e:
            self._reject(kind, value, "normalization", error=e)
            raise

        if kind == ComponentKind.DOMAIN and not result:
            self._reject(kind, value, "normalization")
            raise NormalizationError("Domain normalizes to an empty string", kind, value)

        try:
            size = len(result.encode("utf-8"))
        except UnicodeError as e:
            self._reject(kind, value, "normalization", error=e)
            raise NormalizationError(f"Invalid {kind}: {e}", kind, value) from e
        if size > self._max_bytes:
            self._reject(kind, value, "length", size=size)
            raise LengthExceededError(
                f"{kind.capitalize()} cannot be larger than {self._max_bytes} bytes. "
                f"Size is {size} bytes.",
                kind,
                value,
                size=size,
                limit=self._max_bytes,
            )

        evicted = cache.put(result)
        if evicted:
            self._logger.debug("cache_evicted", kind=kind, count=evicted)
            if self._metrics:
                PREP_CACHE_EVICTIONS.labels(kind=kind).inc(evicted)
        return result

    def nodeprep(self, node: str | None) -> str | None:
        return self.prepare(ComponentKind.NODE, node)

    def domainprep(self, domain: str | None) -> str:
        result = self.prepare(ComponentKind.DOMAIN, domain)
        assert result is not None  # noqa: S101  # domains are never absent
        return result

    def resourceprep(self, resource: str | None) -> str | None:
        return self.prepare(ComponentKind.RESOURCE, resource)

    def _record_lookup(self, kind: ComponentKind, result: str) -> None:
        if self._metrics:
            PREP_CACHE_LOOKUPS.labels(kind=kind, result=result).inc()

    def _reject(self, kind: ComponentKind, value: str | None, reason: str, **kwargs: Any) -> None:
        self._logger.debug("component_rejected", kind=kind, reason=reason, value=value, **kwargs)
        if self._metrics:
            PREP_REJECTIONS.labels(kind=kind, reason=reason).inc()


# ---------------------------------------------------------------------------
# Process-wide default
# ---------------------------------------------------------------------------

_default_normalizer: ComponentNormalizer | None = None
_default_lock = threading.Lock()


def get_default_normalizer() -> ComponentNormalizer:
    """Return the process-wide normalizer, creating it on first use."""
    global _default_normalizer  # noqa: PLW0603
    normalizer = _default_normalizer
    if normalizer is None:
        with _default_lock:
            if _default_normalizer is None:
                _default_normalizer = ComponentNormalizer()
            normalizer = _default_normalizer
    return normalizer


def set_default_normalizer(normalizer: ComponentNormalizer | None) -> None:
    """Install *normalizer* as the process-wide default.

    Passing ``None`` drops the current default; a fresh one is created on
    next use.
    """
    global _default_normalizer  # noqa: PLW0603
    with _default_lock:
        _default_normalizer = normalizer


def configure(config: PrepConfig | dict[str, Any] | str | Path) -> ComponentNormalizer:
    """Build a normalizer from *config* and install it as the default.

    Args:
        config: A [PrepConfig][jidkit.core.prep.PrepConfig], a dictionary of
            settings, or the path of a YAML file.

    Returns:
        The newly installed normalizer.
    """
    if isinstance(config, PrepConfig):
        normalizer = ComponentNormalizer.from_config(config)
    elif isinstance(config, dict):
        normalizer = ComponentNormalizer.from_dict(config)
    else:
        normalizer = ComponentNormalizer.from_yaml(config)
    set_default_normalizer(normalizer)
    return normalizer


def nodeprep(node: str | None) -> str | None:
    """Normalize *node* with the default normalizer."""
    return get_default_normalizer().nodeprep(node)


def domainprep(domain: str | None) -> str:
    """Normalize *domain* with the default normalizer."""
    return get_default_normalizer().domainprep(domain)


def resourceprep(resource: str | None) -> str | None:
    """Normalize *resource* with the default normalizer."""
    return get_default_normalizer().resourceprep(resource)
