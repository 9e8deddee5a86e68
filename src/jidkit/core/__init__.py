"""Normalization machinery, errors and ambient infrastructure.

Attributes:
    ComponentNormalizer: Applies the stringprep profile of each component
        kind, enforces the byte ceiling and maintains the fixed-point caches.
        See [ComponentNormalizer][jidkit.core.prep.ComponentNormalizer].
    NormalizationCache: Thread-safe bounded FIFO set of known fixed points.
        See [NormalizationCache][jidkit.core.cache.NormalizationCache].
    PrepConfig: Pydantic configuration (cache capacities, byte ceiling,
        metrics), loadable from YAML.
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][jidkit.core.logger.Logger].
    Exceptions: [JidError][jidkit.core.exceptions.JidError] and its
        subclasses.

Examples:
    ```python
    from jidkit.core import ComponentNormalizer, PrepConfig, configure

    configure(PrepConfig.from_yaml("config/jidkit.yaml"))
    ```
"""

from .exceptions import (
    ComponentError,
    ConfigurationError,
    IllegalJidError,
    InvalidJidError,
    JidError,
    LengthExceededError,
    NoResourceError,
    NormalizationError,
)
from .cache import CacheConfig, NormalizationCache, PrepCaches
from .logger import Logger, StructuredFormatter, format_kv_pairs
from .metrics import PREP_CACHE_EVICTIONS, PREP_CACHE_LOOKUPS, PREP_REJECTIONS, MetricsConfig
from .yaml import load_yaml
from .prep import (
    ComponentNormalizer,
    PrepConfig,
    configure,
    domainprep,
    get_default_normalizer,
    nodeprep,
    resourceprep,
    set_default_normalizer,
)


__all__ = [
    "PREP_CACHE_EVICTIONS",
    "PREP_CACHE_LOOKUPS",
    "PREP_REJECTIONS",
    "CacheConfig",
    "ComponentError",
    "ComponentNormalizer",
    "ConfigurationError",
    "IllegalJidError",
    "InvalidJidError",
    "JidError",
    "LengthExceededError",
    "Logger",
    "MetricsConfig",
    "NoResourceError",
    "NormalizationCache",
    "NormalizationError",
    "PrepCaches",
    "PrepConfig",
    "StructuredFormatter",
    "configure",
    "domainprep",
    "format_kv_pairs",
    "get_default_normalizer",
    "load_yaml",
    "nodeprep",
    "resourceprep",
    "set_default_normalizer",
]
