r"""jidkit -- XMPP address (JID) value type with cached stringprep.

Parses ``[ node "@" ] domain [ "/" resource ]`` addresses, normalizes every
part with its stringprep profile, enforces the 1023-byte ceiling per part
and caches normalization results, because addresses are built at a very
high rate in a messaging server.

Packages, bottom-up:

```text
              models           JID value type
             /      \
          core      utils      Normalizer, caches, errors | parsing, escaping
             \      /
           models.constants    Component kinds, limits, escape table
```

Attributes:
    models: The [JID][jidkit.models.jid.JID] value type and shared constants.
    core: [ComponentNormalizer][jidkit.core.prep.ComponentNormalizer],
        [NormalizationCache][jidkit.core.cache.NormalizationCache],
        exceptions, logging, metrics and YAML configuration.
    utils: Raw address splitting, XEP-0106 node escaping and the default
        stringprep profile function.

Note:
    Top-level imports (``from jidkit import JID``) use lazy loading and
    resolve on first access.
"""

import importlib


__version__ = "0.1.0"

__all__ = [
    "JID",
    "CacheConfig",
    "ComponentKind",
    "ComponentNormalizer",
    "IllegalJidError",
    "InvalidJidError",
    "JidError",
    "LengthExceededError",
    "NoResourceError",
    "NormalizationCache",
    "NormalizationError",
    "PrepConfig",
    "configure",
    "escape_node",
    "split_jid",
    "unescape_node",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "JID": ("jidkit.models", "JID"),
    "ComponentKind": ("jidkit.models", "ComponentKind"),
    "CacheConfig": ("jidkit.core", "CacheConfig"),
    "ComponentNormalizer": ("jidkit.core", "ComponentNormalizer"),
    "IllegalJidError": ("jidkit.core", "IllegalJidError"),
    "InvalidJidError": ("jidkit.core", "InvalidJidError"),
    "JidError": ("jidkit.core", "JidError"),
    "LengthExceededError": ("jidkit.core", "LengthExceededError"),
    "NoResourceError": ("jidkit.core", "NoResourceError"),
    "NormalizationCache": ("jidkit.core", "NormalizationCache"),
    "NormalizationError": ("jidkit.core", "NormalizationError"),
    "PrepConfig": ("jidkit.core", "PrepConfig"),
    "configure": ("jidkit.core", "configure"),
    "escape_node": ("jidkit.utils.escaping", "escape_node"),
    "unescape_node": ("jidkit.utils.escaping", "unescape_node"),
    "split_jid": ("jidkit.utils.parsing", "split_jid"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'jidkit' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
