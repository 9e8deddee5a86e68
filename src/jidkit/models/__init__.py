"""The XMPP address value type and the constants shared by every layer.

[JID][jidkit.models.jid.JID] is a ``@dataclass(frozen=True, slots=True)``.
All validation and normalization happens in ``__post_init__``, so an invalid
address never escapes the constructor.

Attributes:
    JID: Immutable, hashable, totally ordered address. Loaded lazily because
        it depends on [jidkit.core][jidkit.core], which itself imports
        [jidkit.models.constants][jidkit.models.constants].
    ComponentKind: Enum of the three address parts (node, domain, resource).
    MAX_COMPONENT_BYTES: Size ceiling of each part (1023).
    ESCAPE_SEQUENCES: XEP-0106 character-to-sequence table.
    UNESCAPE_SEQUENCES: Inverse of ``ESCAPE_SEQUENCES``.
    ESCAPED_WHITESPACE: Whitespace characters escaped as ``\\20``.

Note:
    ``JID`` uses ``object.__setattr__`` in ``__post_init__`` to store the
    normalized components and the cached bare/full strings on the frozen
    instance, before the instance is exposed to external code.
"""

import importlib

from .constants import (
    ESCAPE_SEQUENCES,
    ESCAPED_WHITESPACE,
    MAX_COMPONENT_BYTES,
    UNESCAPE_SEQUENCES,
    ComponentKind,
)


__all__ = [
    "ESCAPED_WHITESPACE",
    "ESCAPE_SEQUENCES",
    "JID",
    "MAX_COMPONENT_BYTES",
    "UNESCAPE_SEQUENCES",
    "ComponentKind",
]


def __getattr__(name: str) -> object:
    if name == "JID":
        value = importlib.import_module("jidkit.models.jid").JID
        globals()[name] = value
        return value
    raise AttributeError(f"module 'jidkit.models' has no attribute {name!r}")
