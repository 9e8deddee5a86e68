"""Shared constants for the models layer.

Defines the component kinds, the per-component size ceiling and the node
escaping table. Placing them here avoids circular dependencies between the
models, core and utils layers.

See Also:
    [jidkit.models.jid][]: Uses [ComponentKind][jidkit.models.constants.ComponentKind]
        when normalizing each part of an address.
    [jidkit.utils.escaping][]: Implements node escaping on top of
        ``ESCAPE_SEQUENCES``.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType


class ComponentKind(StrEnum):
    """The three parts of an XMPP address.

    Each kind has its own stringprep profile and its own normalization cache.

    Attributes:
        NODE: Local part, left of ``@``. Normalized with nodeprep
            (case-insensitive).
        DOMAIN: Host part. Transcoded with IDNA ToASCII and normalized with
            nameprep (case-insensitive). Always present.
        RESOURCE: Session qualifier, right of ``/``. Normalized with
            resourceprep (case-sensitive).

    Examples:
        ```python
        ComponentKind.NODE == "node"          # True
        str(ComponentKind.RESOURCE)           # 'resource'
        ```
    """

    NODE = "node"
    DOMAIN = "domain"
    RESOURCE = "resource"


# RFC 6122 section 2.1: each part is limited to 1023 bytes.
MAX_COMPONENT_BYTES: int = 1023

# XEP-0106 (JID Escaping). Any whitespace character is escaped as \20.
ESCAPE_SEQUENCES: MappingProxyType[str, str] = MappingProxyType(
    {
        " ": "\\20",
        '"': "\\22",
        "&": "\\26",
        "'": "\\27",
        "/": "\\2f",
        ":": "\\3a",
        "<": "\\3c",
        ">": "\\3e",
        "@": "\\40",
        "\\": "\\5c",
    }
)

UNESCAPE_SEQUENCES: MappingProxyType[str, str] = MappingProxyType(
    {seq: char for char, seq in ESCAPE_SEQUENCES.items()}
)

# Characters escaped as \20: the Unicode space, line and paragraph separators
# except the no-break spaces U+00A0, U+2007 and U+202F, plus the ASCII
# control whitespace. U+0085 is not included.
ESCAPED_WHITESPACE: frozenset[str] = frozenset(
    " \u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2008\u2009\u200a"
    "\u2028\u2029\u205f\u3000"
    "\t\n\x0b\x0c\r\x1c\x1d\x1e\x1f"
)
