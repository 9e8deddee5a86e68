"""Default stringprep profile function backed by Twisted.

The stringprep profiles themselves (nodeprep, nameprep, resourceprep from
RFC 3920 / RFC 3491) are provided by
``twisted.words.protocols.jabber.xmpp_stringprep``; the IDNA ToASCII step
uses the standard library ``idna`` codec (IDNA 2003), which is the encoding
nameprep was designed for. This module only dispatches on the component
kind.

Any profile function used by [ComponentNormalizer][jidkit.core.prep.ComponentNormalizer]
must follow the same contract: take a kind and a non-empty string, return
the normalized string, raise ``UnicodeError`` on rejection.
"""

from __future__ import annotations

from twisted.words.protocols.jabber.xmpp_stringprep import nameprep, nodeprep, resourceprep

from jidkit.models.constants import ComponentKind


def to_ascii(domain: str) -> str:
    """Transcode *domain* to its ASCII-compatible encoding (``xn--`` labels).

    Pure ASCII labels are returned unchanged, case included; nameprep takes
    care of case folding afterwards.

    Raises:
        UnicodeError: If a label is empty, too long or not encodable.
    """
    return domain.encode("idna").decode("ascii")


def apply_profile(kind: ComponentKind, value: str) -> str:
    """Normalize *value* with the stringprep profile for *kind*.

    Domains always go through [to_ascii()][jidkit.utils.profiles.to_ascii]
    before nameprep, whether or not they contain non-ASCII characters.

    Raises:
        UnicodeError: If the profile rejects the value.
    """
    if kind == ComponentKind.NODE:
        return nodeprep.prepare(value)
    if kind == ComponentKind.RESOURCE:
        return resourceprep.prepare(value)
    return nameprep.prepare(to_ascii(value))


__all__ = [
    "apply_profile",
    "to_ascii",
]
