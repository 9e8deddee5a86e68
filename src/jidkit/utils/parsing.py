"""Splitting of textual addresses into raw components.

[split_jid()][jidkit.utils.parsing.split_jid] only locates the separators of
``[ node "@" ] domain [ "/" resource ]``; it never normalizes, so its output
must still go through [JID][jidkit.models.jid.JID] construction.

[jids_from_strings()][jidkit.utils.parsing.jids_from_strings] is the tolerant
counterpart used on untrusted batches: invalid entries are logged at WARNING
level and skipped instead of aborting the whole batch.

Examples:
    ```python
    split_jid("user@example.com/home")   # ('user', 'example.com', 'home')
    split_jid("example.com/")            # (None, 'example.com', None)
    split_jid("example.com/a@b")         # (None, 'example.com', 'a@b')
    ```
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from jidkit.core.exceptions import IllegalJidError, InvalidJidError


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from jidkit.models.jid import JID

logger = logging.getLogger(__name__)


def split_jid(text: str | None) -> tuple[str | None, str | None, str | None]:
    """Split *text* into ``(node, domain, resource)`` without normalization.

    The first ``/`` starts the resource, so an ``@`` appearing after it is
    part of the resource. A ``/`` in last position yields no resource rather
    than an empty one.

    Args:
        text: Textual address, or ``None``.

    Returns:
        The raw components. ``None`` input gives ``(None, None, None)``;
        the missing domain is reported later, at construction.

    Raises:
        InvalidJidError: If the domain part is empty, e.g. ``"example.com@"``,
            ``"user@/home"`` or ``""``.
    """
    if text is None:
        return None, None, None

    slash = text.find("/")
    head = text if slash < 0 else text[:slash]
    resource = text[slash + 1 :] if slash >= 0 else ""

    at = head.find("@")
    node = head[:at] if at > 0 else None
    domain = head[at + 1 :]

    if not domain:
        raise InvalidJidError("empty domain", jid=text)

    return node, domain, resource or None


def jids_from_strings(
    texts: Iterable[str],
    factory: Callable[[str], JID] | None = None,
) -> list[JID]:
    """Build addresses from *texts*, skipping the ones that are invalid.

    Args:
        texts: Textual addresses.
        factory: Callable turning one text into a ``JID``. Defaults to
            [JID.parse()][jidkit.models.jid.JID.parse] with the default
            normalizer.

    Returns:
        The successfully constructed addresses, in input order.
    """
    if factory is None:
        from jidkit.models.jid import JID  # noqa: PLC0415  # models import this module

        factory = JID.parse

    results: list[JID] = []
    for text in texts:
        try:
            results.append(factory(text))
        except IllegalJidError as e:
            logger.warning("parse_failed jid=%r error=%s", text, e)
    return results


__all__ = [
    "jids_from_strings",
    "split_jid",
]
