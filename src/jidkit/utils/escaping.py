"""Node escaping as defined by XEP-0106 (JID Escaping).

Some characters cannot appear in a node because nodeprep prohibits them
(space, ``"``, ``&``, ``'``, ``/``, ``:``, ``<``, ``>``, ``@``). Escaping
replaces them with a backslash and two hex digits so that names coming from
non-conformant systems, such as an LDAP user called ``Joe Smith``, can still
be turned into addresses:

```python
escape_node("Joe Smith")        # 'Joe\\20Smith'
unescape_node("Joe\\20Smith")   # 'Joe Smith'
```

Escaping is never applied implicitly by [JID][jidkit.models.jid.JID]; callers
escape before construction and unescape for display.
"""

from __future__ import annotations

from jidkit.models.constants import ESCAPE_SEQUENCES, ESCAPED_WHITESPACE, UNESCAPE_SEQUENCES


def escape_node(node: str | None) -> str | None:
    """Escape characters that nodeprep would reject.

    Every character of
    [ESCAPED_WHITESPACE][jidkit.models.constants.ESCAPED_WHITESPACE], not
    only U+0020, becomes ``\\20``. No-break spaces (U+00A0, U+2007, U+202F)
    and U+0085 pass through unchanged. Escaping is not idempotent: escaping
    twice escapes the backslashes again.

    Args:
        node: Raw node text, or ``None``.

    Returns:
        The escaped node, or ``None`` if *node* is ``None``.
    """
    if node is None:
        return None
    parts: list[str] = []
    for ch in node:
        seq = ESCAPE_SEQUENCES.get(ch)
        if seq is not None:
            parts.append(seq)
        elif ch in ESCAPED_WHITESPACE:
            parts.append(ESCAPE_SEQUENCES[" "])
        else:
            parts.append(ch)
    return "".join(parts)


def unescape_node(node: str | None) -> str | None:
    """Reverse [escape_node()][jidkit.utils.escaping.escape_node].

    Only the sequences of the XEP-0106 table are decoded. Any other
    backslash sequence is copied through unchanged; malformed input never
    raises.

    Args:
        node: Escaped node text, or ``None``.

    Returns:
        The unescaped node, or ``None`` if *node* is ``None``.
    """
    if node is None:
        return None
    parts: list[str] = []
    i = 0
    n = len(node)
    while i < n:
        ch = node[i]
        if ch == "\\":
            # Truncated sequences yield a short slice that never matches.
            char = UNESCAPE_SEQUENCES.get(node[i : i + 3])
            if char is not None:
                parts.append(char)
                i += 3
                continue
        parts.append(ch)
        i += 1
    return "".join(parts)
