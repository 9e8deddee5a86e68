"""jidkit exception hierarchy.

Provides typed exceptions for every failure the address type can report,
so callers can tell a malformed address apart from a rejected component or
a contract violation.

Exception hierarchy:

```text
JidError (base -- never raised directly)
├── IllegalJidError         -- construction failed (also a ValueError)
│   └── InvalidJidError     -- malformed textual shape, e.g. empty domain
├── ComponentError          -- a single node/domain/resource was refused
│   ├── NormalizationError  -- the stringprep profile rejected the value
│   └── LengthExceededError -- normalized value is over the byte ceiling
├── NoResourceError         -- full form requested on a bare address
└── ConfigurationError      -- invalid YAML or configuration values
```

Component errors never escape address construction on their own: the
[JID][jidkit.models.jid.JID] constructor collapses them into a single
[IllegalJidError][jidkit.core.exceptions.IllegalJidError] raised ``from``
the component error, so the attempted address and the cause travel
together.

See Also:
    [ComponentNormalizer][jidkit.core.prep.ComponentNormalizer]: Raises
        [ComponentError][jidkit.core.exceptions.ComponentError] subclasses.
    [split_jid()][jidkit.utils.parsing.split_jid]: Raises
        [InvalidJidError][jidkit.core.exceptions.InvalidJidError].
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from jidkit.models.constants import ComponentKind


class JidError(Exception):
    """Base exception for all jidkit errors.

    Never raised directly -- always use a specific subclass.
    """


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class IllegalJidError(JidError, ValueError):
    """An address could not be constructed.

    Attributes:
        jid: The literal address that was attempted, rebuilt from the raw
            components (``None`` when nothing usable was supplied).

    The underlying failure, when there is one, is available as ``cause``
    (an alias of ``__cause__``).
    """

    def __init__(self, message: str, jid: str | None = None) -> None:
        super().__init__(message)
        self.jid = jid

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__


class InvalidJidError(IllegalJidError):
    """The textual form is malformed before any normalization is attempted.

    Raised by [split_jid()][jidkit.utils.parsing.split_jid], for example
    when ``@`` is the last character of the input.
    """


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------


class ComponentError(JidError):
    """Base for failures tied to one address component.

    Attributes:
        kind: The component that was refused.
        value: The raw value that was being normalized.
    """

    def __init__(self, message: str, kind: ComponentKind, value: str | None) -> None:
        super().__init__(message)
        self.kind = kind
        self.value = value


class NormalizationError(ComponentError):
    """The stringprep profile rejected a component.

    Typical causes are prohibited code points, unassigned code points,
    bidirectional rule violations and empty domain labels. The underlying
    ``UnicodeError`` is chained as ``__cause__``.
    """


class LengthExceededError(ComponentError):
    """A normalized component is larger than the allowed byte ceiling.

    Attributes:
        size: Encoded size of the normalized value, in bytes.
        limit: The ceiling that was exceeded.
    """

    def __init__(
        self,
        message: str,
        kind: ComponentKind,
        value: str | None,
        *,
        size: int,
        limit: int,
    ) -> None:
        super().__init__(message, kind, value)
        self.size = size
        self.limit = limit


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------


class NoResourceError(JidError):
    """The full form was requested on an address built without a resource.

    This is a programming error: check ``jid.resource`` first, or use
    [to_bare_jid()][jidkit.models.jid.JID.to_bare_jid].
    """


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(JidError):
    """Invalid or missing configuration (YAML file or dictionary values)."""
