"""
Immutable XMPP address (JID) value type.

A JID is ``[ node "@" ] domain [ "/" resource ]``: the node (usually a user
name) and the resource (usually a session or device) are optional, the
domain is required. Each part is normalized with its stringprep profile on
construction, so that syntactically different spellings of the same address
compare equal, and is limited to 1023 bytes.

Node escaping (XEP-0106) is never applied here; see
[escape_node()][jidkit.utils.escaping.escape_node].
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from functools import total_ordering
from typing import TYPE_CHECKING, Any

from jidkit.core import prep
from jidkit.core.exceptions import ComponentError, IllegalJidError, NoResourceError
from jidkit.utils.parsing import split_jid

from ._validation import validate_instance, validate_optional_str


if TYPE_CHECKING:
    from jidkit.core.prep import ComponentNormalizer


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class JID:
    """Immutable, hashable, totally ordered XMPP address.

    Nodes and domains are case-insensitive (folded by nodeprep and nameprep),
    resources are case-sensitive. Domains are stored in their ASCII
    (``xn--``) form.

    Attributes:
        node: Normalized node, or ``None`` for a server address.
        domain: Normalized domain. Never ``None``.
        resource: Normalized resource, or ``None``.

    Args:
        skip_prep: Assign the components verbatim: no normalization, no
            length check, no cache interaction. Only for callers that already
            hold normalized components.
        normalizer: Normalizer to use instead of the process-wide default.

    Raises:
        IllegalJidError: If the domain is missing, or a component is rejected
            by its profile or is larger than 1023 bytes. The component error
            is chained as ``__cause__``.
        TypeError: If a component is not a ``str`` (or ``None``).

    Examples:
        ```python
        jid = JID.parse("User@EXAMPLE.com/Home")
        jid.node              # 'user'
        jid.domain            # 'example.com'
        jid.resource          # 'Home'
        jid.to_bare_jid()     # 'user@example.com'
        str(jid)              # 'user@example.com/Home'

        JID("user", "example.com") == JID.parse("USER@example.com")  # True
        ```
    """

    node: str | None
    domain: str
    resource: str | None = None
    skip_prep: InitVar[bool] = False
    normalizer: InitVar[ComponentNormalizer | None] = None

    # Computed fields (set in __post_init__)
    _bare: str = field(init=False, repr=False)
    _full: str = field(init=False, repr=False)

    def __post_init__(self, skip_prep: bool, normalizer: ComponentNormalizer | None) -> None:
        validate_optional_str(self.node, "node")
        validate_optional_str(self.resource, "resource")
        if self.domain is None:
            raise IllegalJidError("Domain cannot be None", jid=self._literal())
        validate_instance(self.domain, str, "domain")

        if not skip_prep:
            normalizer = normalizer or prep.get_default_normalizer()
            try:
                node = normalizer.nodeprep(self.node)
                domain = normalizer.domainprep(self.domain)
                resource = normalizer.resourceprep(self.resource)
            except ComponentError as e:
                literal = self._literal()
                raise IllegalJidError(f"Illegal JID: {literal}", jid=literal) from e
            # Bypass frozen restriction to store the normalized components
            object.__setattr__(self, "node", node)
            object.__setattr__(self, "domain", domain)
            object.__setattr__(self, "resource", resource)

        bare = self.domain if self.node is None else f"{self.node}@{self.domain}"
        object.__setattr__(self, "_bare", bare)
        object.__setattr__(
            self, "_full", bare if self.resource is None else f"{bare}/{self.resource}"
        )

    def _literal(self) -> str:
        """Rebuild the attempted address from the raw components, for error reports."""
        literal = self.domain if isinstance(self.domain, str) else ""
        if self.node:
            literal = f"{self.node}@{literal}"
        if self.resource:
            literal = f"{literal}/{self.resource}"
        return literal

    @classmethod
    def parse(
        cls,
        text: str | None,
        *,
        skip_prep: bool = False,
        normalizer: ComponentNormalizer | None = None,
    ) -> JID:
        """Build a JID from its textual form.

        Args:
            text: Address such as ``"user@example.com/home"``.
            skip_prep: See the class documentation.
            normalizer: Normalizer to use instead of the default.

        Raises:
            InvalidJidError: If the domain part is syntactically empty.
            IllegalJidError: If *text* is ``None`` or a component is rejected.
        """
        node, domain, resource = split_jid(text)
        return cls(node, domain, resource, skip_prep, normalizer)  # type: ignore[arg-type]

    @staticmethod
    def equivalent(
        jid1: str,
        jid2: str,
        *,
        normalizer: ComponentNormalizer | None = None,
    ) -> bool:
        """Return True if two textual addresses denote the same JID.

        ``"User@EXAMPLE.com/home"`` is equivalent to ``"user@example.com/home"``
        but not to ``"user@example.com/Home"``.

        Raises:
            IllegalJidError: If either address is invalid.
        """
        return JID.parse(jid1, normalizer=normalizer) == JID.parse(jid2, normalizer=normalizer)

    def to_bare_jid(self) -> str:
        """Return the address without its resource, e.g. ``user@example.com``."""
        return self._bare

    def to_full_jid(self) -> str:
        """Return the address including its resource, e.g. ``user@example.com/home``.

        Raises:
            NoResourceError: If this JID has no resource. A bare address is
                deliberately not returned in its place.
        """
        if self.resource is None:
            raise NoResourceError(
                "This JID was instantiated without a resource identifier. "
                f"A full JID representation is not available for: {self._full}"
            )
        return self._full

    def bare(self) -> JID:
        """Return this address without its resource."""
        if self.resource is None:
            return self
        return JID(self.node, self.domain, None, True)  # type: ignore[arg-type]

    def with_resource(
        self,
        resource: str | None,
        *,
        normalizer: ComponentNormalizer | None = None,
    ) -> JID:
        """Return a copy of this address with *resource* normalized and attached.

        Raises:
            IllegalJidError: If the resource is rejected.
        """
        validate_optional_str(resource, "resource")
        normalizer = normalizer or prep.get_default_normalizer()
        try:
            prepped = normalizer.resourceprep(resource)
        except ComponentError as e:
            literal = f"{self._bare}/{resource}"
            raise IllegalJidError(f"Illegal JID: {literal}", jid=literal) from e
        return JID(self.node, self.domain, prepped, True)  # type: ignore[arg-type]

    def _sort_key(self) -> tuple[str, str, str]:
        return (self.domain, self.node or "", self.resource or "")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JID):
            return NotImplemented
        return self is other or (
            self.node == other.node
            and self.domain == other.domain
            and self.resource == other.resource
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, JID):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash(self._full)

    def __str__(self) -> str:
        return self._full

    def __reduce__(self) -> tuple[Any, ...]:
        # Components are already normalized; do not pay for stringprep again.
        return JID, (self.node, self.domain, self.resource, True)
