"""Unit tests for the jidkit exception hierarchy.

Tests verify:
- issubclass relationships match the documented tree
- IllegalJidError stays catchable as ValueError
- component errors carry their kind, value, size and limit
"""

import pytest

from jidkit.core.exceptions import (
    ComponentError,
    ConfigurationError,
    IllegalJidError,
    InvalidJidError,
    JidError,
    LengthExceededError,
    NoResourceError,
    NormalizationError,
)
from jidkit.models.constants import ComponentKind


ALL_CONCRETE = (
    IllegalJidError,
    InvalidJidError,
    NormalizationError,
    LengthExceededError,
    NoResourceError,
    ConfigurationError,
)


# =============================================================================
# Hierarchy Tests
# =============================================================================


class TestExceptionHierarchy:
    """Verify issubclass relationships match the documented tree."""

    @pytest.mark.parametrize("exc_cls", ALL_CONCRETE)
    def test_all_concrete_inherit_from_jid_error(self, exc_cls: type) -> None:
        assert issubclass(exc_cls, JidError)

    def test_illegal_jid_error_is_value_error(self) -> None:
        assert issubclass(IllegalJidError, ValueError)

    def test_invalid_jid_error_is_illegal_jid_error(self) -> None:
        assert issubclass(InvalidJidError, IllegalJidError)

    @pytest.mark.parametrize("exc_cls", [NormalizationError, LengthExceededError])
    def test_component_errors(self, exc_cls: type) -> None:
        assert issubclass(exc_cls, ComponentError)

    def test_component_error_is_not_illegal_jid_error(self) -> None:
        assert not issubclass(ComponentError, IllegalJidError)
        assert not issubclass(ComponentError, ValueError)

    def test_no_resource_error_is_not_value_error(self) -> None:
        assert not issubclass(NoResourceError, ValueError)


class TestExceptionCatchability:
    """Verify except clauses catch the expected subclasses."""

    def test_value_error_catches_invalid_jid(self) -> None:
        with pytest.raises(ValueError, match="empty domain"):
            raise InvalidJidError("empty domain", jid="user@")

    def test_jid_error_catches_configuration_error(self) -> None:
        with pytest.raises(JidError):
            raise ConfigurationError("bad config")


# =============================================================================
# Attribute Tests
# =============================================================================


class TestIllegalJidError:
    """IllegalJidError attributes."""

    def test_jid_attribute(self) -> None:
        err = IllegalJidError("Illegal JID: a b@c", jid="a b@c")
        assert err.jid == "a b@c"
        assert str(err) == "Illegal JID: a b@c"

    def test_jid_defaults_to_none(self) -> None:
        assert IllegalJidError("nope").jid is None

    def test_cause_without_chain(self) -> None:
        assert IllegalJidError("nope").cause is None

    def test_cause_follows_chain(self) -> None:
        inner = NormalizationError("bad node", ComponentKind.NODE, "a b")
        with pytest.raises(IllegalJidError) as exc_info:
            try:
                raise inner
            except ComponentError as e:
                raise IllegalJidError("Illegal JID: a b@c", jid="a b@c") from e
        assert exc_info.value.cause is inner


class TestComponentErrors:
    """ComponentError and subclasses."""

    def test_normalization_error(self) -> None:
        err = NormalizationError("bad", ComponentKind.DOMAIN, "ex ample")
        assert err.kind == ComponentKind.DOMAIN
        assert err.value == "ex ample"
        assert str(err) == "bad"

    def test_length_exceeded_error(self) -> None:
        err = LengthExceededError(
            "too big", ComponentKind.RESOURCE, "x" * 1024, size=1024, limit=1023
        )
        assert err.kind == ComponentKind.RESOURCE
        assert err.size == 1024
        assert err.limit == 1023

    def test_length_exceeded_requires_keywords(self) -> None:
        with pytest.raises(TypeError):
            LengthExceededError("too big", ComponentKind.NODE, "x", 1024, 1023)  # type: ignore[misc]
