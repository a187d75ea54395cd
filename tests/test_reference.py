"""Tests for the reference state machine."""

import pytest

from javadoc_to_md.errors import ReferenceStateError
from javadoc_to_md.reference import RESOLVED, UNQUALIFIED, UNRESOLVED, Reference


def test_resolve_once() -> None:
    """A reference resolves to a signature exactly once."""
    ref = Reference("B#n", "p.A")
    assert ref.state == UNQUALIFIED
    ref.resolve("p.B#n()")
    assert ref.state == RESOLVED
    assert ref.target == "p.B#n()"
    with pytest.raises(ReferenceStateError):
        ref.resolve("p.B#n(int)")
    assert ref.target == "p.B#n()"


def test_unresolved_is_final() -> None:
    """An unresolved reference cannot be resolved later."""
    ref = Reference("Foo", "p.A")
    ref.mark_unresolved("no declaration matches Foo from p.A")
    assert ref.state == UNRESOLVED
    assert ref.is_settled
    with pytest.raises(ReferenceStateError, match="already unresolved"):
        ref.resolve("p.Foo")
