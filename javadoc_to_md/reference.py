"""A cross-reference from one documented entity to another."""

from dataclasses import dataclass

from javadoc_to_md.errors import ReferenceStateError

UNQUALIFIED = "unqualified"
RESOLVED = "resolved"
UNRESOLVED = "unresolved"


@dataclass(eq=False)
class Reference:
    """A pointer written in a comment, e.g. ``B#n()`` in ``@see B#n()``.

    Starts ``unqualified`` and is settled exactly once by the resolver,
    after which it never changes.
    """

    text: str
    origin: str  # signature of the declaration whose comment owns it
    state: str = UNQUALIFIED
    target: str | None = None
    reason: str | None = None
    external_url: str | None = None

    @property
    def is_resolved(self) -> bool:
        return self.state == RESOLVED

    @property
    def is_settled(self) -> bool:
        return self.state != UNQUALIFIED

    def resolve(self, target: str, external_url: str | None = None) -> None:
        """Bind the reference to a declaration signature (or external page)."""
        self._check_unqualified()
        self.state = RESOLVED
        self.target = target
        self.external_url = external_url

    def mark_unresolved(self, reason: str) -> None:
        """Record that no declaration matches the reference."""
        self._check_unqualified()
        self.state = UNRESOLVED
        self.reason = reason

    def _check_unqualified(self) -> None:
        if self.is_settled:
            msg = f"reference {self.text!r} from {self.origin} is already {self.state}"
            raise ReferenceStateError(msg)
