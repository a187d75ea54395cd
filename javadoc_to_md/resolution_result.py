"""Data model for the outcome of resolving one reference text."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolutionResult:
    """Represents the outcome of resolving a reference written in a comment."""

    text: str
    origin: str
    target: str | None
    winning_rule: str  # exact/member/import/package/external, or "" if unresolved
    reason: str = ""
    external_url: str | None = None

    @property
    def resolved(self) -> bool:
        return self.target is not None
