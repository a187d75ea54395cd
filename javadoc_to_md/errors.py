"""Exception types raised by the converter."""


class JavadocToMdError(Exception):
    """Base class for fatal conversion errors."""


class ConfigError(JavadocToMdError, ValueError):
    """Raised when a configuration option has an unsupported value."""


class NoUnitDescriptorsError(JavadocToMdError):
    """Raised when the input directory holds no compilation unit descriptors."""


class UnitFormatError(JavadocToMdError):
    """Raised when a compilation unit descriptor cannot be read."""

    def __init__(self, path: str, detail: str) -> None:
        """Record the offending file and what was wrong with it."""
        super().__init__(f"{path}: {detail}")
        self.path = path
        self.detail = detail


class DuplicateDeclarationError(JavadocToMdError):
    """Two declarations share one signature.

    Later stages key everything by signature, so a collision (usually two
    source roots overlapping) aborts the whole run.
    """

    def __init__(self, signature: str, first_origin: str, second_origin: str) -> None:
        """Name the colliding signature and both places that declare it."""
        super().__init__(
            f"duplicate declaration {signature}: declared in {first_origin} "
            f"and in {second_origin}"
        )
        self.signature = signature
        self.first_origin = first_origin
        self.second_origin = second_origin


class UnresolvedReferenceError(JavadocToMdError):
    """Raised in strict mode when any reference could not be resolved."""

    def __init__(self, reasons: list[str]) -> None:
        """Collect every unresolved reference reason, in sorted order."""
        self.reasons = sorted(reasons)
        lines = [f"{len(self.reasons)} unresolved reference(s):"]
        lines.extend(f"  - {r}" for r in self.reasons)
        super().__init__("\n".join(lines))


class ReferenceStateError(JavadocToMdError, RuntimeError):
    """A reference was transitioned after it had already been settled."""
