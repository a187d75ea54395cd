"""Data model for one rendered Markdown document."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderedDocument:
    """A Markdown document plus the warnings raised while producing it."""

    identifier: str  # path-like, no extension, e.g. p/A or p/package-summary
    signature: str  # declaration the document is about; "" for SUMMARY
    content: str
    warnings: tuple[str, ...] = ()

    @property
    def data(self) -> bytes:
        return self.content.encode("utf-8")
