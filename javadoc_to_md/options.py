"""Validated converter options built from a configuration mapping."""

from dataclasses import dataclass, field
from typing import Any

from javadoc_to_md.errors import ConfigError
from javadoc_to_md.load_config import DEFAULT_CONFIG

COMMONMARK = "commonmark"
GITHUB = "github"
OUTPUT_FORMATS = (COMMONMARK, GITHUB)

RELATIVE = "relative"
ABSOLUTE = "absolute"
LINK_BASE_STYLES = (RELATIVE, ABSOLUTE)


@dataclass(frozen=True)
class ConverterOptions:
    """Everything ``convert()`` needs to know besides the units themselves."""

    output_format: str = GITHUB
    include_private: bool = False
    fail_on_unresolved_reference: bool = False
    link_base_style: str = RELATIVE
    link_root: str = ""
    link_suffix: str = ".md"
    include_signatures: bool = True
    source_base_url: str = ""
    generate_summary: bool = False
    workers: int = 4
    external_links: dict[str, str] = field(default_factory=dict)
    custom_tags: tuple[str, ...] = ()
    ignore_modifiers: tuple[str, ...] = ()  # e.g. ("protected",)

    def __post_init__(self) -> None:
        """Reject values the renderer cannot honour."""
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"outputFormat must be one of {', '.join(OUTPUT_FORMATS)}, "
                f"got {self.output_format!r}"
            )
        if self.link_base_style not in LINK_BASE_STYLES:
            raise ConfigError(
                f"linkBaseStyle must be one of {', '.join(LINK_BASE_STYLES)}, "
                f"got {self.link_base_style!r}"
            )
        if isinstance(self.workers, bool) or not isinstance(self.workers, int):
            raise ConfigError(f"workers must be an integer, got {self.workers!r}")
        if self.workers < 0:
            raise ConfigError(f"workers must not be negative, got {self.workers}")
        if not isinstance(self.external_links, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in self.external_links.items()
        ):
            raise ConfigError("externalLinks must map package prefixes to base URLs")

    @property
    def is_github(self) -> bool:
        return self.output_format == GITHUB

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "ConverterOptions":
        """Build options from a merged configuration (see load_config)."""
        merged = {**DEFAULT_CONFIG, **config}
        for key in (
            "includePrivate",
            "failOnUnresolvedReference",
            "includeSignatures",
            "generateSummary",
        ):
            if not isinstance(merged[key], bool):
                raise ConfigError(f"{key} must be true or false, got {merged[key]!r}")
        for key in ("outputFormat", "linkBaseStyle", "linkRoot", "linkSuffix", "sourceBaseUrl"):
            if not isinstance(merged[key], str):
                raise ConfigError(f"{key} must be a string, got {merged[key]!r}")
        custom_tags = merged["customTags"] or []
        if not isinstance(custom_tags, list) or not all(isinstance(t, str) for t in custom_tags):
            raise ConfigError("customTags must be a list of tag names")
        ignore_modifiers = merged["ignoreModifiers"] or []
        if not isinstance(ignore_modifiers, list) or not all(
            isinstance(m, str) for m in ignore_modifiers
        ):
            raise ConfigError("ignoreModifiers must be a list of modifiers")

        return cls(
            output_format=merged["outputFormat"],
            include_private=merged["includePrivate"],
            fail_on_unresolved_reference=merged["failOnUnresolvedReference"],
            link_base_style=merged["linkBaseStyle"],
            link_root=merged["linkRoot"],
            link_suffix=merged["linkSuffix"],
            include_signatures=merged["includeSignatures"],
            source_base_url=merged["sourceBaseUrl"],
            generate_summary=merged["generateSummary"],
            workers=merged["workers"],
            external_links=dict(merged["externalLinks"] or {}),
            custom_tags=tuple(t.lstrip("@") for t in custom_tags),
            ignore_modifiers=tuple(ignore_modifiers),
        )
