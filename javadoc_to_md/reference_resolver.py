"""Bind references written in comments to declarations in the model."""

import logging

from javadoc_to_md.documentation_model import DocumentationModel
from javadoc_to_md.resolution_result import ResolutionResult
from javadoc_to_md.type_lookup import find_member, import_candidates

logger = logging.getLogger(__name__)


class ReferenceResolver:
    """Resolves reference texts against a complete, read-only model.

    Rules are tried in order and the first match wins:

    1. ``exact``    - the text is a fully-qualified signature.
    2. ``member``   - no type qualifier: look in the enclosing type's direct
                      members and nested types, then outwards.
    3. ``import``   - qualify the type name through the unit's imports.
    4. ``package``  - qualify the type name with the origin's package.
    5. ``external`` - the qualified name falls under a configured external
                      documentation root.
    """

    def __init__(
        self,
        model: DocumentationModel,
        external_links: dict[str, str] | None = None,
    ) -> None:
        """Index the model's packages and remember external link roots."""
        self.model = model
        self.packages = set(model.packages())
        # longest prefix first so "java.util." beats "java."
        self.external_links = sorted(
            (external_links or {}).items(), key=lambda kv: (-len(kv[0]), kv[0])
        )
        self._cache: dict[tuple[str, str], ResolutionResult] = {}

    def resolve_model(self) -> list[ResolutionResult]:
        """Settle every unqualified reference; settled ones are left alone."""
        results: list[ResolutionResult] = []
        for ref in self.model.references:
            if ref.is_settled:
                continue
            res = self.resolve_text(ref.text, ref.origin)
            if res.target is not None:
                ref.resolve(res.target, res.external_url)
            else:
                ref.mark_unresolved(res.reason)
            results.append(res)

        unresolved = sum(1 for r in results if not r.resolved)
        logger.info(
            "Resolved %d references (%d unresolved)", len(results) - unresolved, unresolved
        )
        return results

    def resolve_text(self, text: str, origin: str) -> ResolutionResult:
        """Resolve ``text`` as written in the comment of ``origin``."""
        key = (text, origin)
        if key not in self._cache:
            self._cache[key] = self._resolve(text, origin)
        return self._cache[key]

    def _resolve(self, text: str, origin: str) -> ResolutionResult:
        type_part, sep, member_part = text.partition("#")
        type_part = type_part.strip()
        member = member_part.strip() if sep else None

        def found(target: str, rule: str, url: str | None = None) -> ResolutionResult:
            return ResolutionResult(text, origin, target, rule, external_url=url)

        target = self._exact(type_part, member)
        if target:
            return found(target, "exact")

        if "." not in type_part:
            target = self._enclosing_member(type_part, member, origin)
            if target:
                return found(target, "member")

        if type_part:
            for candidate in import_candidates(type_part, self.model.imports_for(origin)):
                target = self._exact(candidate, member)
                if target:
                    return found(target, "import")

            package = self.model.package_of(origin)
            target = self._exact(f"{package}.{type_part}" if package else type_part, member)
            if target:
                return found(target, "package")

            external = self._external(type_part, member, origin)
            if external:
                return found(external[0], "external", external[1])

        return ResolutionResult(
            text,
            origin,
            None,
            "",
            reason=f"no declaration matches {text} from {origin}",
        )

    def _exact(self, type_sig: str, member: str | None) -> str | None:
        if not type_sig:
            return None
        if member is None:
            if self.model.is_type(type_sig) or type_sig in self.packages:
                return type_sig
            return None
        if not self.model.is_type(type_sig):
            return None
        return find_member(self.model, type_sig, member)

    def _enclosing_member(self, name: str, member: str | None, origin: str) -> str | None:
        for scope in self.model.enclosing_types(origin):
            if not name:
                target = find_member(self.model, scope, member or "")
            elif self.model.is_type(f"{scope}.{name}"):
                target = self._exact(f"{scope}.{name}", member)
            elif member is None:
                # bare "foo" or "foo(int)" written without "#"
                target = find_member(self.model, scope, name)
            else:
                target = None
            if target:
                return target
        return None

    def _external(
        self, type_part: str, member: str | None, origin: str
    ) -> tuple[str, str] | None:
        if not self.external_links:
            return None
        single_imports = tuple(i for i in self.model.imports_for(origin) if not i.endswith(".*"))
        candidates = [type_part, *import_candidates(type_part, single_imports)]
        if "." not in type_part:
            candidates.append(f"java.lang.{type_part}")  # implicitly imported
        for candidate in candidates:
            for prefix, base in self.external_links:
                if candidate.startswith(prefix):
                    url = f"{base.rstrip('/')}/{candidate.replace('.', '/')}.html"
                    target = candidate
                    if member:
                        url += f"#{member.replace(' ', '')}"
                        target += f"#{member}"
                    return target, url
        return None


def resolve_references(
    model: DocumentationModel,
    external_links: dict[str, str] | None = None,
) -> list[ResolutionResult]:
    """Resolve every reference in ``model``; see ReferenceResolver."""
    return ReferenceResolver(model, external_links).resolve_model()
