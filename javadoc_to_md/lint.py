"""Documentation lint: report what is missing or suspicious in comments."""

import logging

from javadoc_to_md.declaration import METHOD, PACKAGE
from javadoc_to_md.documentation_model import DocumentationModel
from javadoc_to_md.render_declaration import declaration_warnings

logger = logging.getLogger(__name__)


def lint_model(model: DocumentationModel) -> list[str]:
    """Return sorted findings for every non-private declaration.

    Expects a model whose references are already resolved, so unresolved
    references are reported alongside parse and model warnings.
    """
    findings: list[str] = []
    for sig, entry in model.entries.items():
        decl = entry.declaration
        if decl.is_private:
            continue
        findings.extend(declaration_warnings(entry, model))

        comment = entry.effective_comment
        if comment.is_empty:
            if decl.kind != PACKAGE:
                findings.append(f"{sig}: missing documentation comment")
            continue

        documented = {t.argument for t in comment.tags("param")}
        for param in decl.parameters:
            if param.name not in documented:
                findings.append(f"{sig}: parameter {param.name} is not documented")
        returns = (decl.return_type or "void").strip()
        if decl.kind == METHOD and returns != "void" and not comment.tags("return"):
            findings.append(f"{sig}: missing @return")

    logger.info("Lint found %d problems", len(findings))
    return sorted(findings)
