"""Inline code spans and fenced code blocks."""

import re

BACKTICK_RUN_RE = re.compile(r"`+")


def _longest_run(text: str) -> int:
    return max((len(m.group(0)) for m in BACKTICK_RUN_RE.finditer(text)), default=0)


def md_code_span(text: str) -> str:
    """Wrap ``text`` in a backtick fence longer than any run inside it."""
    text = " ".join(text.split("\n"))
    if not text.strip():
        return ""
    fence = "`" * (_longest_run(text) + 1)
    if text.startswith("`") or text.endswith("`"):
        return f"{fence} {text} {fence}"
    return f"{fence}{text}{fence}"


def md_codeblock(lang: str, code: str) -> str:
    """Generate a fenced code block that survives backticks in ``code``."""
    fence = "`" * max(3, _longest_run(code) + 1)
    return f"{fence}{lang}\n{code.rstrip()}\n{fence}"
