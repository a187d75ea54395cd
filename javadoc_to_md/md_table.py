"""Utility for generating Markdown tables."""


def md_cell(text: str) -> str:
    """Make ``text`` safe inside one table cell."""
    return " ".join(text.replace("|", "\\|").split())


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a Markdown table; no rows gives an empty string."""
    if not rows:
        return ""
    out = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join(" --- " for _ in headers) + "|",
    ]
    out.extend("| " + " | ".join(md_cell(c) for c in r) + " |" for r in rows)
    return "\n".join(out)
