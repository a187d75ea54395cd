"""Logic for removing comment delimiters and per-line decoration."""

import re

OPEN_RE = re.compile(r"^\s*/\*\*?")
CLOSE_RE = re.compile(r"\*+/\s*$")
DECORATION_RE = re.compile(r"^\s*\*+ ?")


def strip_comment(raw: str) -> list[str]:
    """Return the comment body as lines, without ``/**``, ``*/`` or ``*`` prefixes.

    Text that was already stripped by the host is returned unchanged apart
    from line-ending normalization.
    """
    text = raw.replace("\r\n", "\n").replace("\r", "\n")
    text = CLOSE_RE.sub("", OPEN_RE.sub("", text, count=1), count=1)

    lines: list[str] = []
    for n, line in enumerate(text.split("\n")):
        m = DECORATION_RE.match(line)
        if m:
            line = line[m.end() :]
        elif n == 0:
            line = line.lstrip()
        lines.append(line.rstrip())

    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return lines
