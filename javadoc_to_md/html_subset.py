"""Translation of the HTML subset found in comments into Markdown."""

from javadoc_to_md.doc_comment import HtmlSpan

STRIKE_TAGS = frozenset({"s", "del", "strike"})


class HtmlTranslator:
    """Maps HTML tags to Markdown markers, one span at a time.

    ``<pre>`` blocks are not handled here; the inline renderer collects
    their content and emits a fenced block. Tags outside the supported set
    pass through verbatim.
    """

    def __init__(self, github: bool, doc_root: str = ".") -> None:
        """``github`` selects GitHub Flavored Markdown over CommonMark.

        ``doc_root`` replaces ``{@docRoot}`` written inside link targets.
        """
        self.github = github
        self.doc_root = doc_root
        self.hrefs: list[str | None] = []

    def translate(self, span: HtmlSpan) -> str:
        tag = span.tag
        if tag == "p":
            return "\n\n"
        if tag == "b":
            return "**"
        if tag == "i":
            return "_" if self.github else "*"
        if tag == "code":
            return "`"
        if tag == "ul":
            return "\n\n"
        if tag == "li":
            return "" if span.closing else "\n- "
        if tag == "a":
            return self._anchor(span)
        if self.github and tag in STRIKE_TAGS:
            return "~~"
        return span.raw

    def _anchor(self, span: HtmlSpan) -> str:
        if span.closing:
            if not self.hrefs:
                return span.raw
            href = self.hrefs.pop()
            return f"]({href})" if href else span.raw
        href = span.attribute("href")
        if href:
            href = href.replace("{@docRoot}", self.doc_root)
        self.hrefs.append(href)
        return "[" if href else span.raw
