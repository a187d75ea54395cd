"""Convert Javadoc comments to Markdown."""

from javadoc_to_md.convert import convert
from javadoc_to_md.options import ConverterOptions
from javadoc_to_md.rendered_document import RenderedDocument

__all__ = ["ConverterOptions", "RenderedDocument", "convert"]
