"""flowdoc - lossy bidirectional conversion between HTML and flow documents.

A flow document is the nested block/inline model used by word-processor style
rich text editors: sections, paragraphs and lists of blocks holding runs of
text with character formatting, hyperlinks and images.

flowdoc converts an HTML tree into such a document and serializes a document
back to HTML. The conversion keeps structure and basic formatting only, so an
HTML -> document -> HTML round trip normalizes the markup rather than
reproducing it.

Examples
--------
Basic usage:

    >>> from flowdoc import document_to_html, html_to_document
    >>> doc = html_to_document("<h2>Title</h2><p>Some <b>bold</b> text</p>")
    >>> document_to_html(doc, standalone=False)
    '<h2>Title</h2><p>Some <b>bold</b> text</p>'

Working with the document directly:

    >>> from flowdoc.ast import Paragraph, Run
    >>> section = doc.blocks[0]
    >>> section.children.append(Paragraph(content=[Run(text="Appended")]))

See Also
--------
flowdoc.ast : Flow document node definitions
flowdoc.options : Parser and renderer options

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "flowdoc requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from flowdoc.api import document_to_html, html_to_document, soup_to_document  # noqa: E402
from flowdoc.ast import Document  # noqa: E402
from flowdoc.exceptions import (  # noqa: E402
    DependencyError,
    FlowDocError,
    InvalidOptionsError,
    ParsingError,
    RenderingError,
    StructuralContractError,
)
from flowdoc.options import HtmlOptions, HtmlRendererOptions  # noqa: E402

__all__ = [
    "__version__",
    "html_to_document",
    "soup_to_document",
    "document_to_html",
    "Document",
    "HtmlOptions",
    "HtmlRendererOptions",
    "FlowDocError",
    "DependencyError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "StructuralContractError",
]
