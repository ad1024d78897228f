"""The exported API functions for HTML <-> flow document conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/flowdoc/api.py
import logging
from dataclasses import fields
from typing import Any, Optional, TypeVar

from flowdoc.ast.nodes import Document
from flowdoc.options.base import BaseParserOptions, BaseRendererOptions
from flowdoc.options.html import HtmlOptions, HtmlRendererOptions
from flowdoc.parsers.html import HtmlToDocumentParser
from flowdoc.renderers.html import HtmlRenderer

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", BaseParserOptions, BaseRendererOptions)


def _merge_options(
    options: Optional[OptionsT],
    options_class: type[OptionsT],
    options_type_name: str,
    **kwargs: Any,
) -> Optional[OptionsT]:
    """Apply keyword overrides on top of an options object.

    Parameters
    ----------
    options : OptionsT or None
        Pre-configured options, or None for defaults
    options_class : type[OptionsT]
        Options class used when ``options`` is None
    options_type_name : str
        Name of the options type for logging (e.g., "parser" or "renderer")
    **kwargs
        Individual option values overriding those in ``options``

    Returns
    -------
    OptionsT or None
        ``options`` unchanged when there are no valid overrides, otherwise an
        updated copy

    """
    option_names = {f.name for f in fields(options_class)}
    valid_kwargs = {k: v for k, v in kwargs.items() if k in option_names}
    missing = [k for k in kwargs if k not in option_names]
    if missing:
        logger.debug(f"Skipping unknown {options_type_name} options: {missing}")

    if not valid_kwargs or (options is not None and not isinstance(options, options_class)):
        return options
    if options is None:
        return options_class(**valid_kwargs)
    return options.create_updated(**valid_kwargs)


def html_to_document(html_text: str, options: Optional[HtmlOptions] = None, **kwargs: Any) -> Document:
    """Convert HTML markup to a flow document.

    Parameters
    ----------
    html_text : str
        HTML markup, a full document or a fragment
    options : HtmlOptions, optional
        Pre-configured parser options
    kwargs : Any
        Individual parser options that override settings in ``options``
        (e.g., ``collapse_whitespace=False``)

    Returns
    -------
    Document
        Document holding a single root Section named "body"

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not an HtmlOptions instance
    DependencyError
        If BeautifulSoup or the selected parser backend is not installed
    ParsingError
        If the HTML parser itself fails

    Examples
    --------
        >>> doc = html_to_document("<h2>Title</h2>")
        >>> doc.blocks[0].children[0].font_size
        28.0

    """
    parser_options = _merge_options(options, HtmlOptions, "parser", **kwargs)
    return HtmlToDocumentParser(parser_options).parse(html_text)


def soup_to_document(soup: Any, options: Optional[HtmlOptions] = None, **kwargs: Any) -> Document:
    """Convert an already parsed BeautifulSoup tree to a flow document.

    Parameters
    ----------
    soup : bs4.BeautifulSoup or bs4.element.Tag
        Parsed HTML; the tree is not modified
    options : HtmlOptions, optional
        Pre-configured parser options; ``html_parser`` is not used
    kwargs : Any
        Individual parser options that override settings in ``options``

    Returns
    -------
    Document
        Document holding a single root Section named "body"

    """
    parser_options = _merge_options(options, HtmlOptions, "parser", **kwargs)
    return HtmlToDocumentParser(parser_options).convert_soup(soup)


def document_to_html(document: Document, options: Optional[HtmlRendererOptions] = None, **kwargs: Any) -> str:
    """Serialize a flow document to HTML.

    Parameters
    ----------
    document : Document
        Document to serialize
    options : HtmlRendererOptions, optional
        Pre-configured renderer options
    kwargs : Any
        Individual renderer options that override settings in ``options``
        (e.g., ``standalone=False``)

    Returns
    -------
    str
        HTML text

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not an HtmlRendererOptions instance
    RenderingError
        If the document cannot be serialized

    Examples
    --------
        >>> document_to_html(html_to_document("<p>Hi</p>"), standalone=False)
        '<p>Hi</p>'

    """
    renderer_options = _merge_options(options, HtmlRendererOptions, "renderer", **kwargs)
    return HtmlRenderer(renderer_options).render_to_string(document)


__all__ = ["html_to_document", "soup_to_document", "document_to_html"]
