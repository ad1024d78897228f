"""Command-line interface for the flowdoc library.

The command reads HTML, converts it to a flow document and writes the document
back as normalized HTML, or prints its structure as a tree.

Examples
--------
Normalize a file:
    $ flowdoc page.html -o normalized.html

Body markup only, read from stdin:
    $ cat page.html | flowdoc - --fragment

Inspect the document structure:
    $ flowdoc page.html --tree

Use environment variables for defaults:
    $ export FLOWDOC_HTML_PARSER=lxml
    $ export FLOWDOC_LOG_LEVEL=DEBUG
    $ flowdoc page.html  # Will parse with lxml and log debug output
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/flowdoc/cli.py

import argparse
import logging
import os
import sys
from dataclasses import fields
from typing import Any, Optional

from flowdoc import __version__
from flowdoc.api import document_to_html, html_to_document
from flowdoc.ast.nodes import (
    Bold,
    Document,
    Figure,
    FormattedSpan,
    Hyperlink,
    ImageBlock,
    ImageInline,
    Inline,
    Italic,
    LineBreak,
    List,
    ListItem,
    Node,
    Paragraph,
    Run,
    Section,
)
from flowdoc.ast.visitors import NodeVisitor
from flowdoc.constants import DEPS_CLI
from flowdoc.exceptions import FlowDocError
from flowdoc.logging_utils import configure_logging
from flowdoc.options.html import HtmlOptions, HtmlRendererOptions
from flowdoc.utils.attributes import font_attributes, format_number
from flowdoc.utils.decorators import requires_dependencies
from flowdoc.utils.io_utils import read_text, write_content

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2

ENV_PREFIX = "FLOWDOC_"
_TRUE_VALUES = ("true", "1", "yes", "on")


def _field_help(options_class: type, name: str) -> str:
    """Return the help text stored in an options field's metadata."""
    for f in fields(options_class):
        if f.name == name:
            return f.metadata.get("help", "")
    raise KeyError(f"{options_class.__name__} has no field {name!r}")


def _field_choices(options_class: type, name: str) -> Optional[list[str]]:
    for f in fields(options_class):
        if f.name == name:
            return f.metadata.get("choices")
    return None


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Help texts for the conversion options come from the option dataclasses.

    """
    parser = argparse.ArgumentParser(
        prog="flowdoc",
        description="Convert HTML to a flow document and back to normalized HTML.",
    )
    parser.add_argument("input", help="HTML file to convert, or '-' to read from stdin")
    parser.add_argument("-o", "--output", help="Write the result to this file instead of stdout")
    parser.add_argument("--tree", action="store_true", help="Print the document structure instead of HTML")
    parser.add_argument("--version", action="version", version=f"flowdoc {__version__}")

    parse_group = parser.add_argument_group("HTML parsing")
    parse_group.add_argument(
        "--parser",
        dest="html_parser",
        default=HtmlOptions.html_parser,
        choices=_field_choices(HtmlOptions, "html_parser"),
        help=_field_help(HtmlOptions, "html_parser"),
    )
    parse_group.add_argument(
        "--no-collapse-whitespace",
        dest="collapse_whitespace",
        action="store_false",
        help="Keep whitespace in text as written (default: "
        + _field_help(HtmlOptions, "collapse_whitespace").lower()
        + ")",
    )
    parse_group.add_argument(
        "--max-depth",
        type=int,
        default=HtmlOptions.max_depth,
        help=_field_help(HtmlOptions, "max_depth"),
    )

    render_group = parser.add_argument_group("HTML rendering")
    render_group.add_argument(
        "--fragment",
        action="store_true",
        help="Write only the body markup, without the html/head/body wrapper",
    )
    render_group.add_argument(
        "--charset",
        default=HtmlRendererOptions.charset,
        help=_field_help(HtmlRendererOptions, "charset"),
    )

    log_group = parser.add_argument_group("Logging")
    log_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    log_group.add_argument("--log-file", help="Also write log messages to this file")
    log_group.add_argument(
        "--trace",
        action="store_true",
        help="Debug logging with timestamps and logger names",
    )

    return parser


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Apply FLOWDOC_* environment variables as defaults to parser arguments.

    Command-line arguments still take precedence over environment variables.
    Invalid values are reported and ignored.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        The argument parser to modify

    """
    for action in parser._actions:
        if not action.dest or action.dest in ("help", "version", "input"):
            continue

        env_key = f"{ENV_PREFIX}{action.dest.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        if isinstance(action, argparse._StoreTrueAction):
            action.default = env_value.lower() in _TRUE_VALUES
        elif isinstance(action, argparse._StoreFalseAction):
            action.default = env_value.lower() in _TRUE_VALUES
        elif action.type is int:
            try:
                action.default = int(env_value)
            except ValueError:
                logger.warning(f"Invalid integer value for {env_key}: {env_value}")
        elif action.choices:
            if env_value in action.choices:
                action.default = env_value
            else:
                logger.warning(f"Invalid choice for {env_key}: {env_value}. Choices: {list(action.choices)}")
        else:
            action.default = env_value


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging based on command-line arguments; --trace wins over --log-level."""
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


class DocumentTreeBuilder(NodeVisitor):
    """Build a ``rich`` tree showing the structure of a flow document.

    Examples
    --------
        >>> from rich.console import Console
        >>> tree = DocumentTreeBuilder().build(html_to_document("<p>Hi</p>"))
        >>> Console().print(tree)

    """

    def __init__(self) -> None:
        """Initialize the builder."""
        self._branches: list[Any] = []

    @requires_dependencies("cli", DEPS_CLI)
    def build(self, doc: Document) -> Any:
        """Return a ``rich.tree.Tree`` for the document."""
        from rich.tree import Tree

        root = Tree("Document")
        self._branches = [root]
        doc.accept(self)
        self._branches = []
        return root

    @staticmethod
    def _formatting_label(node: Inline) -> str:
        attributes = font_attributes(node.formatting)
        if not attributes:
            return ""
        return " " + " ".join(f"{name}={value}" for name, value in attributes)

    def _add(self, label: str, children: Optional[list[Node]] = None) -> None:
        from rich.markup import escape

        branch = self._branches[-1].add(escape(label))
        if children:
            self._branches.append(branch)
            for child in children:
                child.accept(self)
            self._branches.pop()

    @staticmethod
    def _image_label(kind: str, uri: str, width: Optional[float], height: Optional[float]) -> str:
        label = f"{kind} {uri!r}"
        if width is not None:
            label += f" width={format_number(width)}"
        if height is not None:
            label += f" height={format_number(height)}"
        return label

    def visit_document(self, node: Document) -> None:
        """Add the top-level blocks."""
        for block in node.blocks:
            block.accept(self)

    def visit_section(self, node: Section) -> None:
        """Add a Section branch."""
        label = "Section" if node.name is None else f"Section {node.name!r}"
        self._add(label, list(node.children))

    def visit_paragraph(self, node: Paragraph) -> None:
        """Add a Paragraph branch."""
        label = "Paragraph"
        if node.font_size is not None:
            label += f" size={format_number(node.font_size)}"
        if node.font_weight is not None:
            label += f" weight={node.font_weight.value}"
        self._add(label, list(node.content))

    def visit_list(self, node: List) -> None:
        """Add a List branch."""
        self._add(f"List {node.marker_style.value}", list(node.items))

    def visit_list_item(self, node: ListItem) -> None:
        """Add a ListItem branch."""
        self._add("ListItem", list(node.children))

    def visit_image_block(self, node: ImageBlock) -> None:
        """Add an ImageBlock leaf."""
        self._add(self._image_label("ImageBlock", node.uri, node.width, node.height))

    def visit_run(self, node: Run) -> None:
        """Add a Run leaf."""
        self._add(f"Run {node.text!r}{self._formatting_label(node)}")

    def visit_line_break(self, node: LineBreak) -> None:
        """Add a LineBreak leaf."""
        self._add(f"LineBreak{self._formatting_label(node)}")

    def visit_bold(self, node: Bold) -> None:
        """Add a Bold branch."""
        self._add(f"Bold{self._formatting_label(node)}", list(node.content))

    def visit_italic(self, node: Italic) -> None:
        """Add an Italic branch."""
        self._add(f"Italic{self._formatting_label(node)}", list(node.content))

    def visit_formatted_span(self, node: FormattedSpan) -> None:
        """Add a FormattedSpan branch."""
        self._add(f"FormattedSpan{self._formatting_label(node)}", list(node.content))

    def visit_hyperlink(self, node: Hyperlink) -> None:
        """Add a Hyperlink branch."""
        self._add(f"Hyperlink {node.uri!r}{self._formatting_label(node)}", list(node.content))

    def visit_image_inline(self, node: ImageInline) -> None:
        """Add an ImageInline leaf."""
        label = self._image_label("ImageInline", node.uri, node.width, node.height)
        self._add(f"{label}{self._formatting_label(node)}")

    def visit_figure(self, node: Figure) -> None:
        """Add a Figure branch holding its block."""
        self._add(f"Figure{self._formatting_label(node)}", [node.block])


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return read_text(source)


def main(args: list[str] | None = None) -> int:
    """Execute the command line and return the exit code."""
    parser = create_parser()
    apply_env_vars_to_parser(parser)
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        parser_options = HtmlOptions(
            html_parser=parsed_args.html_parser,
            collapse_whitespace=parsed_args.collapse_whitespace,
            max_depth=parsed_args.max_depth,
        )
        renderer_options = HtmlRendererOptions(standalone=not parsed_args.fragment, charset=parsed_args.charset)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    try:
        html_text = _read_input(parsed_args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    try:
        document = html_to_document(html_text, parser_options)
        if parsed_args.tree:
            from rich.console import Console

            tree = DocumentTreeBuilder().build(document)
            if parsed_args.output:
                with open(parsed_args.output, "w", encoding="utf-8") as fh:
                    Console(file=fh, no_color=True, highlight=False, width=120).print(tree)
            else:
                Console(highlight=False).print(tree)
            return EXIT_SUCCESS

        result = document_to_html(document, renderer_options)
    except FlowDocError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except OSError as e:
        print(f"Error: cannot write {parsed_args.output}: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    if parsed_args.output:
        try:
            write_content(result, parsed_args.output)
        except OSError as e:
            print(f"Error: cannot write {parsed_args.output}: {e}", file=sys.stderr)
            return EXIT_USAGE_ERROR
    else:
        sys.stdout.write(result + "\n")

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
