#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/flowdoc/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class for parsers that build a flow
document from a source format.

"""

from __future__ import annotations

from abc import ABC, abstractmethod

from flowdoc.ast import Document
from flowdoc.exceptions import InvalidOptionsError
from flowdoc.options.base import BaseParserOptions


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Examples
    --------
        >>> class MyCustomParser(BaseParser):
        ...     def parse(self, input_data):
        ...         return Document(blocks=[])

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: str) -> Document:
        """Parse the input into a flow document.

        Parameters
        ----------
        input_data : str
            Source document text

        Returns
        -------
        Document
            The parsed document

        Raises
        ------
        ParsingError
            If the input cannot be parsed
        DependencyError
            If required dependencies are not installed

        """
        raise NotImplementedError
