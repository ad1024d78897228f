#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/flowdoc/utils/decorators.py
"""Utility decorators for flowdoc parsers and renderers.

This module provides the dependency check applied to conversion entry points
and a DEBUG-level timer used around whole conversions.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from flowdoc.exceptions import DependencyError
from flowdoc.utils.packages import check_version_requirement


def check_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> None:
    """Raise DependencyError if any of ``packages`` is missing or too old.

    Parameters
    ----------
    converter_name : str
        Name of the converter, used in the error message
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples

    Raises
    ------
    DependencyError
        If any package cannot be imported or does not satisfy its version spec

    """
    missing = []
    version_mismatches = []
    original_error = None

    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as e:
            missing.append((install_name, version_spec))
            if original_error is None:
                original_error = e
            continue

        if version_spec:
            meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
            if not meets_requirement:
                version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

    if missing or version_mismatches:
        raise DependencyError(
            converter_name=converter_name,
            missing_packages=missing,
            version_mismatches=version_mismatches,
            original_import_error=original_error,
        ) from original_error


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies and versions before method execution.

    Parameters
    ----------
    converter_name : str
        Name of the converter (e.g., "html"). This appears in error messages.
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples where:
        - install_name: Package name for pip install (e.g., "beautifulsoup4")
        - import_name: Module name for import statement (e.g., "bs4")
        - version_spec: Version requirement (e.g., ">=4.14.2" or "" for any version)

    Returns
    -------
    Callable
        Decorated method that checks dependencies before execution

    Examples
    --------
        >>> @requires_dependencies("html", [("beautifulsoup4", "bs4", ">=4.14.2")])
        ... def parse(self, html_text):
        ...     from bs4 import BeautifulSoup
        ...     # parsing logic here

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            check_dependencies(converter_name, packages)
            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time the enclosed block and log the result when DEBUG is enabled.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Parsing (html)")

    Examples
    --------
        >>> logger = logging.getLogger(__name__)
        >>> with debug_timer(logger, "Parsing (html)"):
        ...     document = parser.parse(html_text)

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.4f}s")
    else:
        yield
