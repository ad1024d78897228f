#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/flowdoc/utils/io_utils.py
"""Input and output helpers for text content."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def read_text(source: Union[str, Path, IO[bytes], IO[str]], encoding: str = "utf-8") -> str:
    """Read text from a path or a file-like object.

    Parameters
    ----------
    source : str, Path, IO[bytes] or IO[str]
        File path or open stream
    encoding : str, default = "utf-8"
        Encoding used for paths and binary streams

    Returns
    -------
    str
        The decoded text

    Raises
    ------
    TypeError
        If the source type is not supported

    """
    if isinstance(source, (str, Path)):
        return Path(source).read_text(encoding=encoding)

    if hasattr(source, "read"):
        data = source.read()
        if isinstance(data, bytes):
            return data.decode(encoding)
        return cast(str, data)

    raise TypeError(f"Unsupported input type: {type(source)}")


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str], None]) -> Union[StringIO, None]:
    """Write text content to an output destination or return it as a stream.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], IO[str] or None
        Output destination. Can be:
        - None: the content is returned as a StringIO
        - str or Path: the content is written to that file as UTF-8
        - IO[bytes]: the content is encoded as UTF-8 and written
        - IO[str]: the content is written as is

    Returns
    -------
    StringIO or None
        StringIO when ``output`` is None, otherwise None

    Raises
    ------
    TypeError
        If the content is not a string or the output type is not supported

    Examples
    --------
        >>> write_content("<p>x</p>", None).read()
        '<p>x</p>'

    """
    if not isinstance(content, str):
        raise TypeError(f"Content must be str, got {type(content)}")

    if output is None:
        return StringIO(content)

    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        return None

    if hasattr(output, "write"):
        if isinstance(output, BytesIO):
            is_binary_mode = True
        elif isinstance(output, StringIO):
            is_binary_mode = False
        elif isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        elif hasattr(output, "mode"):
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode
        else:
            is_binary_mode = False

        if is_binary_mode:
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
        return None

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["read_text", "write_content"]
