"""Input normalization: obtain SQL text from an argument, a file, or stdin."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from sqlgate.errors import InputError

BOM = "\ufeff"


def strip_bom(text: str) -> str:
    """Remove a single leading U+FEFF. Everything else is returned untouched."""
    if text.startswith(BOM):
        return text[len(BOM):]
    return text


def _decode(data: bytes, origin: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputError(f"{origin} is not valid UTF-8: {e}") from e


def read_sql(value: str, *, is_file: bool = False) -> str:
    """Return normalized SQL text.

    When ``is_file`` is set, ``value`` is a path. The file is decoded as strict
    UTF-8 from raw bytes, so line endings and all non-BOM content survive
    byte for byte.
    """
    if not is_file:
        return strip_bom(value)

    path = Path(value)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise InputError(f"unable to read the file {value}: {e.strerror or e}") from e
    return strip_bom(_decode(data, f"file {value}"))


def read_stdin(stream: BinaryIO) -> str:
    """Read piped SQL from a binary stream (normally ``sys.stdin.buffer``)."""
    return strip_bom(_decode(stream.read(), "stdin"))
