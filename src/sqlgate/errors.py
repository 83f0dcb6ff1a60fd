"""Fatal error taxonomy. Every error aborts the run; the CLI names the stage."""

from __future__ import annotations


class GateError(Exception):
    """Base class for all sqlgate failures."""

    stage = "gate"


class InputError(GateError):
    """SQL source could not be read (missing file, not UTF-8, no stdin)."""

    stage = "input"


class SqlSyntaxError(GateError):
    """Input is not a valid sequence of SQL statements."""

    stage = "parse"


class TransportError(GateError):
    """Policy engine unreachable, timed out, or answered with a non-200 status."""

    stage = "transport"


class DecodeError(GateError):
    """Policy engine response is not UTF-8 JSON of the expected shape."""

    stage = "decode"


class ConfigError(GateError):
    """Config file is unreadable or malformed."""

    stage = "config"
