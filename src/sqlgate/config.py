"""Persistent defaults: ``~/.sqlgate/config.toml`` (``[policy]`` table).

Precedence is CLI option > environment variable > config file > built-in
default. Environment variables are resolved by click; this module only knows
about the file. Other tables in the file are left alone when a setting is
saved.
"""

from __future__ import annotations

import datetime
import os
import re
import stat
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path

from sqlgate.errors import ConfigError
from sqlgate.policy import DEFAULT_URI

_CONFIG_FILE = Path.home() / ".sqlgate" / "config.toml"

SETTING_KEYS = ("uri", "timeout", "dialect")

_BARE_KEY_RE = re.compile(r"[A-Za-z0-9_-]+")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")
_TOML_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


@dataclass(frozen=True)
class Settings:
    uri: str = DEFAULT_URI
    timeout: float | None = None
    dialect: str | None = None


def config_path() -> Path:
    """Config file location; ``SQLGATE_CONFIG`` overrides the default."""
    override = os.environ.get("SQLGATE_CONFIG")
    return Path(override) if override else _CONFIG_FILE


def _escape_toml_value(v: str) -> str:
    """Escape a string for a TOML basic (double-quoted) string."""
    return "".join(
        _TOML_ESCAPES.get(ch) or (f"\\u{ord(ch):04x}" if _CONTROL_RE.match(ch) else ch)
        for ch in v
    )


def _toml_key(key: str) -> str:
    return key if _BARE_KEY_RE.fullmatch(key) else f'"{_escape_toml_value(key)}"'


def _toml_value(value: object, where: str) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return f'"{_escape_toml_value(value)}"'
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, list) and not any(isinstance(v, dict) for v in value):
        return "[" + ", ".join(_toml_value(v, where) for v in value) + "]"
    raise ConfigError(f"cannot rewrite '{where}' in the config file; edit it by hand")


def _dump_table(lines: list[str], header: str, table: dict) -> None:
    scalars = {k: v for k, v in table.items() if not isinstance(v, dict)}
    subtables = {k: v for k, v in table.items() if isinstance(v, dict)}

    if header and (scalars or not subtables):
        lines.append(f"[{header}]")
    for k, v in scalars.items():
        lines.append(f"{_toml_key(k)} = {_toml_value(v, f'{header}.{k}' if header else k)}")
    if scalars or (header and not subtables):
        lines.append("")

    for k, v in subtables.items():
        _dump_table(lines, f"{header}.{_toml_key(k)}" if header else _toml_key(k), v)


def _write_toml(path: Path, data: dict) -> None:
    """Serialize the whole config document and write it with mode 0600."""
    lines: list[str] = []
    # Root-level keys are emitted first; TOML requires them before any header.
    _dump_table(lines, "", data)

    path.parent.mkdir(parents=True, exist_ok=True, mode=0o700)
    path.write_text("\n".join(lines).rstrip("\n") + "\n", encoding="utf-8")
    os.chmod(path, stat.S_IRUSR | stat.S_IWUSR)  # 0600


def _load_file(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"unable to load {path}: {e}") from e


def _coerce(key: str, value: object, path: Path) -> object:
    if key == "timeout":
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise ConfigError(f"{path}: 'timeout' must be a number of seconds")
        try:
            seconds = float(value)
        except ValueError as e:
            raise ConfigError(f"{path}: 'timeout' must be a number of seconds") from e
        if seconds <= 0:
            raise ConfigError(f"{path}: 'timeout' must be positive")
        return seconds
    if not isinstance(value, str):
        raise ConfigError(f"{path}: '{key}' must be a string")
    if _CONTROL_RE.search(value):
        raise ConfigError(f"{path}: '{key}' must not contain control characters")
    return value


def load_settings(path: Path | None = None) -> Settings:
    """Read ``[policy]`` from the config file, falling back to defaults."""
    path = path or config_path()
    section = _load_file(path).get("policy", {})
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: [policy] must be a table")

    known = {f.name for f in fields(Settings)}
    values = {k: _coerce(k, v, path) for k, v in section.items() if k in known}
    return replace(Settings(), **values)


def save_setting(key: str, value: str, path: Path | None = None) -> Path:
    """Validate and persist one ``[policy]`` key. Returns the file written."""
    if key not in SETTING_KEYS:
        raise ConfigError(f"unknown setting '{key}' (valid: {', '.join(SETTING_KEYS)})")
    path = path or config_path()

    data = _load_file(path)
    section = data.get("policy", {})
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: [policy] must be a table")
    section = dict(section)
    section[key] = _coerce(key, value, path)
    data["policy"] = section

    _write_toml(path, data)
    return path
