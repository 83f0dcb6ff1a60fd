"""The `config` command group: inspect and persist default settings."""

from __future__ import annotations

import click

from sqlgate.cli._shared import fail
from sqlgate.config import SETTING_KEYS, config_path, load_settings, save_setting
from sqlgate.errors import GateError


@click.group()
def config() -> None:
    """Manage defaults in ~/.sqlgate/config.toml (or $SQLGATE_CONFIG)."""


@config.command("show")
def config_show() -> None:
    """Show the settings read from the config file."""
    try:
        settings = load_settings()
    except GateError as e:
        fail(e)

    click.echo(f"file: {config_path()}")
    for key in SETTING_KEYS:
        value = getattr(settings, key)
        click.echo(f"  {key} = {value if value is not None else '(unset)'}")


@config.command("set")
@click.argument("key", type=click.Choice(SETTING_KEYS))
@click.argument("value")
def config_set(key: str, value: str) -> None:
    """Persist a default, e.g. `sqlgate config set uri http://opa:8181/v1/data/sql`."""
    try:
        path = save_setting(key, value)
    except GateError as e:
        fail(e)
    click.echo(f"Saved {key} to {path}")
