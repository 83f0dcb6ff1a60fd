"""Logging setup for the CLI. Library modules only call ``logging.getLogger``."""

from __future__ import annotations

import logging


def configure_logging(verbose: bool = False) -> None:
    """Send sqlgate diagnostics to stderr. DEBUG with ``verbose``, else WARNING."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root_logger.addHandler(handler)

    # Silence noisy libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)
