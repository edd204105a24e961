"""Logging setup for the plugin."""

import logging
import os
from typing import Optional

from cognito_client.config.schemas.app_schema import LoggingConfig

ROOT_LOGGER_NAME = "cognito_client"

_HANDLER_MARKER = "_cognito_client_handler"


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure the plugin logger hierarchy.

    Handlers installed by a previous call are replaced, so calling this
    again with a different configuration takes effect immediately.

    Args:
        config: Logging configuration, defaults used when omitted

    Returns:
        The root plugin logger
    """
    config = config or LoggingConfig()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, config.level, logging.INFO))

    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(config.format)
    handlers: list[logging.Handler] = []

    if config.console_enabled:
        handlers.append(logging.StreamHandler())

    if config.file_path:
        log_dir = os.path.dirname(config.file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(config.file_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARKER, True)
        root.addHandler(handler)

    # Host runtimes usually own the root logger; keep our records out of it.
    root.propagate = not handlers

    return root


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the plugin hierarchy."""
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
