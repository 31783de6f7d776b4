"""Configuration for Interprete."""

from interprete.config.settings import (
    Settings,
    get_settings,
    load_config,
    override_settings,
    reset_settings,
)

__all__ = [
    "Settings",
    "load_config",
    "get_settings",
    "override_settings",
    "reset_settings",
]
