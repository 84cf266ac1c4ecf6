"""Configuration package for runtime settings and startup validation."""

from .settings import (
    AppSettings,
    SettingsLoadError,
    config_build_probe_defaults,
    config_load_settings,
    config_parse_json_setting,
)

__all__ = [
    "AppSettings",
    "SettingsLoadError",
    "config_build_probe_defaults",
    "config_load_settings",
    "config_parse_json_setting",
]
