# sdtools/settings/__init__.py
"""Typed settings populated from host JSON payloads.

Usage:
    from sdtools.settings import json_property, auto_populate_settings

    @dataclass
    class PluginSettings:
        title: str = json_property("title", default="")

    auto_populate_settings(settings, payload["settings"])
"""

from .fields import (
    FieldKind,
    FieldBinding,
    json_property,
    filename_field,
    iter_bindings,
)
from .mapper import (
    SettingsTypeError,
    build_field_map,
    auto_populate_settings,
)

__all__ = [
    "FieldKind",
    "FieldBinding",
    "json_property",
    "filename_field",
    "iter_bindings",
    "SettingsTypeError",
    "build_field_map",
    "auto_populate_settings",
]
