"""Annotation scheme binding settings fields to external JSON keys.

Two kinds of settings types are supported.

Dataclasses mark fields with ``json_property``::

    @dataclass
    class PluginSettings:
        title: str = json_property("title", default="")
        sound: str = json_property("soundFile", filename=True, default="")
        cache: dict = field(default_factory=dict)  # never touched

Pydantic models use the field alias as the external key, and
``json_schema_extra={"filename": True}`` (or ``filename_field``) for
filename fields::

    class PluginSettings(BaseModel):
        title: str = Field(default="", alias="title")
        sound: str = filename_field("soundFile", default="")
"""

import dataclasses
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, Mapping

from pydantic import BaseModel, Field

# Keys used in dataclass field metadata
JSON_PROPERTY_KEY = "json_property"
FILENAME_KEY = "filename"


class FieldKind(str, Enum):
    """Transform applied to a payload value before assignment."""
    PLAIN = "plain"  # coerce to the declared type
    FILENAME = "filename"  # strip fake path and percent-decode


@dataclass(frozen=True)
class FieldBinding:
    """Binding of one external key to one settings attribute.

    Attributes:
        external_key: Key used in the JSON payload
        attribute: Python attribute name on the settings object
        annotation: Declared type of the attribute
        kind: Transform applied on assignment
    """
    external_key: str
    attribute: str
    annotation: Any
    kind: FieldKind = FieldKind.PLAIN


def json_property(name: str, *, filename: bool = False, **kwargs: Any) -> Any:
    """Declare a dataclass field bound to the external key ``name``.

    Args:
        name: External JSON key
        filename: Mark as a file picker field
        **kwargs: Passed through to ``dataclasses.field`` (default, default_factory, ...)

    Returns:
        A ``dataclasses.field`` carrying the binding in its metadata
    """
    metadata: Dict[str, Any] = dict(kwargs.pop("metadata", None) or {})
    metadata[JSON_PROPERTY_KEY] = name
    metadata[FILENAME_KEY] = filename
    return dataclasses.field(metadata=metadata, **kwargs)


def filename_field(alias: str, **kwargs: Any) -> Any:
    """Declare a pydantic field bound to ``alias`` and marked as a filename."""
    return Field(alias=alias, json_schema_extra={FILENAME_KEY: True}, **kwargs)


def _dataclass_bindings(cls: type) -> Iterator[FieldBinding]:
    try:
        hints = typing.get_type_hints(cls)
    except (NameError, TypeError):
        # Unresolvable forward references; fall back to raw annotations
        hints = {}

    for f in dataclasses.fields(cls):
        name = f.metadata.get(JSON_PROPERTY_KEY)
        if not name:
            continue
        kind = FieldKind.FILENAME if f.metadata.get(FILENAME_KEY) else FieldKind.PLAIN
        yield FieldBinding(name, f.name, hints.get(f.name, f.type), kind)


def _model_bindings(cls: type) -> Iterator[FieldBinding]:
    for attr, info in cls.model_fields.items():
        name = info.alias
        if name is None and isinstance(info.validation_alias, str):
            name = info.validation_alias
        if not name:
            continue
        extra = info.json_schema_extra
        is_filename = isinstance(extra, Mapping) and bool(extra.get(FILENAME_KEY))
        kind = FieldKind.FILENAME if is_filename else FieldKind.PLAIN
        yield FieldBinding(name, attr, info.annotation, kind)


def iter_bindings(cls: type) -> Iterator[FieldBinding]:
    """Yield bindings for annotated fields of ``cls`` in declaration order.

    Types that are neither dataclasses nor pydantic models have no bindings.
    """
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        yield from _model_bindings(cls)
    elif dataclasses.is_dataclass(cls):
        yield from _dataclass_bindings(cls)
