"""Populate typed settings objects from untyped JSON payloads.

The host sends settings as a plain JSON object. ``auto_populate_settings``
copies every value whose key is bound to a field of the settings object,
ignoring keys it does not know about so older and newer payloads keep
working. A value that cannot be converted to its field's type is a contract
violation and raises ``SettingsTypeError``.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from pydantic import TypeAdapter

from ..paths import filename_from_payload
from .fields import FieldBinding, FieldKind, iter_bindings

_logger = logging.getLogger(__name__)


class SettingsTypeError(ValueError):
    """A payload value could not be converted to its field's type."""

    def __init__(self, key: str, attribute: str, value: Any, reason: str = ""):
        self.key = key
        self.attribute = attribute
        self.value = value
        message = f"Cannot assign {value!r} from key {key!r} to field {attribute!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


def build_field_map(settings: Any) -> Dict[str, FieldBinding]:
    """Map external keys to field bindings for a settings type.

    Args:
        settings: Settings class or instance (dataclass or pydantic model)

    Returns:
        Dictionary of external key -> FieldBinding. When two fields claim
        the same key, the first declared wins.
    """
    if settings is None:
        return {}
    cls = settings if isinstance(settings, type) else type(settings)

    field_map: Dict[str, FieldBinding] = {}
    for binding in iter_bindings(cls):
        if binding.external_key in field_map:
            _logger.debug(
                "Ignoring duplicate key %r on %s.%s",
                binding.external_key, cls.__name__, binding.attribute,
            )
            continue
        field_map[binding.external_key] = binding
    return field_map


def _coerce(binding: FieldBinding, value: Any) -> Any:
    """Convert a payload value to the binding's declared type."""
    if binding.kind is FieldKind.FILENAME:
        return filename_from_payload(value)

    # JSON numbers and booleans are accepted for plain string fields
    if binding.annotation is str and isinstance(value, (bool, int, float)):
        return str(value)

    return TypeAdapter(binding.annotation).validate_python(value)


def auto_populate_settings(settings: Any, payload: Optional[Mapping[str, Any]]) -> int:
    """Copy matching payload values into a settings object.

    Args:
        settings: Settings instance to update in place
        payload: JSON object received from the host (None means no updates)

    Returns:
        Number of fields assigned

    Raises:
        SettingsTypeError: If a value for a known key cannot be converted.
            Fields assigned before the failing key keep their new values.
    """
    field_map = build_field_map(settings)
    if not payload:
        return 0

    populated = 0
    for key, value in payload.items():
        binding = field_map.get(key)
        if binding is None:
            continue

        try:
            setattr(settings, binding.attribute, _coerce(binding, value))
        except (TypeError, ValueError) as e:
            raise SettingsTypeError(key, binding.attribute, value, str(e)) from e

        populated += 1

    _logger.debug(
        "Populated %d of %d payload keys on %s",
        populated, len(payload), type(settings).__name__,
    )
    return populated
