"""Explicit registration of plugin actions.

Each action class registers itself under the action id declared in the
plugin manifest, usually at import time::

    @plugin_action("com.example.counter")
    class CounterAction:
        ...

The host bootstrap then reads ``registered_actions()`` to route events.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple, TypeVar

T = TypeVar("T", bound=type)


@dataclass(frozen=True)
class PluginActionId:
    """An action id and the class that handles it."""
    action_id: str
    action_type: type

    def __repr__(self) -> str:
        return f"PluginActionId(action_id={self.action_id!r}, action_type={self.action_type.__name__})"


class ActionRegistry:
    """Ordered registry of plugin actions keyed by action id."""

    def __init__(self) -> None:
        self._actions: Dict[str, PluginActionId] = {}

    def add(self, action_id: str, action_type: type) -> PluginActionId:
        """Register ``action_type`` under ``action_id``.

        Raises:
            ValueError: If the id is empty or already registered
        """
        if not action_id:
            raise ValueError("action_id must be a non-empty string")
        if action_id in self._actions:
            existing = self._actions[action_id].action_type.__name__
            raise ValueError(f"Action {action_id!r} is already registered to {existing}")

        entry = PluginActionId(action_id, action_type)
        self._actions[action_id] = entry
        return entry

    def register(self, action_id: str) -> Callable[[T], T]:
        """Class decorator form of ``add``."""
        def decorator(cls: T) -> T:
            self.add(action_id, cls)
            return cls
        return decorator

    def get(self, action_id: str) -> Optional[PluginActionId]:
        return self._actions.get(action_id)

    def actions(self) -> Tuple[PluginActionId, ...]:
        """All registered actions in registration order."""
        return tuple(self._actions.values())

    def __len__(self) -> int:
        return len(self._actions)

    def __contains__(self, action_id: object) -> bool:
        return action_id in self._actions


default_registry = ActionRegistry()


def plugin_action(action_id: str) -> Callable[[T], T]:
    """Register a class on the default registry."""
    return default_registry.register(action_id)


def registered_actions() -> Tuple[PluginActionId, ...]:
    """Actions registered on the default registry."""
    return default_registry.actions()
