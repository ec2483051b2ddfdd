"""
Hook Registry

HookRegistry: in-process table mapping hook names to callbacks, built once
when the application is created.

Actions are awaited in registration order; callbacks may be plain functions
or coroutines. Filters are synchronous: each callback receives the value
returned by the previous one and its result replaces it.

Unlike background event hooks, exceptions raised by callbacks propagate to
the caller, because a failed nonce check inside a save handler must abort
the request.
"""

from __future__ import annotations

import inspect
import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class HookRegistry:
    def __init__(self) -> None:
        self._actions: dict[str, list[Callable[..., Any]]] = defaultdict(list)
        self._filters: dict[str, list[Callable[..., Any]]] = defaultdict(list)

    # ── Registration ──────────────────────────────────────────────────────────

    def add_action(self, hook_name: str, callback: Callable[..., Any]) -> None:
        """Subscribe `callback` to the action `hook_name`."""
        self._actions[hook_name].append(callback)
        logger.debug("Action registered: %s -> %s", hook_name, getattr(callback, "__name__", callback))

    def add_filter(self, hook_name: str, callback: Callable[..., Any]) -> None:
        """Subscribe `callback` to the filter `hook_name`."""
        self._filters[hook_name].append(callback)
        logger.debug("Filter registered: %s -> %s", hook_name, getattr(callback, "__name__", callback))

    # ── Lookup ────────────────────────────────────────────────────────────────

    def has_action(self, hook_name: str, callback: Callable[..., Any] | None = None) -> bool:
        if callback is None:
            return bool(self._actions.get(hook_name))
        return callback in self._actions.get(hook_name, [])

    def has_filter(self, hook_name: str, callback: Callable[..., Any] | None = None) -> bool:
        if callback is None:
            return bool(self._filters.get(hook_name))
        return callback in self._filters.get(hook_name, [])

    # ── Dispatch ──────────────────────────────────────────────────────────────

    async def do_action(self, hook_name: str, *args: Any) -> None:
        """
        Run every callback subscribed to `hook_name` with `args`.

        Return values are ignored.
        """
        for callback in self._actions.get(hook_name, []):
            result = callback(*args)
            if inspect.isawaitable(result):
                await result

    def apply_filters(self, hook_name: str, value: Any, *args: Any) -> Any:
        """
        Pass `value` through every callback subscribed to `hook_name`.

        Extra `args` are handed to each callback unchanged.
        """
        for callback in self._filters.get(hook_name, []):
            value = callback(value, *args)
        return value
