"""
Script-call bridge.

Lets any transport (a local HTTP handler, a test harness, a message queue)
invoke named server-side functions with a JSON argument list and get back a
JSON-compatible envelope:

    {"ok": True, "result": ...}
    {"ok": False, "error": "..."}

Functions must be registered explicitly; nothing is looked up by attribute
access. Errors raised by a function are turned into error envelopes here, at
the boundary, so the transport never sees an exception.
"""

import json
from typing import Any, Callable, Dict, List, Optional, Sequence

from sheetlite.spreadsheet.model import Range, Sheet
from sheetlite.utils.logging import get_logger

logger = get_logger(__name__)


class ScriptBridge:
    """Registry of callable functions exposed to a client.

    Usage::

        bridge = ScriptBridge()

        @bridge.expose
        def get_seats():
            return client.get_sheet_by_name("2026_02").get_data_range().get_values()

        bridge.call("get_seats", [])
    """

    def __init__(self) -> None:
        self._functions: Dict[str, Callable[..., Any]] = {}

    def register(self, name: str, function: Callable[..., Any]) -> None:
        """Expose a function under a name.

        Raises:
            ValueError: If the name is already registered
        """
        if name in self._functions:
            raise ValueError(f"Function already registered: {name!r}")
        self._functions[name] = function

    def expose(
        self, function: Optional[Callable[..., Any]] = None, *, name: Optional[str] = None
    ) -> Any:
        """Decorator form of ``register``; defaults to the function's own name."""

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self.register(name or fn.__name__, fn)
            return fn

        if function is not None:
            return decorator(function)
        return decorator

    def names(self) -> List[str]:
        return sorted(self._functions)

    def call(self, name: str, args: Optional[Sequence[Any]] = None) -> Dict[str, Any]:
        """Invoke a registered function and wrap its outcome in an envelope.

        Args:
            name: The registered function name
            args: Positional arguments (JSON-compatible values)

        Returns:
            ``{"ok": True, "result": ...}`` or ``{"ok": False, "error": "..."}``
        """
        function = self._functions.get(name)
        if function is None:
            return {"ok": False, "error": f'Server function "{name}" not found.'}

        try:
            result = function(*(args or ()))
        except Exception as e:
            logger.warning("Bridge call %s failed: %s", name, e)
            return {"ok": False, "error": f"{type(e).__name__}: {e}"}

        logger.debug("Bridge call %s succeeded", name)
        return {"ok": True, "result": to_json_compatible(result)}

    def call_json(self, payload: str) -> str:
        """Decode a ``{"function": ..., "args": [...]}`` request and encode the envelope."""
        try:
            request = json.loads(payload)
        except ValueError as e:
            return json.dumps({"ok": False, "error": f"Invalid JSON: {e}"})

        if not isinstance(request, dict) or not isinstance(request.get("function"), str):
            return json.dumps({"ok": False, "error": "Request must name a 'function'"})
        args = request.get("args", [])
        if not isinstance(args, list):
            return json.dumps({"ok": False, "error": "'args' must be a list"})

        envelope = self.call(request["function"], args)
        try:
            return json.dumps(envelope)
        except (TypeError, ValueError) as e:
            return json.dumps({"ok": False, "error": f"Result is not JSON-serializable: {e}"})


def to_json_compatible(value: Any) -> Any:
    """Convert facade objects in a result to plain data.

    Sheets become their names and Ranges their A1 notation; lists, tuples and
    dicts are converted recursively. Other values pass through unchanged.
    """
    if isinstance(value, Sheet):
        return value.get_name()
    if isinstance(value, Range):
        return value.get_a1_notation()
    if isinstance(value, (list, tuple)):
        return [to_json_compatible(item) for item in value]
    if isinstance(value, dict):
        return {str(key): to_json_compatible(item) for key, item in value.items()}
    return value
