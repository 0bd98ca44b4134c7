from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from music_perception.core.bridge import Bridge
from music_perception.core.config import Settings
from music_perception.core.io_utils import to_text

from .loader import load_tools

logger = logging.getLogger(__name__)


def error_envelope(message: str) -> Dict[str, Any]:
    return {"error": True, "message": message}


def _check_args(spec: dict, args: dict) -> Optional[str]:
    schema = spec.get("inputSchema") or {}
    props = schema.get("properties") or {}
    for key in schema.get("required", []):
        v = args.get(key)
        if v is None or (isinstance(v, str) and not v.strip()):
            return f"Missing required input: {key}"
    for key, prop in props.items():
        if key in args and prop.get("type") == "string" and not isinstance(args[key], str):
            return f"Invalid input: {key} must be a string"
    return None


class Dispatcher:
    """Routes tool calls to the handlers enabled for the active profile."""

    def __init__(self, settings: Settings, bridge: Optional[Bridge] = None) -> None:
        self.settings = settings
        self.bridge = bridge or Bridge(settings)
        self.runners, self.specs = load_tools(settings.profile.name)

    def tool_specs(self) -> List[dict]:
        return [self.specs[name] for name in sorted(self.specs)]

    def dispatch(self, tool_name: str, args: dict | None = None) -> dict:
        if args is None:
            args = {}

        if tool_name not in self.runners:
            return error_envelope(f"Unknown tool: {tool_name}")

        if not isinstance(args, dict):
            return error_envelope("Invalid input: arguments must be an object")

        err = _check_args(self.specs[tool_name], args)
        if err:
            return error_envelope(err)

        logger.info(f"Tool call: {tool_name}")
        try:
            result = self.runners[tool_name](args, self.bridge)
        except Exception as e:
            logger.error(f"Tool {tool_name} failed: {e}")
            return error_envelope(str(e))
        logger.info(f"Tool done: {tool_name}")
        return result

    def call(self, tool_name: str, args: dict | None = None) -> List[Dict[str, str]]:
        """Dispatch and wrap the envelope as a single MCP text content block."""
        result = self.dispatch(tool_name, args)
        return [{"type": "text", "text": to_text(result, pretty=(tool_name == "analyze_youtube"))}]
