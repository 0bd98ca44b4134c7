from music_perception.core.io_utils import utc_now_iso

TOOL_NAME = "ping"

PROFILES = ("standard", "extended")

TOOL_SPEC = {
    "name": "ping",
    "description": "Check if the local MCP is running",
    "inputSchema": {
        "type": "object",
        "properties": {},
        "additionalProperties": False
    }
}


def run(args: dict, bridge) -> dict:
    s = bridge.settings
    return {
        "success": True,
        "status": "alive",
        "service": s.service,
        "version": s.version,
        "capabilities": list(s.profile.capabilities),
        "hf_space": s.hf_space_url,
        "ts": utc_now_iso(),
    }
