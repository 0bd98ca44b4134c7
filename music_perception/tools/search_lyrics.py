TOOL_NAME = "search_lyrics"

PROFILES = ("extended",)

TOOL_SPEC = {
    "name": "search_lyrics",
    "description": "Search LRCLIB for tracks matching a free-text query (title, artist or lyric fragment).",
    "inputSchema": {
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "Search text"}
        },
        "required": ["query"],
        "additionalProperties": False
    }
}


def run(args: dict, bridge) -> dict:
    query = args["query"]
    records = bridge.lyrics.search(query)
    return {
        "success": True,
        "found": bool(records),
        "query": query,
        "count": len(records),
        "results": [r.summary() for r in records],
    }
