TOOL_NAME = "get_lyrics"

PROFILES = ("extended",)

TOOL_SPEC = {
    "name": "get_lyrics",
    "description": "Get lyrics for a track from LRCLIB. Returns time-synced lines when available, plain text otherwise.",
    "inputSchema": {
        "type": "object",
        "properties": {
            "track_name": {"type": "string", "description": "Song title"},
            "artist_name": {"type": "string", "description": "Artist name"}
        },
        "required": ["track_name", "artist_name"],
        "additionalProperties": False
    }
}


def run(args: dict, bridge) -> dict:
    track = args["track_name"]
    artist = args["artist_name"]

    record = bridge.lyrics.get(track, artist)
    if record is None:
        return {"success": True, "found": False, "track_name": track, "artist_name": artist}

    return {"success": True, "found": True, **record.to_dict()}
