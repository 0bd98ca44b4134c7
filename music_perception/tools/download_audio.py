TOOL_NAME = "download_audio"

PROFILES = ("standard", "extended")

TOOL_SPEC = {
    "name": "download_audio",
    "description": "Download audio from YouTube without analysis. Returns local file path.",
    "inputSchema": {
        "type": "object",
        "properties": {
            "url": {"type": "string", "description": "YouTube URL to download"}
        },
        "required": ["url"],
        "additionalProperties": False
    }
}


def run(args: dict, bridge) -> dict:
    url = args["url"]
    file_path = bridge.downloader.download(url)
    return {
        "success": True,
        "url": url,
        "local_path": file_path,
        "message": "Audio downloaded. File will remain until system cleans temp folder.",
    }
