from music_perception.core.io_utils import scoped_audio

TOOL_NAME = "analyze_youtube"

PROFILES = ("standard", "extended")

TOOL_SPEC = {
    "name": "analyze_youtube",
    "description": "Download audio from YouTube and analyze it. Runs locally to bypass datacenter IP blocking.",
    "inputSchema": {
        "type": "object",
        "properties": {
            "url": {"type": "string", "description": "YouTube URL to analyze"}
        },
        "required": ["url"],
        "additionalProperties": False
    }
}


def run(args: dict, bridge) -> dict:
    url = args["url"]
    spectrogram = bridge.settings.profile.spectrogram

    with scoped_audio(bridge.downloader.download, url) as file_path:
        result = bridge.analysis.analyze(file_path, spectrogram=spectrogram)

    out = {
        "success": True,
        "source": "youtube",
        "url": url,
        "analysis": result.analysis,
    }
    if result.spectrogram:
        out["spectrogram"] = result.spectrogram
    return out
