from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


def env(key: str, default: str | None = None) -> str | None:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()


# --- Remote endpoints ---
DEFAULT_HF_SPACE_URL = "https://YOUR-USERNAME-audio-analysis-api.hf.space"
DEFAULT_LYRICS_API_URL = "https://lrclib.net/api"


@dataclass(frozen=True)
class Profile:
    """One of the two bridge process variants."""

    name: str
    service: str
    version: str
    capabilities: Tuple[str, ...]
    spectrogram: bool = False
    lyrics: bool = False


PROFILES: Dict[str, Profile] = {
    "standard": Profile(
        name="standard",
        service="music-perception-local",
        version="1.0.0",
        capabilities=("youtube_download", "audio_analysis"),
    ),
    "extended": Profile(
        name="extended",
        service="music-perception-extended",
        version="1.1.0",
        capabilities=("youtube_download", "audio_analysis", "spectrogram", "lyrics"),
        spectrogram=True,
        lyrics=True,
    ),
}

DEFAULT_PROFILE = "standard"


def get_profile(name: str | None) -> Profile:
    key = (name or DEFAULT_PROFILE).strip().lower()
    if key not in PROFILES:
        raise ValueError(f"Unknown profile: {name}. Supported: {sorted(PROFILES)}")
    return PROFILES[key]


@dataclass(frozen=True)
class Settings:
    profile: Profile = field(default_factory=lambda: PROFILES[DEFAULT_PROFILE])
    hf_space_url: str = DEFAULT_HF_SPACE_URL
    lyrics_api_url: str = DEFAULT_LYRICS_API_URL
    ytdlp_binary: str = "yt-dlp"
    ffmpeg_location: Optional[str] = None
    temp_dir: Optional[str] = None
    fn_index: int = 0
    request_timeout: float = 300.0
    lyrics_timeout: float = 15.0
    log_level: str = "INFO"

    @property
    def service(self) -> str:
        return self.profile.service

    @property
    def version(self) -> str:
        return self.profile.version

    @classmethod
    def from_env(cls, profile: str | None = None) -> "Settings":
        prof = get_profile(profile or env("MCP_PROFILE", DEFAULT_PROFILE))
        # ffmpeg pinning only applies to the extended bridge
        ffmpeg = env("FFMPEG_LOCATION") if prof.name == "extended" else None
        return cls(
            profile=prof,
            hf_space_url=(env("HF_SPACE_URL", DEFAULT_HF_SPACE_URL) or "").rstrip("/"),
            lyrics_api_url=(env("LYRICS_API_URL", DEFAULT_LYRICS_API_URL) or "").rstrip("/"),
            ytdlp_binary=env("YTDLP_BINARY", "yt-dlp") or "yt-dlp",
            ffmpeg_location=ffmpeg,
            temp_dir=env("AUDIO_TEMP_DIR"),
            fn_index=int(env("ANALYSIS_FN_INDEX", "0") or "0"),
            request_timeout=float(env("REQUEST_TIMEOUT_SEC", "300") or "300"),
            lyrics_timeout=float(env("LYRICS_TIMEOUT_SEC", "15") or "15"),
            log_level=(env("LOG_LEVEL", "INFO") or "INFO").upper(),
        )
