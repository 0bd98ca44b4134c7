from __future__ import annotations
from typing import Optional

from music_perception.core.analysis_client import AnalysisClient
from music_perception.core.config import Settings
from music_perception.core.downloader import YtDlpDownloader
from music_perception.core.lyrics_client import LyricsClient


class Bridge:
    """External collaborators for one bridge process, built from Settings."""

    def __init__(
        self,
        settings: Settings,
        downloader: Optional[YtDlpDownloader] = None,
        analysis: Optional[AnalysisClient] = None,
        lyrics: Optional[LyricsClient] = None,
    ) -> None:
        self.settings = settings
        self.downloader = downloader or YtDlpDownloader(
            binary=settings.ytdlp_binary,
            ffmpeg_location=settings.ffmpeg_location,
            temp_dir=settings.temp_dir,
        )
        self.analysis = analysis or AnalysisClient(
            settings.hf_space_url,
            fn_index=settings.fn_index,
            timeout=settings.request_timeout,
            user_agent=settings.service,
        )
        self.lyrics = lyrics or LyricsClient(
            settings.lyrics_api_url,
            timeout=settings.lyrics_timeout,
            user_agent=f"{settings.service}/{settings.version}",
        )
