from __future__ import annotations
import logging
import os
import subprocess
from typing import List, Optional

from music_perception.core.errors import DownloadError
from music_perception.core.io_utils import new_audio_path, remove_quietly

logger = logging.getLogger(__name__)

AUDIO_FORMAT = "mp3"
AUDIO_QUALITY = "192K"
MAX_FILESIZE = "50M"


class YtDlpDownloader:
    """Runs yt-dlp once per URL and returns the local mp3 path."""

    def __init__(
        self,
        binary: str = "yt-dlp",
        ffmpeg_location: Optional[str] = None,
        temp_dir: Optional[str] = None,
    ) -> None:
        self.binary = binary
        self.ffmpeg_location = ffmpeg_location
        self.temp_dir = temp_dir

    def build_args(self, url: str, output_path: str) -> List[str]:
        args = [
            self.binary,
            "-x",
            "--audio-format", AUDIO_FORMAT,
            "--audio-quality", AUDIO_QUALITY,
            "-o", output_path,
            "--no-playlist",
            "--max-filesize", MAX_FILESIZE,
        ]
        if self.ffmpeg_location:
            args += ["--ffmpeg-location", self.ffmpeg_location]
        # "--" so a url starting with "-" is never read as an option
        args += ["--", url]
        return args

    def download(self, url: str) -> str:
        output_path = new_audio_path(self.temp_dir)
        args = self.build_args(url, output_path)
        logger.info(f"yt-dlp start url={url} out={output_path}")

        try:
            proc = subprocess.run(args, capture_output=True, text=True)
        except OSError as e:
            raise DownloadError(f"Failed to spawn yt-dlp: {e}. Is yt-dlp installed?") from e

        # exit 0 alone is not enough: yt-dlp skips oversized files without failing
        if proc.returncode == 0 and os.path.exists(output_path):
            logger.info(f"yt-dlp done out={output_path}")
            return output_path

        remove_quietly(output_path)
        stderr = (proc.stderr or "").strip()
        raise DownloadError(f"yt-dlp failed (code {proc.returncode}): {stderr}")
