from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from music_perception.core.errors import LyricsError
from music_perception.core.lrc import parse_synced_lyrics

logger = logging.getLogger(__name__)


@dataclass
class LyricsRecord:
    track_name: str
    artist_name: str
    album_name: Optional[str] = None
    duration: Optional[float] = None
    instrumental: bool = False
    plain_lyrics: Optional[str] = None
    synced_lyrics: Optional[str] = None
    id: Optional[int] = None

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "LyricsRecord":
        return LyricsRecord(
            id=d.get("id"),
            track_name=d.get("trackName") or "",
            artist_name=d.get("artistName") or "",
            album_name=d.get("albumName"),
            duration=d.get("duration"),
            instrumental=bool(d.get("instrumental", False)),
            plain_lyrics=d.get("plainLyrics"),
            synced_lyrics=d.get("syncedLyrics"),
        )

    @property
    def has_synced(self) -> bool:
        return bool(self.synced_lyrics)

    def to_dict(self) -> Dict[str, Any]:
        synced = parse_synced_lyrics(self.synced_lyrics) if self.has_synced else []
        return {
            "track_name": self.track_name,
            "artist_name": self.artist_name,
            "album_name": self.album_name,
            "duration": self.duration,
            "instrumental": self.instrumental,
            "synced": bool(synced),
            "lyrics": synced if synced else (self.plain_lyrics or ""),
        }

    def summary(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "track_name": self.track_name,
            "artist_name": self.artist_name,
            "album_name": self.album_name,
            "duration": self.duration,
            "instrumental": self.instrumental,
            "has_synced": self.has_synced,
        }


class LyricsClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
        user_agent: str = "music-perception-local",
    ) -> None:
        self.base = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {"User-Agent": user_agent}

    def get(self, track_name: str, artist_name: str) -> Optional[LyricsRecord]:
        r = self.session.get(
            f"{self.base}/get",
            params={"track_name": track_name, "artist_name": artist_name},
            headers=self.headers,
            timeout=self.timeout,
        )
        if r.status_code == 404:
            logger.info(f"No lyrics for {artist_name} - {track_name}")
            return None
        if not r.ok:
            raise LyricsError(f"Lyrics lookup failed: {r.status_code}", status_code=r.status_code)
        return LyricsRecord.from_dict(r.json())

    def search(self, query: str) -> List[LyricsRecord]:
        r = self.session.get(
            f"{self.base}/search",
            params={"q": query},
            headers=self.headers,
            timeout=self.timeout,
        )
        if not r.ok:
            raise LyricsError(f"Lyrics search failed: {r.status_code}", status_code=r.status_code)
        data = r.json() or []
        return [LyricsRecord.from_dict(d) for d in data if isinstance(d, dict)]
