from __future__ import annotations
import re
from typing import Any, Dict, List

LRC_LINE = re.compile(r"^\[(\d{2}):(\d{2})\.(\d{2})\](.*)$")


def parse_synced_lyrics(text: str | None) -> List[Dict[str, Any]]:
    """
    Parse LRC text into [{"time": seconds, "text": line}, ...].
    Lines that are not "[MM:SS.CC] text" are skipped. Order is kept as-is.
    """
    out: List[Dict[str, Any]] = []
    for line in (text or "").splitlines():
        m = LRC_LINE.match(line.strip())
        if not m:
            continue
        minutes, seconds, centis, rest = m.groups()
        t = int(minutes) * 60 + int(seconds) + int(centis) / 100
        out.append({"time": round(t, 2), "text": rest.strip()})
    return out
