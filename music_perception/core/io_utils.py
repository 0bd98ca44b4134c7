from __future__ import annotations
import json
import logging
import os
import tempfile
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterator, Optional

logger = logging.getLogger(__name__)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def new_audio_path(temp_dir: Optional[str] = None) -> str:
    return os.path.join(temp_dir or tempfile.gettempdir(), f"ytdl-{uuid.uuid4()}.mp3")


def remove_quietly(path: Optional[str]) -> None:
    if not path:
        return
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not remove temp file {path}: {e}")


@contextmanager
def scoped_audio(fetch: Callable[[str], str], url: str) -> Iterator[str]:
    """
    Download via fetch(url) and remove the file on every exit path.
    Deletion errors are logged, never raised.
    """
    path = fetch(url)
    try:
        yield path
    finally:
        remove_quietly(path)


def to_text(obj: Dict[str, Any], pretty: bool = False) -> str:
    if pretty:
        return json.dumps(obj, ensure_ascii=False, indent=2)
    return json.dumps(obj, ensure_ascii=False)
