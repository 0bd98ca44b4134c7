from __future__ import annotations
from typing import Optional


class BridgeError(RuntimeError):
    """Base class for failures talking to an external collaborator."""


class DownloadError(BridgeError):
    pass


class AnalysisError(BridgeError):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class LyricsError(BridgeError):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
