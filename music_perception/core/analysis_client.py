from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from music_perception.core.errors import AnalysisError

logger = logging.getLogger(__name__)


@dataclass
class PredictRequest:
    file_ref: Any
    fn_index: int = 0
    spectrogram: bool = False

    def to_dict(self) -> Dict[str, Any]:
        # positional Gradio inputs: (audio file, youtube url[, visualize])
        data: List[Any] = [self.file_ref, None]
        if self.spectrogram:
            data.append(True)
        return {"fn_index": self.fn_index, "data": data}


@dataclass
class PredictResponse:
    analysis: Any
    spectrogram: Optional[str] = None

    @staticmethod
    def from_dict(d: Any) -> "PredictResponse":
        data = d.get("data") if isinstance(d, dict) else None
        if not isinstance(data, list) or not data:
            return PredictResponse(analysis=d)
        spectrogram = data[1] if len(data) > 1 and data[1] else None
        return PredictResponse(analysis=data[0] if data[0] is not None else d, spectrogram=spectrogram)


class AnalysisClient:
    """Two-step upload/predict client for the hosted Gradio analysis app."""

    def __init__(
        self,
        base_url: str,
        fn_index: int = 0,
        timeout: float = 300.0,
        session: Optional[requests.Session] = None,
        user_agent: str = "music-perception-local",
    ) -> None:
        self.base = base_url.rstrip("/")
        self.fn_index = fn_index
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {"User-Agent": user_agent}

    def upload(self, file_path: str) -> Any:
        url = f"{self.base}/upload"
        with open(file_path, "rb") as fh:
            files = {"files": ("audio.mp3", fh, "audio/mpeg")}
            r = self.session.post(url, files=files, headers=self.headers, timeout=self.timeout)
        if not r.ok:
            raise AnalysisError(f"Upload failed: {r.status_code}", status_code=r.status_code)

        refs = r.json()
        if not isinstance(refs, list) or not refs:
            raise AnalysisError("Upload failed: no file reference returned", status_code=r.status_code)
        logger.info(f"Uploaded {os.path.basename(file_path)} -> {refs[0]}")
        return refs[0]

    def predict(self, req: PredictRequest) -> PredictResponse:
        url = f"{self.base}/api/predict"
        r = self.session.post(url, json=req.to_dict(), headers=self.headers, timeout=self.timeout)
        if not r.ok:
            raise AnalysisError(f"Analysis failed: {r.status_code}", status_code=r.status_code)
        return PredictResponse.from_dict(r.json())

    def analyze(self, file_path: str, spectrogram: bool = False) -> PredictResponse:
        ref = self.upload(file_path)
        return self.predict(PredictRequest(file_ref=ref, fn_index=self.fn_index, spectrogram=spectrogram))
