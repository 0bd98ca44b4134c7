"""Shared fixtures: settings per profile and a Bridge with faked collaborators."""

from unittest.mock import MagicMock

import pytest

from music_perception.core.bridge import Bridge
from music_perception.core.config import PROFILES, Settings


def _mock_response(status_code: int, json_data=None, text: str = ""):
    """Create a mock requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.json.return_value = json_data
    resp.text = text
    return resp


@pytest.fixture
def mock_response():
    return _mock_response


@pytest.fixture
def standard_settings(tmp_path):
    return Settings(profile=PROFILES["standard"], hf_space_url="https://space.test", temp_dir=str(tmp_path))


@pytest.fixture
def extended_settings(tmp_path):
    return Settings(profile=PROFILES["extended"], hf_space_url="https://space.test", temp_dir=str(tmp_path))


@pytest.fixture
def fake_bridge_factory():
    """Build a Bridge whose downloader, analysis and lyrics clients are MagicMocks."""

    def _make(settings):
        return Bridge(
            settings,
            downloader=MagicMock(),
            analysis=MagicMock(),
            lyrics=MagicMock(),
        )

    return _make
