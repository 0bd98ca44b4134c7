"""Unit tests for the yt-dlp subprocess wrapper."""

import os
import subprocess
from unittest.mock import patch

import pytest

from music_perception.core.downloader import YtDlpDownloader
from music_perception.core.errors import DownloadError

URL = "https://www.youtube.com/watch?v=abc123"


def _output_path(args):
    return args[args.index("-o") + 1]


def _completed(args, returncode=0, stderr=""):
    return subprocess.CompletedProcess(args, returncode, stdout="", stderr=stderr)


class TestBuildArgs:
    def test_fixed_arguments(self, tmp_path):
        d = YtDlpDownloader(temp_dir=str(tmp_path))
        args = d.build_args(URL, "/tmp/out.mp3")

        assert args == [
            "yt-dlp", "-x",
            "--audio-format", "mp3",
            "--audio-quality", "192K",
            "-o", "/tmp/out.mp3",
            "--no-playlist",
            "--max-filesize", "50M",
            "--", URL,
        ]

    def test_ffmpeg_location_pinned(self):
        d = YtDlpDownloader(ffmpeg_location="/opt/ffmpeg/bin")
        args = d.build_args(URL, "/tmp/out.mp3")

        i = args.index("--ffmpeg-location")
        assert args[i + 1] == "/opt/ffmpeg/bin"
        assert args.index("--") > i
        assert args[-1] == URL

    def test_option_like_url_is_not_an_option(self):
        evil = "--exec=touch /tmp/pwned"
        args = YtDlpDownloader().build_args(evil, "/tmp/out.mp3")

        assert args[-2:] == ["--", evil]
        assert args.count(evil) == 1


class TestDownload:
    @patch("music_perception.core.downloader.subprocess.run")
    def test_success_returns_existing_file(self, mock_run, tmp_path):
        def _fake_run(args, **kwargs):
            with open(_output_path(args), "wb") as f:
                f.write(b"ID3")
            return _completed(args)

        mock_run.side_effect = _fake_run
        path = YtDlpDownloader(temp_dir=str(tmp_path)).download(URL)

        assert os.path.exists(path)
        assert os.path.dirname(path) == str(tmp_path)
        assert os.path.basename(path).startswith("ytdl-")
        assert path.endswith(".mp3")

    @patch("music_perception.core.downloader.subprocess.run")
    def test_unique_paths_per_call(self, mock_run, tmp_path):
        def _fake_run(args, **kwargs):
            open(_output_path(args), "wb").close()
            return _completed(args)

        mock_run.side_effect = _fake_run
        d = YtDlpDownloader(temp_dir=str(tmp_path))

        assert d.download(URL) != d.download(URL)

    @patch("music_perception.core.downloader.subprocess.run")
    def test_exit_zero_without_file_fails(self, mock_run, tmp_path):
        mock_run.side_effect = lambda args, **kw: _completed(args, 0, stderr="File is larger than max-filesize")

        with pytest.raises(DownloadError) as exc:
            YtDlpDownloader(temp_dir=str(tmp_path)).download(URL)

        assert "code 0" in str(exc.value)
        assert "max-filesize" in str(exc.value)

    @patch("music_perception.core.downloader.subprocess.run")
    def test_nonzero_exit_includes_code_and_stderr(self, mock_run, tmp_path):
        mock_run.side_effect = lambda args, **kw: _completed(args, 1, stderr="ERROR: Video unavailable")

        with pytest.raises(DownloadError) as exc:
            YtDlpDownloader(temp_dir=str(tmp_path)).download(URL)

        assert "code 1" in str(exc.value)
        assert "Video unavailable" in str(exc.value)

    @patch("music_perception.core.downloader.subprocess.run")
    def test_partial_file_removed_on_failure(self, mock_run, tmp_path):
        def _fake_run(args, **kwargs):
            open(_output_path(args), "wb").close()
            return _completed(args, 2, stderr="boom")

        mock_run.side_effect = _fake_run

        with pytest.raises(DownloadError):
            YtDlpDownloader(temp_dir=str(tmp_path)).download(URL)

        assert list(tmp_path.iterdir()) == []

    @patch("music_perception.core.downloader.subprocess.run")
    def test_spawn_failure(self, mock_run, tmp_path):
        mock_run.side_effect = FileNotFoundError("No such file or directory: 'yt-dlp'")

        with pytest.raises(DownloadError) as exc:
            YtDlpDownloader(temp_dir=str(tmp_path)).download(URL)

        assert "Failed to spawn yt-dlp" in str(exc.value)
        assert "Is yt-dlp installed?" in str(exc.value)
