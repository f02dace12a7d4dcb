"""Tests for the command-line interface."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from strudel_json import __version__
from strudel_json.cli import main


class TestMain:
    """Test argument handling and exit codes."""

    def test_generates_with_base_url(self, sample_root: Path) -> None:
        main(["--path", str(sample_root), "--base-url", "https://example.com/samples"])

        manifest = json.loads((sample_root / "strudel.json").read_text(encoding="utf-8"))
        assert manifest["_base"] == "https://example.com/samples/"
        assert manifest["kick"] == "kick/kick.wav"

    def test_generates_with_github(self, sample_root: Path) -> None:
        main(["-p", str(sample_root), "-u", "alice", "-r", "kit", "-b", "samples"])

        manifest = json.loads((sample_root / "strudel.json").read_text(encoding="utf-8"))
        assert manifest["_base"] == "https://raw.githubusercontent.com/alice/kit/samples/"

    def test_missing_url_source(
        self, sample_root: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that no URL source is a usage error before any work."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--path", str(sample_root), "--username", "alice"])

        assert exc_info.value.code == 1
        assert "--base-url" in capsys.readouterr().err
        assert not (sample_root / "strudel.json").exists()

    def test_missing_path(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--path", str(tmp_path / "missing"), "--base-url", "https://example.com"])

        assert exc_info.value.code == 1
        assert "does not exist" in capsys.readouterr().err

    def test_path_is_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        file_path = tmp_path / "kick.wav"
        file_path.touch()

        with pytest.raises(SystemExit) as exc_info:
            main(["--path", str(file_path), "--base-url", "https://example.com"])

        assert exc_info.value.code == 1
        assert "is not a directory" in capsys.readouterr().err

    def test_path_required(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--base-url", "https://example.com"])

        assert exc_info.value.code == 2

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_watch_flag_dispatches(self, sample_root: Path) -> None:
        with patch("strudel_json.cli.watch") as mock_watch:
            main(["--path", str(sample_root), "--base-url", "https://example.com", "--watch"])

        mock_watch.assert_called_once()
        path, url_source = mock_watch.call_args.args
        assert path == Path(str(sample_root))
        assert url_source.resolve() == "https://example.com/"
        assert not (sample_root / "strudel.json").exists()
