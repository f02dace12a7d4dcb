"""Shared fixtures for strudel-json tests."""

from pathlib import Path

import pytest


def _make_files(root: Path, *relative_paths: str) -> None:
    """Create empty files (and their parent folders) under root."""
    for relative in relative_paths:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()


@pytest.fixture
def sample_root(tmp_path: Path) -> Path:
    """A sample library with a mix of folders and files."""
    root = tmp_path / "samples"
    root.mkdir()
    _make_files(
        root,
        "kick/kick.wav",
        "snare/snare_02.wav",
        "snare/snare_01.WAV",
        "snare/snare_03.flac",
        "snare/notes.txt",
        "empty/readme.md",
        "README.md",
    )
    return root


@pytest.fixture
def make_files():
    """Helper that creates empty files under a root directory."""
    return _make_files
