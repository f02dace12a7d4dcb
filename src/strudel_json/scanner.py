"""Directory scanning and sample collection.

This module walks the root directory exactly two levels deep: each
immediate subdirectory is a sample folder, and the audio files directly
inside it are its samples.
"""

import os
import sys
from pathlib import Path

from .config import AUDIO_EXTENSIONS
from .core.errors import PathNotDirectoryError, PathNotFoundError, ScanError
from .core.types import SampleEntry, sample_entry


def validate_root(root_path: Path) -> None:
    """Validate that the root path exists and is a directory.

    Args:
        root_path: Directory to scan

    Raises:
        PathNotFoundError: If the path does not exist
        PathNotDirectoryError: If the path is not a directory
    """
    if not root_path.exists():
        raise PathNotFoundError(root_path)

    if not root_path.is_dir():
        raise PathNotDirectoryError(root_path)


def display_name(name: str) -> str:
    """Return a file name as valid UTF-8 text for the manifest.

    Undecodable bytes (surrogate-escaped by the OS layer) become U+FFFD.
    """
    return os.fsencode(name).decode("utf-8", "replace")


def is_audio_file(filename: str) -> bool:
    """Check a file name against the recognized audio extensions (case-insensitive)."""
    return os.path.splitext(filename)[1].lower() in AUDIO_EXTENSIONS


def scan_folder(folder_path: Path) -> list[str]:
    """Collect the audio files directly inside a sample folder.

    Nested directories are not descended into.

    Args:
        folder_path: Absolute path of the sample folder

    Returns:
        Paths of the form "<folder>/<file>", in listing order

    Raises:
        OSError: If the folder cannot be listed
    """
    folder_name = display_name(folder_path.name)
    paths: list[str] = []

    with os.scandir(folder_path) as entries:
        for entry in entries:
            if not entry.is_file(follow_symlinks=False):
                continue

            if is_audio_file(entry.name):
                # Forward slash regardless of host: these are URL-relative
                paths.append(f"{folder_name}/{display_name(entry.name)}")

    return paths


def scan_samples(root_path: Path) -> dict[str, SampleEntry]:
    """Scan the immediate subdirectories of root_path for audio files.

    Folders without audio files are omitted. Folders that cannot be listed
    are reported on stderr and skipped.

    Args:
        root_path: Directory containing the sample folders

    Returns:
        Sample entries keyed by folder name, in listing order

    Raises:
        ScanError: If the root directory itself cannot be listed
    """
    samples: dict[str, SampleEntry] = {}

    try:
        with os.scandir(root_path) as it:
            folders = [entry for entry in it if entry.is_dir(follow_symlinks=False)]
    except OSError as e:
        raise ScanError(f"Error scanning directory {root_path}: {e}") from e

    for folder in folders:
        folder_path = root_path / folder.name

        try:
            paths = scan_folder(folder_path)
        except OSError as e:
            print(f"Error: Failed to scan directory {folder_path}: {e}", file=sys.stderr)
            continue

        entry = sample_entry(paths)
        if entry is not None:
            samples[display_name(folder.name)] = entry

    return samples
