"""Manifest generation.

This module builds the strudel.json manifest for a sample directory and
writes it to the root of that directory.
"""

import json
import sys
from pathlib import Path

from .config import BASE_KEY, JSON_INDENT, MANIFEST_FILENAME
from .core.errors import ManifestValidationError, WriteFailureError
from .core.types import StrudelManifest, UrlSource
from .core.validator import manifest_errors
from .scanner import scan_samples, validate_root


def build_manifest(root_path: Path, url_source: UrlSource) -> StrudelManifest:
    """Build the manifest for a sample directory without writing it.

    Args:
        root_path: Directory containing the sample folders
        url_source: Where the base URL comes from

    Returns:
        Manifest with "_base" first, then folders in listing order

    Raises:
        PathNotFoundError: If root_path does not exist
        PathNotDirectoryError: If root_path is not a directory
        MissingUrlSourceError: If no base URL can be resolved
        ScanError: If root_path cannot be listed
    """
    validate_root(root_path)

    manifest: StrudelManifest = {BASE_KEY: url_source.resolve()}

    for folder_name, entry in scan_samples(root_path).items():
        if folder_name == BASE_KEY:
            print(f"Warning: Skipping folder '{folder_name}': name is reserved.", file=sys.stderr)
            continue
        manifest[folder_name] = entry.to_json_value()

    if len(manifest) == 1:
        print(
            "Warning: No audio files found in the subdirectories of the specified path.",
            file=sys.stderr,
        )

    return manifest


def serialize_manifest(manifest: StrudelManifest) -> str:
    """Serialize a manifest with 4-space indentation and a trailing newline."""
    return json.dumps(manifest, indent=JSON_INDENT, ensure_ascii=False) + "\n"


def write_manifest(root_path: Path, manifest: StrudelManifest) -> Path:
    """Validate a manifest and write it to root_path, replacing any existing file.

    Returns:
        Path of the written manifest

    Raises:
        ManifestValidationError: If the manifest does not match the schema
        WriteFailureError: If the file cannot be written
    """
    errors = manifest_errors(manifest)
    if errors:
        raise ManifestValidationError("Manifest validation failed:\n" + "\n".join(errors))

    output_path = root_path / MANIFEST_FILENAME

    # Fully encoded before the existing file is truncated
    try:
        data = serialize_manifest(manifest).encode("utf-8")
    except UnicodeEncodeError as e:
        raise WriteFailureError(f"Error encoding {output_path}: {e}") from e

    try:
        with output_path.open("wb") as f:
            f.write(data)
    except OSError as e:
        raise WriteFailureError(f"Error writing to file {output_path}: {e}") from e

    return output_path


def generate_strudel_json(root_path: Path, url_source: UrlSource) -> Path:
    """Scan a sample directory and write its strudel.json.

    Args:
        root_path: Directory containing the sample folders
        url_source: Where the base URL comes from

    Returns:
        Path of the written manifest

    Raises:
        GenerationError: If any step fails; nothing is written in that case
    """
    root_path_abs = root_path.resolve()

    print(f"Scanning directory: {root_path_abs}", file=sys.stderr)
    manifest = build_manifest(root_path_abs, url_source)
    output_path = write_manifest(root_path_abs, manifest)

    print(f"Successfully generated '{MANIFEST_FILENAME}' inside '{root_path_abs}'", file=sys.stderr)
    return output_path
