"""strudel-json - sample manifest generator for Strudel.

This package scans a directory of audio sample folders and writes a
strudel.json manifest mapping each folder to its audio files, relative to a
base URL the samples are served from. Watch mode keeps the manifest current
as the library changes.
"""

__version__ = "1.0.0"

# Core library interface
from .core import (
    GenerationError,
    ManifestValidationError,
    MissingUrlSourceError,
    MultiPath,
    PathNotDirectoryError,
    PathNotFoundError,
    ScanError,
    SinglePath,
    StrudelManifest,
    UrlSource,
    WriteFailureError,
    validate_manifest,
)
from .generator import build_manifest, generate_strudel_json, serialize_manifest
from .scanner import scan_samples, validate_root
from .watcher import Debouncer, watch

__all__ = [
    # Primary library interface
    "generate_strudel_json",
    "watch",
    "UrlSource",
    # Building blocks
    "build_manifest",
    "serialize_manifest",
    "scan_samples",
    "validate_root",
    "validate_manifest",
    "Debouncer",
    "SinglePath",
    "MultiPath",
    "StrudelManifest",
    # Errors
    "GenerationError",
    "PathNotFoundError",
    "PathNotDirectoryError",
    "MissingUrlSourceError",
    "ScanError",
    "WriteFailureError",
    "ManifestValidationError",
]
