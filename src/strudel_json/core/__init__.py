"""Core definitions for manifest generation.

This package contains the manifest types, the error hierarchy and
schema validation used by the scanner, generator and watcher.
"""

from .errors import (
    GenerationError,
    ManifestValidationError,
    MissingUrlSourceError,
    PathNotDirectoryError,
    PathNotFoundError,
    ScanError,
    WriteFailureError,
)
from .types import MultiPath, SampleEntry, SinglePath, StrudelManifest, UrlSource, sample_entry
from .validator import manifest_errors, validate_manifest

__all__ = [
    "GenerationError",
    "ManifestValidationError",
    "MissingUrlSourceError",
    "MultiPath",
    "PathNotDirectoryError",
    "PathNotFoundError",
    "SampleEntry",
    "ScanError",
    "SinglePath",
    "StrudelManifest",
    "UrlSource",
    "WriteFailureError",
    "sample_entry",
    "validate_manifest",
    "manifest_errors",
]
