"""Exceptions raised while generating a strudel.json manifest."""

from pathlib import Path


class GenerationError(Exception):
    """Base class for failures that abort a generation attempt."""


class PathNotFoundError(GenerationError):
    """The root path does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"The specified path '{path}' does not exist.")


class PathNotDirectoryError(GenerationError):
    """The root path exists but is not a directory."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"The specified path '{path}' is not a directory.")


class MissingUrlSourceError(GenerationError):
    """Neither a base URL nor a complete GitHub user/repo pair was given."""

    def __init__(self) -> None:
        super().__init__("Either --base-url or both --username and --repo must be provided.")


class ScanError(GenerationError):
    """Listing the root directory failed."""


class WriteFailureError(GenerationError):
    """Writing the manifest file failed."""


class ManifestValidationError(GenerationError):
    """The generated manifest does not conform to the JSON Schema."""
