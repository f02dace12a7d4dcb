"""Type definitions for strudel.json manifests.

This module defines the sample entry union and the URL source used to
build the manifest structure described by schemas/strudel.schema.json.
"""

from dataclasses import dataclass

from ..config import DEFAULT_BRANCH, GITHUB_RAW_URL
from .errors import MissingUrlSourceError

# Maps "_base" to the base URL and each sample folder to one path or a list of paths
StrudelManifest = dict[str, str | list[str]]


@dataclass(frozen=True)
class SinglePath:
    """Folder containing exactly one audio file."""

    path: str

    def to_json_value(self) -> str:
        return self.path


@dataclass(frozen=True)
class MultiPath:
    """Folder containing several audio files, kept in ascending order."""

    paths: tuple[str, ...]

    def to_json_value(self) -> list[str]:
        return sorted(self.paths)


SampleEntry = SinglePath | MultiPath


def sample_entry(paths: list[str]) -> SampleEntry | None:
    """Build the entry for a folder from its matching relative paths.

    Args:
        paths: Relative paths of the audio files found in the folder

    Returns:
        None for no paths, SinglePath for one, MultiPath (sorted) for more
    """
    if not paths:
        return None
    if len(paths) == 1:
        return SinglePath(paths[0])
    return MultiPath(tuple(sorted(paths)))


@dataclass
class UrlSource:
    """Where the manifest's base URL comes from.

    Either an explicit base URL, or GitHub coordinates from which a
    raw.githubusercontent.com URL is derived. The explicit URL wins when both
    are present.

    Attributes:
        base_url: Full base URL for the samples
        github_user: GitHub user or organization
        github_repo: GitHub repository name
        github_branch: Branch name (defaults to "main")
    """

    base_url: str | None = None
    github_user: str | None = None
    github_repo: str | None = None
    github_branch: str = DEFAULT_BRANCH

    @property
    def is_resolvable(self) -> bool:
        return bool(self.base_url) or bool(self.github_user and self.github_repo)

    def resolve(self) -> str:
        """Return the base URL, always ending in a slash.

        Raises:
            MissingUrlSourceError: If neither source is complete
        """
        if self.base_url:
            return self.base_url if self.base_url.endswith("/") else f"{self.base_url}/"

        if self.github_user and self.github_repo:
            return GITHUB_RAW_URL.format(
                user=self.github_user,
                repo=self.github_repo,
                branch=self.github_branch or DEFAULT_BRANCH,
            )

        raise MissingUrlSourceError()
