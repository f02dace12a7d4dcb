"""Command-line interface for strudel-json.

This module provides the CLI entry point for generating strudel.json
manifests from sample directories, once or in watch mode.
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .config import DEFAULT_BRANCH
from .core.errors import GenerationError
from .core.types import UrlSource
from .generator import generate_strudel_json
from .watcher import watch


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strudel-json",
        description="Generate strudel.json files for audio sample libraries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Samples hosted on GitHub
  strudel-json --path ./samples --username alice --repo kit

  # Samples hosted anywhere else
  strudel-json --path ./samples --base-url https://example.com/samples

  # Keep strudel.json up to date while editing the library
  strudel-json --path ./samples --username alice --repo kit --watch
        """,
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument(
        "-p", "--path", required=True, help="Path to the local root directory to scan"
    )

    parser.add_argument(
        "--base-url",
        help="Full base URL for samples (alternative to --username/--repo)",
    )

    parser.add_argument("-u", "--username", help="Your GitHub username")

    parser.add_argument("-r", "--repo", help="Your GitHub repository name")

    parser.add_argument(
        "-b",
        "--branch",
        default=DEFAULT_BRANCH,
        help=f"Your GitHub repository branch name (default: {DEFAULT_BRANCH})",
    )

    parser.add_argument(
        "-w",
        "--watch",
        action="store_true",
        help="Watch mode: automatically regenerate on file changes",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the strudel-json command."""
    args = build_parser().parse_args(argv)

    url_source = UrlSource(
        base_url=args.base_url,
        github_user=args.username,
        github_repo=args.repo,
        github_branch=args.branch,
    )

    if not url_source.is_resolvable:
        print(
            "Error: Either --base-url or both --username and --repo must be provided.",
            file=sys.stderr,
        )
        sys.exit(1)

    path = Path(args.path)

    try:
        if args.watch:
            watch(path, url_source)
        else:
            generate_strudel_json(path, url_source)
    except GenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
