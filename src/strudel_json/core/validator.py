"""JSON Schema validation for strudel.json manifests.

The schema ships inside the package (schemas/strudel.schema.json) and is
loaded once per process.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import Draft7Validator

from .types import StrudelManifest

SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "strudel.schema.json"


@lru_cache(maxsize=1)
def load_schema() -> dict[str, Any]:
    """Load the bundled manifest schema.

    Raises:
        FileNotFoundError: If the schema is missing from the installation
    """
    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def validate_manifest(manifest: StrudelManifest) -> None:
    """Raise jsonschema.ValidationError if the manifest doesn't match the schema."""
    jsonschema.validate(instance=manifest, schema=load_schema(), cls=Draft7Validator)


def manifest_errors(manifest: StrudelManifest) -> list[str]:
    """Describe every schema violation in a manifest.

    Args:
        manifest: The manifest to check

    Returns:
        One line per violation, naming the offending key ("root" for the
        object itself). Empty when the manifest is valid.
    """
    validator = Draft7Validator(load_schema())
    messages = []
    for error in sorted(validator.iter_errors(manifest), key=lambda e: list(e.path)):
        location = " -> ".join(str(p) for p in error.path) or "root"
        messages.append(f"{location}: {error.message}")
    return messages
