"""Tests for manifest schema validation."""

import pytest
from jsonschema import ValidationError

from strudel_json.core.validator import load_schema, manifest_errors, validate_manifest


class TestValidateManifest:
    """Test validation against the bundled schema."""

    def test_schema_loads(self) -> None:
        schema = load_schema()
        assert "_base" in schema["required"]

    def test_accepts_valid_manifest(self) -> None:
        validate_manifest(
            {
                "_base": "https://example.com/samples/",
                "kick": "kick/kick.wav",
                "snare": ["snare/a.wav", "snare/b.wav"],
            }
        )

    def test_accepts_base_only(self) -> None:
        validate_manifest({"_base": "https://example.com/"})

    def test_rejects_missing_base(self) -> None:
        with pytest.raises(ValidationError):
            validate_manifest({"kick": "kick/kick.wav"})

    def test_rejects_base_without_trailing_slash(self) -> None:
        with pytest.raises(ValidationError):
            validate_manifest({"_base": "https://example.com"})

    def test_rejects_single_item_list(self) -> None:
        """Test that a lone path must be a plain string, not a list."""
        with pytest.raises(ValidationError):
            validate_manifest({"_base": "https://example.com/", "kick": ["kick/kick.wav"]})


class TestManifestErrors:
    """Test the per-key error listing used when writing."""

    def test_valid(self) -> None:
        assert manifest_errors({"_base": "https://example.com/", "bd": "bd/a.wav"}) == []

    def test_names_offending_keys(self) -> None:
        errors = manifest_errors(
            {"_base": "https://example.com", "bd": 3, "sd": ["sd/a.wav"]}  # type: ignore[dict-item]
        )

        assert len(errors) == 3
        assert [e.split(":")[0] for e in errors] == ["_base", "bd", "sd"]

    def test_missing_base_reported_at_root(self) -> None:
        errors = manifest_errors({"bd": "bd/a.wav"})

        assert errors == ["root: '_base' is a required property"]
