"""Tests for the JSON Schema describing YAML dictionary files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import pytest
import yaml

from vouch.dictionary import parse_dictionary
from vouch.exceptions import ConfigError

SCHEMAS_DIR: Path = Path(__file__).resolve().parents[2] / "schemas"
DICTIONARY_SCHEMA_PATH: Path = SCHEMAS_DIR / "dictionary.schema.json"


def _load_yaml(path: Path) -> Any:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


@pytest.fixture()
def dictionary_schema() -> dict[str, Any]:
    """Load the dictionary JSON Schema."""
    return json.loads(DICTIONARY_SCHEMA_PATH.read_text(encoding="utf-8"))


def test_schema_is_well_formed(dictionary_schema: dict[str, Any]) -> None:
    jsonschema.Draft202012Validator.check_schema(dictionary_schema)


def test_fixture_dictionary_matches_schema(dictionary_schema: dict[str, Any], dictionaries_root: Path) -> None:
    jsonschema.validate(_load_yaml(dictionaries_root / "overrides.yaml"), dictionary_schema)


def test_bad_classification_rejected_by_schema_and_parser(
    dictionary_schema: dict[str, Any], dictionaries_root: Path
) -> None:
    raw = _load_yaml(dictionaries_root / "bad_classification.yaml")
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(raw, dictionary_schema)
    with pytest.raises(ConfigError):
        parse_dictionary(raw)


@pytest.mark.parametrize(
    "document",
    [
        pytest.param({"codes": {"MIN": {"classification": "validation", "short": "s"}}}, id="missing-message"),
        pytest.param(
            {"codes": {"MIN": {"classification": "validation", "short": "s", "message": "m", "extra": 1}}},
            id="unknown-entry-key",
        ),
        pytest.param({"codes": {}, "version": 2}, id="unknown-top-level-key"),
        pytest.param({"codes": {"MIN": "text"}}, id="entry-not-mapping"),
    ],
)
def test_schema_and_parser_agree_on_invalid_documents(
    dictionary_schema: dict[str, Any], document: dict[str, Any]
) -> None:
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(document, dictionary_schema)
    with pytest.raises(ConfigError):
        parse_dictionary(document)
