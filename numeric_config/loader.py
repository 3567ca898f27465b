"""
Catalogue Loader (``numeric_config.loader``).

Responsibility
--------------
Loads a YAML catalogue file and parses it into typed
``numeric_config.schema`` dataclass instances. Runtime callers go through
``numeric_config.get_field_catalogue()``.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing required keys in parsed dict  -> ``KeyError`` propagates.
* Duplicate field names, non-boolean flags, non-list ``fields``
  -> ``ValueError``.
* ``fields: null`` or no ``fields`` key  -> empty catalogue.
* Bad formats  -> ``FormatNotationError`` / ``InvalidConfigurationError``.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from numeric_config.schema import FieldFormatCatalogue, FieldFormatDef
from numeric_kernel.domain.number_format import NumberFormat


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path) as f:
        return yaml.safe_load(f) or {}


def parse_flag(data: dict[str, Any], key: str, default: bool) -> bool:
    """
    Read an optional boolean flag.

    Raises:
        ValueError: the value is present but is not a YAML boolean
            (e.g. the quoted string ``"false"``).
    """
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' must be true or false, got {value!r}")
    return value


def parse_number_format(data: dict[str, Any]) -> NumberFormat:
    """
    Parse a ``NumberFormat`` from a field dict.

    Either ``format`` (``"N(17.2)"``) or ``precision`` with optional
    ``scale`` must be present.
    """
    positive_only = parse_flag(data, "positive_only", False)
    if "format" in data:
        return NumberFormat.parse(data["format"], positive_only=positive_only)
    return NumberFormat(
        data["precision"],
        data.get("scale", 0),
        positive_only,
    )


def parse_field(data: dict[str, Any]) -> FieldFormatDef:
    """Parse a ``FieldFormatDef`` from a dict."""
    return FieldFormatDef(
        name=data["name"],
        number_format=parse_number_format(data),
        required=parse_flag(data, "required", True),
        description=data.get("description", ""),
    )


def parse_catalogue(data: dict[str, Any]) -> FieldFormatCatalogue:
    """Parse a whole catalogue dict, stamping it with its checksum."""
    fields = data.get("fields") or []
    if not isinstance(fields, list):
        raise ValueError(
            f"'fields' must be a list of field definitions, got {type(fields).__name__}"
        )
    return FieldFormatCatalogue(
        catalogue_id=data["catalogue_id"],
        version=int(data.get("version", 1)),
        fields=tuple(parse_field(f) for f in fields),
        checksum=compute_checksum(data),
        description=data.get("description", ""),
    )


def load_catalogue(path: Path) -> FieldFormatCatalogue:
    return parse_catalogue(load_yaml_file(path))


def compute_checksum(data: dict[str, Any]) -> str:
    """
    Compute SHA-256 checksum of canonical JSON serialization.

    Identical ``data`` always produces identical checksums, independent of
    key order in the source file.
    """
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()
