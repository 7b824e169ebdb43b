"""Loading entity metadata from YAML or JSON description files.

An entity description looks like::

    fields: [id, title, body, publishedAt]
    identifier: [id]

``identifier`` is optional and defaults to ``[id]``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .models import EntityMetadata

_YAML_SUFFIXES = {".yml", ".yaml"}
_JSON_SUFFIXES = {".json"}


def load_entity_metadata(path: str | Path) -> EntityMetadata:
    """Read an entity description file into :class:`EntityMetadata`.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the suffix is neither YAML nor JSON, or the document
            is not a mapping.
        pydantic.ValidationError: If the mapping has the wrong shape.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Entity metadata file not found: {file_path}")

    suffix = file_path.suffix.lower()
    raw = file_path.read_text(encoding="utf-8")
    if suffix in _YAML_SUFFIXES:
        data = yaml.safe_load(raw)
    elif suffix in _JSON_SUFFIXES:
        data = json.loads(raw)
    else:
        raise ValueError(f"Expected a .yml, .yaml or .json file, got: {file_path.suffix}")

    return metadata_from_dict(data)


def metadata_from_dict(data: Any) -> EntityMetadata:
    """Build :class:`EntityMetadata` from a parsed description."""
    if not isinstance(data, dict):
        raise ValueError("Entity metadata must be a mapping with 'fields' and 'identifier'")

    payload: dict[str, Any] = {"field_names": data.get("fields", data.get("field_names", []))}
    identifier = data.get("identifier")
    if identifier is not None:
        # A single identifier may be given as a bare string.
        payload["identifier"] = [identifier] if isinstance(identifier, str) else identifier
    return EntityMetadata.model_validate(payload)
