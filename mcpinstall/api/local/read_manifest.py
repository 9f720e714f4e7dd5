"""Load a directory's package manifest."""

import json
from pathlib import Path

from pydantic import ValidationError

from .LocalManifest import LocalManifest

MANIFEST_FILE_NAME = "package.json"


def read_manifest(directory: Path) -> LocalManifest:
    """Parse ``package.json`` in ``directory``.

    Raises:
        FileNotFoundError: If there is no manifest
        ValueError: If the manifest is not valid JSON or has the wrong shape
    """
    path = directory / MANIFEST_FILE_NAME
    with path.open(encoding="utf-8") as fh:
        try:
            raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a JSON object")

    try:
        return LocalManifest.model_validate(raw)
    except ValidationError as e:
        raise ValueError(f"Unexpected manifest structure in {path}: {e.errors()[0].get('msg', e)}") from e
