"""Resolve a manifest's runnable entry points to absolute paths."""

import os
from pathlib import Path

from ..server.server_name_for_package import server_name_for_package
from .LocalManifest import LocalManifest


def discover_entry_points(directory: Path, manifest: LocalManifest) -> dict[str, Path]:
    """Map each server name to the absolute path it should be launched from.

    Declared binaries win; otherwise the main entry is registered under the
    unscoped package name, or the directory name when the package has none.
    An empty mapping means nothing is runnable.
    """
    binaries = manifest.declared_binaries()
    if binaries:
        return {name: _anchor(directory, relative) for name, relative in binaries.items()}
    if manifest.main_entry:
        return {server_name_for_package(manifest.name) or directory.name: _anchor(directory, manifest.main_entry)}
    return {}


def _anchor(directory: Path, relative: str) -> Path:
    return Path(os.path.normpath(directory / relative))
