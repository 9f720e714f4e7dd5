"""Build a local package and discover its runnable entry points."""

from .LocalManifest import LocalManifest
from .discover_entry_points import discover_entry_points
from .install_dependencies import install_dependencies
from .read_manifest import MANIFEST_FILE_NAME, read_manifest

__all__ = [
    "MANIFEST_FILE_NAME",
    "LocalManifest",
    "discover_entry_points",
    "install_dependencies",
    "read_manifest",
]
