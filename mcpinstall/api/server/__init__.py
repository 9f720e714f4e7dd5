"""Server entry launch descriptors."""

from .ServerEntry import ServerEntry
from .parse_env import parse_env
from .server_name_for_package import server_name_for_package

__all__ = ["ServerEntry", "parse_env", "server_name_for_package"]
