"""Config key for a published package."""

import re

_SCOPE_PATTERN = re.compile(r"^@[^/]+/")


def server_name_for_package(package_name: str) -> str:
    """Strip a leading ``@scope/`` so config keys stay readable.

    >>> server_name_for_package("@modelcontextprotocol/server-filesystem")
    'server-filesystem'
    >>> server_name_for_package("mcp-server-fetch")
    'mcp-server-fetch'
    """
    return _SCOPE_PATTERN.sub("", package_name, count=1)
