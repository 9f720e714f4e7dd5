"""Parse KEY=VALUE strings into an environment mapping."""

from collections.abc import Iterable


def parse_env(pairs: Iterable[str] | None) -> dict[str, str] | None:
    """Split each entry on the first '='.

    Entries with an empty key are dropped. A missing '=' yields an empty value.

    Returns:
        Ordered mapping, or None when nothing usable was supplied
    """
    if not pairs:
        return None
    env: dict[str, str] = {}
    for pair in pairs:
        key, _, value = pair.partition("=")
        if not key:
            continue
        env[key] = value
    return env or None
