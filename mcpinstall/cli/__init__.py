"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    from mcpinstall.api.config.InstallerConfig import InstallerConfig
    from mcpinstall.cli._create_app import _create_app
    from mcpinstall.utils.get_package_version import get_package_version
    from mcpinstall.utils.logger import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"mcpinstall {get_package_version()}")
        return 0

    try:
        log_config = InstallerConfig.load().log
        configure_logging(level=log_config.level, max_bytes=log_config.max_bytes, backup_count=log_config.backup_count)
    except ValueError:
        # Commands report the invalid config themselves
        configure_logging()

    app = _create_app()
    try:
        app(argv)
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0
