from setuptools import find_packages, setup

setup(
    name="mcpinstall",
    version="0.1.0",
    description="Register MCP servers with Claude Desktop, Cursor and VS Code",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and input models
        "typer<0.26",  # CLI; 0.26+ no longer shares the click context stack
        "click>=8.2",  # Typer context handling; CliRunner keeps stderr separate
        "rich",  # Terminal formatting
        "PyYAML",  # YAML output for CLI
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "mcpinstall=mcpinstall.cli:main",
            "mcpinstall-server=mcpinstall.mcp.main:main",
        ],
    },
)
