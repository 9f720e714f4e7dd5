"""The parts of a package.json the installer cares about."""

from pydantic import BaseModel, ConfigDict, Field

from ..server.server_name_for_package import server_name_for_package


class LocalManifest(BaseModel):
    """Package name and declared entry points; every other manifest key is ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = ""
    binaries: dict[str, str] | str | None = Field(default=None, alias="bin")
    main_entry: str | None = Field(default=None, alias="main")

    def declared_binaries(self) -> dict[str, str]:
        """Binary name to relative path, in manifest order.

        A string ``bin`` declares a single binary named after the package.
        """
        if isinstance(self.binaries, str):
            if not self.binaries:
                return {}
            return {server_name_for_package(self.name) or "server": self.binaries}
        return dict(self.binaries or {})
