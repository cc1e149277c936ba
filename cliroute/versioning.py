# cliroute — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Version sources used by the built-in `--version` flag.

A version source answers one question: which version of the tool is installed?
The answer is a mapping of label to version string, or None when that version
could not be determined. Sources never raise for lookup failures; they log and
report None so the version flag stays informational.

Sources:
- StaticVersionSource: A version string known at build time.
- GlobalListingVersionSource: Scrapes a package-listing shell command.
- LocalDescriptorVersionSource: Reads a local package descriptor and also
  reports the globally listed version.
"""
from __future__ import annotations

import json
import re
import shlex
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import toml

from cliroute.logger import logger
from cliroute.shell import execute_command

DEFAULT_LISTING_COMMAND = f"{shlex.quote(sys.executable)} -m pip show {{tool_name}}"


class VersionSource(ABC):
    """Retrieve the installed version(s) of a tool."""

    @abstractmethod
    async def get_versions(self, tool_name: str) -> dict[str, str | None]:
        """Return a label to version mapping; None marks an unresolved version."""


class StaticVersionSource(VersionSource):
    def __init__(self, version_number: str, label: str = "installed"):
        self.version_number = version_number
        self.label = label

    async def get_versions(self, tool_name: str) -> dict[str, str | None]:
        return {self.label: self.version_number}

    def __str__(self) -> str:
        return f"StaticVersionSource(version_number={self.version_number!r})"


def scrape_version(listing: str, tool_name: str) -> str | None:
    """
    Pull a version token for `tool_name` out of package-listing output.

    Understands `Version: 1.2.3` lines (pip show) and listing lines where the
    version directly follows the tool name (`my-cli@1.2.3`, `my-cli 1.2.3`,
    `my-cli==1.2.3`).
    """
    for line in listing.splitlines():
        match = re.match(r"^\s*Version:\s*(\S+)", line)
        if match:
            return match.group(1)

    name_pattern = re.escape(tool_name)
    match = re.search(rf"{name_pattern}(?:@|==|\s+)v?(\d[^\s,;]*)", listing)
    if match:
        return match.group(1)
    return None


class GlobalListingVersionSource(VersionSource):
    """
    Run a package listing command and scrape the tool's version from its output.

    Args:
        command_template (str): Shell command with a `{tool_name}` placeholder.
            Defaults to `python -m pip show {tool_name}` for the running
            interpreter.
        label (str): Label reported for the version.
    """

    def __init__(
        self,
        command_template: str = DEFAULT_LISTING_COMMAND,
        label: str = "global",
    ):
        self.command_template = command_template
        self.label = label

    async def get_versions(self, tool_name: str) -> dict[str, str | None]:
        command = self.command_template.format(tool_name=shlex.quote(tool_name))
        result = await execute_command(command)
        if not result.ok:
            logger.warning(
                "Version listing for '%s' failed: %s", tool_name, result.error
            )
        return {self.label: scrape_version(result.output, tool_name)}

    def __str__(self) -> str:
        return f"GlobalListingVersionSource(command_template={self.command_template!r})"


def _lookup(data: Any, *keys: str, path: Path) -> Any:
    """Walk nested tables; a level that is not a mapping is a malformed descriptor."""
    for key in keys:
        if not isinstance(data, dict):
            raise ValueError(
                f"Malformed descriptor {path}: expected a table above '{key}'"
            )
        data = data.get(key)
        if data is None:
            return None
    return data


def read_descriptor_version(path: Path) -> str:
    """
    Read the version field of a package descriptor.

    `.toml` files are read as `pyproject.toml` (`project.version`, then
    `tool.poetry.version`); `.json` files as `package.json` (`version`).

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file cannot be parsed or carries no version.
    """
    text = path.read_text(encoding="UTF-8")
    if path.suffix == ".toml":
        data = toml.loads(text)
        version = _lookup(data, "project", "version", path=path) or _lookup(
            data, "tool", "poetry", "version", path=path
        )
    elif path.suffix == ".json":
        version = _lookup(json.loads(text), "version", path=path)
    else:
        raise ValueError(f"Unsupported descriptor format: {path.suffix}")
    if not isinstance(version, str) or not version:
        raise ValueError(f"No version field found in {path}")
    return version


class LocalDescriptorVersionSource(VersionSource):
    """
    Report the version recorded in a local package descriptor alongside the
    globally listed one.

    A descriptor that cannot be read is reported as an unresolved "local"
    version rather than an error.
    """

    def __init__(
        self,
        descriptor_path: Path | str,
        global_source: VersionSource | None = None,
    ):
        self.descriptor_path = Path(descriptor_path)
        self.global_source = global_source or GlobalListingVersionSource()

    async def get_versions(self, tool_name: str) -> dict[str, str | None]:
        versions: dict[str, str | None] = {}
        try:
            versions["local"] = read_descriptor_version(self.descriptor_path)
        except (OSError, ValueError) as error:
            logger.info(
                "Could not read local version from '%s': %s",
                self.descriptor_path,
                error,
            )
            versions["local"] = None
        versions.update(await self.global_source.get_versions(tool_name))
        return versions

    def __str__(self) -> str:
        return f"LocalDescriptorVersionSource(descriptor_path='{self.descriptor_path}')"
