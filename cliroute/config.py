# cliroute — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Router configuration model and declarative loader for flag registries."""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from cliroute.exceptions import ConfigError
from cliroute.flag import FlagDefinition
from cliroute.logger import logger
from cliroute.versioning import VersionSource

DEFAULT_CLI_TOOL_NAME = "my-cli"


class RouterConfig(BaseModel):
    """
    Configuration handed to `FlagRouter` / `run()`.

    Attributes:
        cli_tool_name (str): Name shown in usage, error and version output.
        version_number (str | None): Version reported by `--version` when no
            `version_source` is given.
        supported_arguments (dict[str, FlagDefinition]): Flag token to definition.
            Plain dicts are converted to `FlagDefinition`.
        version_source (VersionSource | None): Strategy used by `--version`.
    """

    cli_tool_name: str = DEFAULT_CLI_TOOL_NAME
    version_number: str | None = None
    supported_arguments: dict[str, FlagDefinition] = Field(default_factory=dict)
    version_source: VersionSource | None = None

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @field_validator("cli_tool_name", mode="before")
    @classmethod
    def default_tool_name(cls, value: Any) -> Any:
        return value or DEFAULT_CLI_TOOL_NAME

    @field_validator("supported_arguments", mode="before")
    @classmethod
    def convert_definitions(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValueError("supported_arguments must be a mapping of flag tokens.")
        return {
            token: FlagDefinition.from_value(token, definition)
            for token, definition in value.items()
        }


def import_handler(dotted_path: str) -> Any:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigError(f"Invalid handler path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        return getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error


class RawFlag(BaseModel):
    """A flag entry as written in a configuration file."""

    tokens: list[str]
    name: str
    description: str = ""
    allowed_options: list[str] = Field(default_factory=list)
    handler: str

    @field_validator("tokens")
    @classmethod
    def validate_tokens(cls, tokens: list[str]) -> list[str]:
        if not tokens:
            raise ValueError("A flag needs at least one token.")
        for token in tokens:
            if not token.startswith("-"):
                raise ValueError(f"Flag token '{token}' must start with '-'.")
        return tokens


def convert_flags(
    raw_flags: list[dict[str, Any]] | None,
) -> dict[str, FlagDefinition]:
    """An empty `flags:` key yields an empty registry."""
    if raw_flags is None:
        return {}
    if not isinstance(raw_flags, list):
        raise ConfigError("'flags' must be a list of flag entries.")
    supported_arguments: dict[str, FlagDefinition] = {}
    for index, entry in enumerate(raw_flags):
        if not isinstance(entry, dict):
            raise ConfigError(
                f"Flag entry {index} must be a mapping, got {type(entry).__name__}."
            )
        raw_flag = RawFlag(**entry)
        definition = FlagDefinition(
            name=raw_flag.name,
            description=raw_flag.description,
            allowed_options=raw_flag.allowed_options,
            handler=import_handler(raw_flag.handler),
        )
        for token in raw_flag.tokens:
            supported_arguments[token] = definition
    return supported_arguments


def loader(file_path: Path | str) -> RouterConfig:
    """
    Load a router configuration from a YAML or TOML file.

    The file holds an optional `cli_tool_name`, an optional `version_number`
    and a `flags` list. Each flag needs:
    - tokens: the flag tokens that trigger it, e.g. ["-g", "--greet"]
    - name: canonical name shared by the tokens
    - handler: dotted import path to the handler function
    and may carry `description` and `allowed_options`.

    Raises:
        ConfigError: If the file is missing, malformed or references handlers
            that cannot be imported.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise ConfigError(f"No such config file: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a mapping with a list of flags.\n"
            "Example:\n"
            "cli_tool_name: 'my-cli'\n"
            "flags:\n"
            "  - tokens: ['-g', '--greet']\n"
            "    name: 'greet'\n"
            "    description: 'Say hello'\n"
            "    handler: 'my_module.greet'"
        )

    try:
        return RouterConfig(
            cli_tool_name=raw_config.get("cli_tool_name", DEFAULT_CLI_TOOL_NAME),
            version_number=raw_config.get("version_number"),
            supported_arguments=convert_flags(raw_config.get("flags")),
        )
    except ValueError as error:
        raise ConfigError(f"Invalid configuration in {path}: {error}") from error
