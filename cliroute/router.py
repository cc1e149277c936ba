# cliroute — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Flag routing for CLI tools built on cliroute.

`FlagRouter` owns the flag registry of one invocation. It merges the built-in
`-h/--help` and `-v/--version` flags with the embedder's flags, parses the
process arguments into per-flag buckets, validates them, and awaits each flag's
handler in command-line order.

Dispatch is strictly sequential: a handler only starts once the previous one
has returned or its awaitable has resolved. A handler that raises aborts the
remaining dispatch and the exception propagates to the caller.

Example:
    ```
    async def greet(*names: str) -> None:
        print_success_message(f"Hello {' '.join(names) or 'world'}!")

    asyncio.run(
        run(
            RouterConfig(
                cli_tool_name="greeter",
                supported_arguments={
                    "-g": {"name": "greet", "description": "Say hello", "handler": greet},
                    "--greet": {"name": "greet", "description": "Say hello", "handler": greet},
                },
            )
        )
    )
    ```
"""
from __future__ import annotations

import sys
from types import MappingProxyType
from typing import Any, Mapping, NoReturn, Sequence

from rich import box
from rich.markup import escape
from rich.table import Table

from cliroute.config import RouterConfig
from cliroute.console import console
from cliroute.exceptions import (
    CliRouteError,
    InvalidArgumentError,
    InvalidArgumentsError,
)
from cliroute.flag import FlagDefinition
from cliroute.formatting import print_info_message
from cliroute.logger import logger
from cliroute.parser import (
    RESERVED_BUCKET,
    ParsedArguments,
    parse_input_arguments,
    process_parsed_arguments,
)
from cliroute.themes import CommandLineFormat
from cliroute.versioning import (
    GlobalListingVersionSource,
    StaticVersionSource,
    VersionSource,
)


def build_supported_usage(
    registry: Mapping[str, FlagDefinition],
) -> dict[str, dict[str, Any]]:
    """
    Aggregate registry tokens into one usage row per canonical flag name.

    Rows keep the order in which their first token appears in `registry`:
        {"help": {"Flags": ["-h", "--help"], "Options": [], "Description": "..."}}
    """
    usage: dict[str, dict[str, Any]] = {}
    for token, definition in registry.items():
        if definition.name not in usage:
            usage[definition.name] = {
                "Flags": [token],
                "Options": list(definition.allowed_options),
                "Description": definition.description,
            }
        else:
            usage[definition.name]["Flags"].append(token)
    return usage


class FlagRouter:
    """
    Parses, validates and dispatches command-line flags.

    The registry and tool name are fixed when the router is built and are
    read-only afterwards.

    Args:
        config (RouterConfig | dict | None): Router configuration. A dict is
            validated into a `RouterConfig`.

    Methods:
        run(): Parse the process arguments and dispatch every flag.
        parse_input_arguments(): Group raw arguments by flag token.
        process_parsed_arguments(): Drop the reserved bucket and validate flags.
        output_supported_usage(): Print the usage table.
        output_version(): Print the installed version(s).
        handle_error(): Print the error banner and raise.
    """

    def __init__(self, config: RouterConfig | dict[str, Any] | None = None) -> None:
        if config is None:
            config = RouterConfig()
        elif isinstance(config, dict):
            config = RouterConfig(**config)
        elif not isinstance(config, RouterConfig):
            raise TypeError(
                f"config must be a RouterConfig or dict, got {type(config).__name__}"
            )
        self.config = config
        self.cli_tool_name = config.cli_tool_name
        self.console = console
        self.version_source = self._get_version_source()
        self._registry: dict[str, FlagDefinition] = {
            **self._get_builtin_arguments(),
            **config.supported_arguments,
        }

    @property
    def registry(self) -> Mapping[str, FlagDefinition]:
        return MappingProxyType(self._registry)

    def _get_version_source(self) -> VersionSource:
        if self.config.version_source:
            return self.config.version_source
        if self.config.version_number:
            return StaticVersionSource(self.config.version_number)
        return GlobalListingVersionSource()

    def _get_builtin_arguments(self) -> dict[str, FlagDefinition]:
        help_flag = FlagDefinition(
            name="help",
            description="Prints the currently supported usage of the CLI",
            handler=self.output_supported_usage,
        )
        version_flag = FlagDefinition(
            name="version",
            description=(
                f"Prints the currently installed version of the {self.cli_tool_name} CLI"
            ),
            handler=self.output_version,
        )
        return {
            "-h": help_flag,
            "--help": help_flag,
            "-v": version_flag,
            "--version": version_flag,
        }

    def handle_error(
        self,
        message: str = "No message provided",
        error_type: type[CliRouteError] = CliRouteError,
    ) -> NoReturn:
        """Print the help pointer banner and raise `error_type(message)`."""
        logger.error("[%s] %s", self.cli_tool_name, message)
        self.console.print(
            f"[{CommandLineFormat.DANGER.value}]ERROR:[/] Something went wrong. "
            f"Run '{escape(self.cli_tool_name)} -h' for supported usage",
            highlight=False,
        )
        raise error_type(message)

    def parse_input_arguments(
        self, argv: Sequence[str] | None = None
    ) -> ParsedArguments:
        try:
            return parse_input_arguments(argv)
        except InvalidArgumentsError as error:
            self.handle_error(str(error), InvalidArgumentsError)

    def process_parsed_arguments(
        self, parsed_args: Mapping[str, list[str]]
    ) -> ParsedArguments:
        try:
            return process_parsed_arguments(parsed_args, self._registry)
        except InvalidArgumentError as error:
            self.handle_error(str(error), InvalidArgumentError)

    def output_supported_usage(self) -> None:
        usage = build_supported_usage(self._registry)
        table = Table(box=box.SIMPLE_HEAVY, show_lines=False)
        table.add_column("Name", style=CommandLineFormat.PRIMARY.value, no_wrap=True)
        table.add_column("Flags", no_wrap=True)
        table.add_column("Options")
        table.add_column("Description")
        for name, row in usage.items():
            table.add_row(
                escape(name),
                escape(", ".join(row["Flags"])),
                escape(", ".join(row["Options"])),
                escape(row["Description"]),
            )
        self.console.print(
            f"{escape(self.cli_tool_name)} CLI usage below: ", highlight=False
        )
        self.console.print(table)

    async def output_version(self) -> None:
        versions = await self.version_source.get_versions(self.cli_tool_name)
        show_labels = len(versions) > 1
        for label, version in versions.items():
            if version is None:
                print_info_message(
                    f"Unable to determine the {label} version of {self.cli_tool_name}."
                )
                continue
            prefix = f"{self.cli_tool_name} CLI"
            if show_labels:
                prefix = f"{prefix} {label}"
            self.console.print(
                f"{prefix} version: {version}", markup=False, highlight=False
            )

    async def dispatch(self, processed_args: Mapping[str, list[str]]) -> None:
        """Await each flag's handler in order, one at a time."""
        for arg_name, values in processed_args.items():
            definition = self._registry[arg_name]
            logger.debug(
                "[dispatch] '%s' (%s) with %d value(s).",
                arg_name,
                definition.name,
                len(values),
            )
            await definition(*values)
        logger.debug("[dispatch] Completed %d flag(s).", len(processed_args))

    async def run(self, argv: Sequence[str] | None = None) -> None:
        """
        Entry point: parse the process arguments and dispatch every flag.

        Exits the process with status 1 when no flags are given. Exceptions raised
        by handlers propagate and abort the remaining flags.

        Raises:
            InvalidArgumentsError: If the raw arguments are not a list of strings.
            InvalidArgumentError: If a flag is not in the registry.
        """
        parsed_args = self.parse_input_arguments(argv)
        processed_args = self.process_parsed_arguments(parsed_args)

        if not processed_args:
            logger.info(
                "No input flags provided; %d leading value(s) ignored.",
                len(parsed_args.get(RESERVED_BUCKET, [])),
            )
            self.console.print(
                f"No input flags provided. Run '{escape(self.cli_tool_name)} -h' "
                "for supported usage.",
                highlight=False,
            )
            sys.exit(1)

        await self.dispatch(processed_args)


async def run(
    config: RouterConfig | dict[str, Any] | None = None,
    argv: Sequence[str] | None = None,
) -> None:
    """Build a `FlagRouter` from `config` and run it."""
    await FlagRouter(config).run(argv)
