#!/usr/bin/env python
import asyncio

from cliroute import (
    RouterConfig,
    execute_command,
    print_error_message,
    print_sub_heading_message,
    print_terminal_message,
    run,
)
from cliroute.utils import setup_logging
from cliroute.versioning import GlobalListingVersionSource

setup_logging()


async def shell(*command: str) -> None:
    command_line = " ".join(command) or "echo Hello, cliroute!"
    print_terminal_message(command_line)
    result = await execute_command(command_line)
    if result.ok:
        print_sub_heading_message(result.output.rstrip())
    else:
        print_error_message(str(result.error))


config = RouterConfig(
    cli_tool_name="cliroute",
    supported_arguments={
        "-s": {"name": "shell", "description": "Run a shell command", "handler": shell},
        "--shell": {
            "name": "shell",
            "description": "Run a shell command",
            "handler": shell,
        },
    },
    version_source=GlobalListingVersionSource(),
)

if __name__ == "__main__":
    asyncio.run(run(config))
