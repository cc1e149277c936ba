#!/usr/bin/env python
import asyncio

from cliroute import (
    FlagDefinition,
    RouterConfig,
    get_command_line_input,
    print_heading_message,
    print_success_message,
    run,
)
from cliroute.utils import setup_logging

setup_logging()


async def greet(*names: str) -> None:
    if not names:
        name = await get_command_line_input("Who should I greet? ")
        names = (name or "world",)
    print_success_message(f"Hello {', '.join(names)}!")


def banner(*words: str) -> None:
    print_heading_message(" ".join(words) or "greeter")


greet_flag = FlagDefinition(name="greet", description="Say hello", handler=greet)
banner_flag = FlagDefinition(
    name="banner",
    description="Print a heading",
    allowed_options=["<words>"],
    handler=banner,
)

config = RouterConfig(
    cli_tool_name="greeter",
    version_number="1.0.0",
    supported_arguments={
        "-g": greet_flag,
        "--greet": greet_flag,
        "-b": banner_flag,
        "--banner": banner_flag,
    },
)

if __name__ == "__main__":
    asyncio.run(run(config))
