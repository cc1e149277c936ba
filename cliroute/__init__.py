"""
cliroute

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .config import RouterConfig
from .flag import FlagDefinition
from .formatting import (
    get_command_line_format,
    output_formatted_log,
    print_error_message,
    print_formatted_message,
    print_heading_message,
    print_info_message,
    print_sub_heading_message,
    print_success_message,
    print_terminal_message,
    print_warning_message,
)
from .prompt_utils import get_command_line_input
from .router import FlagRouter, run
from .shell import CommandResult, execute_command
from .themes import CommandLineColors, CommandLineFormat

logger = logging.getLogger("cliroute")


__all__ = [
    "FlagRouter",
    "FlagDefinition",
    "RouterConfig",
    "run",
    "CommandLineColors",
    "CommandLineFormat",
    "CommandResult",
    "execute_command",
    "get_command_line_format",
    "get_command_line_input",
    "output_formatted_log",
    "print_formatted_message",
    "print_error_message",
    "print_warning_message",
    "print_info_message",
    "print_success_message",
    "print_heading_message",
    "print_sub_heading_message",
    "print_terminal_message",
]
