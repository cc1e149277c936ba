# cliroute — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Styled console output built on raw ANSI escape codes.

`get_command_line_format()` folds a sequence of semantic format names into a
single escape string. The printing helpers wrap messages in that escape string
and write them through the shared Rich console, which passes the codes through
untouched.

Includes:
- `get_command_line_format()` for pure style resolution.
- `output_formatted_log()` for printing with an explicit style code.
- `print_formatted_message()` for layout-aware printing (heading, sub heading,
  terminal, plain).
- One-argument wrappers such as `print_error_message()` and
  `print_heading_message()`.
"""
from __future__ import annotations

from typing import Any, Iterable

from rich.console import Console

from cliroute.console import console
from cliroute.themes import FORMAT_CODES, CommandLineColors, CommandLineFormat


def get_command_line_format(formats: Iterable[str] = ()) -> str:
    """
    Resolve semantic format names to a combined ANSI escape string.

    The result always starts with the reset code, followed by the codes of each
    recognised name in call order. Unknown names contribute nothing.

    >>> get_command_line_format(["heading", "primary"]) == "\\x1b[0m\\x1b[1m\\x1b[34m"
    True
    """
    final_format = CommandLineColors.RESET
    for format_name in formats:
        final_format += FORMAT_CODES.get(str(format_name), "")
    return final_format


def get_separator_line(target: Console | None = None) -> str:
    """Full-width separator; Rich reports 80 columns when the width is unknown."""
    target = target or console
    return "-" * target.width


def output_formatted_log(message: Any, style_code: str, *log_args: Any) -> None:
    """
    Print `message` wrapped in `style_code` and a trailing reset.

    Extra arguments are printed after the styled message, unformatted and
    separated by spaces.
    """
    console.out(
        f"{style_code}{message}{CommandLineColors.RESET}",
        *log_args,
        highlight=False,
    )


def print_formatted_message(
    message: str = "",
    format_type: str = CommandLineFormat.DEFAULT,
    format_color: str = CommandLineFormat.DARK,
    *log_args: Any,
) -> None:
    """
    Print a message using the layout of `format_type` and the style of
    `[format_type, format_color]`.

    - heading: separator, upper-cased message, separator
    - subHeading: message, separator
    - terminal: the message framed as ": <message> "
    - anything else: the message as is
    """
    style_code = get_command_line_format([format_type, format_color])
    format_type = str(format_type)

    if format_type == CommandLineFormat.HEADING.value:
        separator = get_separator_line()
        output_formatted_log(separator, style_code, *log_args)
        output_formatted_log(message.upper(), style_code, *log_args)
        output_formatted_log(separator, style_code, *log_args)
    elif format_type == CommandLineFormat.SUB_HEADING.value:
        output_formatted_log(message, style_code, *log_args)
        output_formatted_log(get_separator_line(), style_code, *log_args)
    elif format_type == CommandLineFormat.TERMINAL.value:
        output_formatted_log(f": {message} ", style_code, *log_args)
    else:
        output_formatted_log(message, style_code, *log_args)


def print_error_message(message: str = "", *log_args: Any) -> None:
    print_formatted_message(
        message, CommandLineFormat.DEFAULT, CommandLineFormat.DANGER, *log_args
    )


def print_warning_message(message: str = "") -> None:
    print_formatted_message(message, CommandLineFormat.DEFAULT, CommandLineFormat.WARNING)


def print_info_message(message: str = "") -> None:
    print_formatted_message(message, CommandLineFormat.DEFAULT, CommandLineFormat.INFO)


def print_success_message(message: str = "") -> None:
    print_formatted_message(message, CommandLineFormat.DEFAULT, CommandLineFormat.SUCCESS)


def print_heading_message(message: str = "") -> None:
    print_formatted_message(message, CommandLineFormat.HEADING, CommandLineFormat.PRIMARY)


def print_sub_heading_message(message: str = "") -> None:
    print_formatted_message(
        message, CommandLineFormat.SUB_HEADING, CommandLineFormat.SECONDARY
    )


def print_terminal_message(message: str = "") -> None:
    print_formatted_message(
        message, CommandLineFormat.TERMINAL, CommandLineFormat.TERMINAL
    )
