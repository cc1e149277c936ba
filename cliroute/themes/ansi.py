# cliroute — (c) 2025 rtj.dev LLC — MIT Licensed
"""
ANSI escape codes and the semantic format names built on top of them.

`CommandLineColors` is the raw enumeration of SGR codes understood by virtually
every terminal. `CommandLineFormat` names the semantic styles used by
`cliroute.formatting` ("heading", "danger", "terminal", ...), and
`FORMAT_CODES` resolves each of them to the codes it contributes.

`get_cliroute_theme()` exposes the same semantic names as a Rich `Theme` so that
markup such as `[danger]...[/]` renders consistently with the raw ANSI output.
"""
from __future__ import annotations

from enum import Enum

from rich.style import Style
from rich.theme import Theme


class CommandLineColors:
    """Raw ANSI SGR escape sequences."""

    RESET = "\x1b[0m"
    BRIGHT = "\x1b[1m"
    DIM = "\x1b[2m"
    UNDERSCORE = "\x1b[4m"
    BLINK = "\x1b[5m"
    REVERSE = "\x1b[7m"
    HIDDEN = "\x1b[8m"

    FOREGROUND_BLACK = "\x1b[30m"
    FOREGROUND_RED = "\x1b[31m"
    FOREGROUND_GREEN = "\x1b[32m"
    FOREGROUND_YELLOW = "\x1b[33m"
    FOREGROUND_BLUE = "\x1b[34m"
    FOREGROUND_MAGENTA = "\x1b[35m"
    FOREGROUND_CYAN = "\x1b[36m"
    FOREGROUND_WHITE = "\x1b[37m"

    BACKGROUND_BLACK = "\x1b[40m"
    BACKGROUND_RED = "\x1b[41m"
    BACKGROUND_GREEN = "\x1b[42m"
    BACKGROUND_YELLOW = "\x1b[43m"
    BACKGROUND_BLUE = "\x1b[44m"
    BACKGROUND_MAGENTA = "\x1b[45m"
    BACKGROUND_CYAN = "\x1b[46m"
    BACKGROUND_WHITE = "\x1b[47m"

    @classmethod
    def as_dict(cls) -> dict[str, str]:
        return {
            name: value
            for name, value in vars(cls).items()
            if name.isupper() and isinstance(value, str)
        }


class CommandLineFormat(str, Enum):
    """
    Semantic format names accepted by `get_command_line_format()`.

    Members compare equal to their plain string values, so callers may pass either
    `CommandLineFormat.DANGER` or `"danger"`.
    """

    HEADING = "heading"
    SUB_HEADING = "subHeading"
    DEFAULT = "default"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"
    LIGHT = "light"
    DARK = "dark"
    TERMINAL = "terminal"

    @classmethod
    def choices(cls) -> list[CommandLineFormat]:
        """Return a list of all format choices."""
        return list(cls)

    def __str__(self) -> str:
        return self.value


FORMAT_CODES: dict[str, str] = {
    CommandLineFormat.HEADING.value: CommandLineColors.BRIGHT,
    CommandLineFormat.SUB_HEADING.value: CommandLineColors.DIM,
    CommandLineFormat.DEFAULT.value: CommandLineColors.RESET,
    CommandLineFormat.PRIMARY.value: CommandLineColors.FOREGROUND_BLUE,
    CommandLineFormat.SECONDARY.value: CommandLineColors.FOREGROUND_CYAN,
    CommandLineFormat.SUCCESS.value: CommandLineColors.FOREGROUND_GREEN,
    CommandLineFormat.DANGER.value: CommandLineColors.FOREGROUND_RED,
    CommandLineFormat.WARNING.value: CommandLineColors.FOREGROUND_YELLOW,
    CommandLineFormat.INFO.value: CommandLineColors.FOREGROUND_MAGENTA,
    CommandLineFormat.LIGHT.value: CommandLineColors.FOREGROUND_WHITE,
    CommandLineFormat.DARK.value: CommandLineColors.FOREGROUND_BLACK,
    CommandLineFormat.TERMINAL.value: (
        CommandLineColors.FOREGROUND_WHITE + CommandLineColors.BACKGROUND_BLACK
    ),
}


def get_cliroute_theme() -> Theme:
    """Rich theme mirroring the semantic format names."""
    return Theme(
        {
            CommandLineFormat.HEADING.value: Style(bold=True),
            CommandLineFormat.SUB_HEADING.value: Style(dim=True),
            CommandLineFormat.DEFAULT.value: Style(),
            CommandLineFormat.PRIMARY.value: Style(color="blue"),
            CommandLineFormat.SECONDARY.value: Style(color="cyan"),
            CommandLineFormat.SUCCESS.value: Style(color="green"),
            CommandLineFormat.DANGER.value: Style(color="red"),
            CommandLineFormat.WARNING.value: Style(color="yellow"),
            CommandLineFormat.INFO.value: Style(color="magenta"),
            CommandLineFormat.LIGHT.value: Style(color="white"),
            CommandLineFormat.DARK.value: Style(color="black"),
            CommandLineFormat.TERMINAL.value: Style(color="white", bgcolor="black"),
        }
    )
