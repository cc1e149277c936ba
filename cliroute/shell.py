# cliroute — (c) 2025 rtj.dev LLC — MIT Licensed
"""shell.py
Run shell commands and capture their output without raising."""
from __future__ import annotations

import asyncio

from pydantic import BaseModel, ConfigDict

from cliroute.exceptions import CommandExecutionError
from cliroute.logger import logger


class CommandResult(BaseModel):
    """
    Outcome of `execute_command()`.

    Attributes:
        command (str): The command line that was run.
        output (str): Captured standard output, possibly partial on failure.
        error (str | Exception): Captured standard error when the command
            succeeded, or the failure object when it could not be started or
            exited with a non-zero status.
        return_code (int | None): Exit status, None when the process never ran.
    """

    command: str
    output: str = ""
    error: str | Exception = ""
    return_code: int | None = None

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def ok(self) -> bool:
        return self.return_code == 0 and not isinstance(self.error, Exception)


async def execute_command(command: str) -> CommandResult:
    """
    Run `command` through the system shell and wait for it to finish.

    Never raises for command failures. A non-zero exit status yields a
    `CommandExecutionError` in `error`; a command that cannot be spawned yields
    the exception that prevented it (`OSError`, or `ValueError`/`TypeError` for a
    command line the OS cannot accept).
    """
    logger.debug("Executing shell command: %s", command)
    try:
        process = await asyncio.create_subprocess_shell(
            command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await process.communicate()
    except (OSError, ValueError, TypeError) as error:
        logger.warning("Could not start command '%s': %s", command, error)
        return CommandResult(command=str(command), output="", error=error)

    output = stdout.decode("utf-8", errors="replace")
    error_output = stderr.decode("utf-8", errors="replace")

    if process.returncode != 0:
        logger.info(
            "Command '%s' exited with status %s.", command, process.returncode
        )
        return CommandResult(
            command=command,
            output=output,
            error=CommandExecutionError(command, process.returncode, error_output),
            return_code=process.returncode,
        )

    return CommandResult(
        command=command,
        output=output,
        error=error_output,
        return_code=process.returncode,
    )
