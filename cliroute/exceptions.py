# cliroute — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by cliroute.

The router is fail-fast: anything wrong with the command line is reported once
through `FlagRouter.handle_error()` and raised as one of these exceptions. The
presenter is fail-soft: `execute_command()` never raises, it stores a
`CommandExecutionError` on the returned result instead.

Exception Hierarchy:
- CliRouteError
    ├── InvalidArgumentsError
    ├── InvalidArgumentError
    ├── InvalidFlagDefinitionError
    ├── CommandExecutionError
    └── ConfigError
"""


class CliRouteError(Exception):
    """Base exception for cliroute."""


class InvalidArgumentsError(CliRouteError):
    """Exception raised when the raw argument list is not a sequence of strings."""


class InvalidArgumentError(CliRouteError):
    """Exception raised when a flag token is not present in the flag registry."""


class InvalidFlagDefinitionError(CliRouteError):
    """Exception raised when a registry entry cannot be turned into a FlagDefinition."""


class CommandExecutionError(CliRouteError):
    """Exception describing a shell command that exited with a non-zero status."""

    def __init__(self, command: str, return_code: int | None, stderr: str = ""):
        self.command = command
        self.return_code = return_code
        self.stderr = stderr
        message = f"Command '{command}' exited with status {return_code}"
        if stderr.strip():
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


class ConfigError(CliRouteError):
    """Exception raised when a router configuration file cannot be loaded."""
