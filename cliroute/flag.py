# cliroute — (c) 2025 rtj.dev LLC — MIT Licensed
"""flag.py

Defines `FlagDefinition`, the entry type of a flag registry.

A registry maps flag tokens (`-h`, `--help`) to definitions. Several tokens may
point at definitions sharing one canonical `name`; they are shown as a single
row by the usage table.
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cliroute.exceptions import InvalidFlagDefinitionError
from cliroute.utils import ensure_async


class FlagDefinition(BaseModel):
    """
    A flag's name, help text, allowed sub-options and handler.

    The handler may be sync or async; it is normalised to a coroutine function
    so the router can always await it. Calling the definition runs the handler
    with the flag's positional values.

    Attributes:
        name (str): Canonical name shared by all aliases of the flag.
        description (str): Help text shown in the usage table.
        allowed_options (list[str]): Option strings listed in the usage table.
        handler (Callable): Invoked as `handler(*values)`.
    """

    name: str
    description: str = ""
    allowed_options: list[str] = Field(default_factory=list)
    handler: Callable[..., Awaitable[Any]]

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @field_validator("handler", mode="before")
    @classmethod
    def wrap_handler_as_async(cls, handler: Any) -> Any:
        if not callable(handler):
            raise ValueError("Flag handler must be callable")
        return ensure_async(handler)

    @classmethod
    def from_value(cls, token: str, value: Any) -> FlagDefinition:
        """Accept an existing definition or a mapping with the same fields."""
        if isinstance(value, FlagDefinition):
            return value
        if isinstance(value, dict):
            try:
                return cls(**value)
            except (TypeError, ValueError) as error:
                raise InvalidFlagDefinitionError(
                    f"Invalid definition for flag '{token}': {error}"
                ) from error
        raise InvalidFlagDefinitionError(
            f"Cannot use object of type '{type(value).__name__}' as definition for "
            f"flag '{token}'. Expected a FlagDefinition or a dict."
        )

    async def execute(self, *args: str) -> Any:
        return await self.handler(*args)

    async def __call__(self, *args: str) -> Any:
        return await self.execute(*args)

    def __str__(self) -> str:
        return (
            f"FlagDefinition(name={self.name!r}, description={self.description!r}, "
            f"allowed_options={self.allowed_options!r})"
        )
