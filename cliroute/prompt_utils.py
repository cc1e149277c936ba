# cliroute — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Interactive input helpers.

`get_command_line_input()` suspends the calling coroutine until the user enters
one line at the terminal. Line editing is delegated to Prompt Toolkit; there is
no timeout and cancellation only happens through process-level interruption.
"""
from __future__ import annotations

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import AnyFormattedText

from cliroute.logger import logger


async def get_command_line_input(
    question: AnyFormattedText = "",
    session: PromptSession | None = None,
) -> str:
    """Prompt the user with `question` and return the entered line."""
    session = session or PromptSession()
    answer = await session.prompt_async(question)
    logger.debug("Received %d characters of interactive input.", len(answer))
    return answer
