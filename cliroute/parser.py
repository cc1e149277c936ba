# cliroute — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Groups raw process arguments by flag and validates them against a registry.

Parsing is a single left-to-right scan. Every token starting with `-` opens (or
reopens) a bucket named after itself; every other token is appended to the
bucket that is currently open. Tokens seen before the first flag, normally the
interpreter and script paths, land in the reserved `RESERVED_BUCKET`.

Example:
    >>> parse_input_arguments(["python", "tool.py", "-x", "foo", "bar", "-h"])
    {'unknowns': ['python', 'tool.py'], '-x': ['foo', 'bar'], '-h': []}

No value coercion or POSIX short-flag bundling is performed: `-abc` is simply
the flag token `-abc`.
"""
from __future__ import annotations

import sys
from typing import Any, Mapping, Sequence

from cliroute.exceptions import InvalidArgumentError, InvalidArgumentsError
from cliroute.logger import logger

RESERVED_BUCKET = "unknowns"

ParsedArguments = dict[str, list[str]]


def is_flag_token(token: str) -> bool:
    return token.startswith("-")


def parse_input_arguments(argv: Sequence[str] | None = None) -> ParsedArguments:
    """
    Partition `argv` (default `sys.argv`) into flag buckets.

    Raises:
        InvalidArgumentsError: If `argv` is not a list or tuple of strings.
    """
    if argv is None:
        argv = sys.argv
    if not isinstance(argv, (list, tuple)):
        raise InvalidArgumentsError(
            f"Invalid arguments: expected a list of strings, got {type(argv).__name__}"
        )

    parsed_args: ParsedArguments = {RESERVED_BUCKET: []}
    current_bucket = RESERVED_BUCKET
    for token in argv:
        if not isinstance(token, str):
            raise InvalidArgumentsError(
                f"Invalid arguments: {token!r} is not a string"
            )
        if is_flag_token(token):
            current_bucket = token
            parsed_args.setdefault(token, [])
        else:
            parsed_args[current_bucket].append(token)

    logger.debug("Parsed arguments: %s", parsed_args)
    return parsed_args


def process_parsed_arguments(
    parsed_args: Mapping[str, list[str]], registry: Mapping[str, Any]
) -> ParsedArguments:
    """
    Drop the reserved bucket and check every remaining flag against `registry`.

    Returns a new mapping in the original order; `parsed_args` is left untouched.

    Raises:
        InvalidArgumentError: Naming the first flag, in insertion order, that is
            missing from `registry`.
    """
    processed_args = {
        name: list(values)
        for name, values in parsed_args.items()
        if name != RESERVED_BUCKET
    }
    for arg_name in processed_args:
        if arg_name not in registry:
            raise InvalidArgumentError(f"Invalid argument: {arg_name}")
    return processed_args
