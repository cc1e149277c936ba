"""
cliroute

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .ansi import (
    FORMAT_CODES,
    CommandLineColors,
    CommandLineFormat,
    get_cliroute_theme,
)

__all__ = [
    "CommandLineColors",
    "CommandLineFormat",
    "FORMAT_CODES",
    "get_cliroute_theme",
]
