"""
cliroute

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import asyncio
import os
import sys
from pathlib import Path
from typing import Any

from cliroute.config import RouterConfig, loader
from cliroute.exceptions import CliRouteError
from cliroute.router import FlagRouter
from cliroute.utils import setup_logging
from cliroute.version import __version__


def find_cliroute_config() -> Path | None:
    candidates = [
        Path.cwd() / "cliroute.yaml",
        Path.cwd() / "cliroute.toml",
        Path.cwd() / ".cliroute.yaml",
        Path.cwd() / ".cliroute.toml",
        Path(os.environ.get("CLIROUTE_CONFIG", "cliroute.yaml")),
        Path.home() / ".config" / "cliroute" / "cliroute.yaml",
        Path.home() / ".config" / "cliroute" / "cliroute.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def bootstrap() -> Path | None:
    config_path = find_cliroute_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def get_config() -> RouterConfig:
    config_path = bootstrap()
    if config_path:
        return loader(config_path)
    return RouterConfig(cli_tool_name="cliroute", version_number=__version__)


def main() -> Any:
    setup_logging()
    try:
        router = FlagRouter(get_config())
        return asyncio.run(router.run())
    except CliRouteError:
        sys.exit(1)


if __name__ == "__main__":
    main()
