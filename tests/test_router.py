import asyncio

import pytest
from rich.console import Console

from cliroute import FlagDefinition, FlagRouter, RouterConfig, run
from cliroute.exceptions import (
    CliRouteError,
    InvalidArgumentError,
    InvalidArgumentsError,
)
from cliroute.router import build_supported_usage
from cliroute.themes import get_cliroute_theme
from cliroute.versioning import LocalDescriptorVersionSource, StaticVersionSource

BANNER = "ERROR: Something went wrong. Run 'my-cli -h' for supported usage"


def recording_flag(name: str, calls: list, description: str = "") -> FlagDefinition:
    async def handler(*args):
        calls.append((name, args))

    return FlagDefinition(name=name, description=description, handler=handler)


@pytest.mark.asyncio
async def test_no_flags_exits_without_dispatch(capsys):
    calls: list = []
    router = FlagRouter({"supported_arguments": {"-g": recording_flag("greet", calls)}})

    with pytest.raises(SystemExit) as exc_info:
        await router.run(["node", "script.js"])

    assert exc_info.value.code == 1
    assert calls == []
    captured = capsys.readouterr()
    assert "No input flags provided. Run 'my-cli -h' for supported usage." in captured.out


@pytest.mark.asyncio
async def test_help_handler_invoked_once_without_arguments():
    calls: list = []
    help_flag = recording_flag("help", calls)
    router = FlagRouter(
        RouterConfig(supported_arguments={"-h": help_flag, "--help": help_flag})
    )

    await router.run(["node", "script.js", "-h"])

    assert calls == [("help", ())]


@pytest.mark.asyncio
async def test_values_are_passed_positionally():
    calls: list = []
    router = FlagRouter({"supported_arguments": {"-g": recording_flag("greet", calls)}})

    await router.run(["prog", "-g", "Ada", "Grace"])

    assert calls == [("greet", ("Ada", "Grace"))]


@pytest.mark.asyncio
async def test_unknown_flag_prints_banner_and_raises(capsys):
    calls: list = []
    router = FlagRouter({"supported_arguments": {"-g": recording_flag("greet", calls)}})

    with pytest.raises(InvalidArgumentError, match="-x"):
        await router.run(["node", "script.js", "-g", "-x", "foo", "bar"])

    assert calls == []
    assert BANNER in capsys.readouterr().out


@pytest.mark.asyncio
async def test_invalid_raw_arguments():
    router = FlagRouter()
    with pytest.raises(InvalidArgumentsError):
        await router.run("prog -h")  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_handlers_run_sequentially_in_order():
    events: list[str] = []

    async def slow(*_):
        events.append("slow:start")
        await asyncio.sleep(0.05)
        events.append("slow:end")

    def fast(*_):
        events.append("fast:start")
        events.append("fast:end")

    async def last(*_):
        events.append("last:start")

    router = FlagRouter(
        {
            "supported_arguments": {
                "--slow": {"name": "slow", "handler": slow},
                "--fast": {"name": "fast", "handler": fast},
                "--last": {"name": "last", "handler": last},
            }
        }
    )
    await router.run(["prog", "--slow", "--fast", "--last"])

    assert events == [
        "slow:start",
        "slow:end",
        "fast:start",
        "fast:end",
        "last:start",
    ]


@pytest.mark.asyncio
async def test_handler_that_returns_awaitable_is_awaited():
    events: list[str] = []

    async def later():
        await asyncio.sleep(0.01)
        events.append("first")

    def returns_awaitable(*_):
        return later()

    router = FlagRouter(
        {
            "supported_arguments": {
                "-a": {"name": "a", "handler": returns_awaitable},
                "-b": {"name": "b", "handler": lambda *_: events.append("second")},
            }
        }
    )
    await router.run(["prog", "-a", "-b"])

    assert events == ["first", "second"]


@pytest.mark.asyncio
async def test_failing_handler_aborts_remaining_dispatch():
    calls: list = []

    async def boom(*_):
        raise RuntimeError("boom")

    router = FlagRouter(
        {
            "supported_arguments": {
                "-a": {"name": "a", "handler": boom},
                "-b": recording_flag("b", calls),
            }
        }
    )
    with pytest.raises(RuntimeError, match="boom"):
        await router.run(["prog", "-a", "-b"])

    assert calls == []


def test_caller_entries_override_builtins():
    calls: list = []
    version_flag = recording_flag("version", calls, "Custom version")
    router = FlagRouter({"supported_arguments": {"-v": version_flag}})

    assert router.registry["-v"] is version_flag
    assert router.registry["--version"].description.startswith(
        "Prints the currently installed version"
    )
    assert set(router.registry) == {"-h", "--help", "-v", "--version"}


def test_registry_is_read_only():
    router = FlagRouter()
    with pytest.raises(TypeError):
        router.registry["-z"] = router.registry["-h"]  # type: ignore[index]


def test_tool_name_falls_back_to_default():
    assert FlagRouter().cli_tool_name == "my-cli"
    assert FlagRouter({"cli_tool_name": None}).cli_tool_name == "my-cli"
    assert FlagRouter({"cli_tool_name": "tool"}).cli_tool_name == "tool"


def test_router_rejects_unknown_config_type():
    with pytest.raises(TypeError):
        FlagRouter(["-h"])  # type: ignore[arg-type]


def test_build_supported_usage_groups_aliases():
    help_flag = FlagDefinition(name="help", description="Show help", handler=print)
    mode_flag = FlagDefinition(
        name="mode",
        description="Pick a mode",
        allowed_options=["fast", "safe"],
        handler=print,
    )
    usage = build_supported_usage({"-h": help_flag, "--help": help_flag, "-m": mode_flag})

    assert usage == {
        "help": {"Flags": ["-h", "--help"], "Options": [], "Description": "Show help"},
        "mode": {
            "Flags": ["-m"],
            "Options": ["fast", "safe"],
            "Description": "Pick a mode",
        },
    }


@pytest.mark.asyncio
async def test_builtin_help_prints_usage_table(capsys):
    router = FlagRouter({"cli_tool_name": "tool"})
    router.console = Console(width=200, theme=get_cliroute_theme())

    await router.run(["prog", "--help"])

    out = capsys.readouterr().out
    assert "tool CLI usage below:" in out
    assert "-h, --help" in out
    assert "-v, --version" in out
    assert "Prints the currently supported usage of the CLI" in out


@pytest.mark.asyncio
async def test_builtin_version_with_static_number(capsys):
    router = FlagRouter({"cli_tool_name": "tool", "version_number": "1.2.3"})

    await router.run(["prog", "-v"])

    assert "tool CLI version: 1.2.3" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_builtin_version_reports_local_read_failure(tmp_path, capsys):
    source = LocalDescriptorVersionSource(
        tmp_path / "missing.toml",
        global_source=StaticVersionSource("2.0.0", label="global"),
    )
    router = FlagRouter({"version_source": source})

    await router.run(["prog", "--version"])

    out = capsys.readouterr().out
    assert "Unable to determine the local version of my-cli." in out
    assert "my-cli CLI global version: 2.0.0" in out


@pytest.mark.asyncio
async def test_builtin_version_reports_local_and_global(tmp_path, capsys):
    descriptor = tmp_path / "pyproject.toml"
    descriptor.write_text('[project]\nname = "my-cli"\nversion = "0.9.0"\n')
    source = LocalDescriptorVersionSource(
        descriptor, global_source=StaticVersionSource("1.0.0", label="global")
    )
    router = FlagRouter({"version_source": source})

    await router.run(["prog", "-v"])

    out = capsys.readouterr().out
    assert "my-cli CLI local version: 0.9.0" in out
    assert "my-cli CLI global version: 1.0.0" in out


def test_handle_error_prints_banner_and_raises(capsys):
    router = FlagRouter()

    with pytest.raises(CliRouteError, match="Custom failure"):
        router.handle_error("Custom failure")
    assert BANNER in capsys.readouterr().out

    with pytest.raises(InvalidArgumentError):
        router.handle_error("bad flag", InvalidArgumentError)


@pytest.mark.asyncio
async def test_module_level_run():
    calls: list = []
    await run(
        {"supported_arguments": {"--go": recording_flag("go", calls)}},
        argv=["prog", "--go", "now"],
    )
    assert calls == [("go", ("now",))]
