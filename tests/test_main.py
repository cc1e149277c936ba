import shutil
import sys
import tempfile
from pathlib import Path

import pytest

import cliroute.__main__ as cliroute_main
from cliroute.__main__ import bootstrap, find_cliroute_config, get_config, main
from cliroute.version import __version__

GREETER_MODULE = """\
def greet(*names):
    print("Hello " + (" ".join(names) or "world") + "!")
"""

GREETER_CONFIG = """\
cli_tool_name: greeter
flags:
  - tokens: ["-g", "--greet"]
    name: greet
    description: Say hello
    handler: cliroute_test_greeter.greet
"""


@pytest.fixture(autouse=True)
def fake_home(monkeypatch):
    """Redirect Path.home() to a temporary directory for all tests."""
    temp_home = Path(tempfile.mkdtemp())
    monkeypatch.setattr(Path, "home", lambda: temp_home)
    yield temp_home
    shutil.rmtree(temp_home, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    """Run every test from an empty directory with logging setup disabled."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CLIROUTE_CONFIG", raising=False)
    monkeypatch.setattr(cliroute_main, "setup_logging", lambda: None)
    sys_path_before = list(sys.path)
    yield
    sys.path[:] = sys_path_before


def test_find_config_in_cwd(tmp_path):
    config_file = tmp_path / "cliroute.yaml"
    config_file.touch()
    assert find_cliroute_config() == config_file


def test_find_config_none():
    assert find_cliroute_config() is None


def test_find_config_from_environment(tmp_path, monkeypatch):
    config_file = tmp_path / "elsewhere" / "tool.toml"
    config_file.parent.mkdir()
    config_file.touch()
    monkeypatch.setenv("CLIROUTE_CONFIG", str(config_file))
    assert find_cliroute_config() == config_file


def test_bootstrap_with_global_config(fake_home):
    config_file = fake_home / ".config" / "cliroute" / "cliroute.yaml"
    config_file.parent.mkdir(parents=True)
    config_file.touch()
    assert bootstrap() == config_file
    assert str(config_file.parent) in sys.path


def test_get_config_without_file():
    config = get_config()
    assert config.cli_tool_name == "cliroute"
    assert config.version_number == __version__


def test_main_prints_version(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["cliroute", "-v"])
    main()
    assert f"cliroute CLI version: {__version__}" in capsys.readouterr().out


def test_main_without_flags_exits(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["cliroute"])
    with pytest.raises(SystemExit) as exc_info:
        main()
    assert exc_info.value.code == 1


def test_main_with_unknown_flag_exits(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["cliroute", "--nope"])
    with pytest.raises(SystemExit) as exc_info:
        main()
    assert exc_info.value.code == 1
    assert "Run 'cliroute -h' for supported usage" in capsys.readouterr().out


def test_main_runs_configured_flags(tmp_path, monkeypatch, capsys):
    (tmp_path / "cliroute_test_greeter.py").write_text(GREETER_MODULE)
    (tmp_path / "cliroute.yaml").write_text(GREETER_CONFIG)
    monkeypatch.setattr(sys, "argv", ["greeter", "--greet", "Ada", "Grace"])
    monkeypatch.delitem(sys.modules, "cliroute_test_greeter", raising=False)

    main()

    assert "Hello Ada Grace!" in capsys.readouterr().out
