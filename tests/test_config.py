"""Tests for configuration loading and the entry point."""

import io
import json

import pytest

from academia.config import DEFAULT_CONFIG, load_config
from academia.core import ConfigurationError
from academia.main import AcademiaPlatform, main


def test_defaults():
    assert load_config() == DEFAULT_CONFIG


def test_file_and_overrides(tmp_path):
    path = tmp_path / "academia.json"
    path.write_text(json.dumps({"rest_port": 9000, "log_level": "info"}))
    config = load_config(str(path), overrides={"rest_port": None, "rest_host": "0.0.0.0"})
    assert config["rest_port"] == 9000
    assert config["rest_host"] == "0.0.0.0"
    assert config["log_level"] == "INFO"


@pytest.mark.parametrize(
    "content",
    ["not json", "[1, 2]", json.dumps({"colour": "blue"}), json.dumps({"log_level": "LOUD"}), json.dumps({"log_level": "NOTSET"}),
     json.dumps({"rest_port": 0})],
)
def test_bad_config_files(tmp_path, content):
    path = tmp_path / "academia.json"
    path.write_text(content)
    with pytest.raises(ConfigurationError):
        load_config(str(path))


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(str(tmp_path / "missing.json"))


def test_main_reports_configuration_error(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "missing.json")]) == 2
    assert "Configuration error" in capsys.readouterr().err


def test_demo_mode(capsys):
    assert main(["--demo"]) == 0
    output = capsys.readouterr().out
    assert "Student: Alice Johnson (ID: 1)" in output
    assert "Demo completed" in output


def test_platform_seeds_shell():
    platform = AcademiaPlatform(load_config(overrides={"seed_demo_data": True}))
    stdout = io.StringIO()
    platform.run_shell(stdin=io.StringIO("0\n"), stdout=stdout)
    assert len(platform.manager.get_all_students()) == 3
    assert platform.manager.get_course("CS101").instructor.name == "Alan Turing"


@pytest.mark.parametrize("alias, level", [("warn", "WARNING"), ("FATAL", "CRITICAL"), ("debug", "DEBUG")])
def test_log_level_aliases_are_normalized(alias, level):
    assert load_config(overrides={"log_level": alias})["log_level"] == level


@pytest.fixture
def served(monkeypatch):
    """Capture the uvicorn config instead of binding a socket."""
    import uvicorn

    configs = []

    def fake_run(self, sockets=None):
        self.started = True
        configs.append(self.config)

    monkeypatch.setattr(uvicorn.Server, "run", fake_run)
    return configs


def test_start_rest_server_with_aliased_log_level(served):
    config = load_config(overrides={"log_level": "WARN", "rest_port": 8123})
    AcademiaPlatform(config).start_rest_server()
    assert len(served) == 1
    assert served[0].port == 8123
    assert served[0].log_level == "warning"


def test_main_rest_mode(served):
    assert main(["--rest", "--log-level", "fatal", "--port", "8124"]) == 0
    assert served[0].port == 8124


def test_main_rejects_log_level_unknown_to_server(served, capsys):
    assert main(["--rest", "--log-level", "NOTSET"]) == 2
    assert served == []
    assert "Unknown log level" in capsys.readouterr().err
