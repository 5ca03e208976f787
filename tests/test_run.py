"""Tests for the command-line entry point."""

import json

import pytest

import swarmfield.run as run


@pytest.fixture(autouse=True)
def logging_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(run, "configure_logging", lambda settings, **kwargs: calls.append((settings, kwargs)))
    monkeypatch.setattr(run, "shutdown_logging", lambda: None)
    return calls


def write_config(tmp_path, environment) -> str:
    path = tmp_path / "swarm.json"
    path.write_text(json.dumps({"environment": environment}))
    return str(path)


def test_missing_config_argument() -> None:
    with pytest.raises(SystemExit) as exc:
        run.main([])
    assert exc.value.code == 1


def test_bad_option() -> None:
    with pytest.raises(SystemExit) as exc:
        run.main(["--nope"])
    assert exc.value.code == 1


def test_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        run.main(["-h"])
    assert exc.value.code is None
    assert "Usage" in capsys.readouterr().out


def test_successful_run(tmp_path) -> None:
    path = write_config(tmp_path, {"ticks_per_second": 5, "time_limit": 1, "random_seed": 3})
    with pytest.raises(SystemExit) as exc:
        run.main(["-c", path])
    assert exc.value.code == 0


def test_invalid_config_exits_with_error(tmp_path) -> None:
    path = write_config(tmp_path, {"actors": {"number": -1}})
    with pytest.raises(SystemExit) as exc:
        run.main(["--config", path])
    assert exc.value.code == 1


def test_missing_file_exits_with_error(tmp_path) -> None:
    with pytest.raises(SystemExit) as exc:
        run.main(["-c", str(tmp_path / "absent.json")])
    assert exc.value.code == 1


def test_console_logging_uses_plain_setup(tmp_path, logging_calls) -> None:
    path = write_config(tmp_path, {"time_limit": 0, "logging": {"level": "INFO"}})
    with pytest.raises(SystemExit) as exc:
        run.main(["-c", path])
    assert exc.value.code == 0
    assert logging_calls == [({"level": "INFO"}, {})]


def test_file_logging_archive_named_after_config(tmp_path, logging_calls) -> None:
    path = write_config(tmp_path, {"time_limit": 0, "logging": {"to_file": True}})
    with pytest.raises(SystemExit) as exc:
        run.main(["-c", path])
    assert exc.value.code == 0
    ((settings, kwargs),) = logging_calls
    assert settings["to_file"] is True
    assert kwargs == {"log_filename_prefix": "swarm"}
