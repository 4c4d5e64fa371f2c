"""Tests for the scripted demo entry point"""

import pytest

import demo_core


DEMO_VARS = ["ROBOT_MAX_SPEED", "ROBOT_B", "ROBOT_USE_PID", "ROBOT_LOOP_INTERVAL"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in DEMO_VARS:
        # setenv first so values loaded from .env files are removed afterwards
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def captured(monkeypatch):
    calls = []

    async def fake_run_demo(script, use_pid=False, drive_config=None, supervisor_config=None):
        calls.append((script, drive_config, supervisor_config))

    monkeypatch.setattr(demo_core, "run_demo", fake_run_demo)
    return calls


def test_demo_uses_env_file_tuning(tmp_path, captured):
    env_file = tmp_path / "tuning.env"
    env_file.write_text("ROBOT_MAX_SPEED=0.5\nROBOT_B=0.4\nROBOT_LOOP_INTERVAL=0.05\n")

    demo_core.main("turn", use_pid=False, env_file=str(env_file))

    script, drive_config, supervisor_config = captured[0]
    assert script == "turn"
    assert drive_config.max_speed == 0.5
    assert drive_config.b == 0.4
    assert drive_config.use_pid is False
    assert drive_config.left_pid.period == 0.05
    assert supervisor_config.loop_interval == 0.05


def test_demo_pid_flag_overrides_env(captured):
    demo_core.main("forward", use_pid=True)

    _, drive_config, _ = captured[0]
    assert drive_config.use_pid is True


def test_demo_refuses_invalid_config(tmp_path, captured):
    env_file = tmp_path / "bad.env"
    env_file.write_text("ROBOT_LOOP_INTERVAL=nan\n")

    with pytest.raises(SystemExit) as exc_info:
        demo_core.main("forward", env_file=str(env_file))

    assert exc_info.value.code == 1
    assert captured == []
