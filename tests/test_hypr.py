import logging
from datetime import datetime, timedelta, timezone

import pytest

from nerdshade.config import (
    DEFAULT_DAY_GAMMA,
    DEFAULT_DAY_TEMP,
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    DEFAULT_NIGHT_GAMMA,
    DEFAULT_NIGHT_TEMP,
    DEFAULT_TRANSITION_DURATION,
    Config,
)
from nerdshade.hypr import (
    HyprctlError,
    get_and_set_brightness,
    hyprctl,
    set_gamma,
    set_temperature,
    shellout,
)

CEST = timezone(timedelta(hours=2))


@pytest.fixture
def mock_hyprctl(tmp_path):
    calls = tmp_path / "calls.log"
    script = tmp_path / "mock_hyprctl.sh"
    script.write_text(
        "#!/bin/sh\n"
        f'echo "$*" >> "{calls}"\n'
        'if [ "$2" = "temperature" ]; then\n'
        "  echo ok\n"
        'elif [ "$2" = "gamma" ]; then\n'
        '  if [ "$3" -gt 100 ]; then\n'
        '    echo "Invalid gamma value (should be in range 0-100%)"\n'
        "  else\n"
        "    echo ok\n"
        "  fi\n"
        "else\n"
        '  echo "invalid command"\n'
        "fi\n"
    )
    script.chmod(0o755)
    return str(script), calls


def _messages(caplog):
    return [record.getMessage() for record in caplog.records]


def _config(cmd):
    return Config(
        hyprctl_cmd=cmd,
        latitude=DEFAULT_LATITUDE,
        longitude=DEFAULT_LONGITUDE,
        day_gamma=DEFAULT_DAY_GAMMA,
        night_gamma=DEFAULT_NIGHT_GAMMA,
        day_temp=DEFAULT_DAY_TEMP,
        night_temp=DEFAULT_NIGHT_TEMP,
        transition_duration=DEFAULT_TRANSITION_DURATION,
    )


def test_shellout_captures_output_and_status():
    result = shellout("echo out; echo err >&2; exit 3")
    assert result.stdout == "out\n"
    assert result.stderr == "err\n"
    assert result.returncode == 3


@pytest.mark.parametrize(
    "subcmd, value, expected",
    [
        ("temperature", 5000, "subcmd='temperature' stdout='ok\\n'"),
        ("gamma", 95, "subcmd='gamma' stdout='ok\\n'"),
        (
            "gamma",
            101,
            "subcmd='gamma' stdout='Invalid gamma value (should be in range 0-100%)\\n'",
        ),
        ("foo", 123, "subcmd='foo' stdout='invalid command\\n'"),
        ("", 123, "subcmd='' stdout='invalid command\\n'"),
    ],
)
def test_hyprctl_logs_output(mock_hyprctl, caplog, subcmd, value, expected):
    cmd, _ = mock_hyprctl
    caplog.set_level(logging.DEBUG)
    hyprctl(cmd, subcmd, value)
    assert any(expected in message for message in _messages(caplog))


def test_hyprctl_passes_arguments(mock_hyprctl, caplog):
    cmd, calls = mock_hyprctl
    caplog.set_level(logging.DEBUG)
    hyprctl(cmd, "temperature", 5000)
    assert "hyprctl subcmd='temperature' stdout='ok\\n'" in _messages(caplog)
    assert calls.read_text().splitlines() == ["hyprsunset temperature 5000"]


def test_hyprctl_not_found(tmp_path, caplog):
    caplog.set_level(logging.DEBUG)
    missing = tmp_path / "notexisting" / "binary"
    with pytest.raises(HyprctlError) as info:
        hyprctl(str(missing), "foo", 123)
    assert str(info.value) == "exit status 127"
    assert info.value.returncode == 127
    assert any(
        message.startswith("hyprctl subcmd='foo' stderr='/bin/sh: ")
        for message in _messages(caplog)
    )


def test_set_temperature_and_gamma_use_configured_command(mock_hyprctl, caplog):
    cmd, calls = mock_hyprctl
    caplog.set_level(logging.DEBUG)
    config = _config(cmd)
    set_temperature(config, 4500)
    set_gamma(config, 95)
    messages = _messages(caplog)
    assert "hyprctl subcmd='temperature' stdout='ok\\n'" in messages
    assert "hyprctl subcmd='gamma' stdout='ok\\n'" in messages
    assert calls.read_text().splitlines() == [
        "hyprsunset temperature 4500",
        "hyprsunset gamma 95",
    ]


def test_get_and_set_brightness_ok(mock_hyprctl, caplog):
    cmd, calls = mock_hyprctl
    caplog.set_level(logging.DEBUG)
    when = datetime(2025, 4, 16, 7, 25, tzinfo=CEST)
    temperature, gamma = get_and_set_brightness(_config(cmd), when)
    messages = _messages(caplog)
    assert "local brightness brightness=0.9" in messages
    assert "hyprctl subcmd='temperature' stdout='ok\\n'" in messages
    assert "hyprctl subcmd='gamma' stdout='ok\\n'" in messages
    assert calls.read_text().splitlines() == [
        f"hyprsunset temperature {temperature}",
        f"hyprsunset gamma {gamma}",
    ]
    assert DEFAULT_NIGHT_TEMP < temperature < DEFAULT_DAY_TEMP


def test_get_and_set_brightness_not_ok(tmp_path, caplog):
    caplog.set_level(logging.DEBUG)
    missing = tmp_path / "notexisting" / "binary"
    when = datetime(2025, 4, 16, 7, 25, tzinfo=CEST)
    get_and_set_brightness(_config(str(missing)), when)
    warnings = [
        record.getMessage()
        for record in caplog.records
        if record.levelno == logging.WARNING
    ]
    assert any(
        message.startswith("hyprctl subcmd='temperature' stderr='/bin/sh: ")
        for message in warnings
    )
    assert "error setting temperature err=exit status 127" in warnings
    assert "error setting gamma err=exit status 127" in warnings


def test_get_and_set_brightness_bad_schedule_falls_back_to_night(mock_hyprctl, caplog):
    cmd, _ = mock_hyprctl
    config = _config(cmd)
    config.wakeup = "25:00"
    config.bedtime = "22:00"
    when = datetime(2025, 4, 16, 12, 0, tzinfo=CEST)
    assert get_and_set_brightness(config, when) == (
        DEFAULT_NIGHT_TEMP,
        DEFAULT_NIGHT_GAMMA,
    )
    assert any(
        message.startswith("error getting brightness") for message in _messages(caplog)
    )