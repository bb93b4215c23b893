"""Applying temperature and gamma through a running hyprsunset via hyprctl."""

from __future__ import annotations

import logging
import subprocess
from datetime import datetime

from nerdshade.brightness import get_brightness, scale_brightness
from nerdshade.config import Config

logger = logging.getLogger(__name__)


class HyprctlError(RuntimeError):
    """Raised when the hyprctl command exits with a non-zero status."""

    def __init__(self, returncode: int, stdout: str = "", stderr: str = "") -> None:
        super().__init__(f"exit status {returncode}")
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def shellout(command: str) -> subprocess.CompletedProcess:
    """Run ``command`` through ``/bin/sh -c`` and capture its output as text."""
    return subprocess.run(
        ["/bin/sh", "-c", command],
        capture_output=True,
        text=True,
        check=False,
    )


def hyprctl(cmd: str, subcmd: str, value: int) -> None:
    """Call ``cmd hyprsunset <subcmd> <value>``.

    hyprctl itself does not report bad arguments through its exit status,
    but a failing command still raises HyprctlError.
    """
    logger.debug("running hyprctl %s=%s", subcmd, value)
    result = shellout(f"{cmd} hyprsunset {subcmd} {value}")
    if result.stderr:
        logger.warning("hyprctl subcmd=%r stderr=%r", subcmd, result.stderr)
    logger.debug("hyprctl subcmd=%r stdout=%r", subcmd, result.stdout)
    if result.returncode != 0:
        raise HyprctlError(result.returncode, result.stdout, result.stderr)


def set_temperature(config: Config, temperature: int) -> None:
    """Set the colour temperature in the running session."""
    hyprctl(config.hyprctl_cmd, "temperature", temperature)


def set_gamma(config: Config, gamma: int) -> None:
    """Set the gamma in the running session."""
    hyprctl(config.hyprctl_cmd, "gamma", gamma)


def get_and_set_brightness(config: Config, when: datetime) -> tuple[int, int]:
    """Compute the brightness for ``when`` and apply temperature and gamma.

    Failures are logged, not raised. Returns the temperature and gamma sent.
    """
    try:
        brightness = get_brightness(config, when)
    except ValueError as err:
        logger.warning("error getting brightness err=%s", err)
        brightness = 0.0
    temperature = scale_brightness(brightness, config.night_temp, config.day_temp)
    gamma = scale_brightness(brightness, config.night_gamma, config.day_gamma)
    try:
        set_temperature(config, temperature)
    except (HyprctlError, OSError) as err:
        logger.warning("error setting temperature err=%s", err)
    try:
        set_gamma(config, gamma)
    except (HyprctlError, OSError) as err:
        logger.warning("error setting gamma err=%s", err)
    return temperature, gamma