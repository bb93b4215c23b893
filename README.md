# nerdshade

nerdshade works out how bright the screen should be at a given moment,
from 0.0 (night) to 1.0 (day), and turns that level into a color
temperature and a gamma value for a running Hyprland session, applied
through `hyprctl hyprsunset`. The level follows your location's sunrise
and sunset, or a fixed wakeup/bedtime schedule, with a smooth transition
at each end of the day.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library. Applying
values needs Hyprland with `hyprsunset` running and `hyprctl` available.

## Usage

### Brightness level

```python
from datetime import datetime, timedelta
from nerdshade.brightness import get_local_brightness, scale_brightness

now = datetime.now().astimezone()
level = get_local_brightness(now, 48.516, 9.120, timedelta(hours=1))
temperature = scale_brightness(level, 4000, 6500)
gamma = scale_brightness(level, 90, 100)
```

`nerdshade.brightness` provides:

- `sunrise_sunset(latitude, longitude, day)` – UTC sunrise and sunset for
  a `date`; raises `ValueError` where the sun does not rise or set that day.
- `brightness_level(when, sunrise, sunset, transition)` – 0.0 at or
  outside sunrise/sunset, rising over `transition` after sunrise, falling
  over `transition` before sunset, 1.0 in between. Values are rounded to
  three decimals.
- `get_local_brightness(when, latitude, longitude, transition)` – the
  level for a location (0.0 where the sun neither rises nor sets).
- `get_scheduled_brightness(when, wakeup, bedtime, transition)` – the
  level for fixed `"HH:MM"` wakeup and bedtime values on the day of `when`.
- `parse_hour_minute(text)` – parses a 24-hour `"HH:MM"` string into
  `(hour, minute)`; raises `ValueError` when malformed or out of range.
- `get_brightness(config, when)` – uses the schedule if `config.wakeup`
  is set, the location otherwise.
- `scale_brightness(brightness, low, high)` – maps a level onto an integer
  range.

### Configuration

`nerdshade.config.Config` is a dataclass holding the settings, with these
defaults: `night_temp=4000`, `day_temp=6500`, `night_gamma=90`,
`day_gamma=100`, `latitude=48.516`, `longitude=9.120`, `wakeup=""`,
`bedtime=""`, `hyprctl_cmd="hyprctl"` and `transition_duration` of one hour.
The module also has `round_float`, `round_float3`, `time_ratio` and
`both_or_none` (true when two strings are both set or both empty).

### Applying to Hyprland

```python
from datetime import datetime
from nerdshade.config import Config
from nerdshade.hypr import get_and_set_brightness

temperature, gamma = get_and_set_brightness(Config(), datetime.now().astimezone())
```

`get_and_set_brightness` computes the level, sets temperature and gamma
and returns the two values it sent; failures are logged as warnings rather
than raised. `set_temperature`, `set_gamma` and `hyprctl(cmd, subcmd, value)`
run `<cmd> hyprsunset <subcmd> <value>` through `/bin/sh` and raise
`HyprctlError` (message `exit status N`) when the command exits non-zero.
Note that hyprctl itself reports bad arguments on standard output with a
zero exit status.

### Clocks

`nerdshade.clock.RealClock().now()` returns the current local time.
`SkewClock(epoch_seconds)` starts at the given Unix time and runs at real
speed; `forward(delta)` moves it ahead.

## What it does not do

The package has no command-line program and no loop that keeps updating
the screen on its own. To run continuously, call `get_and_set_brightness`
periodically from your own script or service.