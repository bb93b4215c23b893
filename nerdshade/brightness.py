"""Brightness level computation from sun position or a fixed schedule."""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, timedelta, timezone

from nerdshade.config import Config, round_float3, time_ratio

logger = logging.getLogger(__name__)

_SECONDS_IN_A_DAY = 86400
_UNIX_EPOCH_JULIAN_DAY = 2440587.5
_J2000 = 2451545
_DEGREE = math.pi / 180


def _julian_day(moment: datetime) -> float:
    return int(moment.timestamp()) / _SECONDS_IN_A_DAY + _UNIX_EPOCH_JULIAN_DAY


def _from_julian_day(day: float) -> datetime:
    seconds = int((day - _UNIX_EPOCH_JULIAN_DAY) * _SECONDS_IN_A_DAY)
    return datetime.fromtimestamp(seconds, timezone.utc)


def sunrise_sunset(latitude: float, longitude: float, day: date) -> tuple[datetime, datetime]:
    """Return UTC sunrise and sunset for the given place and day.

    Raises ValueError when the sun does not rise or set on that day.
    """
    noon = datetime(day.year, day.month, day.day, 12, tzinfo=timezone.utc)
    mean_noon = _julian_day(noon) - longitude / 360

    anomaly = math.remainder(357.5291 + 0.98560028 * (mean_noon - _J2000), 360)
    if anomaly < 0:
        anomaly += 360
    anomaly_rad = anomaly * _DEGREE
    center = (
        1.9148 * math.sin(anomaly_rad)
        + 0.0200 * math.sin(2 * anomaly_rad)
        + 0.0003 * math.sin(3 * anomaly_rad)
    )
    perihelion = 102.93005 + 0.3179526 * (mean_noon - _J2000) / 36525
    ecliptic = math.fmod(anomaly + center + 180 + perihelion, 360)
    transit = (
        mean_noon
        + 0.0053 * math.sin(anomaly_rad)
        - 0.0069 * math.sin(2 * ecliptic * _DEGREE)
    )
    declination = math.asin(math.sin(ecliptic * _DEGREE) * 0.39779) / _DEGREE

    lat_rad = latitude * _DEGREE
    decl_rad = declination * _DEGREE
    numerator = -0.01449 - math.sin(lat_rad) * math.sin(decl_rad)
    denominator = math.cos(lat_rad) * math.cos(decl_rad)
    cos_hour_angle = numerator / denominator
    if cos_hour_angle > 1 or cos_hour_angle < -1:
        raise ValueError("the sun does not rise or set on this day at this latitude")
    fraction = math.acos(cos_hour_angle) / _DEGREE / 360
    return _from_julian_day(transit - fraction), _from_julian_day(transit + fraction)


def brightness_level(
    when: datetime, sunrise: datetime, sunset: datetime, transition: timedelta
) -> float:
    """Return the brightness at ``when`` between 0.0 (night) and 1.0 (day)."""
    if when <= sunrise or when >= sunset:
        logger.debug("it is night")
        return 0.0
    if when < sunrise + transition:
        return round_float3(time_ratio(when, sunrise + transition, transition))
    if sunset - transition < when < sunset:
        return round_float3(1.0 - time_ratio(when, sunset, transition))
    return 1.0


def parse_hour_minute(text: str) -> tuple[int, int]:
    """Parse a 24-hour ``"HH:MM"`` string into hour and minute."""
    parts = text.split(":")
    if len(parts) != 2:
        raise ValueError('Time value malformed, needs to be of the form "HH:MM"')
    hour_text, minute_text = parts
    try:
        hour = int(hour_text.strip() if hour_text.strip() == hour_text else "x")
        minute = int(minute_text.strip() if minute_text.strip() == minute_text else "x")
    except ValueError:
        raise ValueError(f"Time value {text!r} is not numeric") from None
    if not 0 <= hour <= 23:
        raise ValueError(f"Hour value ({hour}) must be >=0 and <=23")
    if not 0 <= minute <= 59:
        raise ValueError(f"Minute value ({minute}) must be >=0 and <=59")
    logger.debug("parsed hour/minute hour=%s minute=%s", hour, minute)
    return hour, minute


def get_local_brightness(
    when: datetime, latitude: float, longitude: float, transition: timedelta
) -> float:
    """Return the brightness at ``when`` for the given location."""
    try:
        rise, set_ = sunrise_sunset(latitude, longitude, when.date())
    except ValueError:
        logger.debug("no sunrise or sunset lat=%s lon=%s", latitude, longitude)
        return 0.0
    logger.debug(
        "calculated sun times sunrise=%s sunset=%s lat=%s lon=%s",
        rise, set_, latitude, longitude,
    )
    if when.tzinfo is None:
        rise = rise.astimezone().replace(tzinfo=None)
        set_ = set_.astimezone().replace(tzinfo=None)
    else:
        rise = rise.astimezone(when.tzinfo)
        set_ = set_.astimezone(when.tzinfo)
    return brightness_level(when, rise, set_, transition)


def get_scheduled_brightness(
    when: datetime, wakeup: str, bedtime: str, transition: timedelta
) -> float:
    """Return the brightness at ``when`` for fixed wakeup and bedtime values."""
    wakeup_hour, wakeup_minute = parse_hour_minute(wakeup)
    bedtime_hour, bedtime_minute = parse_hour_minute(bedtime)
    rise = when.replace(hour=wakeup_hour, minute=wakeup_minute, second=0, microsecond=0)
    set_ = when.replace(hour=bedtime_hour, minute=bedtime_minute, second=0, microsecond=0)
    logger.debug("scheduled wakeup/bedtime rise=%s set=%s", rise, set_)
    return brightness_level(when, rise, set_, transition)


def get_brightness(config: Config, when: datetime) -> float:
    """Return the brightness from the fixed schedule if set, else from location."""
    if config.wakeup:
        brightness = get_scheduled_brightness(
            when, config.wakeup, config.bedtime, config.transition_duration
        )
        logger.debug("scheduled brightness brightness=%s", brightness)
    else:
        brightness = get_local_brightness(
            when, config.latitude, config.longitude, config.transition_duration
        )
        logger.debug("local brightness brightness=%s", brightness)
    return brightness


def scale_brightness(brightness: float, low: int, high: int) -> int:
    """Map a brightness in [0, 1] onto the integer range ``low``..``high``."""
    return int((float(high) - float(low)) * brightness + float(low))