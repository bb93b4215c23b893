"""Clocks giving the current time, either real or shifted."""

from datetime import datetime, timedelta, timezone


class RealClock:
    """Clock returning the actual local time."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


class SkewClock:
    """Clock that starts at a given Unix time and runs at real speed."""

    def __init__(self, epoch_seconds: int) -> None:
        start = datetime.fromtimestamp(epoch_seconds, timezone.utc)
        self.skew = datetime.now(timezone.utc) - start

    def now(self) -> datetime:
        return (datetime.now(timezone.utc) - self.skew).astimezone()

    def forward(self, delta: timedelta) -> None:
        self.skew -= delta