"""Compute screen brightness by time of day and apply it to Hyprland via hyprsunset."""

__version__ = "0.1.0"