[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nerdshade"
version = "0.1.0"
description = "Compute screen brightness from sunrise and sunset or a fixed schedule, and apply it to Hyprland through hyprsunset"
requires-python = ">=3.10"
dependencies = []
keywords = ["hyprland", "hyprsunset", "color temperature", "gamma", "night light", "sunrise", "sunset"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers :: Applets",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nerdshade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
