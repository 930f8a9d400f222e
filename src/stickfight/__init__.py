"""stickfight - kinematic stick-figure fighter for a side-view brawler."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("stickfight")
except PackageNotFoundError:
    __version__ = "unknown"
