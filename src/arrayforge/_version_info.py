"""Version information for arrayforge."""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("arrayforge")
except PackageNotFoundError:
    __version__ = "0.0.0"
