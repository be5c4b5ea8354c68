"""royaltyscope: catalog matching and royalty pipeline valuation."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("royaltyscope")
except PackageNotFoundError:
    # Development environment fallback
    __version__ = "0.1.0-dev"
