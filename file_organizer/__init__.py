"""Sort the files of a directory into per-type subfolders."""

from .version import __version__

__all__ = ["__version__"]
