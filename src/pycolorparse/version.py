"""Version information for pycolorparse."""

__version_info__ = (0, 1, 0)
__version__ = ".".join(str(part) for part in __version_info__)
__author__ = "The pycolorparse authors"
__email__ = None
