"""Parse and validate .cub scene files and load XPM textures into images."""

__version__ = "0.1.0"
__all__ = ["__version__"]