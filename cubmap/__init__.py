"""Load and validate .cub raycaster scenes and read their XPM textures."""

__version__ = "0.1.0"