"""Reading and validation of .cub raycaster scenes and their XPM textures."""

__version__ = "0.1.0"