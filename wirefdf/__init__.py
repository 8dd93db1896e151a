"""Height-map reading, XPM parsing and printf-style formatting for wireframe renderers."""

__version__ = "0.1.0"
__all__ = ["colornames", "wordtab", "xpm", "printf", "lineparse", "mapfile"]