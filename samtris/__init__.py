"""A falling-block puzzle game: a window-free game core and a pygame front end."""

__version__ = "0.1.0"