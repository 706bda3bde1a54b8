"""Display-independent state of a dynamic tiling window manager and a dynamic menu, with a file-testing filter."""

__version__ = "0.1.0"