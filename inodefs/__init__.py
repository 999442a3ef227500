"""In-memory i-node file system simulator with menus and command scripts."""

__version__ = "1.0.0"
__all__ = ["partition", "directory", "files", "navigation", "automation", "menu"]