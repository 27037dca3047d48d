"""Screen modules for the TUI."""
from __future__ import annotations

# Import all screen modules to register them with the router
from . import film, main, resources

__all__ = ["film", "main", "resources"]
