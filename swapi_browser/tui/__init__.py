"""TUI (Terminal User Interface) module for swapi_browser.

Provides a screen-based navigation loop over the film catalog.
"""
from .navigator import Navigator
from .router import Router
from .state import UIState

__all__ = ["Navigator", "Router", "UIState"]
