"""Main router and screen registry for the TUI."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Sequence, Union

import httpx

from ..errors import SwapiBrowserError
from .components import choose, render_error
from .screen_states import Screen

if TYPE_CHECKING:
    from rich.console import Console

    from ..fetcher import Fetcher
    from ..settings import Settings
    from .navigator import Navigator
    from .state import UIState

logger = logging.getLogger(__name__)

Selector = Callable[..., Any]


@dataclass
class Failure:
    """Outcome of a screen that could not complete."""

    screen: Screen
    error: Exception


# A screen returns a Screen to push, or one of "back", "home", "exit".
NavResult = Union[Screen, str, None]


class Router:
    """Main navigation loop with screen dispatch.

    The router maintains the main event loop and dispatches to registered
    screen functions based on the current navigation state. Screens never
    call each other; each returns where to go next.
    """

    def __init__(
        self,
        console: Console,
        settings: Settings,
        state: UIState,
        nav: Navigator,
        fetcher: Fetcher,
        selector: Selector = choose,
    ):
        """Initialize router with dependencies.

        Args:
            console: Rich Console for output
            settings: Application settings
            state: UI session state
            nav: Navigator instance
            fetcher: Catalog client shared by every screen
            selector: Prompt function taking (prompt, options, default=...)
        """
        self.console = console
        self.settings = settings
        self.state = state
        self.nav = nav
        self.fetcher = fetcher
        self.selector = selector

    def select(self, prompt: str, options: Sequence[tuple[str, Any]], default: Any = None) -> Any:
        return self.selector(prompt, options, default=default)

    def step(self, screen: Screen) -> NavResult | Failure:
        """Run one screen and return its navigation command or a Failure."""
        screen_fn = lookup_screen(type(screen))

        if screen_fn is None:
            self.console.print(
                f"[yellow]Warning:[/yellow] No screen for '{type(screen).__name__}', "
                "returning to main menu"
            )
            return "home"

        try:
            return screen_fn(self, screen)
        except KeyboardInterrupt:
            self.console.print("\n[dim]Interrupted. Returning to main menu...[/]")
            return "home"
        except (SwapiBrowserError, httpx.HTTPError) as exc:
            logger.exception("screen %s failed", type(screen).__name__)
            return Failure(screen=screen, error=exc)

    def run(self) -> int:
        """Run the main navigation loop.

        Returns:
            Process exit code: 0 after "Exit", 1 after a failed screen
        """
        while True:
            current_screen = self.nav.current()
            self.state.add_to_history(current_screen.label)

            outcome = self.step(current_screen)

            if isinstance(outcome, Failure):
                render_error(
                    self.console,
                    f"Could not load {outcome.screen.label}",
                    str(outcome.error),
                    "Check your connection or SWAPI_BASE_URL and try again.",
                )
                return 1

            result = self._normalize_nav_result(outcome)

            if result == "exit":
                self.console.print("\n[green]Goodbye![/green]\n")
                return 0
            elif result == "home":
                self.nav.home()
            elif result == "back":
                if self.nav.depth() > 1:
                    self.nav.pop()
                else:
                    self.nav.home()
            elif isinstance(result, Screen):
                if result is not current_screen:
                    self.nav.push(result)
            # If result is None/empty, stay on current screen

    @staticmethod
    def _normalize_nav_result(result: NavResult) -> NavResult:
        """Normalize common nav aliases/titles to canonical commands."""
        if result is None or isinstance(result, Screen):
            return result
        s = str(result).strip().lower()
        if not s:
            return None
        if s in {"back", "← back", "< back", "go back", "b"}:
            return "back"
        if s in {"home", "main", "main menu", "back to main menu", "h"}:
            return "home"
        return s


ScreenFn = Callable[[Router, Any], NavResult]

# Screen registry - maps screen state types to handler functions
SCREENS: dict[type, ScreenFn] = {}


def register_screen(screen_type: type[Screen]):
    """Decorator to register a screen function for a state type.

    Usage:
        @register_screen(MainMenu)
        def show_main_menu(router: Router, screen: MainMenu) -> NavResult:
            ...
    """
    def decorator(fn: ScreenFn):
        SCREENS[screen_type] = fn
        return fn
    return decorator


def lookup_screen(screen_type: type) -> ScreenFn | None:
    """Find the handler for a state type, falling back to its base classes."""
    for klass in screen_type.__mro__:
        fn = SCREENS.get(klass)
        if fn is not None:
            return fn
    return None
