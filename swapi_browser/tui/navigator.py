"""Navigation stack manager for screen-based routing."""
from __future__ import annotations

from .screen_states import MainMenu, Screen


class Navigator:
    """Stack-based navigation with breadcrumbs.

    The menu graph is a tree, so the stack alone encodes every transition:
    - Push on enter: choosing a film, a list, or an entity pushes its screen
    - Pop on Back: detail -> list, list -> film, film -> main menu
    - Reset on Home: clears stack to [MainMenu()]
    """

    def __init__(self):
        """Initialize with main menu as the starting screen."""
        self.stack: list[Screen] = [MainMenu()]

    def push(self, screen: Screen) -> None:
        """Navigate to a new screen by pushing onto the stack.

        Args:
            screen: Screen state to navigate to
        """
        self.stack.append(screen)

    def pop(self) -> Screen | None:
        """Go back to the previous screen.

        Returns:
            The screen that was popped, or None if at root
        """
        if len(self.stack) > 1:
            return self.stack.pop()
        return None

    def home(self) -> None:
        """Reset navigation to the main menu."""
        self.stack = [MainMenu()]

    def current(self) -> Screen:
        """Get the current screen state."""
        return self.stack[-1]

    def breadcrumbs(self) -> str:
        """Generate breadcrumb navigation string.

        Returns:
            Breadcrumb path like "Home > A New Hope > Planets > Tatooine"
        """
        return " > ".join(screen.label for screen in self.stack)

    def depth(self) -> int:
        """Get the current navigation depth."""
        return len(self.stack)
