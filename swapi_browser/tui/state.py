"""Session state for remembering user choices across screens."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class UIState:
    """UI session state - remembers the last choices of this run.

    Nothing here outlives the process.
    """

    # Last selected film URL, highlighted by default on the main menu
    last_film_url: str | None = None

    # Session history (breadcrumb labels) for debugging
    session_history: list[str] = field(default_factory=list)

    def remember(self, **kwargs) -> None:
        """Update state with new values.

        Args:
            **kwargs: Attributes to update (e.g., last_film_url="https://...")
        """
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def add_to_history(self, screen: str) -> None:
        """Record screen visit in session history.

        Args:
            screen: Label of the screen that was visited
        """
        self.session_history.append(screen)
