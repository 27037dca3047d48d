"""Reusable UI components for the TUI."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

import questionary
from questionary import Choice
from rich.panel import Panel
from rich.table import Table

from ..resources import FieldSpec

if TYPE_CHECKING:
    from rich.console import Console

    from .router import Router

MISSING = "N/A"


# ═══════════════════════════════════════════════════════════════════════════════
# BRAND STYLING
# ═══════════════════════════════════════════════════════════════════════════════

BRAND_STYLE = questionary.Style([
    ("qmark", "fg:#ffe81f bold"),          # Crawl yellow accent
    ("question", "bold"),
    ("answer", "fg:#ffe81f bold"),
    ("highlighted", "fg:#ffe81f bold"),    # Highlighted item
    ("pointer", "fg:#ffe81f bold"),        # Arrow pointer
    ("selected", "fg:#fff59d"),            # Selected item
])


# ═══════════════════════════════════════════════════════════════════════════════
# SELECTOR
# ═══════════════════════════════════════════════════════════════════════════════

def choose(
    prompt: str,
    options: Sequence[tuple[str, Any]],
    default: Any = None,
) -> Any:
    """Single-select prompt over (label, value) pairs.

    Args:
        prompt: Question shown above the list
        options: Ordered (label, value) pairs
        default: Value to highlight initially

    Returns:
        The value paired with the chosen label, or None if cancelled
    """
    choices = [Choice(title=label, value=value) for label, value in options]
    initial = None
    if default is not None:
        initial = next((c for c in choices if c.value == default), None)
    return questionary.select(
        prompt,
        choices=choices,
        default=initial,
        style=BRAND_STYLE,
    ).ask()


# ═══════════════════════════════════════════════════════════════════════════════
# PRESENTER
# ═══════════════════════════════════════════════════════════════════════════════

def project_fields(entity: dict, columns: Sequence[FieldSpec]) -> list[str]:
    """Cell values for one table row; missing or empty fields become "N/A"."""
    values = []
    for _label, key in columns:
        value = entity.get(key)
        values.append(str(value) if value else MISSING)
    return values


def build_entity_table(entity: dict, columns: Sequence[FieldSpec]) -> Table:
    table = Table(show_lines=False)
    for label, _key in columns:
        table.add_column(label, header_style="bold yellow", overflow="fold")
    table.add_row(*project_fields(entity, columns))
    return table


def render_entity_table(console: Console, entity: dict, columns: Sequence[FieldSpec]) -> None:
    """Render one entity as a single-row table, one column per field spec."""
    console.print(build_entity_table(entity, columns))
    console.print()


# ═══════════════════════════════════════════════════════════════════════════════
# HEADERS
# ═══════════════════════════════════════════════════════════════════════════════

def render_title(console: Console, title: str) -> None:
    """Yellow `=== Title ===` screen header."""
    console.print(f"\n[bold yellow]=== {title} ===[/bold yellow]\n")


def render_breadcrumbs(router: Router) -> None:
    """Render navigation breadcrumbs.

    Args:
        router: Router instance with navigator
    """
    breadcrumbs = router.nav.breadcrumbs()
    router.console.print(f"[dim]{breadcrumbs}[/dim]")


def render_error(
    console: Console,
    title: str,
    cause: str,
    action: str | None = None,
) -> None:
    """Render a friendly error panel with 3-part structure.

    Args:
        console: Rich Console for output
        title: Error title
        cause: What caused the error
        action: Suggested action to resolve
    """
    content = f"[bold red]✗ {title}[/bold red]\n\n"
    content += f"[yellow]Cause:[/yellow] {cause}\n"

    if action:
        content += f"\n[dim]→ {action}[/dim]"

    console.print(Panel.fit(content, border_style="red", title="Error"))
    console.print()
