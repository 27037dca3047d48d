"""Film detail screen."""
from __future__ import annotations

from ...resources import FILM_COLUMNS
from ..components import render_breadcrumbs, render_entity_table, render_title
from ..router import NavResult, Router, register_screen
from ..screen_states import LIST_SCREENS, FilmDetail


@register_screen(FilmDetail)
def show_film(router: Router, screen: FilmDetail) -> NavResult:
    """Film summary table, then a choice of sub-resource list."""
    router.console.clear()
    render_breadcrumbs(router)
    render_title(router.console, screen.label)
    render_entity_table(router.console, screen.film, FILM_COLUMNS)

    options = [(list_type.resource.title, list_type) for list_type in LIST_SCREENS]
    options.append(("Back to Main Menu", "home"))

    action = router.select("What would you like to view?", options)

    if action is None:
        return "back"
    if action == "home":
        return "home"
    return action(film=screen.film)
