"""Main menu screen — the film list and the only way out."""
from __future__ import annotations

from ...resources import film_label
from ..components import render_title
from ..router import NavResult, Router, register_screen
from ..screen_states import FilmDetail, MainMenu


@register_screen(MainMenu)
def show_main_menu(router: Router, screen: MainMenu) -> NavResult:
    """List every film plus Exit."""
    router.console.clear()
    render_title(router.console, "Star Wars Information System")

    films = router.fetcher.films()

    options = [(film_label(film), film) for film in films]
    options.append(("Exit", "exit"))

    default = next(
        (film for film in films if film.get("url") and film.get("url") == router.state.last_film_url),
        None,
    )

    choice = router.select("Select a film to learn more:", options, default=default)

    if choice is None or choice == "exit":
        return "exit"

    router.state.remember(last_film_url=choice.get("url"))
    return FilmDetail(film=choice)
