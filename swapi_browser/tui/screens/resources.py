"""Character, planet and starship screens.

One list handler and one detail handler serve all three kinds; the
resource attached to the screen state decides what is fetched and shown.
"""
from __future__ import annotations

from ..components import render_breadcrumbs, render_entity_table, render_title
from ..router import NavResult, Router, register_screen
from ..screen_states import ResourceDetail, ResourceList


@register_screen(ResourceList)
def show_resource_list(router: Router, screen: ResourceList) -> NavResult:
    """Resolve the film's locators for this kind and offer each entity plus Back.

    Returns:
        The chosen entity's detail screen, or "back" to the film
    """
    resource = screen.resource
    entities = router.fetcher.fetch_many(resource.locators(screen.film))

    options = [(str(entity.get("name") or "N/A"), entity) for entity in entities]
    options.append(("Back", "back"))

    choice = router.select(resource.prompt, options)

    if choice is None or choice == "back":
        return "back"
    return screen.detail(choice)


@register_screen(ResourceDetail)
def show_resource_detail(router: Router, screen: ResourceDetail) -> NavResult:
    """Entity table followed by Back / Main Menu."""
    router.console.clear()
    render_breadcrumbs(router)
    render_title(router.console, screen.label)
    render_entity_table(router.console, screen.entity, screen.resource.columns)

    action = router.select(
        "What would you like to do?",
        [("Back", "back"), ("Main Menu", "home")],
    )

    if action == "home":
        return "home"
    return "back"
