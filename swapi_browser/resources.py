"""Entity kinds exposed by the catalog and the fields shown for each."""
from __future__ import annotations

from dataclasses import dataclass

# (column header, JSON key)
FieldSpec = tuple[str, str]

FILM_COLUMNS: tuple[FieldSpec, ...] = (
    ("Episode", "episode_id"),
    ("Director", "director"),
    ("Release Date", "release_date"),
    ("Opening Crawl", "opening_crawl"),
)


@dataclass(frozen=True)
class Resource:
    """One kind of film sub-resource (characters, planets, starships).

    Attributes:
        key: Film attribute holding the locator sequence
        title: Menu label on the film screen and breadcrumb label
        prompt: Question asked on the list screen
        columns: Ordered field specs rendered on the detail screen
    """

    key: str
    title: str
    prompt: str
    columns: tuple[FieldSpec, ...]

    def locators(self, film: dict) -> list[str]:
        return list(film.get(self.key) or [])


CHARACTERS = Resource(
    key="characters",
    title="Characters",
    prompt="Select a character:",
    columns=(
        ("Height", "height"),
        ("Mass", "mass"),
        ("Hair Color", "hair_color"),
        ("Eye Color", "eye_color"),
        ("Birth Year", "birth_year"),
    ),
)

PLANETS = Resource(
    key="planets",
    title="Planets",
    prompt="Select a planet:",
    columns=(
        ("Climate", "climate"),
        ("Terrain", "terrain"),
        ("Population", "population"),
        ("Diameter", "diameter"),
    ),
)

STARSHIPS = Resource(
    key="starships",
    title="Starships",
    prompt="Select a starship:",
    columns=(
        ("Model", "model"),
        ("Manufacturer", "manufacturer"),
        ("Crew", "crew"),
        ("Passengers", "passengers"),
        ("Class", "starship_class"),
    ),
)

RESOURCES: tuple[Resource, ...] = (CHARACTERS, PLANETS, STARSHIPS)


def film_label(film: dict) -> str:
    """Main menu label, e.g. "Episode 4: A New Hope (1977-05-25)"."""
    return f"Episode {film.get('episode_id')}: {film.get('title')} ({film.get('release_date')})"
