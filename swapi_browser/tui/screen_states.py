"""Screen states for the browser's menu graph.

Each state carries exactly the data needed to render its screen again, so
"Back" can re-enter a previous screen without re-prompting for anything.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from ..resources import CHARACTERS, PLANETS, STARSHIPS, Resource


@dataclass(eq=False)
class Screen:
    """Base class for every point in the menu graph."""

    @property
    def label(self) -> str:
        raise NotImplementedError


@dataclass(eq=False)
class MainMenu(Screen):
    @property
    def label(self) -> str:
        return "Home"


@dataclass(eq=False)
class FilmDetail(Screen):
    film: dict = field(repr=False)

    @property
    def label(self) -> str:
        return str(self.film.get("title") or "Film")


@dataclass(eq=False)
class ResourceList(Screen):
    """Entities of one kind referenced by a film."""

    resource: ClassVar[Resource]
    film: dict = field(repr=False)

    @property
    def label(self) -> str:
        return self.resource.title

    def detail(self, entity: dict) -> ResourceDetail:
        return DETAIL_FOR[type(self)](film=self.film, entity=entity)


@dataclass(eq=False)
class ResourceDetail(Screen):
    """A single entity picked from a ResourceList."""

    resource: ClassVar[Resource]
    film: dict = field(repr=False)
    entity: dict = field(repr=False)

    @property
    def label(self) -> str:
        return str(self.entity.get("name") or "N/A")


class CharacterList(ResourceList):
    resource = CHARACTERS


class CharacterDetail(ResourceDetail):
    resource = CHARACTERS


class PlanetList(ResourceList):
    resource = PLANETS


class PlanetDetail(ResourceDetail):
    resource = PLANETS


class ShipList(ResourceList):
    resource = STARSHIPS


class ShipDetail(ResourceDetail):
    resource = STARSHIPS


DETAIL_FOR: dict[type[ResourceList], type[ResourceDetail]] = {
    CharacterList: CharacterDetail,
    PlanetList: PlanetDetail,
    ShipList: ShipDetail,
}

# Film screen menu order
LIST_SCREENS: tuple[type[ResourceList], ...] = (CharacterList, PlanetList, ShipList)
