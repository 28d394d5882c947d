"""Plant cards: what each card shows, how cards are laid out and edited."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeVar

from plantly.store import Plant

CARD_WIDTH = 300
CARD_SPACING = 20

_EDITABLE = frozenset({"name", "species", "description", "health_status"})

T = TypeVar("T")


def clean_name(name: str) -> str:
    """Strip a trailing " (species)" suffix from a displayed plant name."""
    index = name.find(" (")
    return name if index == -1 else name[:index]


def card_title(name: str, species: str) -> str:
    """Return the title a card shows: the plant name with its species."""
    return f"{clean_name(name)} ({species})"


def column_count(width: int) -> int:
    """Return how many cards fit side by side in ``width`` pixels (at least one)."""
    return max(1, width // (CARD_WIDTH + CARD_SPACING))


def grid_layout(plants: Iterable[T], columns: int) -> list[tuple[int, int, T]]:
    """Place items row by row into ``columns`` columns as (row, column, item)."""
    if columns < 1:
        raise ValueError("columns must be at least 1")
    return [
        (index // columns, index % columns, plant)
        for index, plant in enumerate(plants)
    ]


def edit_plant(plant: Plant, **kwargs: str) -> Plant:
    """Return a copy of ``plant`` with the given fields changed; the id is kept."""
    unknown = set(kwargs) - _EDITABLE
    if unknown:
        raise TypeError(f"cannot edit field(s): {', '.join(sorted(unknown))}")
    return dataclasses.replace(plant, **kwargs)


@dataclass
class Card:
    """What a single plant card displays."""

    plant_id: int
    title: str
    species: str
    description: str
    health_status: str

    @staticmethod
    def from_plant(plant: Plant) -> "Card":
        """Build the card shown for ``plant``."""
        return Card(
            plant_id=plant.id,
            title=card_title(plant.name, plant.species),
            species=plant.species,
            description=plant.description,
            health_status=plant.health_status,
        )

    def to_plant(self) -> Plant:
        """Recover the plant record this card shows."""
        return Plant(
            id=self.plant_id,
            name=clean_name(self.title),
            species=self.species,
            description=self.description,
            health_status=self.health_status,
        )