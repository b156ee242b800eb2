"""Entity and tile models for the dinosaur comparison infographic.

Defines the shared attribute set of any animal-like record (weight,
height, diet) and the two refinements used by the infographic: the
Human built from the form and the Dinosaur built from the reference
records. Entities are frozen dataclasses built through the ``make_*``
factory functions, which accept plain attribute mappings.

Also defines the Tile record handed to renderers and its display
configuration.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

DINOSAUR_FIELDS: tuple[str, ...] = (
    "species",
    "weight",
    "height",
    "diet",
    "where",
    "when",
    "fact",
)


class Diet(str, Enum):
    """What an animal eats."""

    HERBIVORE = "herbivore"
    CARNIVORE = "carnivore"
    OMNIVORE = "omnivore"


class MissingAttributeError(Exception):
    """Raised when a dinosaur record lacks a required field.

    Attributes:
        field: Name of the first missing field.
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required Dinosaur property: {field}")


@dataclass(frozen=True)
class Animal:
    """Attributes shared by every animal-like record.

    Attributes:
        weight: Weight in pounds.
        height: Height in inches.
        diet: One of the ``Diet`` values.
    """

    weight: float
    height: float
    diet: str


@dataclass(frozen=True)
class Human(Animal):
    """An animal with a display name, built from the form."""

    name: str


@dataclass(frozen=True)
class Dinosaur(Animal):
    """An animal from the reference records.

    Attributes:
        species: Display name, also the default image key.
        where: Where the species lived.
        when: When the species lived.
        fact: Trivia about the species.
    """

    species: str
    where: str
    when: str
    fact: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a record with the same keys as the input data."""
        return {
            "species": self.species,
            "weight": self.weight,
            "height": self.height,
            "diet": self.diet,
            "where": self.where,
            "when": self.when,
            "fact": self.fact,
        }


def make_animal(attrs: Mapping[str, Any]) -> Animal:
    """Build an Animal from the ``weight``, ``height`` and ``diet`` keys.

    Other keys are ignored. Presence of the three keys is assumed.
    """
    return Animal(
        weight=attrs["weight"],
        height=attrs["height"],
        diet=attrs["diet"],
    )


def make_human(attrs: Mapping[str, Any]) -> Human:
    """Build a Human: ``name`` plus the Animal attributes."""
    rest = {key: value for key, value in attrs.items() if key != "name"}
    animal = make_animal(rest)
    return Human(
        weight=animal.weight,
        height=animal.height,
        diet=animal.diet,
        name=attrs["name"],
    )


def make_dinosaur(attrs: Mapping[str, Any]) -> Dinosaur:
    """Build a Dinosaur from a raw record.

    Every field in ``DINOSAUR_FIELDS`` must be a key of *attrs* itself.
    Fields are checked in that order and the first absent one fails.

    Args:
        attrs: Raw record, e.g. one entry of the reference data file.

    Returns:
        The constructed Dinosaur. Extra keys in *attrs* are dropped.

    Raises:
        MissingAttributeError: If a required field is absent.
    """
    for name in DINOSAUR_FIELDS:
        if name not in attrs:
            raise MissingAttributeError(name)

    named = ("species", "where", "when", "fact")
    rest = {key: value for key, value in attrs.items() if key not in named}
    animal = make_animal(rest)
    return Dinosaur(
        weight=animal.weight,
        height=animal.height,
        diet=animal.diet,
        species=attrs["species"],
        where=attrs["where"],
        when=attrs["when"],
        fact=attrs["fact"],
    )


@dataclass(frozen=True)
class TileConfig:
    """Display settings for tile composition and rendering.

    Attributes:
        sentinel_species: Species whose tile shows only its fact.
        human_image: Image key used for the human tile.
        image_dir: Directory prefix of tile images.
        image_ext: File extension of tile images.
    """

    sentinel_species: str = "Pigeon"
    human_image: str = "human"
    image_dir: str = "images"
    image_ext: str = ".png"


@dataclass(frozen=True)
class Tile:
    """One unit of the infographic grid.

    Attributes:
        caption: Species or human name.
        body: Fact shown under the image. None for no body.
        image: Image key when it differs from the caption.
    """

    caption: str
    body: str | None = None
    image: str | None = None

    @property
    def image_key(self) -> str:
        """Image key, falling back to the caption."""
        return self.image or self.caption

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "caption": self.caption,
            "body": self.body,
            "image": self.image_key,
        }
