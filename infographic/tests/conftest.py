"""Shared fixtures for infographic tests."""

from __future__ import annotations

import random
from collections.abc import Callable
from typing import Any

import pytest

from infographic.src.models import Dinosaur, Human, make_dinosaur, make_human


def _dino_record(**overrides: Any) -> dict[str, Any]:
    """A complete raw dinosaur record with optional overrides."""
    record = {
        "species": "Triceratops",
        "weight": 13000,
        "height": 114,
        "diet": "herbivore",
        "where": "North America",
        "when": "Late Cretaceous",
        "fact": "First discovered in 1889 by Othniel Charles Marsh",
    }
    record.update(overrides)
    return record


@pytest.fixture
def dino_record() -> Callable[..., dict[str, Any]]:
    """Factory for complete raw dinosaur records."""
    return _dino_record


@pytest.fixture
def human() -> Human:
    """Ann: 65 inches, 120 lbs, omnivore."""
    return make_human({"name": "Ann", "height": 65, "weight": 120, "diet": "omnivore"})


@pytest.fixture
def triceratops() -> Dinosaur:
    return make_dinosaur(_dino_record())


@pytest.fixture
def pigeon() -> Dinosaur:
    return make_dinosaur(
        _dino_record(
            species="Pigeon",
            weight=0.5,
            height=9,
            where="World Wide",
            when="Holocene",
            fact="All birds are considered dinosaurs.",
        )
    )


@pytest.fixture
def eight_dinosaurs() -> list[Dinosaur]:
    """Eight dinosaurs, the last one the sentinel species."""
    names = [
        "Triceratops",
        "Tyrannosaurus Rex",
        "Anklyosaurus",
        "Brachiosaurus",
        "Stegosaurus",
        "Elasmosaurus",
        "Pteranodon",
    ]
    dinos = [
        make_dinosaur(_dino_record(species=name, weight=1000 * (i + 1), height=50 + i))
        for i, name in enumerate(names)
    ]
    dinos.append(
        make_dinosaur(
            _dino_record(species="Pigeon", weight=0.5, height=9, fact="All birds are considered dinosaurs.")
        )
    )
    return dinos


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for deterministic picks."""
    return random.Random(1234)
