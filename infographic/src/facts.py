"""Fact selection for dinosaur tiles.

A dinosaur tile shows one of six candidate strings: where and when the
species lived, its trivia fact, or one of the three comparisons with
the human. The pick is uniform over the candidates.
"""

from __future__ import annotations

import logging
import random

from infographic.src.comparators import compare_diet, compare_height, compare_weight
from infographic.src.models import Dinosaur, Human

logger = logging.getLogger(__name__)


def fact_candidates(dinosaur: Dinosaur, human: Human) -> list[str]:
    """Return the ordered candidate list for a dinosaur/human pair.

    Args:
        dinosaur: Dinosaur shown on the tile. Speaks in the comparisons.
        human: Human the dinosaur is compared with.

    Returns:
        Location, era, trivia, diet, height and weight strings, in order.
    """
    return [
        f"Location: {dinosaur.where}",
        f"When I lived: {dinosaur.when}",
        dinosaur.fact,
        compare_diet(dinosaur, human),
        compare_height(dinosaur, human),
        compare_weight(dinosaur, human),
    ]


def select_fact(
    dinosaur: Dinosaur,
    human: Human,
    rng: random.Random | None = None,
) -> str:
    """Pick one candidate uniformly at random.

    Args:
        dinosaur: Dinosaur shown on the tile.
        human: Human the dinosaur is compared with.
        rng: Random source. A freshly seeded generator is used when None,
            so separate calls share no state.

    Returns:
        The selected candidate string.
    """
    source = rng if rng is not None else random.Random()
    candidates = fact_candidates(dinosaur, human)
    index = source.randrange(len(candidates))
    logger.debug("Selected fact %d for %s", index, dinosaur.species)
    return candidates[index]
