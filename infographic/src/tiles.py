"""Tile composition and grid assembly.

Builds one Tile per dinosaur, plus the human's own tile, and lays
them out as a 3x3 grid with the human in the centre.
"""

from __future__ import annotations

import logging
import random

from infographic.src.facts import select_fact
from infographic.src.models import Dinosaur, Human, Tile, TileConfig
from infographic.src.renderers import HTMLTileRenderer

logger = logging.getLogger(__name__)

GRID_DINOSAURS = 8
HUMAN_POSITION = 4


def get_tile(
    human: Human,
    dinosaur: Dinosaur | None = None,
    rng: random.Random | None = None,
    config: TileConfig | None = None,
) -> Tile:
    """Compose the tile for a dinosaur, or the human's tile.

    Args:
        human: Human shown, or compared with the dinosaur.
        dinosaur: Dinosaur for a dinosaur tile. None for the human tile.
        rng: Random source for the fact pick.
        config: Display settings. Defaults to TileConfig().

    Returns:
        The composed Tile.
    """
    cfg = config or TileConfig()
    if dinosaur is None:
        return Tile(caption=human.name, body=None, image=cfg.human_image)
    if dinosaur.species == cfg.sentinel_species:
        return Tile(caption=dinosaur.species, body=dinosaur.fact)
    return Tile(caption=dinosaur.species, body=select_fact(dinosaur, human, rng))


def get_tile_html(
    human: Human,
    dinosaur: Dinosaur | None = None,
    rng: random.Random | None = None,
    config: TileConfig | None = None,
) -> str:
    """Compose a tile and render it as grid item markup."""
    tile = get_tile(human, dinosaur, rng, config)
    return HTMLTileRenderer(config).render(tile)


def build_grid(
    human: Human,
    dinosaurs: list[Dinosaur],
    rng: random.Random | None = None,
    config: TileConfig | None = None,
) -> list[Tile]:
    """Compose the nine grid tiles.

    Order is dinosaurs 0-3, the human, then dinosaurs 4-7, which puts
    the human in the centre of a 3x3 grid.

    Args:
        human: Human compared with every dinosaur.
        dinosaurs: Exactly eight dinosaurs, in display order.
        rng: Random source shared by the fact picks. Each tile still
            draws independently.
        config: Display settings.

    Returns:
        Nine tiles in grid order.

    Raises:
        ValueError: If *dinosaurs* does not hold exactly eight entries.
    """
    if len(dinosaurs) != GRID_DINOSAURS:
        raise ValueError(
            f"Grid needs exactly {GRID_DINOSAURS} dinosaurs, got {len(dinosaurs)}"
        )

    tiles = [get_tile(human, dino, rng, config) for dino in dinosaurs]
    tiles.insert(HUMAN_POSITION, get_tile(human, config=config))
    logger.debug("Built grid of %d tiles for %s", len(tiles), human.name)
    return tiles


def add_tiles(
    human: Human,
    dinosaurs: list[Dinosaur],
    rng: random.Random | None = None,
    config: TileConfig | None = None,
) -> list[str]:
    """Compose the nine grid tiles and render them as markup, in order."""
    tiles = build_grid(human, dinosaurs, rng, config)
    return HTMLTileRenderer(config).render_many(tiles)
