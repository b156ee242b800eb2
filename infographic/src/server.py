"""FastAPI router for the dinosaur comparison infographic.

Accepts the form values describing a human, compares the human with
the loaded dinosaurs and returns the nine grid tiles, rendered as
markup or as dictionaries. Designed to be mounted at
``/api/infographic/`` by the parent application.

Example::

    from fastapi import FastAPI
    from infographic.src.server import init_infographic, router

    init_infographic()
    app = FastAPI()
    app.include_router(router, prefix="/api/infographic")
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from infographic.src.models import Diet, Dinosaur, TileConfig
from infographic.src.records import human_from_form, load_dinosaurs
from infographic.src.renderers import RendererRegistry
from infographic.src.tiles import build_grid
from shared.hardening import ErrorFormatter, InputValidator, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()

# ---------------------------------------------------------------------------
# Module-level state (initialized by init_infographic)
# ---------------------------------------------------------------------------

_dinosaurs: list[Dinosaur] | None = None
_seed: int | None = None
_config: TileConfig = TileConfig()


def init_infographic(
    data_path: str | Path | None = None,
    seed: int | None = None,
    config: TileConfig | None = None,
) -> list[Dinosaur]:
    """Load the dinosaurs and set up the service.

    Call this once at application startup before any requests are served.

    Args:
        data_path: Record file. Defaults to the bundled reference data.
        seed: Seed for the fact picks. Each request gets its own
            generator seeded with it, so equal requests get equal tiles.
            None draws fresh randomness for every tile.
        config: Display settings.

    Returns:
        The loaded dinosaurs.

    Raises:
        MissingAttributeError: If a record lacks a required field.
    """
    global _dinosaurs, _seed, _config

    _dinosaurs = load_dinosaurs(data_path)
    _seed = seed
    _config = config or TileConfig()
    return _dinosaurs


def get_dinosaurs() -> list[Dinosaur]:
    """Return the loaded dinosaurs or raise.

    Raises:
        HTTPException: If the service has not been initialized.
    """
    if _dinosaurs is None:
        raise HTTPException(
            status_code=500,
            detail="Infographic data not initialized",
        )
    return _dinosaurs


# ---------------------------------------------------------------------------
# Pydantic request models
# ---------------------------------------------------------------------------


class HumanForm(BaseModel):
    """Request body carrying the form values."""

    name: str = Field(..., min_length=1, max_length=100)
    feet: int = Field(..., ge=0, le=12)
    inches: float = Field(default=0.0, ge=0, lt=12)
    weight: float = Field(..., gt=0)
    diet: Diet


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


@router.get("/health")
def health_check() -> dict[str, Any]:
    """Return infographic service health status."""
    return {
        "status": "ok",
        "service": "infographic",
        "version": "0.1.0",
        "dinosaurs_loaded": len(_dinosaurs) if _dinosaurs is not None else 0,
    }


# ---------------------------------------------------------------------------
# Dinosaurs
# ---------------------------------------------------------------------------


@router.get("/dinosaurs")
def list_dinosaurs() -> dict[str, Any]:
    """List the loaded dinosaur records."""
    return {"dinosaurs": [dino.to_dict() for dino in get_dinosaurs()]}


# ---------------------------------------------------------------------------
# Tiles
# ---------------------------------------------------------------------------


@router.post("/tiles")
def create_tiles(body: HumanForm, format: str = "html") -> dict[str, Any]:
    """Compare the submitted human with every dinosaur.

    Args:
        body: Form values.
        format: Tile format, ``html`` or ``dict``.

    Returns:
        Dict with the nine rendered tiles in grid order.
    """
    dinosaurs = get_dinosaurs()
    if RendererRegistry.get_renderer(format) is None:
        available = ", ".join(RendererRegistry.available_renderers())
        raise HTTPException(
            status_code=400,
            detail=f"Unknown tile format: {format}. Available: {available}",
        )

    try:
        name = InputValidator().clean_display_text(body.name)
    except ValidationError as exc:
        error = ErrorFormatter().format_form_error(exc)
        raise HTTPException(status_code=422, detail=error.to_dict()) from exc

    human = human_from_form(name, body.feet, body.inches, body.weight, body.diet)
    rng = random.Random(_seed) if _seed is not None else None
    try:
        tiles = build_grid(human, dinosaurs, rng, _config)
    except ValueError as exc:
        logger.exception("Failed to build grid")
        error = ErrorFormatter().format_data_error(exc)
        raise HTTPException(status_code=500, detail=error.to_dict()) from exc

    return {
        "format": format,
        "tiles": RendererRegistry.render(tiles, format, _config),
    }
