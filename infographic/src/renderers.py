"""
Tile renderers and registry.

Renderers turn structured Tile records into the format handed to the
page: HTML markup for direct insertion, or plain dictionaries for
JSON clients. All renderers inherit from BaseTileRenderer and register
themselves with the RendererRegistry.
"""

from __future__ import annotations

import html
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from infographic.src.models import Tile, TileConfig


class BaseTileRenderer(ABC):
    """
    Abstract base class for tile renderers.

    Args:
        config: Display settings. Defaults to TileConfig().
    """

    RENDERER_NAME: ClassVar[str] = "base"

    def __init__(self, config: TileConfig | None = None) -> None:
        self.config = config or TileConfig()

    @abstractmethod
    def render(self, tile: Tile) -> Any:
        """
        Render a single tile.

        Args:
            tile: Tile to render

        Returns:
            Rendered tile in the renderer's format
        """
        pass

    def render_many(self, tiles: list[Tile]) -> list[Any]:
        """Render tiles in order."""
        return [self.render(tile) for tile in tiles]


class RendererRegistry:
    """Registry of available tile renderers."""

    _renderers: ClassVar[dict[str, type[BaseTileRenderer]]] = {}

    @classmethod
    def register(cls, renderer_class: type[BaseTileRenderer]) -> type[BaseTileRenderer]:
        """Register a renderer class."""
        cls._renderers[renderer_class.RENDERER_NAME] = renderer_class
        return renderer_class

    @classmethod
    def get_renderer(
        cls, name: str, config: TileConfig | None = None
    ) -> BaseTileRenderer | None:
        """Get a renderer by name."""
        renderer_class = cls._renderers.get(name)
        if renderer_class:
            return renderer_class(config)
        return None

    @classmethod
    def available_renderers(cls) -> list[str]:
        """Get list of available renderer names."""
        return list(cls._renderers.keys())

    @classmethod
    def render(
        cls,
        tiles: list[Tile],
        format: str,
        config: TileConfig | None = None,
    ) -> list[Any]:
        """Render tiles using the specified format."""
        renderer = cls.get_renderer(format, config)
        if renderer is None:
            available = ", ".join(cls.available_renderers())
            raise ValueError(f"Unknown tile format: {format}. Available: {available}")
        return renderer.render_many(tiles)


def generate_tile_html(
    caption: str,
    fact: str | None = None,
    image: str | None = None,
    config: TileConfig | None = None,
) -> str:
    """
    Build the grid item markup for one tile.

    Args:
        caption: Tile label, species or human name
        fact: Body text. The paragraph is omitted when empty or None
        image: Image key when different from the caption
        config: Display settings

    Returns:
        Tile HTML content
    """
    cfg = config or TileConfig()
    image = image or caption
    label = html.escape(caption, quote=False)
    src = html.escape(f"{cfg.image_dir}/{image}{cfg.image_ext}")

    lines = [
        '<div class="grid-item">',
        f"    <h3>{label}</h3>",
        f'    <img src="{src}" alt="{html.escape(caption)} image"/>',
    ]
    if fact:
        lines.append(f"    <p>{html.escape(fact, quote=False)}</p>")
    lines.append("</div>")
    return "\n".join(lines)


@RendererRegistry.register
class HTMLTileRenderer(BaseTileRenderer):
    """Render tiles as grid item markup."""

    RENDERER_NAME: ClassVar[str] = "html"

    def render(self, tile: Tile) -> str:
        """Render tile to an HTML string."""
        return generate_tile_html(tile.caption, tile.body, tile.image, self.config)


@RendererRegistry.register
class DictTileRenderer(BaseTileRenderer):
    """Render tiles as dictionaries for JSON responses."""

    RENDERER_NAME: ClassVar[str] = "dict"

    def render(self, tile: Tile) -> dict[str, Any]:
        """Render tile to a dictionary."""
        return tile.to_dict()
