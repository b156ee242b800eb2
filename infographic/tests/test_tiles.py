"""Tests for tile composition and grid assembly."""

from __future__ import annotations

import random

import pytest

from infographic.src.facts import fact_candidates
from infographic.src.models import Tile, TileConfig
from infographic.src.renderers import generate_tile_html
from infographic.src.tiles import add_tiles, build_grid, get_tile, get_tile_html


class TestGetTile:
    """Single tile composition."""

    def test_human_tile(self, human):
        assert get_tile(human) == Tile(caption="Ann", body=None, image="human")

    def test_sentinel_tile_shows_fact_only(self, human, pigeon):
        tile = get_tile(human, pigeon)
        assert tile == Tile(caption="Pigeon", body="All birds are considered dinosaurs.")

    def test_sentinel_tile_draws_no_random(self, human, pigeon):
        rng = random.Random(3)
        state = rng.getstate()
        get_tile(human, pigeon, rng)
        assert rng.getstate() == state

    def test_dinosaur_tile_body_is_candidate(self, human, triceratops, rng):
        candidates = fact_candidates(triceratops, human)
        for _ in range(50):
            tile = get_tile(human, triceratops, rng)
            assert tile.caption == "Triceratops"
            assert tile.image is None
            assert tile.body in candidates

    def test_custom_sentinel(self, human, pigeon, triceratops, rng):
        cfg = TileConfig(sentinel_species="Triceratops")
        assert get_tile(human, triceratops, rng, cfg).body == triceratops.fact
        assert get_tile(human, pigeon, rng, cfg).body in fact_candidates(pigeon, human)

    def test_custom_human_image(self, human):
        assert get_tile(human, config=TileConfig(human_image="person")).image == "person"


class TestGetTileHtml:
    def test_human_only(self, human):
        markup = get_tile_html(human)
        assert markup == generate_tile_html("Ann", "", "human")
        assert "<p>" not in markup

    def test_pigeon(self, human, pigeon):
        assert get_tile_html(human, pigeon) == generate_tile_html(
            "Pigeon", "All birds are considered dinosaurs."
        )

    def test_dinosaur(self, human, triceratops, rng):
        markup = get_tile_html(human, triceratops, rng)
        assert "<h3>Triceratops</h3>" in markup
        assert any(f"<p>{c}</p>" in markup for c in fact_candidates(triceratops, human))


class TestBuildGrid:
    """Nine-tile layout with the human in the centre."""

    def test_interleaved_order(self, human, eight_dinosaurs, rng):
        tiles = build_grid(human, eight_dinosaurs, rng)
        captions = [tile.caption for tile in tiles]
        expected = [d.species for d in eight_dinosaurs[:4]] + ["Ann"] + [
            d.species for d in eight_dinosaurs[4:]
        ]
        assert captions == expected

    def test_human_tile_in_centre(self, human, eight_dinosaurs, rng):
        tiles = build_grid(human, eight_dinosaurs, rng)
        assert tiles[4] == Tile(caption="Ann", body=None, image="human")

    def test_bodies(self, human, eight_dinosaurs, rng):
        tiles = build_grid(human, eight_dinosaurs, rng)
        dino_tiles = tiles[:4] + tiles[5:]
        for dino, tile in zip(eight_dinosaurs, dino_tiles):
            if dino.species == "Pigeon":
                assert tile.body == dino.fact
            else:
                assert tile.body in fact_candidates(dino, human)

    @pytest.mark.parametrize("count", [0, 7, 9])
    def test_requires_eight_dinosaurs(self, human, eight_dinosaurs, count):
        dinos = (eight_dinosaurs * 2)[:count]
        with pytest.raises(ValueError, match="exactly 8 dinosaurs"):
            build_grid(human, dinos)


class TestAddTiles:
    def test_returns_nine_markup_strings(self, human, eight_dinosaurs, rng):
        markup = add_tiles(human, eight_dinosaurs, rng)
        assert len(markup) == 9
        assert all(m.startswith('<div class="grid-item">') for m in markup)
        assert markup[4] == generate_tile_html("Ann", None, "human")

    def test_seeded_runs_match(self, human, eight_dinosaurs):
        first = add_tiles(human, eight_dinosaurs, random.Random(42))
        second = add_tiles(human, eight_dinosaurs, random.Random(42))
        assert first == second
