"""Tests for fact candidates and selection."""

from __future__ import annotations

import random
from collections import Counter

from infographic.src.facts import fact_candidates, select_fact


class FixedIndex:
    """Random source that always picks the same index."""

    def __init__(self, index: int) -> None:
        self.index = index
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return self.index


class TestFactCandidates:
    def test_order_and_content(self, triceratops, human):
        assert fact_candidates(triceratops, human) == [
            "Location: North America",
            "When I lived: Late Cretaceous",
            "First discovered in 1889 by Othniel Charles Marsh",
            "I think you shouldn't eat meat, you know.",
            "At 9.50 feet, I am about 75% taller than you",
            "At 13000 lbs, I am about 10733% heavier than you",
        ]

    def test_comparisons_speak_for_the_dinosaur(self, pigeon, human):
        candidates = fact_candidates(pigeon, human)
        assert candidates[4].startswith("At 0.75 feet")
        assert candidates[5].startswith("At 0.5 lbs")


class TestSelectFact:
    """Random selection over the six candidates."""

    def test_uses_injected_source(self, triceratops, human):
        source = FixedIndex(3)
        assert select_fact(triceratops, human, source) == "I think you shouldn't eat meat, you know."
        assert source.calls == [6]

    def test_each_index_reachable(self, triceratops, human):
        candidates = fact_candidates(triceratops, human)
        for index, expected in enumerate(candidates):
            assert select_fact(triceratops, human, FixedIndex(index)) == expected

    def test_seeded_source_is_reproducible(self, triceratops, human):
        first = [select_fact(triceratops, human, random.Random(7)) for _ in range(5)]
        second = [select_fact(triceratops, human, random.Random(7)) for _ in range(5)]
        assert first == second

    def test_distribution_is_uniform(self, triceratops, human, rng):
        counts = Counter(select_fact(triceratops, human, rng) for _ in range(6000))
        assert set(counts) == set(fact_candidates(triceratops, human))
        # Expect ~1000 each; the end candidates are not under-weighted
        assert all(800 < count < 1200 for count in counts.values())

    def test_default_source_returns_candidate(self, triceratops, human):
        assert select_fact(triceratops, human) in fact_candidates(triceratops, human)
