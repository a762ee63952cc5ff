"""Shared fixtures: adjacency specifications used across test modules."""

from __future__ import annotations

from typing import Dict, List

import pytest


@pytest.fixture
def loops_spec() -> Dict[str, List[str]]:
    #           ┌──────────────────────────┐
    #           ▼                          │
    # start ─► start_loop ─► loop_1 ─► loop_2 ─► accept
    #   │          │                          ▲
    #   └──────────┴──────► s1 ───────────────┘
    return {
        "start": ["start_loop", "s1"],
        "start_loop": ["loop_1", "s1"],
        "loop_1": ["loop_2"],
        "loop_2": ["start_loop", "accept"],
        "s1": ["accept"],
        "accept": [],
    }


@pytest.fixture
def dead_loop_spec() -> Dict[str, List[str]]:
    # start ─► loop_a ◄──► loop_b   (no exit)
    return {
        "start": ["loop_a"],
        "loop_a": ["loop_b"],
        "loop_b": ["loop_a"],
    }


@pytest.fixture
def crossing_loops_spec() -> Dict[str, List[str]]:
    # start ─► s1 ◄──► s3 ◄──► s2 ◄─ start,  s3 ─► accept
    return {
        "start": ["s1", "s2"],
        "s1": ["s3"],
        "s2": ["s3"],
        "s3": ["s1", "s2", "accept"],
        "accept": [],
    }


@pytest.fixture
def diamond_spec() -> Dict[str, List[str]]:
    #        ┌─► a ─┐
    # start ─┤      ├─► c ─► end
    #        └─► b ─┘   └────┘
    return {
        "start": ["a", "b"],
        "a": ["c"],
        "b": ["c"],
        "c": ["end", "d"],
        "d": ["end"],
        "end": [],
    }
