"""Shared fixtures for the edge linking tests."""

import pytest

from tests.helpers import grid


@pytest.fixture
def horizontal_run():
    return grid([
        ".......",
        ".#####.",
        ".......",
    ])


@pytest.fixture
def long_plus():
    """Junction with four arms two pixels long."""
    return grid([
        "..#..",
        "..#..",
        "#####",
        "..#..",
        "..#..",
    ])


@pytest.fixture
def mixed_edges():
    """A few curves, a junction and some isolated noise pixels."""
    return grid([
        "#.........#.....",
        ".#.......#......",
        "..#.....#....#..",
        "...#...#........",
        "....###.........",
        "......#.........",
        "......#....####.",
        "......#...#.....",
        "#.....#..#......",
        ".......##.....#.",
    ])
