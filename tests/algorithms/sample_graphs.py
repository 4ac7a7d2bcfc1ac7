"""Adjacency-list graphs shared across traversal tests.

Each fixture returns a dict of node -> list of successors; tests turn it into
an edges function with ``graph.__getitem__`` or ``graph.get``.
"""

import pytest


@pytest.fixture
def diamond():
    #      ┌──►B──┐
    #  A───┤      ├──►D      E
    #      └──►C──┘
    return {
        "A": ["B", "C"],
        "B": ["D"],
        "C": ["D"],
        "D": [],
        "E": [],
    }


@pytest.fixture
def line1():
    #  A──►B──►C──►D──►E
    return {
        "A": ["B"],
        "B": ["C"],
        "C": ["D"],
        "D": ["E"],
        "E": [],
    }


@pytest.fixture
def cycle1():
    #  A──►B──►C──►A, C──►D
    return {
        "A": ["B"],
        "B": ["C"],
        "C": ["A", "D"],
        "D": [],
    }


@pytest.fixture
def square_with_shortcut():
    #  A──►B──►C──►D
    #  │           ▲
    #  └───────────┘
    return {
        "A": ["B", "D"],
        "B": ["C"],
        "C": ["D"],
        "D": ["A"],
    }


@pytest.fixture
def self_loops():
    return {
        "A": ["A", "B"],
        "B": ["B", "A", "C"],
        "C": ["C"],
    }
