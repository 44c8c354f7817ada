"""Shared test fixtures."""

from __future__ import annotations

import pytest

from blobqr.engine.matrix import matrix_from_rows


# Hand-drawn module grids ('#' = dark)

SINGLE_CELL = [
    "...",
    ".#.",
    "...",
]

SOLID_RECT = [
    ".....",
    ".###.",
    ".###.",
    ".....",
]

RING = [
    ".......",
    ".#####.",
    ".#####.",
    ".##.##.",
    ".#####.",
    ".#####.",
    ".......",
]

# Ring flush against the matrix edge: expanded box clamps to the ring itself
EDGE_RING = [
    "###..",
    "#.#..",
    "###..",
    ".....",
]

U_SHAPE = [
    ".....",
    ".#.#.",
    ".#.#.",
    ".###.",
    ".....",
]

L_SHAPE = [
    "#..",
    "#..",
    "##.",
]

DIAGONAL = [
    "#.",
    ".#",
]


@pytest.fixture
def single_cell():
    return matrix_from_rows(SINGLE_CELL)


@pytest.fixture
def solid_rect():
    return matrix_from_rows(SOLID_RECT)


@pytest.fixture
def ring():
    return matrix_from_rows(RING)


@pytest.fixture
def edge_ring():
    return matrix_from_rows(EDGE_RING)


@pytest.fixture
def u_shape():
    return matrix_from_rows(U_SHAPE)


@pytest.fixture
def l_shape():
    return matrix_from_rows(L_SHAPE)
