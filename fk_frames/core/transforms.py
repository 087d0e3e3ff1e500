# -*- coding: utf-8 -*-
"""Homogeneous-transform overlay for the joint being animated.

The overlay shows the link step as a 3x3 matrix, rotation block next to the
link length:

    [cos(th)  -sin(th)  L]
    [sin(th)   cos(th)  0]
    [   0         0     1]

once with sympy symbols and once evaluated, and marks which part the
animation is currently playing (rotation block, then the L column).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np
import sympy as sp

ROTATION = "rotation"
TRANSLATION = "translation"


@dataclass(frozen=True)
class MatrixOverlay:
    joint: int
    symbolic: List[List[str]]
    evaluated: List[List[str]]
    highlight: str


def overlay_matrix(theta: float, length: float) -> np.ndarray:
    c, s = np.cos(theta), np.sin(theta)
    return np.array([[c, -s, length], [s, c, 0.0], [0.0, 0.0, 1.0]], dtype=float)


def symbolic_link_transform(index: int) -> sp.Matrix:
    """Overlay matrix of joint ``index`` with symbols ``theta<i>`` and ``L<i>``."""
    th = sp.Symbol(f"theta{index}", real=True)
    L = sp.Symbol(f"L{index}", positive=True)
    return sp.Matrix([[sp.cos(th), -sp.sin(th), L], [sp.sin(th), sp.cos(th), 0], [0, 0, 1]])


def format_entry(value: float, places: int = 2) -> str:
    """Fixed-point text without a negative zero."""
    text = f"{value:.{places}f}"
    if float(text) == 0.0:
        return f"{0.0:.{places}f}"
    return text


def evaluated_link_transform(theta: float, length: float, places: int = 2) -> List[List[str]]:
    M = overlay_matrix(theta, length)
    return [[format_entry(float(v), places) for v in row] for row in M]


def phase_highlight(local_progress: float) -> str:
    """Which part of the matrix is being animated: rotation block or L column."""
    if local_progress <= 1.0:
        return ROTATION
    return TRANSLATION


def matrix_overlay(joint: int, theta: float, length: float, local_progress: float) -> MatrixOverlay:
    """Overlay for joint ``joint`` rotating by ``theta`` then moving ``length`` (mm)."""
    sym = symbolic_link_transform(joint)
    return MatrixOverlay(
        joint=joint,
        symbolic=[[str(sym[r, c]) for c in range(3)] for r in range(3)],
        evaluated=evaluated_link_transform(theta, length),
        highlight=phase_highlight(local_progress),
    )
