"""
Drawable primitives produced by Simulation.render() and painted by the renderer.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union

from .geometry import Point
from .projector import Column

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class FillRect:
    x: float
    y: float
    width: float
    height: float
    color: Color


@dataclass(frozen=True)
class StrokeRect:
    x: float
    y: float
    width: float
    height: float
    color: Color


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    color: Color
    width: int = 1


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float
    color: Color


@dataclass(frozen=True)
class Text:
    position: Point
    text: str
    color: Color
    size: int


Primitive = Union[FillRect, StrokeRect, Line, Circle, Column, Text]
