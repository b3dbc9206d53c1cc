"""Configuration types for particle emitters: curves, emission shapes, atlases."""

from __future__ import annotations

import enum
import math
import random
from dataclasses import dataclass, field
from itertools import pairwise
from typing import Union

import numpy as np

from quadkit.color import WHITE, Color

__all__ = [
    "Interpolation",
    "Curve",
    "BatchedCurve",
    "PointShape",
    "RectShape",
    "SphereShape",
    "EmissionShape",
    "BlendMode",
    "ColorCurve",
    "AtlasConfig",
    "EmitterConfig",
]

Vec2 = tuple[float, float]


class Interpolation(enum.Enum):
    """How the points between a curve's key points are built."""

    LINEAR = enum.auto()
    BEZIER = enum.auto()


@dataclass
class BatchedCurve:
    """A curve sampled at evenly spaced steps over 0..1."""

    points: list[float]

    def get(self, t: float) -> float:
        """Sample the curve at t in 0..1, interpolating between stored steps."""
        count = len(self.points)
        if count == 0:
            raise ValueError("cannot sample an empty curve")
        t_scaled = t * count
        if math.isnan(t_scaled) or t_scaled < 0.0:
            truncated = 0
        elif math.isinf(t_scaled):
            truncated = count - 1
        else:
            truncated = int(t_scaled)
        previous_ix = min(truncated, count - 1)
        next_ix = min(previous_ix + 1, count - 1)
        previous = self.points[previous_ix]
        following = self.points[next_ix]
        return previous + (following - previous) * (t_scaled - previous_ix)


@dataclass
class Curve:
    """Key points (x, y) with x in 0..1 describing a value over a lifetime."""

    points: list[Vec2] = field(default_factory=list)
    interpolation: Interpolation = Interpolation.LINEAR
    resolution: int = 20

    def batch(self) -> BatchedCurve:
        """Sample the curve into `resolution` steps per unit of x."""
        if self.interpolation is Interpolation.BEZIER:
            raise ValueError("only linear interpolation is supported")

        step = np.float32(1.0) / np.float32(self.resolution)
        x = np.float32(0.0)
        points: list[float] = []
        for start, end in pairwise(self.points):
            sx, sy = np.float32(start[0]), np.float32(start[1])
            ex, ey = np.float32(end[0]), np.float32(end[1])
            while x <= ex:
                t = (x - sx) / (ex - sx)
                points.append(float(sy + (ey - sy) * t))
                x = np.float32(x + step)
        return BatchedCurve(points)


@dataclass(frozen=True)
class PointShape:
    """Particles are emitted from the emitter position itself."""

    def gen_random_point(self, rng: random.Random | None = None) -> Vec2:
        return (0.0, 0.0)


@dataclass(frozen=True)
class RectShape:
    """Particles are emitted inside a rectangle centred on the emitter."""

    width: float
    height: float

    def gen_random_point(self, rng: random.Random | None = None) -> Vec2:
        rng = rng or random.Random()
        return (
            rng.uniform(-self.width / 2.0, self.width / 2.0),
            rng.uniform(-self.height / 2.0, self.height / 2.0),
        )


@dataclass(frozen=True)
class SphereShape:
    """Particles are emitted uniformly inside a circle centred on the emitter."""

    radius: float

    def gen_random_point(self, rng: random.Random | None = None) -> Vec2:
        rng = rng or random.Random()
        ro = math.sqrt(rng.uniform(0.0, self.radius * self.radius))
        phi = rng.uniform(0.0, math.pi * 2.0)
        return (ro * math.cos(phi), ro * math.sin(phi))


EmissionShape = Union[PointShape, RectShape, SphereShape]


class BlendMode(enum.Enum):
    """How overlapping particles combine."""

    ALPHA = enum.auto()
    ADDITIVE = enum.auto()


@dataclass(frozen=True)
class ColorCurve:
    """Colors a particle passes through at the start, middle and end of its life."""

    start: Color = WHITE
    mid: Color = WHITE
    end: Color = WHITE


@dataclass(frozen=True)
class AtlasConfig:
    """An n by m sprite sheet and the frame range an animation uses."""

    n: int
    m: int
    start_index: int
    end_index: int

    @classmethod
    def from_range(
        cls, n: int, m: int, start: int | None = None, stop: int | None = None
    ) -> AtlasConfig:
        """Use frames start..stop (stop excluded); missing bounds span the whole sheet."""
        return cls(
            n=n,
            m=m,
            start_index=0 if start is None else start,
            end_index=n * m if stop is None else stop,
        )


@dataclass
class EmitterConfig:
    """Everything that describes how an emitter spawns and animates particles."""

    local_coords: bool = False
    emission_shape: EmissionShape = field(default_factory=PointShape)
    one_shot: bool = False
    lifetime: float = 1.0
    lifetime_randomness: float = 0.0
    explosiveness: float = 0.0
    amount: int = 8
    emitting: bool = True
    initial_direction: Vec2 = (0.0, -1.0)
    initial_direction_spread: float = 0.0
    initial_velocity: float = 50.0
    initial_velocity_randomness: float = 0.0
    linear_accel: float = 0.0
    size: float = 10.0
    size_randomness: float = 0.0
    size_curve: Curve | None = None
    blend_mode: BlendMode = BlendMode.ALPHA
    colors_curve: ColorCurve = field(default_factory=ColorCurve)
    gravity: Vec2 = (0.0, 0.0)
    atlas: AtlasConfig | None = None