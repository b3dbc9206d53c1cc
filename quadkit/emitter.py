"""Particle emitters: spawning, moving and ageing particles on the CPU."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, replace

from quadkit.color import Color
from quadkit.particle_config import BatchedCurve, EmitterConfig

__all__ = ["Particle", "Emitter", "EmittersCache"]

Vec2 = tuple[float, float]


def _ratio(numerator: float, denominator: float) -> float:
    """Divide like IEEE floats do: x/0 is infinite and 0/0 is NaN."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _saturating_int(value: float) -> int:
    """Truncate to a non-negative integer, as a saturating float-to-unsigned cast."""
    if math.isnan(value) or value <= 0.0:
        return 0
    if math.isinf(value):
        return 2**63
    return int(value)


def _lerp_color(a: Color, b: Color, t: float) -> Color:
    return Color(*(x * (1.0 - t) + y * t for x, y in zip(a.to_tuple(), b.to_tuple())))


@dataclass
class Particle:
    """One live particle: what is drawn and the state that drives it."""

    pos: Vec2
    size: float
    uv: tuple[float, float, float, float]
    spawn_index: float
    age_ratio: float
    color: Color
    velocity: Vec2
    lived: float
    lifetime: float
    frame: int
    initial_size: float


class Emitter:
    """Spawns particles according to its config and advances them each update."""

    MAX_PARTICLES = 10000

    def __init__(self, config: EmitterConfig, rng: random.Random | None = None) -> None:
        self.config = config
        self.rng = rng or random.Random()
        self.particles: list[Particle] = []
        self.last_emit_time = 0.0
        self.time_passed = 0.0
        self.particles_spawned = 0
        self.position: Vec2 = (0.0, 0.0)
        self.batched_size_curve: BatchedCurve | None = None
        self.rebuild_size_curve()

    def reset(self) -> None:
        """Drop all particles and restart the emission cycle."""
        self.particles.clear()
        self.last_emit_time = 0.0
        self.time_passed = 0.0
        self.particles_spawned = 0

    def rebuild_size_curve(self) -> None:
        """Resample the size curve after the config's curve has changed."""
        curve = self.config.size_curve
        self.batched_size_curve = curve.batch() if curve is not None else None

    def _random_initial_velocity(self) -> Vec2:
        cfg = self.config
        spread = cfg.initial_direction_spread
        angle = self.rng.uniform(-spread / 2.0, spread / 2.0)
        speed = cfg.initial_velocity - cfg.initial_velocity * self.rng.uniform(
            0.0, cfg.initial_velocity_randomness
        )
        dx, dy = cfg.initial_direction
        c, s = math.cos(angle), math.sin(angle)
        return ((dx * c - dy * s) * speed, (dx * s + dy * c) * speed)

    def _emit_particle(self, offset: Vec2) -> None:
        cfg = self.config
        sx, sy = cfg.emission_shape.gen_random_point(self.rng)
        ox, oy = offset[0] + sx, offset[1] + sy

        size = cfg.size - cfg.size * self.rng.uniform(0.0, cfg.size_randomness)
        if cfg.local_coords:
            pos = (ox, oy)
        else:
            pos = (self.position[0] + ox, self.position[1] + oy)

        velocity = self._random_initial_velocity()
        lifetime = cfg.lifetime - cfg.lifetime * self.rng.uniform(0.0, cfg.lifetime_randomness)

        self.particles.append(
            Particle(
                pos=pos,
                size=size,
                uv=(1.0, 1.0, 0.0, 0.0),
                spawn_index=float(self.particles_spawned),
                age_ratio=0.0,
                color=cfg.colors_curve.start,
                velocity=velocity,
                lived=0.0,
                lifetime=lifetime,
                frame=0,
                initial_size=size,
            )
        )
        self.particles_spawned += 1

    def emit(self, pos: Vec2, n: int) -> None:
        """Immediately emit n particles, ignoring the emitting flag and amount."""
        for _ in range(n):
            self._emit_particle(pos)
            self.particles_spawned += 1

    def _spawn(self) -> None:
        cfg = self.config
        self.time_passed += self._dt
        if cfg.amount == 0:
            return
        gap = (cfg.lifetime / cfg.amount) * (1.0 - cfg.explosiveness)
        if gap < 0.001:
            spawn_amount = cfg.amount
        else:
            spawn_amount = _saturating_int((self.time_passed - self.last_emit_time) / gap)

        for _ in range(spawn_amount):
            self.last_emit_time = self.time_passed
            if self.particles_spawned < cfg.amount:
                self._emit_particle((0.0, 0.0))
            if len(self.particles) >= cfg.amount:
                break

    def _advance(self, particle: Particle, dt: float) -> None:
        cfg = self.config
        vx, vy = particle.velocity
        vx += vx * cfg.linear_accel * dt
        vy += vy * cfg.linear_accel * dt

        t = _ratio(particle.lived, particle.lifetime)
        curve = cfg.colors_curve
        if t < 0.5:
            particle.color = _lerp_color(curve.start, curve.mid, t * 2.0)
        else:
            particle.color = _lerp_color(curve.mid, curve.end, (t - 0.5) * 2.0)

        particle.pos = (particle.pos[0] + vx * dt, particle.pos[1] + vy * dt)
        scale = 1.0 if self.batched_size_curve is None else self.batched_size_curve.get(t)
        particle.size = particle.initial_size * scale

        if particle.lifetime != 0.0:
            particle.age_ratio = particle.lived / particle.lifetime

        particle.lived += dt
        gx, gy = cfg.gravity
        particle.velocity = (vx + gx * dt, vy + gy * dt)

        atlas = cfg.atlas
        if atlas is None:
            particle.uv = (0.0, 0.0, 1.0, 1.0)
            return
        if particle.lifetime != 0.0:
            span = atlas.end_index - atlas.start_index
            particle.frame = (
                _saturating_int(particle.lived / particle.lifetime * span) + atlas.start_index
            )
        x = particle.frame % atlas.n
        y = particle.frame // atlas.m
        particle.uv = (x / atlas.n, y / atlas.m, 1.0 / atlas.n, 1.0 / atlas.m)

    def update(self, dt: float) -> None:
        """Spawn due particles, move every particle by dt and drop expired ones."""
        cfg = self.config
        if cfg.emitting:
            self._dt = dt
            self._spawn()

        if cfg.one_shot and self.time_passed > cfg.lifetime:
            self.time_passed = 0.0
            self.last_emit_time = 0.0
            cfg.emitting = False

        for particle in self.particles:
            self._advance(particle, dt)

        alive = [
            p for p in self.particles if not (p.lived > p.lifetime or p.lived > cfg.lifetime)
        ]
        self.particles_spawned -= len(self.particles) - len(alive)
        self.particles = alive

    def step(self, pos: Vec2, dt: float) -> None:
        """Place the emitter at pos and update it by dt."""
        self.position = (float(pos[0]), float(pos[1]))
        self.update(dt)


class EmittersCache:
    """Many short-lived emitters sharing one config, reusing finished ones."""

    CACHE_DEFAULT_SIZE = 10

    def __init__(self, config: EmitterConfig, rng: random.Random | None = None) -> None:
        self.config = config
        self.rng = rng or random.Random()
        self._cache: list[Emitter] = [
            Emitter(replace(config, emitting=False), self.rng)
            for _ in range(self.CACHE_DEFAULT_SIZE)
        ]
        self._active: list[tuple[Emitter, Vec2]] = []

    @property
    def active(self) -> list[tuple[Emitter, Vec2]]:
        """Emitters currently running, with their positions."""
        return list(self._active)

    @property
    def cached(self) -> int:
        """Number of idle emitters ready for reuse."""
        return len(self._cache)

    def spawn(self, pos: Vec2) -> Emitter:
        """Start an emitter at pos, reusing an idle one when available."""
        emitter = self._cache.pop() if self._cache else Emitter(replace(self.config), self.rng)
        emitter.rebuild_size_curve()
        emitter.config.emitting = True
        emitter.reset()
        self._active.append((emitter, (float(pos[0]), float(pos[1]))))
        return emitter

    def update(self, dt: float) -> None:
        """Update every active emitter and return finished ones to the cache."""
        still_active: list[tuple[Emitter, Vec2]] = []
        for emitter, pos in self._active:
            emitter.position = pos
            emitter.update(dt)
            if emitter.config.emitting:
                still_active.append((emitter, pos))
            else:
                self._cache.append(emitter)
        self._active = still_active