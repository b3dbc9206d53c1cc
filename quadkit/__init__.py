"""Game building blocks without rendering: colors, cameras, a frame executor, platformer physics, particles, Life and Snake."""

__version__ = "0.1.0"

__all__ = [
    "camera",
    "color",
    "emitter",
    "executor",
    "life",
    "particle_config",
    "platformer",
    "snake",
]