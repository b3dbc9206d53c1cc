"""Pixel-stepping actor/solid collision world with static tile layers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

__all__ = ["Rect", "Actor", "Solid", "World"]

Vec2 = tuple[float, float]


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    w: float
    h: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def contains(self, point: Vec2) -> bool:
        """True if the point lies inside; the right and bottom edges are excluded."""
        px, py = point
        return self.left <= px < self.right and self.top <= py < self.bottom

    def overlaps(self, other: Rect) -> bool:
        """True if the rectangles intersect or touch."""
        return (
            self.left <= other.right
            and self.right >= other.left
            and self.top <= other.bottom
            and self.bottom >= other.top
        )


@dataclass(frozen=True)
class Actor:
    """Handle of a moving body in a World."""

    index: int


@dataclass(frozen=True)
class Solid:
    """Handle of a solid, pushing body in a World."""

    index: int


@dataclass
class _StaticTiledLayer:
    static_colliders: list[bool]
    tile_width: float
    tile_height: float
    width: int
    tag: int

    def tag_of(self, pos: Vec2) -> int | None:
        """Tag of the filled tile under pos, or None when the tile is empty."""
        y = int(pos[1] / self.tile_width)
        x = int(pos[0] / self.tile_height)
        ix = y * self.width + x
        if 0 <= ix < len(self.static_colliders) and self.static_colliders[ix]:
            return self.tag
        return None


@dataclass
class _Collider:
    pos: Vec2
    width: int
    height: int
    collidable: bool = True
    squished: bool = False
    x_remainder: float = 0.0
    y_remainder: float = 0.0
    squishers: set[Solid] = field(default_factory=set)

    def rect(self) -> Rect:
        return Rect(self.pos[0], self.pos[1], float(self.width), float(self.height))


class World:
    """Actors move pixel by pixel and stop at solids; solids carry and push actors."""

    def __init__(self) -> None:
        self._layers: list[_StaticTiledLayer] = []
        self._solids: list[_Collider] = []
        self._actors: list[_Collider] = []

    def add_static_tiled_layer(
        self,
        static_colliders: list[bool],
        tile_width: float,
        tile_height: float,
        width: int,
        tag: int,
    ) -> None:
        """Add a grid of filled/empty tiles, row by row, `width` tiles per row."""
        self._layers.append(
            _StaticTiledLayer(list(static_colliders), tile_width, tile_height, width, tag)
        )

    def add_actor(self, pos: Vec2, width: int, height: int) -> Actor:
        actor = Actor(len(self._actors))
        self._actors.append(_Collider(pos=(float(pos[0]), float(pos[1])), width=width, height=height))
        return actor

    def add_solid(self, pos: Vec2, width: int, height: int) -> Solid:
        solid = Solid(len(self._solids))
        self._solids.append(_Collider(pos=(float(pos[0]), float(pos[1])), width=width, height=height))
        return solid

    def set_actor_position(self, actor: Actor, pos: Vec2) -> None:
        collider = self._actors[actor.index]
        collider.x_remainder = 0.0
        collider.y_remainder = 0.0
        collider.pos = (float(pos[0]), float(pos[1]))

    def _move_axis(self, actor: Actor, amount: float, horizontal: bool) -> bool:
        collider = self._actors[actor.index]
        if horizontal:
            collider.x_remainder += amount
            steps = _round_half_away(collider.x_remainder)
        else:
            collider.y_remainder += amount
            steps = _round_half_away(collider.y_remainder)
        if steps == 0:
            return True

        if horizontal:
            collider.x_remainder -= steps
        else:
            collider.y_remainder -= steps
        sign = _sign(steps)
        dx, dy = (sign, 0) if horizontal else (0, sign)

        while steps != 0:
            x, y = collider.pos
            if self.collide_solids((x + dx, y + dy), collider.width, collider.height):
                return False
            collider.pos = (x + dx, y + dy)
            steps -= sign
        return True

    def move_v(self, actor: Actor, dy: float) -> bool:
        """Move vertically; return False if a solid stopped the actor."""
        return self._move_axis(actor, dy, horizontal=False)

    def move_h(self, actor: Actor, dx: float) -> bool:
        """Move horizontally; return False if a solid stopped the actor."""
        return self._move_axis(actor, dx, horizontal=True)

    def solid_move(self, solid: Solid, dx: float, dy: float) -> None:
        """Move a solid, carrying actors riding on it and pushing those in its way."""
        collider = self._solids[solid.index]
        collider.x_remainder += dx
        collider.y_remainder += dy
        move_x = _round_half_away(collider.x_remainder)
        move_y = _round_half_away(collider.y_remainder)

        riding_rect = Rect(collider.pos[0], collider.pos[1] - 1.0, float(collider.width), 1.0)
        pushing_rect = Rect(
            collider.pos[0] + move_x,
            collider.pos[1],
            collider.width - 1.0,
            float(collider.height),
        )

        riding: list[Actor] = []
        pushing: list[Actor] = []
        for index, actor_collider in enumerate(self._actors):
            actor = Actor(index)
            rider_rect = Rect(
                actor_collider.pos[0],
                actor_collider.pos[1] + actor_collider.height - 1.0,
                float(actor_collider.width),
                1.0,
            )
            pushed = pushing_rect.overlaps(actor_collider.rect())
            if riding_rect.overlaps(rider_rect):
                riding.append(actor)
            elif pushed and not actor_collider.squished:
                pushing.append(actor)

            if not pushed:
                actor_collider.squishers.discard(solid)
                if not actor_collider.squishers:
                    actor_collider.squished = False

        collider.collidable = False
        for actor in riding:
            self.move_h(actor, float(move_x))
        for actor in pushing:
            if not self.move_h(actor, float(move_x)):
                squashed = self._actors[actor.index]
                squashed.squished = True
                squashed.squishers.add(solid)
        collider.collidable = True

        x, y = collider.pos
        if move_x != 0:
            collider.x_remainder -= move_x
            x += move_x
        if move_y != 0:
            collider.y_remainder -= move_y
            y += move_y
        collider.pos = (x, y)

    def solid_at(self, pos: Vec2) -> bool:
        return self.tag_at(pos, 1)

    def tag_at(self, pos: Vec2, tag: int) -> bool:
        """True if the first filled tile under pos has the tag, or a solid covers pos."""
        for layer in self._layers:
            layer_tag = layer.tag_of(pos)
            if layer_tag is not None:
                return layer_tag == tag
        return any(s.collidable and s.rect().contains(pos) for s in self._solids)

    def collide_solids(self, pos: Vec2, width: int, height: int) -> bool:
        """True if a box at pos hits a tile tagged 1 or a collidable solid."""
        if self.collide_tag(1, pos, width, height):
            return True
        box = Rect(pos[0], pos[1], float(width), float(height))
        return any(s.collidable and s.rect().overlaps(box) for s in self._solids)

    def collide_tag(self, tag: int, pos: Vec2, width: int, height: int) -> bool:
        """True if the border of a box at pos touches a filled tile with the tag."""
        px, py = pos
        for layer in self._layers:

            def check(point: Vec2, layer: _StaticTiledLayer = layer) -> bool:
                return layer.tag_of(point) == tag

            if (
                check((px, py))
                or check((px + width - 1.0, py))
                or check((px + width - 1.0, py + height - 1.0))
                or check((px, py + height - 1.0))
            ):
                return True

            if width > int(layer.tile_width):
                x = px + layer.tile_width
                while x < px + width - 1.0:
                    if check((x, py)) or check((x, py + height - 1.0)):
                        return True
                    x += layer.tile_width

            if height > int(layer.tile_height):
                y = py + layer.tile_height
                while y < py + height - 1.0:
                    if check((px, y)) or check((px + width - 1.0, y)):
                        return True
                    y += layer.tile_height
        return False

    def squished(self, actor: Actor) -> bool:
        return self._actors[actor.index].squished

    def actor_pos(self, actor: Actor) -> Vec2:
        return self._actors[actor.index].pos

    def solid_pos(self, solid: Solid) -> Vec2:
        return self._solids[solid.index].pos

    def collide_check(self, actor: Actor, pos: Vec2) -> bool:
        """True if the actor's box placed at pos would hit something solid."""
        collider = self._actors[actor.index]
        return self.collide_solids(pos, collider.width, collider.height)