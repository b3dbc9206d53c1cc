"""Snake game state on a square board."""

from __future__ import annotations

import random
import time
from collections import deque
from typing import Callable

__all__ = ["SnakeGame", "UP", "DOWN", "LEFT", "RIGHT"]

Point = tuple[int, int]

UP: Point = (0, -1)
DOWN: Point = (0, 1)
RIGHT: Point = (1, 0)
LEFT: Point = (-1, 0)


class SnakeGame:
    """The board, the snake, the fruit and the score of one game."""

    SQUARES = 16
    START_SPEED = 0.3
    FRUIT_SCORE = 100
    SPEEDUP = 0.9

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.rng = rng or random.Random()
        self.clock = clock
        self.restart()

    def _random_point(self) -> Point:
        return (self.rng.randrange(self.SQUARES), self.rng.randrange(self.SQUARES))

    def restart(self) -> None:
        """Reset the snake, score and speed and place a new fruit."""
        self.head: Point = (0, 0)
        self.direction: Point = RIGHT
        self.body: deque[Point] = deque()
        self.fruit: Point = self._random_point()
        self.score = 0
        self.speed = self.START_SPEED
        self.last_update = self.clock()
        self.game_over = False

    def turn(self, direction: Point) -> None:
        """Change heading unless the game is over or it would reverse the snake."""
        if self.game_over:
            return
        if direction != (-self.direction[0], -self.direction[1]):
            self.direction = direction

    def advance(self) -> None:
        """Move the snake one square, eating fruit and checking for collisions."""
        self.body.appendleft(self.head)
        self.head = (self.head[0] + self.direction[0], self.head[1] + self.direction[1])
        if self.head == self.fruit:
            self.fruit = self._random_point()
            self.score += self.FRUIT_SCORE
            self.speed *= self.SPEEDUP
        else:
            self.body.pop()

        x, y = self.head
        if not (0 <= x < self.SQUARES and 0 <= y < self.SQUARES):
            self.game_over = True
        if self.head in self.body:
            self.game_over = True

    def update(self, now: float) -> bool:
        """Advance if the step interval has passed; return True if a step was taken."""
        if self.game_over or now - self.last_update <= self.speed:
            return False
        self.last_update = now
        self.advance()
        return True