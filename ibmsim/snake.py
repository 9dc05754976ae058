"""Terminal snake game."""

from __future__ import annotations

import os
import random
import sys
import time
from dataclasses import dataclass

from .console import Console

if sys.platform == "win32":
    import msvcrt
else:
    import select
    import termios
    import tty

WIDTH = 20
HEIGHT = 20
FRAME_SECONDS = 0.1

_MOVES = {"w": (0, -1), "s": (0, 1), "a": (-1, 0), "d": (1, 0)}
_OPPOSITE = {"w": "s", "s": "w", "a": "d", "d": "a"}


@dataclass(frozen=True)
class Point:
    """A cell on the board."""

    x: int
    y: int


class SnakeGame:
    """Board state: snake body (head first), food, heading and game-over flag."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT, rng: random.Random | None = None):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.direction = "d"
        self.body: list[Point] = []
        self.food = Point(0, 0)
        self.game_over = False
        self.reset()

    def reset(self) -> None:
        """Start a new round; the heading carries over from the last round."""
        self.body = [Point(self.width // 2, self.height // 2)]
        self.food = Point(self.rng.randrange(self.width), self.rng.randrange(self.height))
        self.game_over = False

    def turn(self, key: str) -> bool:
        """Change heading with w/a/s/d unless it reverses; return whether it changed."""
        if key in _MOVES and self.direction != _OPPOSITE[key]:
            self.direction = key
            return True
        return False

    def step(self) -> bool:
        """Advance one frame and return whether the game is over."""
        dx, dy = _MOVES[self.direction]
        head = self.body[0]
        tail = self.body[-1]
        new_head = Point(head.x + dx, head.y + dy)
        self.body = [new_head, *self.body[:-1]]

        if new_head.x in (0, self.width - 1) or new_head.y in (0, self.height - 1):
            self.game_over = True
        if new_head in self.body[1:]:
            self.game_over = True

        if new_head == self.food:
            self.body.append(tail)
            self.food = Point(
                self.rng.randrange(self.width - 2) + 1,
                self.rng.randrange(self.height - 2) + 1,
            )
        return self.game_over

    def render(self) -> str:
        """Draw the board: '#' walls, 'O' head, 'F' food, 'o' body."""
        head = self.body[0]
        segments = set(self.body[1:])
        rows = []
        for y in range(self.height):
            cells = []
            for x in range(self.width):
                cell = Point(x, y)
                if y in (0, self.height - 1) or x in (0, self.width - 1):
                    cells.append("#")
                elif cell == head:
                    cells.append("O")
                elif cell == self.food:
                    cells.append("F")
                elif cell in segments:
                    cells.append("o")
                else:
                    cells.append(" ")
            rows.append("".join(cells) + "\n")
        return "".join(rows)

    def score(self) -> int:
        """Number of pieces of food eaten."""
        return len(self.body) - 1


class _Keyboard:
    """Unbuffered single-key input from the terminal."""

    def __enter__(self):
        self._saved = None
        if sys.platform != "win32":
            fd = sys.stdin.fileno()
            if os.isatty(fd):
                self._saved = termios.tcgetattr(fd)
                tty.setcbreak(fd)
        return self

    def __exit__(self, *exc_info):
        if self._saved is not None:
            termios.tcsetattr(sys.stdin.fileno(), termios.TCSADRAIN, self._saved)

    def poll(self) -> str | None:
        if sys.platform == "win32":
            return msvcrt.getwch() if msvcrt.kbhit() else None
        ready, _, _ = select.select([sys.stdin], [], [], 0)
        return (sys.stdin.read(1) or None) if ready else None

    def wait(self) -> str:
        if sys.platform == "win32":
            return msvcrt.getwch()
        return sys.stdin.read(1)


def snake_unit(console: Console | None = None) -> None:
    """Play rounds of snake until the player presses R after a game over."""
    console = console if console is not None else Console()
    game = SnakeGame()
    with _Keyboard() as keyboard:
        while True:
            game.rng = random.Random()
            game.reset()
            while not game.game_over:
                console.write("\033[2J\033[H" + game.render())
                key = keyboard.poll()
                if key is not None:
                    game.turn(key)
                game.step()
                time.sleep(FRAME_SECONDS)
            console.write(f"Game Over! Puntuación: {game.score()}\n")
            console.write("Presiona cualquier tecla para reiniciar o 'R' para salir.\n")
            if keyboard.wait() in ("R", "r", ""):
                break