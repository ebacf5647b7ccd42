"""Counting and animated colouring of islands in a land/water grid."""

from __future__ import annotations

import colorsys
import enum
import sys
import time
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import TextIO

import pygame

LAND = "1"

WATER = (30, 100, 180)
GRID_LINE = (0, 0, 0, 60)
UNVISITED_LAND = (180, 180, 180)
HIGHLIGHT = (255, 255, 255, 180)
WHITE = (255, 255, 255)
DARKBLUE = (0, 82, 172)

PADDING = 40
TOP_MARGIN = 70
MIN_CELL = 4.0


class RenderMode(enum.Enum):
    GRAPH = "graph"
    ISLAND = "island"


def _is_land(grid: Sequence[Sequence[str]], r: int, c: int) -> bool:
    return 0 <= r < len(grid) and 0 <= c < len(grid[r]) and grid[r][c] == LAND


def flood_fill(
    grid: Sequence[Sequence[str]], r: int, c: int, visited: set[tuple[int, int]]
) -> None:
    """Mark every land cell connected to (r, c) in ``visited``."""
    stack = [(r, c)]
    while stack:
        r, c = stack.pop()
        if (r, c) in visited or not _is_land(grid, r, c):
            continue
        visited.add((r, c))
        stack.extend([(r, c + 1), (r + 1, c), (r, c - 1), (r - 1, c)])


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count groups of orthogonally connected land cells."""
    visited: set[tuple[int, int]] = set()
    count = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == LAND and (r, c) not in visited:
                flood_fill(grid, r, c, visited)
                count += 1
    return count


def read_grid_file(path: str | Path) -> list[str]:
    """Read a grid file: row and column counts, then one token per row."""
    tokens = Path(path).read_text().split()
    try:
        rows, cols = int(tokens[0]), int(tokens[1])
    except (IndexError, ValueError) as exc:
        raise ValueError("grid file must start with row and column counts") from exc
    grid = tokens[2 : 2 + rows]
    if len(grid) < rows:
        raise ValueError(f"expected {rows} rows, found {len(grid)}")
    for row in grid:
        if len(row) != cols:
            raise ValueError(f"row {row!r} does not have {cols} columns")
    return grid


def _token_source(stream: TextIO | Iterable[str]) -> Iterator[str]:
    if hasattr(stream, "readline"):
        return (token for line in stream for token in line.split())
    return iter(stream)


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("input ended unexpectedly") from None


def island(
    matrix: IslandGrid,
    stream: TextIO | Iterable[str] | None = None,
    out: TextIO | None = None,
    base_dir: str | Path = "tests",
) -> int | None:
    """Ask for a grid, count its islands and animate them on ``matrix``.

    ``stream`` is a text stream or an iterator of input tokens. Returns the
    island count, or None when the grid file cannot be used.
    """
    tokens = _token_source(sys.stdin if stream is None else stream)
    out = sys.stdout if out is None else out

    out.write("\n=== Count Islands ===\n1. Manual Input\n2. Load from File\nChoice: ")
    out.flush()
    try:
        choice = int(_next_token(tokens))
    except ValueError:
        choice = None

    if choice == 2:
        out.write("Enter filename: ")
        out.flush()
        filename = _next_token(tokens)
        try:
            grid = read_grid_file(Path(base_dir) / filename)
        except OSError:
            out.write("Failed to open file.\n")
            return None
        except ValueError:
            out.write("DIMENSION ERROR in file!\n")
            return None
        out.write("Map loaded successfully.\n")
    else:
        out.write("== Map dimensions ==\nMap rows: ")
        out.flush()
        rows = int(_next_token(tokens))
        out.write("Map columns: ")
        out.flush()
        cols = int(_next_token(tokens))
        out.write("Enter map row per row (1 means land, 0 means water, no spaces):")
        out.flush()
        grid = []
        while len(grid) < rows:
            row = _next_token(tokens)
            if len(row) != cols:
                out.write(
                    "DIMENSION ERROR! Incorrect column count, please reenter the row.\n"
                )
                continue
            grid.append(row)

    count = num_islands(grid)
    out.write(f"\nNumber of Islands: {count}\n")
    matrix.load_grid(grid)
    matrix.visible = True
    matrix.solve()
    out.write(
        "(Island grid is now shown in the GUI window. "
        "Select option 7 in menu to go back to graph view.)\n"
    )
    return count


def _draw_rect(
    surface: pygame.Surface, color: tuple[int, ...], rect: pygame.Rect, width: int = 0
) -> None:
    if len(color) == 4 and color[3] < 255:
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(overlay, color, overlay.get_rect(), width)
        surface.blit(overlay, rect.topleft)
    else:
        pygame.draw.rect(surface, color, rect, width)


class IslandGrid:
    """A grid whose islands are coloured one cell at a time."""

    def __init__(self, step_delay: float = 1.0):
        self.step_delay = step_delay
        self.clear()

    def clear(self) -> None:
        self.grid: list[str] = []
        self.island_ids: list[list[int]] = []
        self.rows = 0
        self.cols = 0
        self._island_count = 0
        self.island_colors: list[tuple[int, int, int]] = []
        self.solving = False
        self.current: tuple[int, int] | None = None
        self.visible = False

    def load_grid(self, grid: Iterable[Sequence[str]]) -> None:
        self.grid = ["".join(row) for row in grid]
        self.rows = len(self.grid)
        self.cols = len(self.grid[0]) if self.grid else 0
        self.island_ids = [[-1] * self.cols for _ in range(self.rows)]
        self._island_count = 0
        self.solving = False
        self.island_colors = []

    @property
    def has_data(self) -> bool:
        return self.rows > 0 and self.cols > 0

    @property
    def island_count(self) -> int:
        return self._island_count

    def _generate_colors(self) -> None:
        self.island_colors = []
        for i in range(self._island_count):
            hue = (i * 137.508) % 360.0
            r, g, b = colorsys.hsv_to_rgb(hue / 360.0, 0.75, 0.90)
            self.island_colors.append((int(r * 255), int(g * 255), int(b * 255)))

    def _color_island(
        self, r: int, c: int, island_id: int, visited: set[tuple[int, int]]
    ) -> None:
        stack = [(r, c)]
        while stack:
            r, c = stack.pop()
            if not (0 <= r < self.rows and 0 <= c < self.cols):
                continue
            if (r, c) in visited or self.grid[r][c] != LAND:
                continue
            visited.add((r, c))
            self.island_ids[r][c] = island_id
            self.current = (r, c)
            if self.step_delay > 0:
                time.sleep(self.step_delay)
            stack.extend([(r, c + 1), (r, c - 1), (r + 1, c), (r - 1, c)])

    def solve(self) -> None:
        """Label every island, pausing on each cell so the fill can be watched."""
        if not self.has_data:
            return
        self.solving = True
        visited: set[tuple[int, int]] = set()
        self._island_count = 0
        self._generate_colors()
        try:
            for r, row in enumerate(self.grid):
                for c, cell in enumerate(row):
                    if cell == LAND and (r, c) not in visited:
                        self._island_count += 1
                        self._generate_colors()
                        self._color_island(r, c, self._island_count - 1, visited)
        finally:
            self.solving = False
            self.current = None

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        screen_width: int,
        screen_height: int,
    ) -> None:
        if not self.has_data:
            return
        avail_w = screen_width - 2 * PADDING
        avail_h = screen_height - TOP_MARGIN - PADDING
        cell = max(min(avail_w / self.cols, avail_h / self.rows), MIN_CELL)
        offset_x = (screen_width - cell * self.cols) / 2.0
        offset_y = TOP_MARGIN + (avail_h - cell * self.rows) / 2.0

        if self.solving:
            caption = f"Solving... Islands so far: {self._island_count}"
        else:
            caption = f"Islands found: {self._island_count}"
        text = font.render(caption, True, DARKBLUE)
        surface.blit(text, ((screen_width - text.get_width()) // 2, 20))

        size = max(1, int(cell))
        current = self.current if self.solving else None
        for r, row in enumerate(self.grid):
            for c, value in enumerate(row):
                rect = pygame.Rect(int(offset_x + c * cell), int(offset_y + r * cell), size, size)
                if value == LAND:
                    island_id = self.island_ids[r][c]
                    if 0 <= island_id < len(self.island_colors):
                        fill = self.island_colors[island_id]
                    else:
                        fill = UNVISITED_LAND
                else:
                    fill = WATER
                _draw_rect(surface, fill, rect)
                if current == (r, c):
                    _draw_rect(surface, HIGHLIGHT, rect)
                    _draw_rect(surface, WHITE, rect, 2)
                else:
                    _draw_rect(surface, GRID_LINE, rect, 1)