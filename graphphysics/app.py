"""Interactive terminal menu driving a live graph and island visualiser."""

from __future__ import annotations

import sys
import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

import pygame

from graphphysics.graph import Graph
from graphphysics.islands import IslandGrid, RenderMode, island

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
TARGET_FPS = 60
WINDOW_TITLE = "Graph Physics Visualizer"

RAYWHITE = (245, 245, 245)
DARKBLUE = (0, 82, 172)
BLACK = (0, 0, 0)
LIME = (0, 158, 47)
SKYBLUE_FADED = (102, 191, 255, 127)

MENU = (
    "\n--- Graph Menu ---\n"
    "1. Add Edge (u v)\n2. Add Vertex (u)\n3. Visual BFS (start)\n4. Visual DFS (start)\n"
    "5. Path Check (u v)\n6. Component Analysis\n7. Reset / Back to Graph\n"
    "8. Find Islands\n0. Exit\nChoice: "
)


@dataclass
class AppState:
    """The graph and island grid shared by the menu and the renderer."""

    graph: Graph = field(default_factory=Graph)
    matrix: IslandGrid = field(default_factory=IslandGrid)


def _render_mode(state: AppState) -> RenderMode:
    return RenderMode.ISLAND if state.matrix.visible else RenderMode.GRAPH


def _tokens(stream: TextIO | Iterable[str]) -> Iterator[str]:
    if hasattr(stream, "readline"):
        return (token for line in stream for token in line.split())
    return iter(stream)


def _read_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError("input ended unexpectedly") from None
    return int(token)


def load_graph_file(graph: Graph, path: str | Path, out: TextIO | None = None) -> int:
    """Apply the vertex and edge commands in a graph file.

    A ``1 u v`` command adds an edge and ``2 u`` adds a vertex. Reading stops
    at the first token that is not a number. Returns the number of commands
    applied; raises OSError when the file cannot be read.
    """
    out = sys.stdout if out is None else out
    tokens = iter(Path(path).read_text().split())
    applied = 0
    while True:
        try:
            command = _read_int(tokens)
            if command == 1:
                u, v = _read_int(tokens), _read_int(tokens)
                graph.add_edge(u, v)
                applied += 1
            elif command == 2:
                graph.add_vertex(_read_int(tokens))
                applied += 1
            else:
                out.write("Unknown command in file.\n")
        except (EOFError, ValueError):
            return applied


def cli_interface(
    state: AppState,
    filename: str = "",
    stream: TextIO | Iterable[str] | None = None,
    out: TextIO | None = None,
    base_dir: str | Path = "tests",
) -> None:
    """Run the menu loop until the user chooses 0 or the input ends."""
    out = sys.stdout if out is None else out

    if filename:
        try:
            load_graph_file(state.graph, Path(base_dir) / filename, out)
        except OSError:
            out.write(f"Failed to open file: {filename}\n")
        else:
            out.write(f"Graph loaded from file: {filename}\n")

    tokens = _tokens(sys.stdin if stream is None else stream)
    graph = state.graph
    while True:
        out.write(MENU)
        out.flush()
        try:
            choice = _read_int(tokens)
            if choice == 0:
                return
            match choice:
                case 1:
                    u, v = _read_int(tokens), _read_int(tokens)
                    graph.add_edge(u, v)
                case 2:
                    graph.add_vertex(_read_int(tokens))
                case 3:
                    graph.visual_bfs(_read_int(tokens), out)
                case 4:
                    graph.visual_dfs(_read_int(tokens), out)
                case 5:
                    u, v = _read_int(tokens), _read_int(tokens)
                    if graph.has_path(u, v, out):
                        out.write("Path exists!\n")
                    else:
                        out.write("No path found.\n")
                case 6:
                    graph.component(out)
                case 7:
                    graph.reset_colors()
                    state.matrix.visible = False
                case 8:
                    island(state.matrix, tokens, out, base_dir)
                case _:
                    out.write("Invalid command.\n")
        except (EOFError, ValueError):
            return


def _draw_graph_overlay(
    screen: pygame.Surface, title_font: pygame.font.Font, small_font: pygame.font.Font
) -> None:
    panel = pygame.Surface((320, 60), pygame.SRCALPHA)
    panel.fill(SKYBLUE_FADED)
    screen.blit(panel, (10, 10))
    screen.blit(title_font.render("Interact via Terminal", True, DARKBLUE), (20, 20))
    screen.blit(
        small_font.render("Nodes repel, Edges pull (Springs)", True, BLACK), (20, 45)
    )


def _draw_fps(screen: pygame.Surface, font: pygame.font.Font, clock: pygame.time.Clock) -> None:
    screen.blit(font.render(f"{round(clock.get_fps())} FPS", True, LIME), (720, 10))


def main(argv: list[str] | None = None) -> int:
    """Open the visualiser window and run the terminal menu beside it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        print("Invalid! Run by 'graphphysics' or 'graphphysics graph.txt'")
        return 0
    filename = args[0] if args else ""

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        font = pygame.font.Font(None, 26)
        small_font = pygame.font.Font(None, 20)

        state = AppState()
        threading.Thread(
            target=cli_interface, args=(state, filename), daemon=True
        ).start()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            delta_time = clock.tick(TARGET_FPS) / 1000.0

            screen.fill(RAYWHITE)
            if _render_mode(state) is RenderMode.GRAPH:
                state.graph.update_physics(delta_time)
                state.graph.draw(screen, font)
                _draw_graph_overlay(screen, font, small_font)
            else:
                state.matrix.draw(screen, font, SCREEN_WIDTH, SCREEN_HEIGHT)
            _draw_fps(screen, small_font, clock)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0