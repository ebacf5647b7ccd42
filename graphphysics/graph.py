"""Undirected graph with traversals and a spring-based layout simulation."""

from __future__ import annotations

import random
import sys
import threading
import time
from collections import deque
from dataclasses import dataclass, field
from typing import TextIO

import pygame
from pygame.math import Vector2

MAROON = (190, 33, 55)
GREEN = (0, 228, 48)
ORANGE = (255, 161, 0)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
DARKGRAY = (80, 80, 80)

REST_LENGTH = 100.0
NODE_RADIUS = 20.0
OUTLINE_RADIUS = 22.0
EDGE_WIDTH = 2


def _normalized(vector: Vector2) -> Vector2:
    length = vector.length()
    return vector / length if length > 0 else Vector2(0, 0)


@dataclass
class NodeProperties:
    """Position, velocity and colour of one drawn vertex."""

    position: Vector2
    velocity: Vector2 = field(default_factory=Vector2)
    color: tuple[int, int, int] = MAROON


@dataclass
class ComponentReport:
    """Sizes of the connected components, in discovery order."""

    sizes: list[int]

    @property
    def count(self) -> int:
        return len(self.sizes)

    @property
    def is_connected(self) -> bool:
        return self.count == 1


class Graph:
    """An undirected graph whose vertices are laid out by a spring simulation."""

    def __init__(self, step_delay: float = 0.5, rng: random.Random | None = None):
        self.adj: dict[int, list[int]] = {}
        self.nodes: dict[int, NodeProperties] = {}
        self.step_delay = step_delay
        self.simulation_active = True
        self.repulsion_strength = 5000.0
        self.spring_strength = 0.1
        self.damping = 0.85
        self._rng = rng if rng is not None else random.Random()
        self._lock = threading.RLock()

    def add_vertex(self, u: int) -> None:
        with self._lock:
            if u not in self.adj:
                self.adj[u] = []
                x = 400 + self._rng.randint(-100, 100)
                y = 300 + self._rng.randint(-100, 100)
                self.nodes[u] = NodeProperties(Vector2(x, y))
            self.simulation_active = True

    def add_edge(self, u: int, v: int) -> None:
        with self._lock:
            self.add_vertex(u)
            self.add_vertex(v)
            self.adj[u].append(v)
            self.adj[v].append(u)
            self.simulation_active = True

    def _neighbors(self, node: int) -> list[int]:
        with self._lock:
            return list(self.adj.get(node, ()))

    def _visit(self, node: int, color: tuple[int, int, int], out: TextIO) -> None:
        print(node, file=out)
        with self._lock:
            if node in self.nodes:
                self.nodes[node].color = color
        if self.step_delay > 0:
            time.sleep(self.step_delay)

    def bfs(self, start_node: int, out: TextIO | None = None) -> list[int]:
        """Breadth-first traversal; returns the vertices in visiting order."""
        out = sys.stdout if out is None else out
        order: list[int] = []
        seen = {start_node}
        queue = deque([start_node])
        while queue:
            current = queue.popleft()
            order.append(current)
            self._visit(current, GREEN, out)
            for neighbor in self._neighbors(current):
                if neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(neighbor)
        return order

    def dfs(self, start_node: int, out: TextIO | None = None) -> list[int]:
        """Depth-first traversal; returns the vertices in visiting order."""
        out = sys.stdout if out is None else out
        order: list[int] = []
        seen: set[int] = set()
        stack = [start_node]
        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)
            order.append(current)
            self._visit(current, ORANGE, out)
            stack.extend(n for n in self._neighbors(current) if n not in seen)
        return order

    def has_path(self, start: int, target: int, out: TextIO | None = None) -> bool:
        return target in self.bfs(start, out)

    def component(self, out: TextIO | None = None) -> ComponentReport:
        """Find connected components and print a summary of them."""
        out = sys.stdout if out is None else out
        with self._lock:
            vertices = list(self.adj)
        seen: set[int] = set()
        sizes: list[int] = []
        for node in vertices:
            if node in seen:
                continue
            members = self.bfs(node, out)
            sizes.append(len(members))
            seen.update(members)
        report = ComponentReport(sizes)
        print(f"Number of components: {report.count}", file=out)
        for index, size in enumerate(report.sizes, start=1):
            print(f"Component {index} size: {size}", file=out)
        print(f"Is Connected: {'Yes' if report.is_connected else 'No'}", file=out)
        return report

    def update_physics(self, delta_time: float) -> None:
        """Advance the layout simulation by one time step."""
        with self._lock:
            if not self.simulation_active:
                return
            for id1, p1 in self.nodes.items():
                total = Vector2(0, 0)
                for id2, p2 in self.nodes.items():
                    if id1 == id2:
                        continue
                    direction = p1.position - p2.position
                    dist_sq = direction.length_squared() + 0.1
                    push = _normalized(direction) * (self.repulsion_strength / dist_sq)
                    # Repulsion terms are combined component-wise, starting from zero.
                    total = Vector2(total.x * push.x, total.y * push.y)
                p1.velocity = p1.velocity + total * delta_time

            for u, neighbors in self.adj.items():
                for v in neighbors:
                    delta = self.nodes[v].position - self.nodes[u].position
                    distance = delta.length()
                    if distance < 0.001:
                        continue
                    force = (distance - REST_LENGTH) * self.spring_strength * 2
                    attraction = _normalized(delta) * force
                    self.nodes[u].velocity = self.nodes[u].velocity + attraction * delta_time
                    self.nodes[v].velocity = self.nodes[v].velocity - attraction * delta_time

            total_movement = 0.0
            for props in self.nodes.values():
                props.velocity = props.velocity * self.damping
                if props.velocity.length() < 0.01:
                    props.velocity = Vector2(0, 0)
                props.position = props.position + props.velocity * delta_time
                total_movement += props.velocity.length()
            if total_movement < 0.001:
                self.simulation_active = False

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        with self._lock:
            edges = [
                (self.nodes[u].position, self.nodes[v].position)
                for u, neighbors in self.adj.items()
                for v in neighbors
            ]
            vertices = [(i, Vector2(p.position), p.color) for i, p in self.nodes.items()]
        for start, end in edges:
            pygame.draw.line(surface, DARKGRAY, start, end, EDGE_WIDTH)
        for node_id, position, color in vertices:
            pygame.draw.circle(surface, BLACK, position, OUTLINE_RADIUS)
            pygame.draw.circle(surface, color, position, NODE_RADIUS)
            label = font.render(str(node_id), True, WHITE)
            surface.blit(label, (int(position.x - 8), int(position.y - 8)))

    def reset_colors(self) -> None:
        with self._lock:
            for props in self.nodes.values():
                props.color = MAROON

    def _highlight(self, visited: list[int]) -> None:
        with self._lock:
            for node in visited:
                if node in self.nodes:
                    self.nodes[node].color = GREEN

    def visual_bfs(self, start_node: int, out: TextIO | None = None) -> list[int]:
        self.reset_colors()
        visited = self.bfs(start_node, out)
        self._highlight(visited)
        return visited

    def visual_dfs(self, start_node: int, out: TextIO | None = None) -> list[int]:
        visited = self.dfs(start_node, out)
        self._highlight(visited)
        return visited