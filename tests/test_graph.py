import io
import random

import pygame
import pytest
from pygame.math import Vector2

from graphphysics.graph import (
    BLACK,
    DARKGRAY,
    GREEN,
    MAROON,
    ORANGE,
    ComponentReport,
    Graph,
)


@pytest.fixture
def graph():
    g = Graph(step_delay=0, rng=random.Random(1))
    g.add_edge(1, 2)
    g.add_edge(1, 3)
    g.add_edge(2, 4)
    return g


def test_add_edge_creates_vertices_and_symmetric_adjacency(graph):
    assert set(graph.adj) == {1, 2, 3, 4}
    assert graph.adj[1] == [2, 3]
    assert graph.adj[4] == [2]
    for u, neighbors in graph.adj.items():
        for v in neighbors:
            assert u in graph.adj[v]


def test_add_vertex_places_node_near_center_and_is_idempotent():
    g = Graph(step_delay=0, rng=random.Random(5))
    g.add_vertex(7)
    position = Vector2(g.nodes[7].position)
    g.add_vertex(7)
    assert g.nodes[7].position == position
    assert 300 <= position.x <= 500
    assert 200 <= position.y <= 400
    assert g.nodes[7].color == MAROON


def test_bfs_order_and_output(graph):
    out = io.StringIO()
    order = graph.bfs(1, out)
    assert order == [1, 2, 3, 4]
    assert out.getvalue().split() == ["1", "2", "3", "4"]
    assert all(graph.nodes[n].color == GREEN for n in order)


def test_dfs_order_colors_orange(graph):
    out = io.StringIO()
    order = graph.dfs(1, out)
    assert order == [1, 3, 2, 4]
    assert all(graph.nodes[n].color == ORANGE for n in order)


def test_has_path(graph):
    graph.add_vertex(9)
    assert graph.has_path(1, 4, io.StringIO())
    assert not graph.has_path(1, 9, io.StringIO())


def test_bfs_from_unknown_vertex_leaves_graph_unchanged(graph):
    assert graph.bfs(42, io.StringIO()) == [42]
    assert 42 not in graph.adj


def test_component_report(graph):
    graph.add_edge(10, 11)
    out = io.StringIO()
    report = graph.component(out)
    assert report.sizes == [4, 2]
    assert report.count == 2
    assert not report.is_connected
    text = out.getvalue()
    assert "Number of components: 2" in text
    assert "Is Connected: No" in text


def test_component_connected():
    report = ComponentReport([3])
    assert report.is_connected


def test_visual_bfs_resets_then_highlights(graph):
    graph.add_vertex(9)
    graph.nodes[9].color = ORANGE
    graph.visual_bfs(2, io.StringIO())
    assert graph.nodes[9].color == MAROON
    assert all(graph.nodes[n].color == GREEN for n in (1, 2, 3, 4))


def test_visual_dfs_highlights_green(graph):
    graph.visual_dfs(3, io.StringIO())
    assert all(graph.nodes[n].color == GREEN for n in (1, 2, 3, 4))


def test_reset_colors(graph):
    graph.bfs(1, io.StringIO())
    graph.reset_colors()
    assert {p.color for p in graph.nodes.values()} == {MAROON}


def test_spring_pulls_connected_nodes_together():
    g = Graph(step_delay=0)
    g.add_edge(1, 2)
    g.nodes[1].position = Vector2(0, 0)
    g.nodes[2].position = Vector2(300, 0)
    g.update_physics(1 / 60)
    a, b = g.nodes[1].position, g.nodes[2].position
    assert b.x - a.x < 300
    assert a.x + b.x == pytest.approx(300)
    assert a.y == b.y == 0


def test_simulation_stops_when_still():
    g = Graph(step_delay=0)
    g.add_vertex(1)
    assert g.simulation_active
    before = Vector2(g.nodes[1].position)
    g.update_physics(1 / 60)
    assert not g.simulation_active
    assert g.nodes[1].position == before
    g.add_vertex(2)
    assert g.simulation_active


def test_draw_renders_nodes_and_edges():
    pygame.font.init()
    font = pygame.font.Font(None, 20)
    g = Graph(step_delay=0)
    g.add_edge(1, 2)
    g.nodes[1].position = Vector2(100, 100)
    g.nodes[2].position = Vector2(300, 100)
    surface = pygame.Surface((400, 200))
    surface.fill((255, 255, 255))
    g.draw(surface, font)
    assert tuple(surface.get_at((115, 100)))[:3] == MAROON
    assert tuple(surface.get_at((121, 100)))[:3] == BLACK
    assert tuple(surface.get_at((200, 100)))[:3] == DARKGRAY