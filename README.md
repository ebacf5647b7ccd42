# graphphysics

An interactive graph explorer. You build an undirected graph from a terminal menu. A pygame window shows the graph, and the edges act as springs that settle the layout. Breadth-first and depth-first traversals are animated one vertex at a time. A second view counts the islands in a grid of land (`1`) and water (`0`) and colours each island cell by cell as it is found.

## Installation

```
pip install .
```

## Running

```
graphphysics
graphphysics graph.txt
```

The optional argument names a file in `./tests/`. The graph is loaded from that file before the menu appears. If the file cannot be read, the program prints `Failed to open file: <name>` and starts with an empty graph. With more than one argument it prints a usage message and exits.

The menu runs in the terminal, and the window runs beside it. The menu ends when you choose `0`, when input ends, or when you type something that is not a number. The window stays open until you close it.

### Graph file format

The file is a stream of whitespace-separated integers:

- `1 u v` adds the edge u–v and creates any vertex that is missing.
- `2 u` adds the vertex u.

```
1 0 1
1 1 2
2 7
```

An unknown command number prints `Unknown command in file.` and the next number is read as a new command. Reading stops at the first token that is not an integer, so the file cannot contain comments.

### Terminal menu

```
1. Add Edge (u v)
2. Add Vertex (u)
3. Visual BFS (start)
4. Visual DFS (start)
5. Path Check (u v)
6. Component Analysis
7. Reset / Back to Graph
8. Find Islands
0. Exit
```

- **3**: Resets all colours, then runs a breadth-first search. It prints each vertex as it is visited and turns it green, pausing 0.5 s per vertex.
- **4**: Runs a depth-first search, turning each vertex orange as it is visited. When the search finishes, the visited vertices are turned green.
- **5**: Runs a BFS from `u`, printing its visiting order. It then reports `Path exists!` or `No path found.`.
- **6**: Prints the number of connected components, the size of each, and whether the graph is connected.
- **7**: Resets vertex colours and switches the window back to the graph view.
- **8**: Counts islands, as described below.

### Islands

Option 8 asks for a choice:

1. **Manual input.** Give the number of rows, then the number of columns, then one row per entry as a string of `0`/`1` characters. A row of the wrong length is rejected and asked for again.
2. **Load from file.** Give a file name in `./tests/`. The file holds the row and column counts followed by the rows:

   ```
   4 5
   11000
   11000
   00100
   00011
   ```

   If the file cannot be opened, the program prints `Failed to open file.`. If the rows do not match the stated size, it prints `DIMENSION ERROR in file!`.

The program prints the island count, and the window switches to the grid view. Each island is filled in its own colour, one cell per second, and the cell being filled is highlighted. Choose option 7 to return to the graph view.

## Library use

```python
from graphphysics.graph import Graph
from graphphysics.islands import num_islands

g = Graph(step_delay=0)
g.add_edge(1, 2)
g.add_edge(2, 3)
g.add_vertex(9)
print(g.has_path(1, 3))   # prints the BFS order, then True
print(g.has_path(1, 9))   # prints the BFS order, then False
report = g.component()    # prints the summary and returns it
print(report.sizes, report.count, report.is_connected)  # [3, 1] 2 False

print(num_islands([list("110"), list("001")]))  # 2
```

`Graph.bfs` and `Graph.dfs` return the vertices in visiting order. Each of them, and `has_path`, `component`, `visual_bfs` and `visual_dfs`, takes an optional `out` text stream for its printed output. `Graph(step_delay=..., rng=...)` sets the pause per visited vertex and the `random.Random` used for the starting positions.

Other names you can use:

- `graphphysics.islands`:
  - `IslandGrid(step_delay=1.0)` provides `load_grid`, `solve`, `clear` and `draw`, and the properties `has_data` and `island_count`.
  - `RenderMode` is an enum.
  - `flood_fill(grid, r, c, visited)` marks an island's cells.
  - `read_grid_file(path)` reads a grid file and raises `ValueError` on a malformed file.
  - `island(matrix, stream, out, base_dir)` runs the prompt shown under option 8.
- `graphphysics.app`:
  - `AppState` holds the graph and the island grid.
  - `load_graph_file(graph, path, out)` returns the number of commands applied.
  - `cli_interface(state, filename, stream, out, base_dir)` runs the menu loop.
  - `main(argv)` is the command's entry point.

## Limitations

- Only the springs on the edges shape the layout. The pairwise repulsion term adds up to zero, so vertices that share no edges are not pushed apart, and overlapping vertices stay where they were placed.
- Graphs and grids are not saved. Everything lives in memory for one session.

## Tests

```
pip install .[test]
pytest
```