"""Traversal and shortest-path algorithms.

Modules:
    base: weight algebra, graph query protocol and enums.
    frontier: FIFO/LIFO and priority frontiers.
    traversal: BFS/DFS walks and folds, explicit and implicit.
    dijkstra: best-first engine, Dijkstra and its implicit forms.
    astar: A* and its implicit forms.
    bellman_ford: negative-weight shortest paths and cycle detection.
    floyd_warshall: all-pairs distances.
    distance_matrix: POI-restricted all-pairs distances.
"""
