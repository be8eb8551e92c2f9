from graphwalk.algorithms.astar import a_star, implicit_a_star, implicit_a_star_by
from graphwalk.algorithms.dijkstra import implicit_dijkstra, shortest_path
from graphwalk.path import Path


def zero_heuristic(_node, _target):
    return 0


def manhattan(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def build_grid(make_graph, size, walls=()):
    nodes = [(x, y) for x in range(size) for y in range(size) if (x, y) not in walls]
    node_set = set(nodes)
    edges = []
    for x, y in nodes:
        for dx, dy in ((1, 0), (0, 1), (-1, 0), (0, -1)):
            nbr = (x + dx, y + dy)
            if nbr in node_set:
                edges.append(((x, y), nbr, 1))
    return make_graph(nodes, edges)


class TestAStar:
    def test_zero_heuristic_matches_dijkstra(self, graph1, square1, square2, undirected1):
        for g in (graph1, square1, square2, undirected1):
            for s in g:
                for t in g:
                    assert a_star(g, s, t, zero_heuristic) == shortest_path(g, s, t)

    def test_admissible_inconsistent_heuristic_stays_optimal(self, make_graph):
        # h(A) = 4 is exact from A but drops by more than the S->A edge costs
        g = make_graph(
            ["S", "A", "B", "C", "G"],
            [("S", "A", 1), ("S", "B", 1), ("A", "C", 1), ("B", "C", 2), ("C", "G", 3)],
        )
        estimates = {"A": 4}
        path = a_star(g, "S", "G", lambda n, _t: estimates.get(n, 0))
        assert path == Path(("S", "A", "C", "G"), 5)
        assert path == shortest_path(g, "S", "G")

    def test_manhattan_on_grid(self, make_graph):
        walls = {(1, 0), (1, 1), (1, 2)}
        g = build_grid(make_graph, 4, walls)
        path = a_star(g, (0, 0), (3, 0), manhattan)
        assert path.total_weight == 9
        assert path.src_node == (0, 0)
        assert path.dst_node == (3, 0)
        assert len(path) == 10
        assert path.total_weight == shortest_path(g, (0, 0), (3, 0)).total_weight

    def test_heuristic_receives_target(self, square1):
        seen_targets = set()

        def spy(node, target):
            seen_targets.add(target)
            return 0

        a_star(square1, "A", "C", spy)
        assert seen_targets == {"C"}

    def test_source_equals_target(self, square1):
        assert a_star(square1, "B", "B", zero_heuristic) == Path(("B",), 0)

    def test_unreachable_and_missing(self, square1):
        assert a_star(square1, "C", "A", zero_heuristic) is None
        assert a_star(square1, "A", "Q", zero_heuristic) is None


class TestImplicitAStar:
    @staticmethod
    def _moves(pos):
        x, y = pos
        for dx, dy in ((1, 0), (0, 1), (-1, 0), (0, -1)):
            nxt = (x + dx, y + dy)
            if 0 <= nxt[0] < 6 and 0 <= nxt[1] < 6:
                yield nxt, 1

    def test_grid(self):
        goal = (5, 4)
        weight = implicit_a_star(
            (0, 0), self._moves, lambda p: p == goal, lambda p: manhattan(p, goal)
        )
        assert weight == 9

    def test_agrees_with_implicit_dijkstra(self):
        goal = (3, 5)
        expected = implicit_dijkstra((1, 1), self._moves, lambda p: p == goal)
        assert (
            implicit_a_star(
                (1, 1), self._moves, lambda p: p == goal, lambda p: manhattan(p, goal)
            )
            == expected
        )

    def test_expands_fewer_states_than_dijkstra(self):
        goal = (5, 0)
        expanded = {"astar": 0, "dijkstra": 0}

        def counting(name):
            def successors(pos):
                expanded[name] += 1
                return list(self._moves(pos))

            return successors

        implicit_a_star(
            (0, 0), counting("astar"), lambda p: p == goal, lambda p: manhattan(p, goal)
        )
        implicit_dijkstra((0, 0), counting("dijkstra"), lambda p: p == goal)
        assert expanded["astar"] < expanded["dijkstra"]

    def test_by_key(self):
        goal = (2, 2)

        def successors(state):
            pos, steps = state
            for nxt, cost in self._moves(pos):
                yield (nxt, steps + 1), cost

        weight = implicit_a_star_by(
            ((0, 0), 0),
            successors,
            lambda s: s[0] == goal,
            lambda s: manhattan(s[0], goal),
            lambda s: s[0],
        )
        assert weight == 4

    def test_admissible_inconsistent_heuristic(self):
        edges = {"S": [("A", 1), ("B", 1)], "A": [("C", 1)], "B": [("C", 2)], "C": [("G", 3)], "G": []}
        estimates = {"A": 4}
        weight = implicit_a_star(
            "S", lambda n: edges[n], lambda n: n == "G", lambda n: estimates.get(n, 0)
        )
        assert weight == 5

    def test_no_goal(self):
        assert (
            implicit_a_star((0, 0), self._moves, lambda p: p == (9, 9), lambda p: 0)
            is None
        )
