"""
Tests for variable numbering, DIMACS text and the two encoders.

Small instances are checked against exhaustive search over all assignments.
"""

import itertools
import os
import tempfile
from pathlib import Path

import pytest

from reductions.encoding import (
    CNF,
    encode_clique,
    encode_coloring,
    format_dimacs,
    parse_dimacs,
    parse_dimacs_string,
    position_of,
    split_variable,
    variable_index,
    vertex_of,
    write_dimacs,
)
from reductions.graph import Graph

SAMPLE_CNF = """c This is a comment
p cnf 4 3
1 2 -3 0
-1 3 4 0
2 -4 0
"""

TRIANGLE = Graph.from_edges([(1, 2), (2, 3), (1, 3)])
PATH = Graph.from_edges([(1, 2), (2, 3)])

SMALL_GRAPHS = [
    (4, Graph.from_edges([])),
    (4, Graph.from_edges([(1, 2), (2, 3), (3, 4)])),
    (4, Graph.from_edges([(1, 2), (2, 3), (1, 3), (3, 4)])),
    (4, Graph.from_edges([(1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4)])),
    (4, Graph.from_edges([(1, 2), (2, 3), (3, 4), (4, 1)])),
]


def satisfies(clauses, true_vars):
    return all(any((lit > 0) == (abs(lit) in true_vars) for lit in clause) for clause in clauses)


def is_satisfiable(cnf):
    variables = range(1, cnf.num_variables + 1)
    for bits in itertools.product([False, True], repeat=cnf.num_variables):
        true_vars = {v for v, bit in zip(variables, bits) if bit}
        if satisfies(cnf.clauses, true_vars):
            return True
    return False


def has_clique(graph, n, k):
    return any(
        all(graph.has_edge(v, w) for v, w in itertools.combinations(subset, 2))
        for subset in itertools.combinations(range(1, n + 1), k)
    )


def is_colorable(graph, n, k):
    for colors in itertools.product(range(k), repeat=n):
        if all(colors[v - 1] != colors[w - 1]
               for v in range(1, n + 1) for w in range(v + 1, n + 1)
               if graph.has_edge(v, w)):
            return True
    return False


class TestVariables:
    """Tests for the shared variable numbering."""

    def test_known_values(self):
        """Each vertex owns a band of K consecutive variables."""
        assert variable_index(1, 1, 3) == 1
        assert variable_index(3, 1, 3) == 3
        assert variable_index(1, 2, 3) == 4
        assert variable_index(2, 4, 3) == 11

    def test_bijection(self):
        """(position, vertex) pairs map one-to-one onto [1, N*K]."""
        for n, k in [(1, 1), (3, 2), (4, 3), (5, 5), (2, 7)]:
            seen = {
                variable_index(i, v, k)
                for i in range(1, k + 1)
                for v in range(1, n + 1)
            }
            assert seen == set(range(1, n * k + 1))

    def test_inverse(self):
        """Decoding var(i, v) recovers v and (i, v)."""
        for n, k in [(1, 1), (3, 2), (4, 3), (6, 4)]:
            for i in range(1, k + 1):
                for v in range(1, n + 1):
                    x = variable_index(i, v, k)
                    assert vertex_of(x, k) == v
                    assert position_of(x, k) == i
                    assert split_variable(x, k) == (i, v)


class TestDimacs:
    """Tests for DIMACS rendering and parsing."""

    def test_format(self):
        """Header first, then one clause per line ending in 0."""
        cnf = CNF.from_clauses(3, [(1, -2), (3,), (-1, -3)])

        assert format_dimacs(cnf) == "p cnf 3 3\n1 -2 0\n3 0\n-1 -3 0\n"

    def test_format_empty_clause(self):
        """An empty clause is written as a lone 0."""
        cnf = CNF.from_clauses(1, [(1,), ()])

        assert format_dimacs(cnf) == "p cnf 1 2\n1 0\n0\n"
        assert cnf.has_empty_clause()

    def test_format_comments(self):
        cnf = CNF.from_clauses(1, [(1,)], comments=["hello"])

        assert format_dimacs(cnf).startswith("c hello\np cnf 1 1\n")

    def test_parse_string(self):
        cnf = parse_dimacs_string(SAMPLE_CNF)

        assert cnf.num_variables == 4
        assert cnf.num_clauses == 3
        assert cnf.clauses == [(1, 2, -3), (-1, 3, 4), (2, -4)]
        assert cnf.comments == ["This is a comment"]

    def test_parse_empty_clause(self):
        """A lone 0 parses back to the empty clause."""
        cnf = parse_dimacs_string("p cnf 1 2\n1 0\n0\n")

        assert cnf.clauses == [(1,), ()]

    def test_parse_errors(self):
        with pytest.raises(ValueError, match="Missing problem line"):
            parse_dimacs_string("1 2 0\n")
        with pytest.raises(ValueError, match="Invalid problem line"):
            parse_dimacs_string("p dnf 2 1\n1 2 0\n")
        with pytest.raises(ValueError, match="Invalid literal"):
            parse_dimacs_string("p cnf 2 1\n1 x 0\n")

    def test_write_and_parse_file(self):
        """A written formula reads back with the same clauses."""
        cnf = encode_clique(PATH, 3, 2)

        with tempfile.TemporaryDirectory() as tmpdir:
            output_path = Path(tmpdir) / "nested" / "sat.cnf"
            write_dimacs(cnf, output_path)
            cnf2 = parse_dimacs(output_path)

        assert cnf2.num_variables == cnf.num_variables
        assert cnf2.num_clauses == cnf.num_clauses
        assert cnf2.clauses == cnf.clauses

    def test_parse_missing_file(self):
        with pytest.raises(FileNotFoundError):
            parse_dimacs(os.path.join(tempfile.gettempdir(), "no-such-file.cnf"))


class TestCliqueEncoder:
    """Tests for the k-clique reduction."""

    def test_triangle_clauses(self):
        """Triangle with K=3: coverage and distinctness only."""
        cnf = encode_clique(TRIANGLE, 3, 3)

        assert cnf.num_variables == 9
        assert cnf.clauses[:3] == [(1, 4, 7), (2, 5, 8), (3, 6, 9)]
        assert cnf.num_clauses == 3 + 0 + 3 * 3
        assert cnf.num_clauses == len(cnf.clauses)

    def test_path_clauses(self):
        """Path 1-2-3 with K=2: vertices 1 and 3 cannot share the clique."""
        cnf = encode_clique(PATH, 3, 2)

        assert cnf.clauses == [
            (1, 3, 5),
            (2, 4, 6),
            (-1, -6),
            (-5, -2),
            (-1, -2),
            (-3, -4),
            (-5, -6),
        ]

    @pytest.mark.parametrize("n,graph", SMALL_GRAPHS)
    def test_clause_count(self, n, graph):
        """Header count equals K + 2*non-edges*C(K,2) + C(K,2)*N."""
        non_edges = sum(
            1 for v, w in itertools.combinations(range(1, n + 1), 2)
            if not graph.has_edge(v, w)
        )
        for k in range(1, 5):
            pairs = k * (k - 1) // 2
            cnf = encode_clique(graph, n, k)
            assert cnf.num_clauses == k + 2 * non_edges * pairs + pairs * n
            assert f"p cnf {n * k} {cnf.num_clauses}\n" in format_dimacs(cnf)

    @pytest.mark.parametrize("n,graph", SMALL_GRAPHS)
    def test_sound_and_complete(self, n, graph):
        """Satisfiable iff the graph has a clique of size K."""
        for k in range(1, 4):
            assert is_satisfiable(encode_clique(graph, n, k)) == has_clique(graph, n, k)

    def test_k_larger_than_n(self):
        """No clique is larger than the vertex count."""
        assert not is_satisfiable(encode_clique(TRIANGLE, 3, 4))

    def test_single_slot(self):
        """K=1 is satisfiable iff there is at least one vertex."""
        assert is_satisfiable(encode_clique(Graph(), 1, 1))
        assert not is_satisfiable(encode_clique(Graph(), 0, 1))

    def test_degenerate_sizes(self):
        """Non-positive sizes give a well-defined formula."""
        cnf = encode_clique(TRIANGLE, 3, 0)
        assert cnf.num_variables == 0
        assert cnf.clauses == []

        cnf = encode_clique(Graph(), 0, 2)
        assert cnf.num_variables == 0
        assert cnf.clauses == [(), ()]


class TestColoringEncoder:
    """Tests for the k-coloring reduction."""

    def test_triangle_clauses(self):
        """Triangle with K=2: 3 coverage, 3 at-most-one, 6 adjacency clauses."""
        cnf = encode_coloring(TRIANGLE, 3, 2)

        assert cnf.num_variables == 6
        assert cnf.clauses == [
            (1, 2), (3, 4), (5, 6),
            (-1, -2), (-3, -4), (-5, -6),
            (-1, -3), (-1, -5), (-3, -5),
            (-2, -4), (-2, -6), (-4, -6),
        ]

    @pytest.mark.parametrize("n,graph", SMALL_GRAPHS)
    def test_clause_count(self, n, graph):
        """Header count equals N + N*C(K,2) + K*|E|."""
        for k in range(1, 5):
            cnf = encode_coloring(graph, n, k)
            expected = n + n * k * (k - 1) // 2 + k * graph.num_edges
            assert cnf.num_clauses == expected
            assert cnf.num_clauses == len(cnf.clauses)

    @pytest.mark.parametrize("n,graph", SMALL_GRAPHS)
    def test_sound_and_complete(self, n, graph):
        """Satisfiable iff the graph is K-colorable."""
        for k in range(1, 4):
            assert is_satisfiable(encode_coloring(graph, n, k)) == is_colorable(graph, n, k)

    def test_complete_graph(self):
        """K_4 needs exactly four colors."""
        complete = Graph.from_edges(itertools.combinations(range(1, 5), 2))

        assert not is_satisfiable(encode_coloring(complete, 4, 3))
        assert is_satisfiable(encode_coloring(complete, 4, 4))

    def test_edges_outside_range_ignored(self):
        """Only vertices 1..N take part in the formula."""
        graph = Graph.from_edges([(1, 2), (2, 9)])
        cnf = encode_coloring(graph, 2, 2)

        assert cnf.num_clauses == 2 + 2 + 2
