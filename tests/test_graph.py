"""
Tests for the transition graph: construction, neighbors and cliques.
"""

from collections import Counter
from itertools import combinations

import networkx as nx
import pytest
from camelot_graph.graph.builder import (
    ScaleTransitions,
    UnknownKeyError,
    get_scale_transitions,
    make_scale_transition_graph,
)
from camelot_graph.graph.cliques import maximal_cliques
from camelot_graph.graph.neighbors import harmonic_transitions_from
from camelot_graph.theory.key import decode, make_standard_scale
from camelot_graph.theory.transitions import HARMONIC_TRANSITIONS, VERTICAL, make_transition


@pytest.fixture(scope="module")
def transitions():
    return make_scale_transition_graph()


class TestGraphConstruction:
    """Test building the 24-node graph."""

    def test_node_count(self, transitions):
        assert transitions.graph.number_of_nodes() == 24
        assert set(transitions.index) == set(make_standard_scale())

    def test_edge_count(self, transitions):
        """One edge per (key, transition), parallel edges kept."""
        assert transitions.graph.number_of_edges() == 240

    def test_each_label_has_24_edges(self, transitions):
        labels = Counter(
            label for _, _, label in transitions.graph.edges(data="transition")
        )
        assert set(labels) == set(HARMONIC_TRANSITIONS)
        assert all(count == 24 for count in labels.values())

    def test_graph_is_undirected(self, transitions):
        assert not transitions.graph.is_directed()
        source = transitions.node(decode("8B"))
        target = transitions.node(decode("8A"))
        assert transitions.graph.has_edge(source, target)
        assert transitions.graph.has_edge(target, source)

    def test_vertical_pair_has_parallel_edges(self, transitions):
        """8A->8B and 8B->8A are both stored, both labeled Vertical."""
        source = transitions.node(decode("8B"))
        target = transitions.node(decode("8A"))
        labels = [
            data["transition"]
            for data in transitions.graph.get_edge_data(source, target).values()
        ]
        assert labels == [VERTICAL, VERTICAL]

    def test_edges_match_rules(self, transitions):
        for key in make_standard_scale():
            for transition in HARMONIC_TRANSITIONS:
                target = make_transition(key, transition)
                assert transitions.graph.has_edge(
                    transitions.node(key), transitions.node(target)
                )

    def test_edges_record_source(self, transitions):
        """Each edge remembers the node its rule was applied from."""
        for u, v, data in transitions.graph.edges(data=True):
            assert data["source"] in (u, v)
            source_key = transitions.key(data["source"])
            other = v if data["source"] == u else u
            assert make_transition(source_key, data["transition"]) == transitions.key(other)

    def test_node_key_lookup(self, transitions):
        for key in make_standard_scale():
            assert transitions.key(transitions.node(key)) == key

    def test_unknown_key(self, transitions):
        with pytest.raises(UnknownKeyError):
            transitions.node("8A")

    def test_graph_is_frozen(self, transitions):
        assert nx.is_frozen(transitions.graph)
        with pytest.raises(nx.NetworkXError):
            transitions.graph.add_edge(0, 1)

    def test_shared_graph_built_once(self):
        assert get_scale_transitions() is get_scale_transitions()


class TestNeighbors:
    """Test one-step neighbor lookup."""

    def test_neighbors_of_8a(self):
        neighbors = [str(key) for key in harmonic_transitions_from(decode("8A"))]
        assert neighbors == [
            "1A", "3A", "4B", "6A", "7A", "7B", "8A", "8B", "9A", "10A", "11B",
        ]

    def test_neighbors_include_self_and_all_targets(self):
        for key in make_standard_scale():
            neighbors = harmonic_transitions_from(key)
            assert key in neighbors
            for transition in HARMONIC_TRANSITIONS:
                assert make_transition(key, transition) in neighbors

    def test_neighbors_sorted_and_unique(self):
        for key in make_standard_scale():
            neighbors = harmonic_transitions_from(key)
            assert neighbors == sorted(set(neighbors))
            assert 1 < len(neighbors) <= 11

    def test_neighbors_match_graph_adjacency(self, transitions):
        simple = transitions.adjacency_graph()
        for key in make_standard_scale():
            adjacent = {
                transitions.key(node)
                for node in simple.neighbors(transitions.node(key))
            }
            assert set(harmonic_transitions_from(key)) == adjacent | {key}


class TestCliques:
    """Test maximal clique enumeration."""

    def test_cliques_are_pairwise_adjacent(self):
        for clique in maximal_cliques():
            for a, b in combinations(clique, 2):
                assert b in harmonic_transitions_from(a)

    def test_cliques_are_maximal(self):
        for clique in maximal_cliques():
            for key in make_standard_scale():
                if key in clique:
                    continue
                assert not all(key in harmonic_transitions_from(member) for member in clique)

    def test_cliques_cover_every_edge(self):
        """Each adjacent pair appears together in at least one clique."""
        cliques = maximal_cliques()
        for key in make_standard_scale():
            for neighbor in harmonic_transitions_from(key):
                if neighbor == key:
                    continue
                assert any(key in c and neighbor in c for c in cliques)

    def test_empty_graph_has_no_cliques(self):
        assert maximal_cliques(ScaleTransitions(nx.MultiGraph(), {})) == set()

    def test_cliques_are_stable(self, transitions):
        assert maximal_cliques(transitions) == maximal_cliques()
        assert all(len(clique) >= 2 for clique in maximal_cliques())
