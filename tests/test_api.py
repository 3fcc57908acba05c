"""Tests for the public entry points."""

import pytest

import toposcc as ts

ACYCLIC_VERTICES = "bcade"
ACYCLIC_EDGES = [(s[0], s[1]) for s in ["ad", "ab", "bc", "de", "cd"]]

CYCLIC_VERTICES = "abcdefghijkl"
CYCLIC_EDGES = [
    (s[0], s[1]) for s in ["ab", "bc", "be", "bf", "cd", "cg", "dc", "dh", "ea", "ef", "fg", "gf", "hd", "hg", "ii", "kl"]
]


def _edge_predicate(edges: list[tuple[str, str]]):  # noqa: ANN202
    edge_set = set(edges)

    def comes_before(a: str, b: str) -> bool:
        return (a, b) in edge_set

    return comes_before


def _component_sets(components: list[list[str]]) -> list[frozenset[str]]:
    return [frozenset(component) for component in components]


class TestAcyclicOrdering:
    """The descending variants mirror the computation instead of reversing it."""

    def test_order(self) -> None:
        assert "".join(ts.order(ACYCLIC_VERTICES, ACYCLIC_EDGES)) == "abcde"

    def test_order_by(self) -> None:
        assert "".join(ts.order_by(ACYCLIC_VERTICES, _edge_predicate(ACYCLIC_EDGES))) == "abcde"

    def test_order_desc(self) -> None:
        assert "".join(ts.order_desc(ACYCLIC_VERTICES, ACYCLIC_EDGES)) == "edcba"

    def test_order_by_desc(self) -> None:
        assert "".join(ts.order_by_desc(ACYCLIC_VERTICES, _edge_predicate(ACYCLIC_EDGES))) == "edcba"

    @pytest.mark.parametrize("algorithm", list(ts.SccAlgorithm))
    def test_algorithms_agree(self, algorithm: ts.SccAlgorithm) -> None:
        assert "".join(ts.order(ACYCLIC_VERTICES, ACYCLIC_EDGES, algorithm=algorithm)) == "abcde"
        assert "".join(ts.order_desc(ACYCLIC_VERTICES, ACYCLIC_EDGES, algorithm=algorithm)) == "edcba"

    def test_decompose_acyclic_gives_singletons(self) -> None:
        assert ts.decompose(ACYCLIC_VERTICES, ACYCLIC_EDGES) == [["a"], ["b"], ["c"], ["d"], ["e"]]
        assert ts.decompose_desc(ACYCLIC_VERTICES, ACYCLIC_EDGES) == [["e"], ["d"], ["c"], ["b"], ["a"]]

    def test_no_edges_keeps_input_order(self) -> None:
        assert ts.order([3, 1, 2], []) == [3, 1, 2]
        assert ts.order_desc([3, 1, 2], []) == [3, 1, 2]

    def test_empty_input(self) -> None:
        assert ts.order([], []) == []
        assert ts.decompose_by([], lambda a, b: True) == []

    def test_vertices_may_be_a_generator(self) -> None:
        assert ts.order((v for v in "cba"), [("a", "b"), ("b", "c")]) == ["a", "b", "c"]

    def test_desc_is_not_a_reversed_ascending_order(self) -> None:
        # Unconstrained elements keep their input order in both directions.
        vertices = ["x", "a", "b"]
        edges = [("a", "b")]
        assert ts.order(vertices, edges) == ["x", "a", "b"]
        assert ts.order_desc(vertices, edges) == ["x", "b", "a"]


class TestCyclicDecomposition:
    def test_components(self) -> None:
        sets = _component_sets(ts.decompose(CYCLIC_VERTICES, CYCLIC_EDGES))

        assert len(sets) == 7
        assert set(sets) == {frozenset(c) for c in ["abe", "cdh", "fg", "i", "j", "k", "l"]}
        assert sets.index(frozenset("abe")) < sets.index(frozenset("fg"))
        assert sets.index(frozenset("cdh")) < sets.index(frozenset("fg"))
        assert sets.index(frozenset("abe")) < sets.index(frozenset("cdh"))
        assert sets.index(frozenset("k")) < sets.index(frozenset("l"))

    def test_components_desc(self) -> None:
        sets = _component_sets(ts.decompose_desc(CYCLIC_VERTICES, CYCLIC_EDGES))

        assert set(sets) == {frozenset(c) for c in ["abe", "cdh", "fg", "i", "j", "k", "l"]}
        assert sets.index(frozenset("fg")) < sets.index(frozenset("abe"))
        assert sets.index(frozenset("fg")) < sets.index(frozenset("cdh"))
        assert sets.index(frozenset("cdh")) < sets.index(frozenset("abe"))
        assert sets.index(frozenset("l")) < sets.index(frozenset("k"))

    def test_predicate_components_match(self) -> None:
        by_pairs = set(_component_sets(ts.decompose(CYCLIC_VERTICES, CYCLIC_EDGES)))
        by_predicate = set(_component_sets(ts.decompose_by(CYCLIC_VERTICES, _edge_predicate(CYCLIC_EDGES))))
        assert by_pairs == by_predicate

    def test_predicate_desc_components_match(self) -> None:
        by_pairs = _component_sets(ts.decompose_desc(CYCLIC_VERTICES, CYCLIC_EDGES))
        by_predicate = _component_sets(ts.decompose_by_desc(CYCLIC_VERTICES, _edge_predicate(CYCLIC_EDGES)))
        assert set(by_pairs) == set(by_predicate)
        assert by_predicate.index(frozenset("l")) < by_predicate.index(frozenset("k"))

    def test_decompose_is_repeatable(self) -> None:
        first = ts.decompose(CYCLIC_VERTICES, CYCLIC_EDGES)
        second = ts.decompose(CYCLIC_VERTICES, CYCLIC_EDGES)
        assert first == second

    @pytest.mark.parametrize("order", [ts.order, ts.order_by])
    def test_order_reports_cycles(self, order) -> None:  # noqa: ANN001
        edges = CYCLIC_EDGES if order is ts.order else _edge_predicate(CYCLIC_EDGES)
        with pytest.raises(ts.CycleDetectedError) as exc_info:
            order(CYCLIC_VERTICES, edges)

        reported = {frozenset(component) for component in exc_info.value.components}
        assert reported == {frozenset("abe"), frozenset("cdh"), frozenset("fg"), frozenset("i")}

    def test_self_loop_singleton_fails_order(self) -> None:
        assert ts.decompose("a", [("a", "a")]) == [["a"]]
        with pytest.raises(ts.CycleDetectedError) as exc_info:
            ts.order("a", [("a", "a")])
        assert exc_info.value.component == ["a"]

    def test_self_loop_via_predicate(self) -> None:
        with pytest.raises(ts.CycleDetectedError) as exc_info:
            ts.order_by_desc("ab", lambda x, y: x == y == "b")
        assert exc_info.value.components == [["b"]]


class TestEquality:
    """Tests for injected equality."""

    def test_key_equality(self) -> None:
        equality = ts.KeyEquality(str.lower)
        assert ts.order(["B", "a"], [("a", "b")], equality=equality) == ["a", "B"]
        assert ts.order_desc(["B", "a"], [("a", "b")], equality=equality) == ["B", "a"]

    def test_predecessors_come_from_edges(self) -> None:
        # A predecessor is visited as it appears in the edge list
        equality = ts.KeyEquality(str.lower)
        assert ts.order(["B", "a"], [("A", "b")], equality=equality) == ["A", "B"]

    def test_key_equality_merges_duplicates(self) -> None:
        assert ts.decompose(["a", "A", "b"], [], equality=ts.KeyEquality(str.lower)) == [["a"], ["b"]]

    def test_custom_equality(self) -> None:
        class CaseInsensitive:
            def equals(self, left: str, right: str) -> bool:
                return left.lower() == right.lower()

            def hash(self, value: str) -> int:
                return hash(value.lower())

        result = ts.decompose(["A", "b"], [("a", "B"), ("B", "a")], equality=CaseInsensitive())
        assert [sorted(member.lower() for member in component) for component in result] == [["a", "b"]]

    def test_unhashable_elements_with_key_equality(self) -> None:
        vertices = [[2], [1]]
        assert ts.order(vertices, [([1], [2])], equality=ts.KeyEquality(tuple)) == [[1], [2]]

    def test_elements_are_returned_not_copies(self) -> None:
        first = [1]
        second = [2]
        result = ts.order([second, first], [(first, second)], equality=ts.KeyEquality(tuple))
        assert result[0] is first
        assert result[1] is second

    def test_natural_equality_is_the_default(self) -> None:
        explicit = ts.decompose(CYCLIC_VERTICES, CYCLIC_EDGES, equality=ts.NaturalEquality())
        assert explicit == ts.decompose(CYCLIC_VERTICES, CYCLIC_EDGES)


class TestInvalidArguments:
    @pytest.mark.parametrize(
        "call",
        [
            lambda: ts.decompose(None, []),
            lambda: ts.order(None, []),
            lambda: ts.decompose_desc("ab", None),
            lambda: ts.order_desc("ab", None),
            lambda: ts.decompose_by(None, lambda a, b: False),
            lambda: ts.order_by("ab", None),
            lambda: ts.decompose_by_desc("ab", "not callable"),
            lambda: ts.order_by_desc("ab", 42),
            lambda: ts.order("ab", [("a", "b", "c")]),
            lambda: ts.decompose("ab", [], algorithm="kosaraju"),
        ],
    )
    def test_raises_invalid_argument(self, call) -> None:  # noqa: ANN001
        with pytest.raises(ts.InvalidArgumentError):
            call()

    def test_invalid_argument_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="vertices must not be None"):
            ts.decompose(None, [])

    def test_predicate_not_called_for_invalid_algorithm(self) -> None:
        calls: list[tuple[str, str]] = []

        def comes_before(a: str, b: str) -> bool:
            calls.append((a, b))
            return False

        with pytest.raises(ts.InvalidArgumentError):
            ts.decompose_by("ab", comes_before, algorithm="bogus")
        assert calls == []


class TestCancellation:
    def test_cancel_propagates(self) -> None:
        with pytest.raises(ts.DecompositionCancelledError):
            ts.order("abc", [("a", "b")], cancel=lambda: True)

    def test_cancel_is_a_toposcc_error(self) -> None:
        with pytest.raises(ts.ToposccError):
            ts.decompose_by("abc", lambda a, b: False, cancel=lambda: True)
