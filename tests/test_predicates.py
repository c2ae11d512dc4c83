"""Tests for warble.predicates — predicate model, nest/un_nest, rendering."""

import pytest

from warble.predicates import (
    EMPTY,
    AndPredicate,
    Empty,
    HeaderPredicate,
    MethodPredicate,
    OrPredicate,
    PathExtensionPredicate,
    PathPatternPredicate,
    QueryParamPredicate,
    describe,
    is_pair,
    method_path_pair,
    nest,
    to_dict,
    un_nest,
)

GET = MethodPredicate(frozenset({"GET"}))
FOO = PathPatternPredicate("/foo")


class TestValueEquality:
    def test_leaves_compare_by_payload(self) -> None:
        assert MethodPredicate(frozenset({"GET"})) == GET
        assert PathPatternPredicate("/foo") == FOO
        assert QueryParamPredicate("a") != QueryParamPredicate("b")

    def test_pairs_compare_recursively(self) -> None:
        assert AndPredicate(GET, FOO) == AndPredicate(
            MethodPredicate(frozenset({"GET"})), PathPatternPredicate("/foo")
        )

    def test_pair_order_is_significant(self) -> None:
        assert AndPredicate(GET, FOO) != AndPredicate(FOO, GET)

    def test_and_differs_from_or(self) -> None:
        assert AndPredicate(GET, FOO) != OrPredicate(GET, FOO)

    def test_empty_instances_are_equal(self) -> None:
        assert Empty() == EMPTY

    def test_hashable(self) -> None:
        assert len({AndPredicate(GET, FOO), AndPredicate(GET, FOO)}) == 1

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            FOO.pattern = "/bar"  # type: ignore[misc]

    def test_type_tags(self) -> None:
        assert EMPTY.type == "Empty"
        assert GET.type == "HttpMethod"
        assert FOO.type == "PathPattern"
        assert HeaderPredicate("Accept: [text/html]").type == "Header"
        assert QueryParamPredicate("q").type == "QueryParam"
        assert PathExtensionPredicate("*.txt").type == "PathExtension"
        assert AndPredicate(GET, FOO).type == "And"
        assert OrPredicate(GET, FOO).type == "Or"


class TestNest:
    def test_empty_base_returns_addition(self) -> None:
        q = QueryParamPredicate("bar1")
        assert nest(EMPTY, q) is q

    def test_base_goes_left(self) -> None:
        q1 = QueryParamPredicate("bar1")
        q2 = QueryParamPredicate("bar2")
        assert nest(q1, q2) == AndPredicate(q1, q2)

    def test_accumulates_left_deep(self) -> None:
        q1, q2, q3 = (QueryParamPredicate(n) for n in ("a", "b", "c"))
        assert nest(nest(nest(EMPTY, q1), q2), q3) == AndPredicate(AndPredicate(q1, q2), q3)


class TestUnNest:
    def test_and_returns_left(self) -> None:
        assert un_nest(AndPredicate(GET, FOO)) == GET

    def test_or_returns_left(self) -> None:
        assert un_nest(OrPredicate(GET, FOO)) == GET

    def test_leaf_returns_empty(self) -> None:
        assert un_nest(QueryParamPredicate("a")) == EMPTY

    def test_empty_stays_empty(self) -> None:
        assert un_nest(EMPTY) == EMPTY

    def test_undoes_nest(self) -> None:
        q1, q2, q3 = (QueryParamPredicate(n) for n in ("a", "b", "c"))
        outer = nest(EMPTY, q1)
        inner = nest(nest(outer, q2), q3)
        assert un_nest(un_nest(inner)) == outer
        assert un_nest(outer) == EMPTY


class TestPairShape:
    def test_is_pair(self) -> None:
        assert is_pair(AndPredicate(GET, FOO))
        assert is_pair(OrPredicate(GET, FOO))
        assert not is_pair(GET)
        assert not is_pair(EMPTY)

    def test_method_path_and(self) -> None:
        assert method_path_pair(AndPredicate(GET, FOO)) == (frozenset({"GET"}), "/foo")

    def test_method_path_or(self) -> None:
        assert method_path_pair(OrPredicate(GET, FOO)) == (frozenset({"GET"}), "/foo")

    def test_reversed_order_is_not_a_pair(self) -> None:
        assert method_path_pair(AndPredicate(FOO, GET)) is None

    def test_other_shapes(self) -> None:
        assert method_path_pair(AndPredicate(QueryParamPredicate("q"), FOO)) is None
        assert method_path_pair(AndPredicate(AndPredicate(GET, FOO), FOO)) is None
        assert method_path_pair(GET) is None


class TestDescribe:
    def test_method_and_path(self) -> None:
        assert describe(AndPredicate(GET, FOO)) == "(GET && /foo)"

    def test_multiple_methods_sorted(self) -> None:
        assert describe(MethodPredicate(frozenset({"POST", "GET"}))) == "[GET, POST]"

    def test_or_and_leaves(self) -> None:
        p = OrPredicate(QueryParamPredicate("q"), HeaderPredicate("Accept: [text/html]"))
        assert describe(p) == "(?q || Accept: [text/html])"

    def test_extension_and_empty(self) -> None:
        assert describe(PathExtensionPredicate("*.txt")) == "*.txt"
        assert describe(EMPTY) == "*"


class TestToDict:
    def test_nested(self) -> None:
        p = AndPredicate(QueryParamPredicate("q"), AndPredicate(GET, FOO))
        assert to_dict(p) == {
            "type": "And",
            "left": {"type": "QueryParam", "name": "q"},
            "right": {
                "type": "And",
                "left": {"type": "HttpMethod", "methods": ["GET"]},
                "right": {"type": "PathPattern", "pattern": "/foo"},
            },
        }

    def test_methods_sorted(self) -> None:
        p = MethodPredicate(frozenset({"PUT", "DELETE"}))
        assert to_dict(p) == {"type": "HttpMethod", "methods": ["DELETE", "PUT"]}

    def test_descriptors(self) -> None:
        assert to_dict(HeaderPredicate("X-Api")) == {"type": "Header", "descriptor": "X-Api"}
        assert to_dict(EMPTY) == {"type": "Empty"}
