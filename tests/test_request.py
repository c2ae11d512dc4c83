"""Tests for warble.routing.request — native request predicates."""

import pytest

from warble.routing.request import (
    GET,
    POST,
    AndRequestPredicate,
    AnyRequestPredicate,
    HeadersRequestPredicate,
    MethodRequestPredicate,
    NegateRequestPredicate,
    OrRequestPredicate,
    PathExtensionRequestPredicate,
    PathRequestPredicate,
    QueryParamRequestPredicate,
    accept,
    all_,
    content_type,
    headers,
    method,
    path,
    path_extension,
    query_param,
)


class TestFactories:
    def test_method_upper_cases(self) -> None:
        assert method("get", "Post") == MethodRequestPredicate(frozenset({"GET", "POST"}))

    def test_method_requires_a_name(self) -> None:
        with pytest.raises(ValueError, match="at least one"):
            method()

    def test_path_kept_verbatim(self) -> None:
        assert path("bar1") == PathRequestPredicate("bar1")

    def test_verb_is_method_and_path(self) -> None:
        assert GET("/foo") == AndRequestPredicate(
            MethodRequestPredicate(frozenset({"GET"})), PathRequestPredicate("/foo")
        )

    def test_accept(self) -> None:
        assert accept("application/json") == HeadersRequestPredicate(
            "Accept: [application/json]"
        )

    def test_accept_many(self) -> None:
        assert str(accept("text/html", "application/json")) == (
            "Accept: [text/html, application/json]"
        )

    def test_content_type(self) -> None:
        assert content_type("text/plain").descriptor == "Content-Type: [text/plain]"

    def test_headers_ignores_test_for_equality(self) -> None:
        assert headers("X-Api", lambda h: True) == headers("X-Api")

    def test_query_param(self) -> None:
        assert query_param("bar1", lambda v: True) == QueryParamRequestPredicate("bar1")

    def test_path_extension(self) -> None:
        pred = path_extension(".TXT")
        assert isinstance(pred, PathExtensionRequestPredicate)
        assert pred.descriptor == "*.txt"
        assert pred.test is not None
        assert pred.test("/docs/readme.txt")
        assert not pred.test("/docs/readme.md")

    def test_all(self) -> None:
        assert isinstance(all_(), AnyRequestPredicate)


class TestComposition:
    def test_and_operator(self) -> None:
        a, b = query_param("a"), query_param("b")
        assert a & b == AndRequestPredicate(a, b)
        assert a.and_(b) == a & b

    def test_or_operator(self) -> None:
        assert GET("/foo") | POST("/foos") == OrRequestPredicate(GET("/foo"), POST("/foos"))

    def test_invert_operator(self) -> None:
        a = query_param("a")
        assert ~a == NegateRequestPredicate(a)

    def test_str(self) -> None:
        assert str(GET("/foo") | POST("/foos")) == "((GET && /foo) || (POST && /foos))"
        assert str(~query_param("debug")) == "!?debug"
