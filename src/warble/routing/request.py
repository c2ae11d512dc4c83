"""Request predicates — the routing definition's native condition objects.

Predicates compose with ``&`` (and), ``|`` (or), and ``~`` (negate)::

    GET("/users") | POST("/users")
    accept("application/json") & path("/api")

They describe a condition only. warble never evaluates them against a
request; the optional ``test`` callables are carried along untouched.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


class RequestPredicate:
    """Base for all request predicates. Provides boolean composition."""

    __slots__ = ()

    def and_(self, other: RequestPredicate) -> RequestPredicate:
        return AndRequestPredicate(self, other)

    def or_(self, other: RequestPredicate) -> RequestPredicate:
        return OrRequestPredicate(self, other)

    def negate(self) -> RequestPredicate:
        return NegateRequestPredicate(self)

    def __and__(self, other: RequestPredicate) -> RequestPredicate:
        return self.and_(other)

    def __or__(self, other: RequestPredicate) -> RequestPredicate:
        return self.or_(other)

    def __invert__(self) -> RequestPredicate:
        return self.negate()


@dataclass(frozen=True, slots=True)
class MethodRequestPredicate(RequestPredicate):
    """Matches one of a set of HTTP methods."""

    methods: frozenset[str]

    def __str__(self) -> str:
        return ", ".join(sorted(self.methods))


@dataclass(frozen=True, slots=True)
class PathRequestPredicate(RequestPredicate):
    """Matches a path pattern. The pattern string is kept verbatim."""

    pattern: str

    def __str__(self) -> str:
        return self.pattern


@dataclass(frozen=True, slots=True)
class HeadersRequestPredicate(RequestPredicate):
    """Matches request headers. ``descriptor`` names the condition."""

    descriptor: str
    test: Callable[[Any], bool] | None = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return self.descriptor


@dataclass(frozen=True, slots=True)
class QueryParamRequestPredicate(RequestPredicate):
    """Matches on a named query parameter."""

    name: str
    test: Callable[[str], bool] | None = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f"?{self.name}"


@dataclass(frozen=True, slots=True)
class PathExtensionRequestPredicate(RequestPredicate):
    """Matches the file extension of the request path."""

    descriptor: str
    test: Callable[[str], bool] | None = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return self.descriptor


@dataclass(frozen=True, slots=True)
class AndRequestPredicate(RequestPredicate):
    left: RequestPredicate
    right: RequestPredicate

    def __str__(self) -> str:
        return f"({self.left} && {self.right})"


@dataclass(frozen=True, slots=True)
class OrRequestPredicate(RequestPredicate):
    left: RequestPredicate
    right: RequestPredicate

    def __str__(self) -> str:
        return f"({self.left} || {self.right})"


@dataclass(frozen=True, slots=True)
class NegateRequestPredicate(RequestPredicate):
    predicate: RequestPredicate

    def __str__(self) -> str:
        return f"!{self.predicate}"


@dataclass(frozen=True, slots=True)
class AnyRequestPredicate(RequestPredicate):
    """Matches every request."""

    def __str__(self) -> str:
        return "*"


# -- Factories ----------------------------------------------------------------


def method(*methods: str) -> RequestPredicate:
    """Match any of *methods*. Names are upper-cased."""
    if not methods:
        msg = "method() requires at least one HTTP method."
        raise ValueError(msg)
    return MethodRequestPredicate(frozenset(m.upper() for m in methods))


def path(pattern: str) -> RequestPredicate:
    return PathRequestPredicate(pattern)


def GET(pattern: str) -> RequestPredicate:  # noqa: N802 — HTTP verbs read as verbs
    return method("GET") & path(pattern)


def HEAD(pattern: str) -> RequestPredicate:  # noqa: N802
    return method("HEAD") & path(pattern)


def POST(pattern: str) -> RequestPredicate:  # noqa: N802
    return method("POST") & path(pattern)


def PUT(pattern: str) -> RequestPredicate:  # noqa: N802
    return method("PUT") & path(pattern)


def PATCH(pattern: str) -> RequestPredicate:  # noqa: N802
    return method("PATCH") & path(pattern)


def DELETE(pattern: str) -> RequestPredicate:  # noqa: N802
    return method("DELETE") & path(pattern)


def OPTIONS(pattern: str) -> RequestPredicate:  # noqa: N802
    return method("OPTIONS") & path(pattern)


def accept(*media_types: str) -> RequestPredicate:
    """Match requests whose ``Accept`` header allows one of *media_types*."""
    return HeadersRequestPredicate(f"Accept: [{', '.join(media_types)}]")


def content_type(*media_types: str) -> RequestPredicate:
    """Match requests whose ``Content-Type`` is one of *media_types*."""
    return HeadersRequestPredicate(f"Content-Type: [{', '.join(media_types)}]")


def headers(name: str, test: Callable[[Any], bool] | None = None) -> RequestPredicate:
    """Match on an arbitrary header, described by its name."""
    return HeadersRequestPredicate(name, test)


def query_param(name: str, test: Callable[[str], bool] | None = None) -> RequestPredicate:
    return QueryParamRequestPredicate(name, test)


def path_extension(extension: str) -> RequestPredicate:
    """Match paths ending in ``.{extension}`` (case-insensitive)."""
    ext = extension.lstrip(".").lower()
    return PathExtensionRequestPredicate(f"*.{ext}", lambda p: p.lower().endswith(f".{ext}"))


def all_() -> RequestPredicate:
    return AnyRequestPredicate()
