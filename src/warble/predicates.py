"""Predicate model — immutable, value-equal route predicate trees.

Leaf kinds describe a single condition (method, path pattern, header,
query parameter, path extension). ``AndPredicate`` and ``OrPredicate``
combine two predicates and keep their order: ``left`` is the outer or
context side, ``right`` the inner or specific side.

The Predicate union type is pattern-matchable via match/case.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Empty:
    """Identity element: no predicate yet.

    All instances compare equal; use the ``EMPTY`` singleton.
    """

    @property
    def type(self) -> str:
        return "Empty"


EMPTY = Empty()


@dataclass(frozen=True, slots=True)
class MethodPredicate:
    """Matches any of a set of HTTP methods."""

    methods: frozenset[str]

    @property
    def type(self) -> str:
        return "HttpMethod"


@dataclass(frozen=True, slots=True)
class PathPatternPredicate:
    """Matches a path pattern such as ``/users/{id}``."""

    pattern: str

    @property
    def type(self) -> str:
        return "PathPattern"


@dataclass(frozen=True, slots=True)
class HeaderPredicate:
    """Matches request headers, e.g. ``Accept: [application/json]``."""

    descriptor: str

    @property
    def type(self) -> str:
        return "Header"


@dataclass(frozen=True, slots=True)
class QueryParamPredicate:
    """Requires a query parameter to be present."""

    name: str

    @property
    def type(self) -> str:
        return "QueryParam"


@dataclass(frozen=True, slots=True)
class PathExtensionPredicate:
    """Matches the file extension of the request path."""

    descriptor: str

    @property
    def type(self) -> str:
        return "PathExtension"


@dataclass(frozen=True, slots=True)
class AndPredicate:
    """Both sides must match (logical AND)."""

    left: Predicate
    right: Predicate

    @property
    def type(self) -> str:
        return "And"


@dataclass(frozen=True, slots=True)
class OrPredicate:
    """Either side must match (logical OR)."""

    left: Predicate
    right: Predicate

    @property
    def type(self) -> str:
        return "Or"


type PairPredicate = AndPredicate | OrPredicate

type Predicate = (
    Empty
    | MethodPredicate
    | PathPatternPredicate
    | HeaderPredicate
    | QueryParamPredicate
    | PathExtensionPredicate
    | AndPredicate
    | OrPredicate
)


def nest(base: Predicate, addition: Predicate) -> Predicate:
    """Add *addition* to an accumulated context.

    The outer context always occupies the ``left`` slot::

        nest(EMPTY, q1)  -> q1
        nest(q1, q2)     -> AndPredicate(q1, q2)
    """
    if base == EMPTY:
        return addition
    return AndPredicate(base, addition)


def un_nest(predicate: Predicate) -> Predicate:
    """Peel one level off a context built by :func:`nest`.

    Returns ``left`` for AND/OR nodes and ``EMPTY`` for anything else.
    Only a valid undo for contexts that ``nest`` produced.
    """
    match predicate:
        case AndPredicate(left=left) | OrPredicate(left=left):
            return left
        case _:
            return EMPTY


def is_pair(predicate: Predicate) -> bool:
    """Return True for AND/OR nodes."""
    return isinstance(predicate, AndPredicate | OrPredicate)


def method_path_pair(predicate: Predicate) -> tuple[frozenset[str], str] | None:
    """Return ``(methods, pattern)`` if *predicate* is a method/path pair node.

    The node must be AND or OR with a ``MethodPredicate`` on the left and a
    ``PathPatternPredicate`` on the right. Any other shape returns None.
    """
    match predicate:
        case AndPredicate(
            left=MethodPredicate(methods=methods), right=PathPatternPredicate(pattern=pattern)
        ) | OrPredicate(
            left=MethodPredicate(methods=methods), right=PathPatternPredicate(pattern=pattern)
        ):
            return methods, pattern
        case _:
            return None


def describe(predicate: Predicate) -> str:
    """Render a predicate as a compact, human-readable expression.

    Examples::

        AndPredicate(MethodPredicate({"GET"}), PathPatternPredicate("/foo"))
            -> "(GET && /foo)"
        OrPredicate(QueryParamPredicate("q"), HeaderPredicate("Accept: [text/html]"))
            -> "(?q || Accept: [text/html])"
    """
    match predicate:
        case Empty():
            return "*"
        case MethodPredicate(methods=methods):
            if len(methods) == 1:
                return next(iter(methods))
            return "[" + ", ".join(sorted(methods)) + "]"
        case PathPatternPredicate(pattern=pattern):
            return pattern
        case HeaderPredicate(descriptor=descriptor) | PathExtensionPredicate(
            descriptor=descriptor
        ):
            return descriptor
        case QueryParamPredicate(name=name):
            return f"?{name}"
        case AndPredicate(left=left, right=right):
            return f"({describe(left)} && {describe(right)})"
        case OrPredicate(left=left, right=right):
            return f"({describe(left)} || {describe(right)})"
        case _:  # pragma: no cover
            msg = f"Not a predicate: {predicate!r}"
            raise TypeError(msg)


def to_dict(predicate: Predicate) -> dict[str, Any]:
    """Serialize a predicate tree to JSON-compatible dicts keyed by ``type``."""
    match predicate:
        case Empty():
            return {"type": predicate.type}
        case MethodPredicate(methods=methods):
            return {"type": predicate.type, "methods": sorted(methods)}
        case PathPatternPredicate(pattern=pattern):
            return {"type": predicate.type, "pattern": pattern}
        case HeaderPredicate(descriptor=descriptor) | PathExtensionPredicate(
            descriptor=descriptor
        ):
            return {"type": predicate.type, "descriptor": descriptor}
        case QueryParamPredicate(name=name):
            return {"type": predicate.type, "name": name}
        case AndPredicate(left=left, right=right) | OrPredicate(left=left, right=right):
            return {"type": predicate.type, "left": to_dict(left), "right": to_dict(right)}
        case _:  # pragma: no cover
            msg = f"Not a predicate: {predicate!r}"
            raise TypeError(msg)
