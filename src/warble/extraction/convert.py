"""Conversion from native request predicates to the predicate model."""

from warble.errors import UnrecognizedPredicateKind
from warble.predicates import (
    AndPredicate,
    HeaderPredicate,
    MethodPredicate,
    OrPredicate,
    PathExtensionPredicate,
    PathPatternPredicate,
    Predicate,
    QueryParamPredicate,
)
from warble.routing.request import (
    AndRequestPredicate,
    HeadersRequestPredicate,
    MethodRequestPredicate,
    OrRequestPredicate,
    PathExtensionRequestPredicate,
    PathRequestPredicate,
    QueryParamRequestPredicate,
    RequestPredicate,
)


def to_predicate(native: RequestPredicate) -> Predicate:
    """Convert a native request predicate tree, recursing into AND/OR.

    Raises ``UnrecognizedPredicateKind`` for any kind outside the
    enumerated set, such as negations or match-all.
    """
    match native:
        case MethodRequestPredicate(methods=methods):
            return MethodPredicate(frozenset(methods))
        case PathRequestPredicate(pattern=pattern):
            return PathPatternPredicate(pattern)
        case HeadersRequestPredicate(descriptor=descriptor):
            return HeaderPredicate(descriptor)
        case QueryParamRequestPredicate(name=name):
            return QueryParamPredicate(name)
        case PathExtensionRequestPredicate(descriptor=descriptor):
            return PathExtensionPredicate(descriptor)
        case AndRequestPredicate(left=left, right=right):
            return AndPredicate(to_predicate(left), to_predicate(right))
        case OrRequestPredicate(left=left, right=right):
            return OrPredicate(to_predicate(left), to_predicate(right))
        case _:
            raise UnrecognizedPredicateKind(native)
