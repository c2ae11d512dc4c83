"""Route extractor — a router-function visitor that collects routes.

Usage::

    routes = extract_routes(router_function)

    # or drive it by hand
    extractor = RouteExtractor()
    router_function.accept(extractor)
    routes = extractor.finish()

Each ``leaf`` binding is searched for method/path pair nodes. Every pair
found becomes one ``Route`` whose predicate is the nesting context ANDed
with that pair node.
"""

import logging
from collections.abc import Iterator
from functools import reduce

from warble._internal.types import Handler, ResourceLookup
from warble.config import ExtractorConfig
from warble.errors import UnbalancedNestingError
from warble.extraction.convert import to_predicate
from warble.predicates import (
    EMPTY,
    AndPredicate,
    OrPredicate,
    Predicate,
    describe,
    is_pair,
    method_path_pair,
    nest,
)
from warble.route import Route
from warble.routing.functions import RouterFunction
from warble.routing.request import RequestPredicate

logger = logging.getLogger("warble.extraction")


def chain_pairs(predicate: Predicate) -> Iterator[AndPredicate | OrPredicate]:
    """Yield the pair nodes visited by the reference chain scan.

    Order: *predicate* itself, then its left chain top-down, then its
    right chain top-down. Nodes off both chains (``root.left.right`` and
    the like) are never visited.
    """
    if not is_pair(predicate):
        return
    yield predicate
    node = predicate.left
    while is_pair(node):
        yield node
        node = node.left
    node = predicate.right
    while is_pair(node):
        yield node
        node = node.right


def all_pairs(predicate: Predicate) -> Iterator[AndPredicate | OrPredicate]:
    """Yield every pair node in pre-order (node, left subtree, right subtree)."""
    match predicate:
        case AndPredicate(left=left, right=right) | OrPredicate(left=left, right=right):
            yield predicate
            yield from all_pairs(left)
            yield from all_pairs(right)
        case _:
            return


class RouteExtractor:
    """Visitor that flattens a router-function walk into routes.

    One instance serves one traversal. The nesting context is kept as an
    explicit stack of scope predicates so unbalanced walks can be detected.
    """

    __slots__ = ("_config", "_routes", "_scopes")

    def __init__(self, config: ExtractorConfig | None = None) -> None:
        self._config = config or ExtractorConfig()
        self._scopes: list[Predicate] = []
        self._routes: list[Route] = []

    @property
    def context(self) -> Predicate:
        """Predicate inherited from every open scope, outermost on the left."""
        return reduce(nest, self._scopes, EMPTY)

    @property
    def depth(self) -> int:
        return len(self._scopes)

    @property
    def routes(self) -> list[Route]:
        return list(self._routes)

    # -- Visitor -------------------------------------------------------------

    def enter_scope(self, predicate: RequestPredicate) -> None:
        scope = to_predicate(predicate)
        self._scopes.append(scope)
        logger.debug("Entered scope %s (depth %d)", describe(scope), len(self._scopes))

    def exit_scope(self, predicate: RequestPredicate) -> None:
        if self._scopes:
            self._scopes.pop()
            logger.debug("Exited scope (depth %d)", len(self._scopes))
            return

        if self._config.strict_nesting:
            msg = f"exit_scope({predicate}) called with no open scope."
            raise UnbalancedNestingError(msg)
        logger.warning("exit_scope(%s) called with no open scope; context stays empty", predicate)

    def leaf(self, predicate: RequestPredicate, handler: Handler) -> None:
        binding = to_predicate(predicate)
        context = self.context
        pairs = all_pairs(binding) if self._config.exhaustive else chain_pairs(binding)

        found = 0
        for node in pairs:
            pair = method_path_pair(node)
            if pair is None:
                continue
            methods, pattern = pair
            route = Route(
                path=pattern,
                methods=methods,
                predicate=nest(context, node),
                handler=handler,
            )
            self._routes.append(route)
            found += 1
            logger.debug("Route %s %s", ", ".join(sorted(methods)), pattern)

        if not found:
            logger.debug("Binding %s has no method/path pair", describe(binding))

    def resources(self, lookup: ResourceLookup) -> None:
        logger.debug("Skipping resource binding %r", lookup)

    def unknown(self, router_function: RouterFunction) -> None:
        logger.debug("Skipping unknown router function %r", router_function)

    # -- Result --------------------------------------------------------------

    def finish(self) -> list[Route]:
        """Return the extracted routes once the walk is complete."""
        if self._scopes and self._config.strict_nesting:
            msg = f"Walk finished with {len(self._scopes)} scope(s) still open."
            raise UnbalancedNestingError(msg)
        return self.routes


def extract_routes(
    router_function: RouterFunction,
    config: ExtractorConfig | None = None,
) -> list[Route]:
    """Walk *router_function* with a fresh extractor and return its routes."""
    extractor = RouteExtractor(config)
    router_function.accept(extractor)
    return extractor.finish()
