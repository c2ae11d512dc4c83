"""Router functions — the tree a routing definition compiles into.

Each node accepts a :class:`Visitor` and reports itself in strict
depth-first order: nested groups as balanced ``enter_scope``/``exit_scope``
pairs, handler bindings as ``leaf`` calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from warble._internal.types import Handler, ResourceLookup
from warble.routing.request import RequestPredicate


@runtime_checkable
class Visitor(Protocol):
    """Receives the events of a router-function walk."""

    def enter_scope(self, predicate: RequestPredicate) -> None: ...

    def exit_scope(self, predicate: RequestPredicate) -> None: ...

    def leaf(self, predicate: RequestPredicate, handler: Handler) -> None: ...

    def resources(self, lookup: ResourceLookup) -> None: ...

    def unknown(self, router_function: RouterFunction) -> None: ...


class RouterFunction:
    """Base for router-function tree nodes.

    Subclasses override :meth:`accept`. Nodes that do not are reported to
    the visitor through ``unknown``.
    """

    __slots__ = ()

    def accept(self, visitor: Visitor) -> None:
        visitor.unknown(self)

    def and_(self, other: RouterFunction) -> RouterFunction:
        """Compose with *other*; this tree is walked first."""
        return ComposedRouterFunction(self, other)


@dataclass(frozen=True, slots=True)
class HandlerRouterFunction(RouterFunction):
    """A terminal binding of a predicate to a handler."""

    predicate: RequestPredicate
    handler: Handler

    def accept(self, visitor: Visitor) -> None:
        visitor.leaf(self.predicate, self.handler)


@dataclass(frozen=True, slots=True)
class NestedRouterFunction(RouterFunction):
    """A group of routes sharing a predicate."""

    predicate: RequestPredicate
    child: RouterFunction

    def accept(self, visitor: Visitor) -> None:
        visitor.enter_scope(self.predicate)
        self.child.accept(visitor)
        visitor.exit_scope(self.predicate)


@dataclass(frozen=True, slots=True)
class ComposedRouterFunction(RouterFunction):
    first: RouterFunction
    second: RouterFunction

    def accept(self, visitor: Visitor) -> None:
        self.first.accept(visitor)
        self.second.accept(visitor)


@dataclass(frozen=True, slots=True)
class EmptyRouterFunction(RouterFunction):
    """Routes nothing. Produced by a ``nest`` block with no bindings."""

    def accept(self, visitor: Visitor) -> None:
        return None


@dataclass(frozen=True, slots=True)
class ResourcesRouterFunction(RouterFunction):
    """Serves static resources found by *lookup*."""

    lookup: ResourceLookup

    def accept(self, visitor: Visitor) -> None:
        visitor.resources(self.lookup)
