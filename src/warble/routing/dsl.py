"""Builder DSL for routing definitions.

Usage::

    def routes(r: RouterBuilder) -> None:
        r.get("/", index)

        with r.nest(path("/api") & accept("application/json")):
            r.get("/users", list_users)
            r.post("/users", create_user)

        @r.delete("/users/{id}")
        def delete_user(request): ...

    router_function = router(routes)
"""

from __future__ import annotations

import contextlib
from collections.abc import Callable, Iterator
from functools import reduce

from warble._internal.types import Handler, ResourceLookup
from warble.errors import ConfigurationError
from warble.routing import request as rp
from warble.routing.functions import (
    EmptyRouterFunction,
    HandlerRouterFunction,
    NestedRouterFunction,
    ResourcesRouterFunction,
    RouterFunction,
)
from warble.routing.request import RequestPredicate

Decorator = Callable[[Handler], Handler]


def _compose(functions: list[RouterFunction]) -> RouterFunction:
    if not functions:
        return EmptyRouterFunction()
    return reduce(lambda first, second: first.and_(second), functions)


class RouterBuilder:
    """Collects bindings and nested groups into a router-function tree."""

    __slots__ = ("_stack",)

    def __init__(self) -> None:
        # One list of functions per open nest block; index 0 is the top level
        self._stack: list[list[RouterFunction]] = [[]]

    def add(self, router_function: RouterFunction) -> None:
        """Add an already-built router function at the current level."""
        self._stack[-1].append(router_function)

    def route(self, predicate: RequestPredicate, handler: Handler) -> None:
        self.add(HandlerRouterFunction(predicate, handler))

    def resources(self, lookup: ResourceLookup) -> None:
        self.add(ResourcesRouterFunction(lookup))

    @contextlib.contextmanager
    def nest(self, predicate: RequestPredicate) -> Iterator[RouterBuilder]:
        """Group every binding registered inside the block under *predicate*."""
        self._stack.append([])
        try:
            yield self
        finally:
            children = self._stack.pop()
        self.add(NestedRouterFunction(predicate, _compose(children)))

    def _verb(
        self,
        factory: Callable[[str], RequestPredicate],
        pattern: str,
        handler: Handler | None,
    ) -> Decorator | None:
        if handler is not None:
            self.route(factory(pattern), handler)
            return None

        def decorator(func: Handler) -> Handler:
            self.route(factory(pattern), func)
            return func

        return decorator

    def get(self, pattern: str, handler: Handler | None = None) -> Decorator | None:
        return self._verb(rp.GET, pattern, handler)

    def head(self, pattern: str, handler: Handler | None = None) -> Decorator | None:
        return self._verb(rp.HEAD, pattern, handler)

    def post(self, pattern: str, handler: Handler | None = None) -> Decorator | None:
        return self._verb(rp.POST, pattern, handler)

    def put(self, pattern: str, handler: Handler | None = None) -> Decorator | None:
        return self._verb(rp.PUT, pattern, handler)

    def patch(self, pattern: str, handler: Handler | None = None) -> Decorator | None:
        return self._verb(rp.PATCH, pattern, handler)

    def delete(self, pattern: str, handler: Handler | None = None) -> Decorator | None:
        return self._verb(rp.DELETE, pattern, handler)

    def options(self, pattern: str, handler: Handler | None = None) -> Decorator | None:
        return self._verb(rp.OPTIONS, pattern, handler)

    def build(self) -> RouterFunction:
        """Return the router-function tree for everything registered so far."""
        if len(self._stack) != 1:
            msg = "Cannot build a router inside an open nest() block."
            raise ConfigurationError(msg)
        if not self._stack[0]:
            msg = "No routes registered."
            raise ConfigurationError(msg)
        return _compose(self._stack[0])


def router(block: Callable[[RouterBuilder], None]) -> RouterFunction:
    """Run *block* against a fresh builder and return the built tree."""
    builder = RouterBuilder()
    block(builder)
    return builder.build()
