"""Warble — flatten predicate-composed routing definitions into routes.

Walks a router-function tree, keeps the nesting context of every
enclosing group, and emits one route per method/path pair found in each
handler binding.

Basic usage::

    from warble import extract_routes, router
    from warble.routing.request import path, query_param

    def routes(r):
        r.get("/", index)
        with r.nest(query_param("v2")):
            r.post("/users", create_user)

    for route in extract_routes(router(routes)):
        print(route.methods, route.path)
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "ExtractorConfig",
    "Route",
    "RouteExtractor",
    "RouterBuilder",
    "UnbalancedNestingError",
    "UnrecognizedPredicateKind",
    "WarbleError",
    "extract_routes",
    "format_route_table",
    "render_route_document",
    "router",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import warble`` fast; the route document pulls in kida only
    when it is used.
    """
    if name == "ExtractorConfig":
        from warble.config import ExtractorConfig

        return ExtractorConfig

    if name == "Route":
        from warble.route import Route

        return Route

    if name in ("RouteExtractor", "extract_routes"):
        from warble.extraction import visitor as _visitor

        return getattr(_visitor, name)

    if name in ("RouterBuilder", "router"):
        from warble.routing import dsl as _dsl

        return getattr(_dsl, name)

    if name in ("format_route_table", "render_route_document"):
        from warble import listing as _listing

        return getattr(_listing, name)

    if name in (
        "WarbleError",
        "ConfigurationError",
        "UnbalancedNestingError",
        "UnrecognizedPredicateKind",
    ):
        from warble import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
