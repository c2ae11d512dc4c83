"""Route listings — a text table and a Markdown route reference.

Both take the output of ``extract_routes`` and keep its order.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from kida import Environment

from warble.predicates import describe
from warble.route import Route

ROUTE_DOCUMENT_TEMPLATE = """\
# {{ title }}

{{ count }} route(s).
{% for row in rows %}

## {{ row.methods }} `{{ row.path }}`

- Methods: {{ row.methods }}
- Path pattern: `{{ row.path }}`
- Handler: `{{ row.handler }}`
- Predicate: `{{ row.predicate }}`
{% end %}
"""


@dataclass(frozen=True, slots=True)
class _RouteRow:
    methods: str
    path: str
    handler: str
    predicate: str


def _handler_name(handler: Any) -> str:
    if handler is None:
        return "-"
    return getattr(handler, "__name__", str(handler))


def _rows(routes: Sequence[Route]) -> list[_RouteRow]:
    return [
        _RouteRow(
            methods=", ".join(sorted(route.methods)),
            path=route.path,
            handler=_handler_name(route.handler),
            predicate=describe(route.predicate),
        )
        for route in routes
    ]


def format_route_table(routes: Sequence[Route]) -> str:
    """Format routes as a fixed-width table of METHOD, PATH, HANDLER, PREDICATE."""
    if not routes:
        return "No routes registered."

    rows = _rows(routes)

    # Column widths, never narrower than the headers
    max_methods = max(6, *(len(r.methods) for r in rows))
    max_path = max(4, *(len(r.path) for r in rows))
    max_handler = max(7, *(len(r.handler) for r in rows))

    fmt = f"{{:<{max_methods}}}  {{:<{max_path}}}  {{:<{max_handler}}}  {{}}"
    lines = [fmt.format("METHOD", "PATH", "HANDLER", "PREDICATE").rstrip()]
    sep_len = max_methods + max_path + max_handler + 6 + max(len(r.predicate) for r in rows)
    lines.append("-" * min(sep_len, 80))
    lines.extend(fmt.format(r.methods, r.path, r.handler, r.predicate) for r in rows)
    return "\n".join(lines)


def render_route_document(routes: Sequence[Route], *, title: str = "Routes") -> str:
    """Render a Markdown route reference, one section per route."""
    env = Environment(autoescape=False)
    template = env.from_string(ROUTE_DOCUMENT_TEMPLATE)
    return template.render({"title": title, "count": len(routes), "rows": _rows(routes)})
