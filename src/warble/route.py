"""Route — the flattened result of route extraction."""

from dataclasses import dataclass, field
from typing import Any

from warble.predicates import Predicate, to_dict


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen, extracted route.

    ``predicate`` is the full expression required for the route to match:
    the nesting context ANDed with the method/path pair that produced it.
    ``path`` and ``methods`` are copies of that pair's payload.

    ``handler`` is the opaque handler of the originating binding. It is
    not part of equality, hashing, or repr.
    """

    path: str
    methods: frozenset[str]
    predicate: Predicate
    handler: Any = field(default=None, compare=False, repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict (handler omitted)."""
        return {
            "path": self.path,
            "methods": sorted(self.methods),
            "predicate": to_dict(self.predicate),
        }
