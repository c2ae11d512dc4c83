"""Warble exception hierarchy.

Shared across the routing model, the converter, and the extractor so
every module raises and catches the same types.
"""

from typing import Any


class WarbleError(Exception):
    """Base for all warble-specific errors."""


class ConfigurationError(WarbleError):
    """Raised when a routing definition is invalid.

    Typically surfaces while building a router or while walking it.
    """


class UnrecognizedPredicateKind(ConfigurationError):  # noqa: N818 — named for what it reports
    """A native request predicate has no counterpart in the predicate model.

    Raised by the conversion layer. The walk is aborted rather than
    dropping the predicate, which would produce wrong or missing routes.
    """

    def __init__(self, predicate: Any) -> None:
        self.predicate = predicate
        kind = type(predicate).__name__
        super().__init__(f"Unrecognized request predicate kind: {kind} ({predicate!r})")


class UnbalancedNestingError(WarbleError):
    """Scope enter/exit calls from the walker did not pair up.

    Raised on an exit with no open scope, or when a walk finishes with
    scopes still open. Only raised when ``strict_nesting`` is enabled.
    """
