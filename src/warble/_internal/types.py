"""Shared type aliases used across warble modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler — opaque to warble, carried through to extracted routes
Handler: TypeAlias = Callable[..., Any]

# Static resource lookup — maps a request to a resource, never called by warble
ResourceLookup: TypeAlias = Callable[..., Any]
