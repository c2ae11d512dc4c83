"""Extractor configuration.

ExtractorConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExtractorConfig:
    """Route extraction configuration. Immutable after creation.

    Defaults reproduce the reference extraction behavior with unbalanced
    nesting treated as an error::

        config = ExtractorConfig(exhaustive=True)
    """

    # Nesting
    strict_nesting: bool = True  # Raise on unmatched exit or scopes left open

    # Pair discovery
    exhaustive: bool = False  # Search every pair node, not only the left/right chains
