"""Routing — request predicates and router-function trees.

Routing definitions are built with the DSL in ``warble.routing.dsl``
and walked with a ``Visitor`` from ``warble.routing.functions``.
"""
