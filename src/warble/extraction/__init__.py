"""Extraction — flatten a router-function tree into concrete routes.

The extractor is driven by a router-function walk and keeps the nesting
context of every enclosing scope while it collects routes.
"""
