"""Heuristic C coding-rule checker for small programming assignments."""

__version__ = "0.1.0"
