"""Queries over parse results."""

from dependency_tree.analysis.ordering import bootstrap_order, dependents_of, load_order

__all__ = ["bootstrap_order", "dependents_of", "load_order"]
