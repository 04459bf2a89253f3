"""Graph building and cycle detection."""

from import_audit.analysis.cycles import find_cycles
from import_audit.analysis.dependency_graph import GraphBuilder
from import_audit.analysis.graph_models import DependencyGraph, EdgeSet

__all__ = ["DependencyGraph", "EdgeSet", "GraphBuilder", "find_cycles"]
