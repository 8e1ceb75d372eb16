"""CBOM cross-reference graph.

All public names are re-exported here so that callers can write
``from cbomlens.core.dependency import build_dependency_index``.

Submodules:
    models -- Relation, DependencyEdge, DependencyView, DependencyIndex
    graph  -- explicit / implicit edge extraction and index construction
"""

from cbomlens.core.dependency.graph import (
    build_dependency_index,
    explicit_edges,
    implicit_edges,
)
from cbomlens.core.dependency.models import (
    DependencyEdge,
    DependencyIndex,
    DependencyView,
    Relation,
)

__all__ = [
    "DependencyEdge",
    "DependencyIndex",
    "DependencyView",
    "Relation",
    "build_dependency_index",
    "explicit_edges",
    "implicit_edges",
]
