"""Build the cross-reference index of a CBOM.

Edges come from two places:

1. **Explicit** -- the top-level ``dependencies`` array.  Each entry
   ``{"ref": A, "dependsOn": [B, ...], "provides": [C, ...]}`` yields one
   depends-on edge per ``dependsOn`` target and one provides edge per
   ``provides`` target.
2. **Implicit** -- reference fields inside a cryptographic asset's
   ``cryptoProperties`` (see ``REFERENCE_PATHS``).  Every value resolved at
   one of those paths becomes a depends-on edge tagged with the path.

Every edge is recorded in both directions.  Identical edges reached through
different origins are all kept.  Only string references are indexed; other
values in reference positions are skipped.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Iterable, Iterator

from cbomlens.core.constants import (
    CRYPTO_ASSET_TYPE,
    DEPENDS_ON_ORIGIN,
    PROVIDES_ORIGIN,
    REFERENCE_PATHS,
)
from cbomlens.core.dependency.models import (
    DependencyEdge,
    DependencyIndex,
    Relation,
    RefPath,
)
from cbomlens.core.paths import MISSING, resolve_path

logger = logging.getLogger(__name__)


def explicit_edges(document: Any) -> Iterator[DependencyEdge]:
    """Yield the edges declared in the top-level ``dependencies`` array."""
    if not isinstance(document, dict):
        return
    dependencies = document.get("dependencies")
    if not isinstance(dependencies, list):
        return

    for entry in dependencies:
        if not isinstance(entry, dict) or not isinstance(entry.get("ref"), str):
            continue
        source = entry["ref"]
        for key, origin, relation in (
            ("dependsOn", DEPENDS_ON_ORIGIN, Relation.DEPENDS_ON),
            ("provides", PROVIDES_ORIGIN, Relation.PROVIDES),
        ):
            targets = entry.get(key)
            if not isinstance(targets, list):
                continue
            for target in targets:
                if isinstance(target, str):
                    yield DependencyEdge(source, target, origin, relation)


def implicit_edges(component: dict[str, Any]) -> Iterator[DependencyEdge]:
    """Yield the depends-on edges found in a component's reference fields."""
    source = component.get("bom-ref")
    if not isinstance(source, str):
        return
    for path in REFERENCE_PATHS:
        refs = resolve_path(component, path)
        if refs is MISSING:
            continue
        for ref in refs:
            if isinstance(ref, str):
                yield DependencyEdge(source, ref, path, Relation.DEPENDS_ON)


def _crypto_assets(document: Any) -> Iterator[dict[str, Any]]:
    if not isinstance(document, dict):
        return
    components = document.get("components")
    if not isinstance(components, list):
        return
    for component in components:
        if isinstance(component, dict) and component.get("type") == CRYPTO_ASSET_TYPE:
            yield component


def build_dependency_index(
    document: Any, detections: Iterable[dict[str, Any]]
) -> DependencyIndex:
    """Build the complete index for *document*.

    Args:
        document: The parsed CBOM.  Implicit edges are read once per
            cryptographic asset component.
        detections: Flattened detections of the same document; the last
            detection carrying a given ``bom-ref`` becomes the asset returned
            by queries for that reference.

    Returns:
        A fully built, immutable ``DependencyIndex``.
    """
    assets: dict[str, dict[str, Any]] = {}
    for detection in detections:
        ref = detection.get("bom-ref")
        if isinstance(ref, str):
            assets[ref] = detection

    edges = list(explicit_edges(document))
    for component in _crypto_assets(document):
        edges.extend(implicit_edges(component))

    forward: dict[Relation, defaultdict[str, list[RefPath]]] = {
        relation: defaultdict(list) for relation in Relation
    }
    backward: dict[Relation, defaultdict[str, list[RefPath]]] = {
        relation: defaultdict(list) for relation in Relation
    }
    for edge in edges:
        forward[edge.relation][edge.source].append((edge.target, edge.origin))
        backward[edge.relation][edge.target].append((edge.source, edge.origin))

    logger.debug(
        "Built dependency index: %d edge(s) over %d asset(s)", len(edges), len(assets)
    )
    return DependencyIndex(
        edges=edges,
        depends=forward[Relation.DEPENDS_ON],
        depended_on=backward[Relation.DEPENDS_ON],
        provides=forward[Relation.PROVIDES],
        provided_by=backward[Relation.PROVIDES],
        assets=assets,
    )
