"""Data types for the CBOM cross-reference graph.

- ``Relation`` -- the two directed relation kinds (depends-on, provides).
- ``DependencyEdge`` -- one directed, origin-tagged reference.
- ``DependencyView`` -- the answer to a query for one reference id.
- ``DependencyIndex`` -- four directional indices plus the asset lookup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

RefPath = tuple[str, str]
AssetPath = tuple[dict[str, Any], str]


class Relation(str, Enum):
    """Directed relation kinds between two assets."""

    DEPENDS_ON = "dependsOn"
    PROVIDES = "provides"


@dataclass(frozen=True)
class DependencyEdge:
    """A directed reference from ``source`` to ``target``.

    Attributes:
        source: ``bom-ref`` of the referencing asset.
        target: ``bom-ref`` being referenced.
        origin: Attribute path the edge was read from, e.g.
            ``"dependencies.dependsOn"`` or
            ``"cryptoProperties.relatedCryptoMaterialProperties.algorithmRef"``.
        relation: Which relation the edge belongs to.
    """

    source: str
    target: str
    origin: str
    relation: Relation = Relation.DEPENDS_ON


@dataclass
class DependencyView:
    """Resolved neighbours of one asset, as ``(asset, origin path)`` pairs."""

    depends_on: list[AssetPath] = field(default_factory=list)
    is_depended_on: list[AssetPath] = field(default_factory=list)
    provides: list[AssetPath] = field(default_factory=list)
    is_provided_by: list[AssetPath] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (
            self.depends_on or self.is_depended_on or self.provides or self.is_provided_by
        )


def _freeze(index: Mapping[str, list[RefPath]]) -> Mapping[str, tuple[RefPath, ...]]:
    return MappingProxyType({ref: tuple(pairs) for ref, pairs in index.items()})


class DependencyIndex:
    """Immutable cross-reference index for one loaded document.

    Built in full by ``build_dependency_index`` and never modified
    afterwards; a new document gets a new index.  Each directional map goes
    from a reference id to the ordered ``(related ref, origin path)`` pairs
    recorded for it.  References to ids that are not known assets are kept
    in the maps but dropped by ``query``.
    """

    def __init__(
        self,
        edges: list[DependencyEdge],
        depends: Mapping[str, list[RefPath]],
        depended_on: Mapping[str, list[RefPath]],
        provides: Mapping[str, list[RefPath]],
        provided_by: Mapping[str, list[RefPath]],
        assets: Mapping[str, dict[str, Any]],
    ) -> None:
        self._edges = tuple(edges)
        self._depends = _freeze(depends)
        self._depended_on = _freeze(depended_on)
        self._provides = _freeze(provides)
        self._provided_by = _freeze(provided_by)
        self._assets = MappingProxyType(dict(assets))

    @classmethod
    def empty(cls) -> DependencyIndex:
        return cls([], {}, {}, {}, {}, {})

    @property
    def edges(self) -> tuple[DependencyEdge, ...]:
        """All edges in insertion order, duplicates included."""
        return self._edges

    @property
    def assets(self) -> Mapping[str, dict[str, Any]]:
        """Reference id -> asset lookup."""
        return self._assets

    @property
    def depends(self) -> Mapping[str, tuple[RefPath, ...]]:
        return self._depends

    @property
    def depended_on(self) -> Mapping[str, tuple[RefPath, ...]]:
        return self._depended_on

    @property
    def provides(self) -> Mapping[str, tuple[RefPath, ...]]:
        return self._provides

    @property
    def provided_by(self) -> Mapping[str, tuple[RefPath, ...]]:
        return self._provided_by

    def asset(self, ref: str) -> dict[str, Any] | None:
        return self._assets.get(ref)

    def query(self, ref: str) -> DependencyView:
        """Return the four resolved neighbour lists of *ref*.

        Pairs whose related reference is not a known asset are skipped.  An
        unknown *ref* yields an empty view.
        """
        return DependencyView(
            depends_on=self._resolve(self._depends.get(ref, ())),
            is_depended_on=self._resolve(self._depended_on.get(ref, ())),
            provides=self._resolve(self._provides.get(ref, ())),
            is_provided_by=self._resolve(self._provided_by.get(ref, ())),
        )

    def _resolve(self, pairs: tuple[RefPath, ...]) -> list[AssetPath]:
        return [
            (self._assets[related], origin)
            for related, origin in pairs
            if related in self._assets
        ]

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"DependencyIndex(edges={len(self._edges)}, assets={len(self._assets)})"
