"""Property-based tests for the cross-reference index.

Verifies:
- Symmetry: every edge is visible from both of its ends
- Counts: forward and backward maps hold one pair per edge
- Queries only ever return known assets
"""
from __future__ import annotations

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from cbomlens.core.dependency import DependencyIndex, Relation, build_dependency_index
from cbomlens.core.detections import flatten_detections


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

REFS = ("a", "b", "c", "d", "e")

refs = st.sampled_from(REFS)


@st.composite
def crypto_component(draw: st.DrawFn) -> dict:
    """A cryptographic asset holding implicit references."""
    suites = draw(st.lists(st.lists(refs, max_size=3), max_size=2))
    return {
        "type": "cryptographic-asset",
        "bom-ref": draw(refs),
        "cryptoProperties": {
            "relatedCryptoMaterialProperties": {"algorithmRef": draw(refs)},
            "protocolProperties": {
                "cipherSuites": [{"algorithms": algorithms} for algorithms in suites],
            },
        },
    }


@st.composite
def cbom_document(draw: st.DrawFn) -> dict:
    """A CBOM with random components and explicit dependencies."""
    components = draw(st.lists(crypto_component(), max_size=5))
    dependencies = draw(
        st.lists(
            st.fixed_dictionaries({
                "ref": refs,
                "dependsOn": st.lists(refs, max_size=3),
                "provides": st.lists(refs, max_size=2),
            }),
            max_size=3,
        )
    )
    return {"components": components, "dependencies": dependencies}


def _index(document: dict) -> DependencyIndex:
    return build_dependency_index(document, flatten_detections(document))


class TestGraphSymmetry:

    @given(document=cbom_document())
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_every_edge_visible_from_both_ends(self, document: dict) -> None:
        index = _index(document)
        for edge in index.edges:
            if edge.relation is Relation.DEPENDS_ON:
                forward, backward = index.depends, index.depended_on
            else:
                forward, backward = index.provides, index.provided_by
            assert (edge.target, edge.origin) in forward[edge.source]
            assert (edge.source, edge.origin) in backward[edge.target]

    @given(document=cbom_document())
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_one_pair_per_edge(self, document: dict) -> None:
        index = _index(document)
        for relation, forward, backward in (
            (Relation.DEPENDS_ON, index.depends, index.depended_on),
            (Relation.PROVIDES, index.provides, index.provided_by),
        ):
            count = sum(1 for e in index.edges if e.relation is relation)
            assert sum(len(v) for v in forward.values()) == count
            assert sum(len(v) for v in backward.values()) == count


class TestQueries:

    @given(document=cbom_document())
    @settings(max_examples=50, suppress_health_check=[HealthCheck.too_slow])
    def test_only_known_assets_returned(self, document: dict) -> None:
        index = _index(document)
        for ref in REFS + ("zzz",):
            view = index.query(ref)
            for pairs in (view.depends_on, view.is_depended_on, view.provides, view.is_provided_by):
                for asset, _ in pairs:
                    assert index.asset(asset["bom-ref"]) is asset
