"""Resolve dotted attribute paths through a JSON tree.

CBOM documents nest objects and arrays at unpredictable depth: a protocol
carries a list of cipher suites, each carrying a list of algorithm
references.  ``resolve_path`` hides that shape and always answers with a flat
list of leaves, or with the ``MISSING`` sentinel when the path does not exist.

Resolution rules
----------------
- At a mapping, descend into the key named by the next segment.  A key that
  is not present makes the whole path absent.
- At a list, apply the remaining path to every element, drop elements for
  which the path is absent, and concatenate the per-element results (one
  level of flattening).
- When the path is exhausted, a list leaf is returned unchanged and any other
  leaf (including ``None``) is wrapped as ``[leaf]``.

Absence inside a list branch never surfaces as ``MISSING``: a path through a
list with no matching element resolves to ``[]``.  Callers rely on this
difference: ``MISSING`` means "omit the property", ``[]`` means "none found".

The traversal uses an explicit work-list, so document depth is bounded only by
memory.  Cyclic structures are not supported.
"""

from __future__ import annotations

from typing import Any


class Missing:
    """Type of the ``MISSING`` sentinel: a path that does not exist.

    Falsy, so that ``if not values`` treats it like an empty result; use
    ``is MISSING`` when the distinction matters.
    """

    _instance: Missing | None = None

    def __new__(cls) -> Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = Missing()


def is_missing(value: object) -> bool:
    """Return True if *value* is the ``MISSING`` sentinel."""
    return value is MISSING


def resolve_path(root: Any, path: str) -> list[Any] | Missing:
    """Return every leaf reachable from *root* along the dotted *path*.

    Args:
        root: A JSON value (dicts, lists, scalars).  Never mutated.
        path: Dot-separated attribute names, e.g.
            ``"cryptoProperties.protocolProperties.cipherSuites.algorithms"``.

    Returns:
        A list of leaves in document order, or ``MISSING`` if a segment is
        absent on a mapping before any list was traversed.  The list is new,
        but the leaves are the original objects.
    """
    parts = path.split(".")
    depth_limit = len(parts)

    leaves: list[Any] = []
    inside_sequence = False
    # LIFO of (node, index of next segment); elements pushed in reverse to
    # keep document order.
    work: list[tuple[Any, int]] = [(root, 0)]

    while work:
        node, depth = work.pop()

        if depth == depth_limit:
            if isinstance(node, list):
                leaves.extend(node)
            else:
                leaves.append(node)
            continue

        if isinstance(node, list):
            inside_sequence = True
            work.extend((item, depth) for item in reversed(node))
            continue

        key = parts[depth]
        if isinstance(node, dict) and key in node:
            work.append((node[key], depth + 1))
            continue

        if not inside_sequence:
            return MISSING

    return leaves
