# coding: utf-8

# Copyright (c) LocaleOps Development Team.
# Distributed under the terms of the Modified BSD License.

from ..delta_format import DeltaBuilder
from ..resource_format import (
    Shape, shape_of, join_path, RootShapeError, ResourceValidationError)
from ..log import debug

__all__ = ["diff", "diff_resources"]


def _empty_like(value):
    return [] if isinstance(value, list) else {}


def diff_added(value, path, di):
    """Decompose value into added leaf deltas at path.

    Containers are diffed against an empty container of the same shape, so
    only leaves ever show up in the result.
    """
    if shape_of(value) == Shape.LEAF:
        di.added(path, value)
    else:
        diff_any(_empty_like(value), value, path, di)


def diff_removed(value, path, di):
    "Decompose value into removed leaf deltas at path."
    if shape_of(value) == Shape.LEAF:
        di.removed(path)
    else:
        diff_any(value, _empty_like(value), path, di)


def _leaf_to_leaf(a, b, path, di):
    if a != b:
        di.changed(path, a, b)


def _added_only(a, b, path, di):
    # The old value is dropped without reporting its leaves
    diff_added(b, path, di)


def _list_to_leaf(a, b, path, di):
    di.changed(path, "", b)


def _map_to_leaf(a, b, path, di):
    diff_maps(a, {}, path, di)
    di.changed(path, "", b)


def _same_shape(a, b, path, di):
    diff_any(a, b, path, di)


# Behaviour for a key present on both sides, by (old shape, new shape).
# Map -> leaf reports the removed leaves of the old map while list -> leaf
# does not; both report the new leaf as changed from "".
transitions = {
    (Shape.LEAF, Shape.LEAF): _leaf_to_leaf,
    (Shape.LEAF, Shape.LIST): _added_only,
    (Shape.LEAF, Shape.MAP): _added_only,
    (Shape.LIST, Shape.LEAF): _list_to_leaf,
    (Shape.LIST, Shape.LIST): _same_shape,
    (Shape.LIST, Shape.MAP): _added_only,
    (Shape.MAP, Shape.LEAF): _map_to_leaf,
    (Shape.MAP, Shape.LIST): _added_only,
    (Shape.MAP, Shape.MAP): _same_shape,
}


def diff_item(a, b, path, di):
    "Diff two values found under the same key or index."
    transitions[(shape_of(a), shape_of(b))](a, b, path, di)


def diff_any(a, b, path, di):
    if isinstance(a, dict) and isinstance(b, dict):
        diff_maps(a, b, path, di)
    elif isinstance(a, list) and isinstance(b, list):
        diff_lists(a, b, path, di)
    else:
        raise RuntimeError("Can only diff two lists or two dicts.")


def diff_lists(a, b, path, di):
    """Compute a positional diff of two lists.

    Items are compared index by index, so an insertion in the middle of a
    list shows up as changes to every following index plus an addition at
    the end.
    """
    for i in range(max(len(a), len(b))):
        subpath = path + [i]
        if i >= len(a):
            diff_added(b[i], subpath, di)
        elif i >= len(b):
            diff_removed(a[i], subpath, di)
        else:
            diff_item(a[i], b[i], subpath, di)


def diff_maps(a, b, path, di):
    """Compute the diff of two dicts.

    Added and removed keys are decomposed into leaf deltas, keys in both
    dicts are compared based on the shapes of their values.
    """
    akeys = set(a.keys())
    bkeys = set(b.keys())
    for key in akeys | bkeys:
        if not isinstance(key, str):
            raise ResourceValidationError(
                "Invalid key {!r} in dict at '{}'.".format(key, join_path(path)))

    # Sorting keys in loops to get a deterministic diff result
    for key in sorted(bkeys - akeys):
        diff_added(b[key], path + [key], di)

    for key in sorted(akeys - bkeys):
        diff_removed(a[key], path + [key], di)

    for key in sorted(akeys & bkeys):
        diff_item(a[key], b[key], path + [key], di)


def diff_resources(old, new):
    """Compute the leaf deltas between two resources.

    Both resources must have a dict root. Returns a list of added, removed
    and changed deltas, one for each leaf string that differs.
    """
    if not isinstance(old, dict) or not isinstance(new, dict):
        raise RootShapeError(
            "Can only diff resources with a dict root, got '{}' and '{}'.".format(
                type(old).__name__, type(new).__name__))
    di = DeltaBuilder()
    diff_maps(old, new, [], di)
    deltas = di.validated()
    debug("Computed %d deltas", len(deltas))
    return deltas


diff = diff_resources
