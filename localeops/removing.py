# coding: utf-8

# Copyright (c) LocaleOps Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import OrderedDict

from .delta_format import DeltaType, validate_delta
from .log import DeltaFormatError, debug
from .resource_format import (
    is_index, get_value, join_path, validate_resource,
    StructuralInvariantError)


__all__ = ["remove_keys"]


def _unset(resource, path):
    container = get_value(resource, path[:-1], None)
    if isinstance(container, list):
        raise StructuralInvariantError(
            "String key {!r} addresses a list at '{}'.".format(
                path[-1], join_path(path[:-1])))
    if isinstance(container, dict):
        container.pop(path[-1], None)


def pull_at(values, indices):
    """Remove the items at the given indices from a list in place.

    All indices refer to positions in the list before any removal.
    Indices out of range are ignored.
    """
    indices = set(indices)
    values[:] = [v for i, v in enumerate(values) if i not in indices]
    return values


def remove_keys(resource, deltas):
    """Remove the values addressed by removed deltas from resource.

    Values under string keys are unset directly. Integer keys are grouped by
    the list owning them and removed from each list in one go, so removing
    several items from the same list does not shift the positions of the
    others. Containers emptied by the removals are left in place. The
    resource is modified in place and returned.
    """
    lists = OrderedDict()
    for d in deltas:
        validate_delta(d)
        if d["type"] != DeltaType.REMOVED:
            raise DeltaFormatError(
                "Can only remove keys for removed deltas, got '{}'.".format(d["type"]))
        if is_index(d["key"]):
            lists.setdefault(tuple(d["leaf_path"]), []).append(d["key"])
        else:
            _unset(resource, list(d["path"]))

    # Deepest lists first, their parents still hold them at original indices
    for leaf_path, indices in sorted(lists.items(), key=lambda kv: len(kv[0]), reverse=True):
        values = get_value(resource, leaf_path, None)
        if not isinstance(values, list):
            raise StructuralInvariantError(
                "Integer keys {} address a non-list value at '{}'.".format(
                    indices, join_path(leaf_path)))
        debug("Removing indices %s from %s", indices, join_path(leaf_path))
        pull_at(values, indices)

    validate_resource(resource)
    return resource
