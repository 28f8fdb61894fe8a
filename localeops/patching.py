# coding: utf-8

# Copyright (c) LocaleOps Development Team.
# Distributed under the terms of the Modified BSD License.

from .delta_format import validate_update
from .log import debug
from .resource_format import (
    Missing, is_index, get_value, join_path, validate_resource,
    RootShapeError, StructuralInvariantError)


__all__ = ["ResourcePatcher", "apply_updates", "set_value"]


def _child(container, key):
    if isinstance(container, dict):
        return container.get(key, Missing)
    if 0 <= key < len(container):
        return container[key]
    return Missing


def _assign(container, key, value, path):
    if is_index(key):
        if not isinstance(container, list):
            raise StructuralInvariantError(
                "Integer key {} addresses a non-list container at '{}'.".format(
                    key, join_path(path)))
        if key < 0:
            raise StructuralInvariantError(
                "Negative index {} at '{}'.".format(key, join_path(path)))
        if key >= len(container):
            # Pad with placeholders, later updates are expected to fill them
            container.extend([None] * (key - len(container)))
            container.append(value)
        else:
            container[key] = value
    else:
        if not isinstance(container, dict):
            raise StructuralInvariantError(
                "String key {!r} addresses a non-dict container at '{}'.".format(
                    key, join_path(path)))
        container[key] = value


def set_value(resource, path, value):
    """Set value at path in resource, creating missing containers.

    A missing container, or a leaf standing where a container is needed, is
    replaced by an empty list when the next key is an integer and by an
    empty dict otherwise.
    """
    container = resource
    for i in range(len(path) - 1):
        key, next_key = path[i], path[i + 1]
        child = _child(container, key) if is_index(key) == isinstance(container, list) else Missing
        if is_index(next_key):
            if isinstance(child, dict):
                raise StructuralInvariantError(
                    "Integer key {} addresses a dict at '{}'.".format(
                        next_key, join_path(path[:i + 1])))
            if not isinstance(child, list):
                child = []
                _assign(container, key, child, path[:i])
        else:
            if isinstance(child, list):
                raise StructuralInvariantError(
                    "String key {!r} addresses a list at '{}'.".format(
                        next_key, join_path(path[:i + 1])))
            if not isinstance(child, dict):
                child = {}
                _assign(container, key, child, path[:i])
        container = child
    _assign(container, path[-1], value, path[:-1])


class ResourcePatcher(object):
    """Apply leaf updates to a resource.

    Updates are applied in order. Whenever the key following a path prefix
    is an integer, the value at that prefix is turned into a list unless it
    already is one. Prefixes converted this way are remembered in
    ``converted_paths``, so that a batch of updates filling a new list does
    not convert it again halfway through.

    The memory belongs to one patch session: use a fresh patcher, or call
    ``reset()``, before patching an unrelated resource.
    """

    def __init__(self):
        self.converted_paths = set()

    def reset(self):
        "Forget all converted paths."
        self.converted_paths.clear()

    def _convert_lists(self, resource, path):
        for i in range(len(path) - 1):
            if not is_index(path[i + 1]):
                continue
            prefix = tuple(path[:i + 1])
            if prefix in self.converted_paths:
                continue
            if not isinstance(get_value(resource, prefix, None), list):
                debug("Converting %s to a list", join_path(prefix))
                set_value(resource, prefix, [])
                self.converted_paths.add(prefix)

    def apply_update(self, resource, path, value):
        "Set value at path, without validating the result."
        path = list(path)
        self._convert_lists(resource, path)
        set_value(resource, path, value)

    def apply_updates(self, resource=None, updates=()):
        """Apply updates to resource in place and return it.

        Each update is a dict with a ``path`` and a string ``value``.
        A new resource is started when resource is None. Raises a
        ResourceValidationError if the result is not a valid resource.
        """
        if resource is None:
            resource = {}
        if not isinstance(resource, dict):
            raise RootShapeError(
                "Can only patch resources with a dict root, got '{}'.".format(
                    type(resource).__name__))
        for update in updates:
            validate_update(update)
            self.apply_update(resource, update["path"], update["value"])
        validate_resource(resource)
        return resource


def apply_updates(resource, updates):
    "Apply updates to resource with a fresh ResourcePatcher."
    return ResourcePatcher().apply_updates(resource, updates)
