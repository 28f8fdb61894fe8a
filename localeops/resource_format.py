# coding: utf-8

# Copyright (c) LocaleOps Development Team.
# Distributed under the terms of the Modified BSD License.

"""The resource model shared by the diff, patch and removal engines.

A resource is a nested structure of translatable strings:

- a leaf is a ``str``,
- a list is a ``list`` of resource values,
- a map is a ``dict`` with ``str`` keys and resource values.

The root of a resource is always a map. Paths into a resource are lists
of keys, ``str`` for map keys and ``int`` for list indices.
"""

import io
import json
import os

from jsonschema import Draft7Validator as Validator
from jsonschema.exceptions import best_match

from .log import DeltaFormatError


__all__ = [
    "Shape", "shape_of",
    "ResourceValidationError", "StructuralInvariantError", "RootShapeError",
    "validate_resource", "is_valid_resource",
    "is_index", "validate_path", "join_path", "get_value", "Missing",
    ]


# Sentinel to allow None as a default value
Missing = object()


class ResourceValidationError(ValueError):
    """A value does not conform to the leaf/list/map resource model."""
    pass


class StructuralInvariantError(ValueError):
    """A path key addresses a container of the wrong kind.

    An integer key must address a list, a string key must address a map.
    """
    pass


class RootShapeError(TypeError):
    """A resource root is not a map."""
    pass


class Shape:
    "Collection of the variants a resource value can take."
    LEAF = "leaf"
    LIST = "list"
    MAP = "map"


def shape_of(value):
    "Return the Shape of a resource value."
    if isinstance(value, str):
        return Shape.LEAF
    elif isinstance(value, list):
        return Shape.LIST
    elif isinstance(value, dict):
        return Shape.MAP
    raise ResourceValidationError(
        "Invalid resource value of type '{}': expecting str, list or dict.".format(
            type(value).__name__))


_schema_path = os.path.join(os.path.dirname(__file__), "resource.schema.json")
_validator = None


def _get_validator():
    global _validator
    if _validator is None:
        with io.open(_schema_path, encoding="utf-8") as f:
            schema = json.load(f)
        _validator = Validator(schema)
    return _validator


def validate_resource(resource):
    """Check that resource is a well formed resource.

    Raises a ResourceValidationError if not well formed.
    """
    err = best_match(_get_validator().iter_errors(resource))
    if err is not None:
        location = join_path(list(err.absolute_path))
        raise ResourceValidationError(
            "Resource validation failed at '{}': {}".format(location, err.message))


def is_valid_resource(resource):
    "Return whether resource is a well formed resource."
    try:
        validate_resource(resource)
    except ResourceValidationError:
        return False
    return True


def is_index(key):
    "Return whether a path key addresses a list item."
    return isinstance(key, int) and not isinstance(key, bool)


def validate_path(path):
    """Check that path is a non-empty sequence of str or int keys.

    Returns the path as a list.
    """
    if not isinstance(path, (list, tuple)) or not path:
        raise DeltaFormatError("Path must be a non-empty list, not {!r}.".format(path))
    for key in path:
        if not (isinstance(key, str) or is_index(key)):
            raise DeltaFormatError(
                "Invalid path key {!r} of type '{}' in path {!r}.".format(
                    key, type(key).__name__, path))
    return list(path)


def join_path(path):
    "Join a path on the form ['foo', 0, 'bar'] into '/foo/0/bar'."
    return "/" + "/".join(str(key) for key in path)


def get_value(resource, path, default=Missing):
    """Get the value at path in resource.

    Raises KeyError if the path does not resolve, unless a default is given.
    """
    value = resource
    for key in path:
        if is_index(key) and isinstance(value, list) and 0 <= key < len(value):
            value = value[key]
        elif isinstance(key, str) and isinstance(value, dict) and key in value:
            value = value[key]
        else:
            if default is Missing:
                raise KeyError(join_path(path))
            return default
    return value
