# coding: utf-8

# Copyright (c) LocaleOps Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import DeltaFormatError
from .resource_format import is_index, validate_path


class Delta(dict):
    """For internal usage in localeops library.

    Minimal class providing attribute access to delta keys.

    A delta always describes a change to a single leaf string. It carries
    the full ``path`` to the leaf, the ``leaf_path`` of the container owning
    the leaf and the ``key`` of the leaf within that container.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class DeltaType:
    "Collection of valid values for the type field in deltas."
    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"


def _located(type, path, **kwargs):
    path = list(path)
    return Delta(type=type, path=path, leaf_path=path[:-1], key=path[-1], **kwargs)


def delta_added(path, value):
    "Create a delta for a leaf value added at path."
    return _located(DeltaType.ADDED, path, value=value)

def delta_removed(path):
    "Create a delta for a leaf value removed at path."
    return _located(DeltaType.REMOVED, path)

def delta_changed(path, old_value, new_value):
    "Create a delta for a leaf value at path changed from old_value to new_value."
    return _located(DeltaType.CHANGED, path, old_value=old_value, new_value=new_value)


def make_update(path, value):
    "Create an update setting value at path."
    return dict(path=list(path), value=value)


class DeltaBuilder(object):
    """Collects the leaf deltas of one diff computation in emission order."""

    def __init__(self):
        self._deltas = []

    def validated(self):
        return self._deltas

    def append(self, delta):
        # Typechecking (just for internal consistency checking)
        assert isinstance(delta, Delta)
        assert delta.type in (DeltaType.ADDED, DeltaType.REMOVED, DeltaType.CHANGED)
        self._deltas.append(delta)

    def extend(self, deltas):
        for d in deltas:
            self.append(d)

    def added(self, path, value):
        self.append(delta_added(path, value))

    def removed(self, path):
        self.append(delta_removed(path))

    def changed(self, path, old_value, new_value):
        self.append(delta_changed(path, old_value, new_value))


def is_valid_delta(delta):
    "Return whether delta is a well formed delta."
    try:
        validate_delta(delta)
    except DeltaFormatError:
        return False
    return True


def validate_deltas(deltas):
    """Check that deltas is a list of well formed deltas.

    Raises a DeltaFormatError if not well formed.
    """
    if not isinstance(deltas, list):
        raise DeltaFormatError("Deltas must be a list.")
    for d in deltas:
        validate_delta(d)


def _check_string(delta, name):
    value = delta.get(name)
    if not isinstance(value, str):
        raise DeltaFormatError(
            "Delta field '{}' must be a string, not '{}'.".format(
                name, type(value).__name__))


def validate_delta(delta):
    """Check that delta is a well formed leaf delta.

    Raises a DeltaFormatError if not well formed.
    """
    if not isinstance(delta, dict):
        raise DeltaFormatError("Delta '{}' is not a dict.".format(delta))
    for name in ("type", "path", "leaf_path", "key"):
        if name not in delta:
            raise DeltaFormatError("Delta '{}' is missing field '{}'.".format(delta, name))

    path = validate_path(delta["path"])
    if list(delta["leaf_path"]) != path[:-1] or delta["key"] != path[-1]:
        raise DeltaFormatError(
            "Delta leaf_path {!r} and key {!r} do not match path {!r}.".format(
                delta["leaf_path"], delta["key"], path))
    # True == 1, so make sure an index key really is an int
    if is_index(delta["key"]) != is_index(path[-1]):
        raise DeltaFormatError("Delta key {!r} has the wrong type.".format(delta["key"]))

    t = delta["type"]
    if t == DeltaType.ADDED:
        _check_string(delta, "value")
    elif t == DeltaType.REMOVED:
        pass  # no value
    elif t == DeltaType.CHANGED:
        _check_string(delta, "old_value")
        _check_string(delta, "new_value")
    else:
        raise DeltaFormatError("Unknown delta type '{}'.".format(t))


def validate_update(update):
    """Check that update is a dict with a valid path and a string value.

    Raises a DeltaFormatError if not well formed.
    """
    if not isinstance(update, dict):
        raise DeltaFormatError("Update '{}' is not a dict.".format(update))
    validate_path(update.get("path"))
    if not isinstance(update.get("value"), str):
        raise DeltaFormatError(
            "Update value at {!r} must be a string, not '{}'.".format(
                update.get("path"), type(update.get("value")).__name__))
