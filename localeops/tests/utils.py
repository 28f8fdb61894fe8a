# coding: utf-8

# Copyright (c) LocaleOps Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import io
import json
import os

from localeops import diff, apply_updates, remove_keys
from localeops.delta_format import DeltaType, is_valid_delta
from localeops.translations import updates_from_deltas


def snapshot_locale_dir(dirpath):
    """Read all json resource files below dirpath into a snapshot."""
    snapshot = {}
    for root, dirs, files in os.walk(dirpath):
        for fn in files:
            full = os.path.join(root, fn)
            rel = os.path.relpath(full, dirpath).replace(os.sep, "/")
            with io.open(full, encoding="utf-8") as f:
                snapshot[rel] = json.load(f)
    return snapshot


def _delta_key(d):
    return json.dumps(d, sort_keys=True)


def assert_deltas_equal(received, expected):
    "Compare two lists of deltas, ignoring their order."
    assert sorted(map(_delta_key, received)) == sorted(map(_delta_key, expected))


def check_diff_and_patch(a, b):
    """Check that applying diff(a, b) to a copy of a reproduces b.

    Holds when b differs from a by leaf edits, additions and removals of
    leaves, without shape changes of existing values.
    """
    d = diff(a, b)
    assert all(is_valid_delta(e) for e in d)
    patched = apply_updates(copy.deepcopy(a), updates_from_deltas(d))
    removed = [e for e in d if e.type == DeltaType.REMOVED]
    if removed:
        patched = remove_keys(patched, removed)
    assert patched == b


def check_symmetric_diff_and_patch(a, b):
    "Check that patch(a, diff(a,b)) reproduces b and vice versa."
    check_diff_and_patch(a, b)
    check_diff_and_patch(b, a)
