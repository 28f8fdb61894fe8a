# coding: utf-8

# Copyright (c) LocaleOps Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

import pytest

from localeops import diff

from .utils import check_diff_and_patch


def make_resource(sections, keys, items):
    resource = {}
    for s in range(sections):
        section = resource["section%d" % s] = {}
        for k in range(keys):
            section["key%d" % k] = "Text %d.%d" % (s, k)
        section["items"] = [
            {"title": "Item %d" % i, "tags": ["t%d" % i, "u%d" % i]}
            for i in range(items)]
    return resource


@pytest.mark.timeout(timeout=60)
def test_diff_large_resource(slow):
    a = make_resource(50, 100, 50)
    b = copy.deepcopy(a)
    for s in range(0, 50, 3):
        section = b["section%d" % s]
        section["key0"] = "Changed"
        del section["key1"]
        section["new"] = {"x": "X"}
        for item in section["items"]:
            del item["tags"][1:]

    deltas = diff(a, b)
    # Per changed section: one change, one removal, one addition and
    # one removed tag for each item
    assert len(deltas) == 17 * (1 + 1 + 1 + 50)
    check_diff_and_patch(a, b)
