# coding: utf-8

# Copyright (c) LocaleOps Development Team.
# Distributed under the terms of the Modified BSD License.

from ..log import debug
from .generic import diff_resources

__all__ = ["diff_snapshots"]


def _tagged(deltas, file_path):
    for d in deltas:
        d.file_path = file_path
    return deltas


def diff_snapshots(old_snapshot, new_snapshot):
    """Compute the deltas between two snapshots of a locale directory.

    A snapshot maps resource file paths to resources. Resources of files
    only present in new_snapshot are reported as added leaves, resources of
    files only present in old_snapshot as removed leaves. Each delta gets a
    ``file_path`` entry naming the file it belongs to.
    """
    old_files = set(old_snapshot.keys())
    new_files = set(new_snapshot.keys())

    deltas = []
    for file_path in sorted(new_files - old_files):
        deltas.extend(_tagged(diff_resources({}, new_snapshot[file_path]), file_path))

    for file_path in sorted(old_files - new_files):
        debug("Resource file %s was removed", file_path)
        deltas.extend(_tagged(diff_resources(old_snapshot[file_path], {}), file_path))

    for file_path in sorted(old_files & new_files):
        deltas.extend(_tagged(
            diff_resources(old_snapshot[file_path], new_snapshot[file_path]), file_path))

    return deltas
