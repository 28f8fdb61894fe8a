# coding: utf-8

# Copyright (c) LocaleOps Development Team.
# Distributed under the terms of the Modified BSD License.

"""Turning source deltas into translation work, and applying the results.

A translation is a dict with the translated ``value``, the source string
it was translated ``from``, the ``file_path`` of the resource file and the
``resource_path`` of the string within it.
"""

import copy
import io
import json
import os
from collections import OrderedDict

from jsonschema import Draft7Validator as Validator
from jsonschema.exceptions import best_match

from .delta_format import DeltaType, make_update
from .diffing import diff_snapshots
from .log import DeltaFormatError, debug, info
from .patching import ResourcePatcher
from .resource_format import get_value, join_path


__all__ = [
    "StaleTranslationError",
    "validate_translation", "updates_from_deltas", "check_stale",
    "apply_translations", "get_untranslated", "submit_translations",
    ]


class StaleTranslationError(ValueError):
    """A translation was made against a source string that has since changed."""
    pass


_schema_path = os.path.join(os.path.dirname(__file__), "translation.schema.json")
_validator = None


def _get_validator():
    global _validator
    if _validator is None:
        with io.open(_schema_path, encoding="utf-8") as f:
            _validator = Validator(json.load(f))
    return _validator


def validate_translation(translation):
    """Check that translation is a well formed translation.

    Raises a DeltaFormatError if not well formed.
    """
    err = best_match(_get_validator().iter_errors(translation))
    if err is not None:
        raise DeltaFormatError("Invalid translation {!r}: {}".format(translation, err.message))


def updates_from_deltas(deltas):
    """Create patch updates for the added and changed deltas.

    Removed deltas have no value to set and are skipped.
    """
    updates = []
    for d in deltas:
        if d["type"] == DeltaType.ADDED:
            updates.append(make_update(d["path"], d["value"]))
        elif d["type"] == DeltaType.CHANGED:
            updates.append(make_update(d["path"], d["new_value"]))
    return updates


def check_stale(translations, current_snapshot):
    """Check that every translation was made from the current source string.

    Raises a StaleTranslationError for the first translation whose ``from``
    differs from the string currently found in current_snapshot.
    """
    for tr in translations:
        validate_translation(tr)
        resource = current_snapshot.get(tr["file_path"], {})
        current = get_value(resource, tr["resource_path"], None)
        if current != tr["from"]:
            raise StaleTranslationError(
                "Translation for {}:{} is stale. From: {!r}, Current: {!r}".format(
                    tr["file_path"], join_path(tr["resource_path"]), tr["from"], current))


def _group_by_file(translations):
    groups = OrderedDict()
    for tr in translations:
        groups.setdefault(tr["file_path"], []).append(tr)
    return groups


def apply_translations(translations, target_resources, source_snapshot):
    """Apply translations to target resources and record their sources.

    target_resources maps file paths to resources of the target locale and
    is patched with the translated values. source_snapshot maps the same file
    paths to the source strings each translation was made from, and is
    patched with the ``from`` values. Both are modified in place and
    returned as a tuple.
    """
    for file_path, group in _group_by_file(translations).items():
        for tr in group:
            validate_translation(tr)
        debug("Applying %d translations to %s", len(group), file_path)

        target_resources[file_path] = ResourcePatcher().apply_updates(
            target_resources.get(file_path),
            [make_update(tr["resource_path"], tr["value"]) for tr in group])

        source_snapshot[file_path] = ResourcePatcher().apply_updates(
            source_snapshot.get(file_path),
            [make_update(tr["resource_path"], tr["from"]) for tr in group])

    return target_resources, source_snapshot


def get_untranslated(database, locale, current_snapshot):
    """Compute the source deltas not yet translated to locale.

    Compares the source snapshot stored for locale, recording what the
    existing translations were made from, with current_snapshot.
    """
    stored = database.get(locale)
    if stored is None:
        stored = {}
    deltas = diff_snapshots(stored, current_snapshot)
    info("Found %d untranslated changes for locale %s", len(deltas), locale)
    return deltas


def submit_translations(database, locale, translations, current_snapshot, target_resources):
    """Apply received translations for locale.

    All translations are checked for staleness against current_snapshot
    first. Copies of the target resources are then patched, and only when
    every file was patched are they written back into target_resources and
    the stored source snapshot of locale updated. On error neither is
    modified. Returns the patched target resources.
    """
    if not translations:
        return target_resources

    check_stale(translations, current_snapshot)

    stored = database.get(locale)
    if stored is None:
        stored = {}
    patched, stored = apply_translations(
        translations, copy.deepcopy(target_resources), stored)
    target_resources.update(patched)
    database.set(locale, stored)
    info("Applied %d translations for locale %s", len(translations), locale)
    return target_resources
