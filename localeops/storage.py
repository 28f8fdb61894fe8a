# coding: utf-8

# Copyright (c) LocaleOps Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from .log import debug
from .resource_format import ResourceValidationError, validate_resource


class FileDatabase(object):
    """Stores the source snapshot of each target locale in a json file.

    A stored snapshot records, for every translated string, the source
    string the translation was made from. Comparing it with the current
    source snapshot reveals new strings and stale translations.
    """

    def __init__(self, path):
        self.path = path

    def initialize(self):
        "Create an empty database file if there is none."
        if not os.path.exists(self.path):
            debug("Creating snapshot database %s", self.path)
            self._write({})

    def _read(self):
        if not os.path.exists(self.path):
            return {}
        with io.open(self.path, encoding="utf-8") as f:
            return json.load(f)

    def _write(self, content):
        with io.open(self.path, "w", encoding="utf-8") as f:
            json.dump(content, f, indent=2, ensure_ascii=False, sort_keys=True)
            f.write("\n")

    def get(self, locale):
        """Get the snapshot stored for locale, or None if there is none.

        Raises a ResourceValidationError if a stored resource is invalid.
        """
        snapshot = self._read().get(locale)
        if snapshot is None:
            return None
        if not isinstance(snapshot, dict):
            raise ResourceValidationError(
                "Snapshot for locale {!r} in {} is not a dict.".format(locale, self.path))
        for file_path, resource in snapshot.items():
            try:
                validate_resource(resource)
            except ResourceValidationError as e:
                raise ResourceValidationError(
                    "Snapshot for locale {!r} is corrupted in {}: {}".format(
                        locale, file_path, e))
        return snapshot

    def set(self, locale, snapshot):
        "Replace the snapshot stored for locale."
        content = self._read()
        content[locale] = snapshot
        self._write(content)

    def delete(self, locale):
        "Remove the snapshot stored for locale, if any."
        content = self._read()
        if content.pop(locale, None) is not None:
            self._write(content)


def create_database(database_path=None):
    """Create and initialize the snapshot database.

    The path defaults to the configured Storage.database_path.
    """
    if database_path is None:
        from .config import build_config
        database_path = build_config('apply')['database_path']
    db = FileDatabase(database_path)
    db.initialize()
    return db
