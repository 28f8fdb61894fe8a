# -*- coding: utf-8 -*-

# Copyright (c) LocaleOps Development Team.
# Distributed under the terms of the Modified BSD License.

import os

from pytest import fixture, skip

from localeops.storage import FileDatabase

from .utils import snapshot_locale_dir


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def source_snapshot(filespath):
    """Snapshot of the english source locale in the test files"""
    return snapshot_locale_dir(os.path.join(filespath, "en"))


@fixture
def target_resources(filespath):
    """Resources of the russian target locale in the test files"""
    return snapshot_locale_dir(os.path.join(filespath, "ru"))


@fixture
def database(tmpdir):
    db = FileDatabase(str(tmpdir.join('localeops.json')))
    db.initialize()
    return db
