# coding: utf-8

# Copyright (c) LocaleOps Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import logging

import pytest

from localeops.config import (
    build_config, configure, recursive_update, Namespace, CONFIG_FILENAME)


@pytest.fixture
def config_dir(tmpdir):
    return tmpdir.mkdir('config')


def write_config(config_dir, content):
    config_dir.join(CONFIG_FILENAME + '.json').write_text(
        json.dumps(content), 'utf-8')


def test_build_config_defaults(config_dir):
    assert build_config('extract', path=str(config_dir)) == {
        'log_level': 'INFO',
        'database_path': 'localeops.json',
        'use_color': True,
    }
    assert build_config('apply', path=str(config_dir)) == {
        'log_level': 'INFO',
        'database_path': 'localeops.json',
    }


def test_build_config_unknown_entrypoint():
    with pytest.raises(ValueError):
        build_config('translate')


def test_build_config_from_disk(config_dir):
    write_config(config_dir, {
        'Storage': {'database_path': 'snapshots.json'},
        'Extract': {'use_color': False},
    })
    config = build_config('extract', path=str(config_dir))
    assert config['database_path'] == 'snapshots.json'
    assert config['use_color'] is False
    assert config['log_level'] == 'INFO'

    # Sections of other entrypoints do not leak
    assert 'use_color' not in build_config('apply', path=str(config_dir))


def test_build_config_path_priority(tmpdir):
    high = tmpdir.mkdir('high')
    low = tmpdir.mkdir('low')
    write_config(high, {'Global': {'log_level': 'DEBUG'}})
    write_config(low, {'Global': {'log_level': 'ERROR'},
                       'Storage': {'database_path': 'low.json'}})
    config = build_config('apply', path=[str(high), str(low)])
    assert config['log_level'] == 'DEBUG'
    assert config['database_path'] == 'low.json'


def test_recursive_update():
    target = {'a': 1, 'b': {'c': 2, 'd': 3}}
    recursive_update(target, {'a': None, 'b': {'c': 4, 'd': None}, 'e': {}}, False)
    assert target == {'b': {'c': 4}}

    target = {'a': 1}
    recursive_update(target, {'a': None}, True)
    assert target == {'a': None}


def test_configure(config_dir):
    write_config(config_dir, {'Global': {'log_level': 'WARN'}})
    ns = configure('apply', path=str(config_dir))
    assert isinstance(ns, Namespace)
    assert ns.log_level == 'WARN'
    assert ns.database_path == 'localeops.json'
    assert logging.getLogger('localeops').level == logging.WARN
