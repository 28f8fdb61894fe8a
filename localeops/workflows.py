# coding: utf-8

# Copyright (c) LocaleOps Development Team.
# Distributed under the terms of the Modified BSD License.

"""Configured entry points for the extract and apply workflows.

Each entry point reads the localeops config for its name, sets up
logging from it and opens the configured snapshot database.
"""

import sys

from .config import configure
from .prettyprint import PrettyPrintConfig, pretty_print_deltas
from .storage import create_database
from .translations import get_untranslated, submit_translations


def extract(locale, current_snapshot, out=None, config_path=None):
    """Report the source deltas not yet translated to locale.

    The deltas are printed to out (stdout by default), colored unless
    disabled by the ``use_color`` option, and returned.
    """
    config = configure('extract', path=config_path)
    database = create_database(config.database_path)

    deltas = get_untranslated(database, locale, current_snapshot)

    printconfig = PrettyPrintConfig(
        out=out if out is not None else sys.stdout,
        use_color=config.use_color)
    pretty_print_deltas(deltas, printconfig)
    return deltas


def apply(locale, translations, current_snapshot, target_resources, config_path=None):
    """Apply received translations for locale and return the target resources."""
    config = configure('apply', path=config_path)
    database = create_database(config.database_path)
    return submit_translations(
        database, locale, translations, current_snapshot, target_resources)
