#!/usr/bin/env python
# coding: utf-8

# Copyright (c) LocaleOps Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup

# Package metadata, version included, lives in setup.cfg

LONG_DESCRIPTION = """\
Structural diffing and patching of nested JSON locale resources.

localeops computes leaf level deltas between two versions of a source
locale, and applies received translations to the resources of target
locales, keeping track of which source strings each translation was made
from.
"""


if __name__ == '__main__':
    setup(
      long_description=LONG_DESCRIPTION,
      )
