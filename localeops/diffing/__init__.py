# coding: utf-8

# Copyright (c) LocaleOps Development Team.
# Distributed under the terms of the Modified BSD License.

from .generic import diff, diff_resources
from .snapshots import diff_snapshots

__all__ = ["diff", "diff_resources", "diff_snapshots"]
