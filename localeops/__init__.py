# coding: utf-8

# Copyright (c) LocaleOps Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, diff_snapshots
from .patching import ResourcePatcher, apply_updates
from .removing import remove_keys
from .resource_format import (
    ResourceValidationError, StructuralInvariantError, RootShapeError,
    validate_resource)


__all__ = [
    "__version__",
    "diff", "diff_snapshots",
    "ResourcePatcher", "apply_updates",
    "remove_keys",
    "ResourceValidationError", "StructuralInvariantError", "RootShapeError",
    "validate_resource",
    ]
