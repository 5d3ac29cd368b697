# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .config import DiffConfig, default_filter, ignore_filter
from .generic import (
    Diff, changeset, changed_paths, all_paths, paths_and_values, patch,
    apply_patch, collect_paths_and_values,
)

__all__ = [
    "Diff", "DiffConfig", "default_filter", "ignore_filter", "changeset",
    "changed_paths", "all_paths", "paths_and_values", "patch", "apply_patch",
    "collect_paths_and_values",
]
