# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diff_format import Missing, Change, ChangeOp
from .diffing import Diff, DiffConfig, changeset, patch, apply_patch
from .log import InvalidPathError, PathParseError, UnsupportedValueError
from .matchers import (
    Node, AnyIndex, AnyProperty, IndexMatcher, PropertyMatcher, UnionMatcher)
from .parsing import parse_path, parse_path_matcher
from .path import Path
from .pathmatcher import PathMatcher
from .projection import Projection, projection, json_clone
from .versioning import VersionInfo


__all__ = [
    "__version__",
    "Missing", "Change", "ChangeOp",
    "Path", "PathMatcher", "Node",
    "AnyIndex", "AnyProperty", "IndexMatcher", "PropertyMatcher", "UnionMatcher",
    "Diff", "DiffConfig", "changeset", "patch", "apply_patch",
    "parse_path", "parse_path_matcher",
    "Projection", "projection", "json_clone",
    "VersionInfo",
    "InvalidPathError", "PathParseError", "UnsupportedValueError",
    ]
