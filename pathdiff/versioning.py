# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .diffing import Diff
from .parsing import parse_path_matcher
from .pathmatcher import PathMatcher

__all__ = ["VersionInfo"]


def to_matcher(expression):
    if isinstance(expression, PathMatcher):
        return expression
    return parse_path_matcher(expression)


class VersionInfo(object):
    """A current version of a value, optionally with its previous version.

    Changes between the versions are computed on first access and cached.
    previous_values lists the patterns whose old values are kept by
    the `previous_values` property.
    """

    def __init__(self, current, previous=None, diff=None, previous_values=None):
        self.current = current
        self.previous = previous
        self.diff = diff if diff is not None else Diff()
        self.previous_value_matchers = tuple(
            to_matcher(m) for m in (previous_values or ()))
        self._changes = None
        self._changed_paths = None
        self._paths = None
        self._previous_values = None
        self._previous_values_computed = False

    @property
    def has_previous(self):
        return self.previous is not None

    def map(self, fn, diff=None, previous_values=None):
        "Return a VersionInfo of fn applied to both versions."
        if previous_values is None:
            previous_values = self.previous_value_matchers
        return VersionInfo(
            fn(self.current),
            fn(self.previous) if self.has_previous else None,
            diff=diff if diff is not None else self.diff,
            previous_values=previous_values,
        )

    @property
    def changes(self):
        if not self.has_previous:
            return None
        if self._changes is None:
            self._changes = self.diff.changeset(self.previous, self.current)
        return self._changes

    @property
    def changed_paths(self):
        if not self.has_previous:
            return None
        if self._changed_paths is None:
            self._changed_paths = set(self.changes)
        return self._changed_paths

    @property
    def paths(self):
        "Changed paths, or all paths of current if there is no previous version."
        if self._paths is None:
            if self.has_previous:
                self._paths = self.changed_paths
            else:
                self._paths = self.diff.all_paths(self.current)
        return self._paths

    @property
    def previous_values(self):
        """The old values of changes matching the previous_values patterns.

        Collected into a tree of the same shape as previous. None when
        there is no previous version or no change matched.
        """
        if not self.has_previous or not self.previous_value_matchers:
            return None
        if not self._previous_values_computed:
            values = None
            for change in self.changes.values():
                if any(m.match(change.path) for m in self.previous_value_matchers):
                    if values is None:
                        values = [] if isinstance(self.previous, list) else {}
                    change.path.set(values, change.old_value)
            self._previous_values = values
            self._previous_values_computed = True
        return self._previous_values

    def _changed_path_list(self):
        return [change.path for change in self.changes.values()]

    def matches(self, expression):
        """Whether the pattern touches this version.

        With a previous version, any changed path inside the pattern
        counts. Without one, anything found by the pattern does.
        """
        matcher = to_matcher(expression)
        if self.has_previous:
            return any(matcher.prefix_match(p) for p in self._changed_path_list())
        return matcher.find_first(self.current) is not None

    def matches_any(self, expressions):
        matchers = [to_matcher(e) for e in expressions]
        if self.has_previous:
            paths = self._changed_path_list()
            return any(m.prefix_match(p) for m in matchers for p in paths)
        return any(m.find_first(self.current) is not None for m in matchers)

    def to_json(self):
        changed_paths = list(self.changes) if self.has_previous else None
        return {
            'current': self.current,
            'changed_paths': changed_paths,
            'previous': self.previous_values,
        }
