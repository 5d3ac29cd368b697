# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import InvalidPathError
from .matchers import (
    Node, ComponentMatcher, IndexMatcher, PropertyMatcher, UnionMatcher,
    AnyIndex, AnyProperty,
)
from .path import Path, is_index
from .utils import container_type

__all__ = [
    "PathMatcher", "Node", "AnyIndex", "AnyProperty", "UnionMatcher",
    "IndexMatcher", "PropertyMatcher",
]


def to_component_matcher(component):
    if isinstance(component, ComponentMatcher):
        return component
    if is_index(component):
        return IndexMatcher(component)
    if isinstance(component, str):
        return PropertyMatcher(component)
    raise InvalidPathError(
        'Unrecognized path matcher component: %r of type %s' % (
            component, type(component).__name__))


class FoundValues(object):
    """Lazy sequence of the values matched in a tree.

    Every iteration searches the tree again, so the same tree always
    produces the same values in the same order.
    """

    def __init__(self, matcher, root):
        self._matcher = matcher
        self._root = root

    def __iter__(self):
        for node in self._matcher.iter_nodes(self._root):
            yield node.value

    def __repr__(self):
        return 'FoundValues(%s)' % (self._matcher.to_json(),)


class PathMatcher(object):
    """Immutable pattern over path components.

    Components are literal properties (str), literal indexes (int), the
    wildcards AnyProperty and AnyIndex, or a UnionMatcher of literals.
    """
    __slots__ = ('_matchers', '_allow_gaps')

    def __init__(self, components=()):
        matchers = tuple(to_component_matcher(c) for c in components)
        object.__setattr__(self, '_matchers', matchers)
        object.__setattr__(self, '_allow_gaps', any(m.allow_gaps for m in matchers))

    @classmethod
    def of(cls, *components):
        return cls(components)

    def __setattr__(self, name, value):
        raise AttributeError('PathMatcher is immutable')

    @property
    def allow_gaps(self):
        "Whether matches may select a non-contiguous subset of list items."
        return self._allow_gaps

    @property
    def matchers(self):
        return self._matchers

    def __len__(self):
        return len(self._matchers)

    def _test_prefix(self, path, n):
        for i in range(n):
            if not self._matchers[i].test(path.component_at(i)):
                return False
        return True

    def match(self, path):
        "Whether path matches this pattern exactly."
        if len(path) != len(self._matchers):
            return False
        return self._test_prefix(path, len(path))

    def prefix_match(self, path):
        "Whether path is inside, or equal to, a subtree denoted by this pattern."
        if len(path) < len(self._matchers):
            return False
        return self._test_prefix(path, len(self._matchers))

    def partial_match(self, path):
        """Whether path is consistent with this pattern as far as both go.

        A path shorter than the pattern matches partially if it could still
        be extended into a full match.
        """
        return self._test_prefix(path, min(len(path), len(self._matchers)))

    def iter_nodes(self, root):
        "Generate the matching nodes of root in depth-first pre-order."
        if not self._matchers:
            yield Node(Path.ROOT, root)
            return
        if container_type(root) is None:
            return
        for node in self._descend(root, Path.ROOT, 0):
            yield node

    def _descend(self, current, path, depth):
        last = depth == len(self._matchers) - 1
        for component, value in self._matchers[depth].select(current):
            child = path.child(component)
            if last:
                yield Node(child, value)
            elif container_type(value) is not None:
                for node in self._descend(value, child, depth + 1):
                    yield node

    def find(self, root, visitor=None):
        """Find all nodes of root matching this pattern.

        If given, visitor(path, value) is called for each match as it is
        found. Returns the list of matching nodes.
        """
        nodes = []
        for node in self.iter_nodes(root):
            if visitor is not None:
                visitor(node.path, node.value)
            nodes.append(node)
        return nodes

    def find_first(self, root):
        return next(self.iter_nodes(root), None)

    def find_values(self, root):
        return FoundValues(self, root)

    def find_first_value(self, root, default=None):
        node = self.find_first(root)
        if node is None:
            return default
        return node.value

    def to_json(self):
        return '$' + ''.join(m.to_json() for m in self._matchers)

    def __str__(self):
        return self.to_json()

    def __repr__(self):
        return 'PathMatcher(%r)' % (self.to_json(),)

    def __eq__(self, other):
        if not isinstance(other, PathMatcher):
            return NotImplemented
        return self._matchers == other._matchers

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self._matchers)
