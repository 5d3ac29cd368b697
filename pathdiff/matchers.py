# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import json
import re

from .diff_format import Missing
from .log import InvalidPathError
from .path import (
    is_index, validate_index, validate_property, validate_component,
    index_to_string, property_to_string,
)
from .utils import normalize_component

__all__ = [
    "Node", "ComponentMatcher", "IndexMatcher", "PropertyMatcher",
    "UnionMatcher", "AnyIndex", "AnyProperty",
]


# A concrete path together with the value found there
Node = namedtuple("Node", ["path", "value"])


class ComponentMatcher(object):
    """Matches a single path component.

    `test` checks a component of an existing path and `select` yields
    the (component, value) pairs of a container that satisfy the matcher.
    `allow_gaps` tells whether the matcher can pick a subset of the
    indices of a list.
    """
    allow_gaps = False

    def test(self, component):
        raise NotImplementedError

    def select(self, current):
        raise NotImplementedError

    def to_json(self):
        raise NotImplementedError

    def __str__(self):
        return self.to_json()


# Property names that read as a canonical list index
_r_index = re.compile(r'^(?:0|[1-9][0-9]*)\Z')


def _select_literal(current, component):
    """Look up a literal component in a list or dict.

    Returns the concrete (component, value) found, with value Missing if
    absent. A numeral property selects the list index it names, and an
    index selects the string key of a dict.
    """
    if isinstance(current, list):
        if not is_index(component):
            if not _r_index.match(component):
                return component, Missing
            component = int(component)
        if component < len(current):
            return component, current[component]
        return component, Missing
    if isinstance(current, dict):
        key = normalize_component(component)
        return key, current.get(key, Missing)
    return component, Missing


class IndexMatcher(ComponentMatcher):
    allow_gaps = True

    def __init__(self, index):
        validate_index(index)
        self.index = index

    def test(self, component):
        return normalize_component(component) == normalize_component(self.index)

    def select(self, current):
        component, value = _select_literal(current, self.index)
        if value is not Missing:
            yield component, value

    def to_json(self):
        return index_to_string(self.index)

    def __eq__(self, other):
        return isinstance(other, IndexMatcher) and other.index == self.index

    def __hash__(self):
        return hash((IndexMatcher, self.index))

    def __repr__(self):
        return 'IndexMatcher(%r)' % (self.index,)


class PropertyMatcher(ComponentMatcher):

    def __init__(self, prop):
        validate_property(prop)
        self.prop = prop

    def test(self, component):
        return normalize_component(component) == self.prop

    def select(self, current):
        component, value = _select_literal(current, self.prop)
        if value is not Missing:
            yield component, value

    def to_json(self):
        return property_to_string(self.prop)

    def __eq__(self, other):
        return isinstance(other, PropertyMatcher) and other.prop == self.prop

    def __hash__(self):
        return hash((PropertyMatcher, self.prop))

    def __repr__(self):
        return 'PropertyMatcher(%r)' % (self.prop,)


class UnionMatcher(ComponentMatcher):
    """Matches any of a set of literal components.

    Members may mix properties and indexes. Members naming the same
    component (0 and "0") select it once.
    """

    def __init__(self, components):
        components = tuple(components)
        if len(components) < 2:
            raise InvalidPathError(
                'Expected at least 2 components in a union, got %r' % (components,))
        for component in components:
            validate_component(component)
        self.components = components
        self._normalized = frozenset(normalize_component(c) for c in components)

    @property
    def allow_gaps(self):
        return any(is_index(c) for c in self.components)

    def test(self, component):
        return normalize_component(component) in self._normalized

    def select(self, current):
        seen = set()
        for member in self.components:
            component, value = _select_literal(current, member)
            if value is Missing or component in seen:
                continue
            seen.add(component)
            yield component, value

    def to_json(self):
        return '[%s]' % ','.join(
            json.dumps(c, ensure_ascii=False) for c in self.components)

    def __eq__(self, other):
        return isinstance(other, UnionMatcher) and other.components == self.components

    def __hash__(self):
        return hash((UnionMatcher, self.components))

    def __repr__(self):
        return 'UnionMatcher(%r)' % (list(self.components),)


class _AnyIndex(ComponentMatcher):
    allow_gaps = True

    def test(self, component):
        return is_index(component)

    def select(self, current):
        if isinstance(current, list):
            for i, value in enumerate(current):
                if value is not Missing:
                    yield i, value

    def to_json(self):
        return '[*]'

    def __repr__(self):
        return 'AnyIndex'


class _AnyProperty(ComponentMatcher):

    def test(self, component):
        return isinstance(component, str)

    def select(self, current):
        if isinstance(current, dict):
            for key, value in current.items():
                if isinstance(key, str) and value is not Missing:
                    yield key, value

    def to_json(self):
        return '.*'

    def __repr__(self):
        return 'AnyProperty'


AnyIndex = _AnyIndex()
AnyProperty = _AnyProperty()
