# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import re

from .diff_format import Missing
from .log import InvalidPathError
from .utils import container_type, components_equal, normalize_component

__all__ = ["Path"]


identifier_pattern = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*\Z")


def is_index(component):
    # bool is an int subclass but never a valid index
    return isinstance(component, int) and not isinstance(component, bool)


def validate_index(index):
    if not is_index(index):
        raise InvalidPathError(
            'Expected index to be an integer, got %r' % (index,))
    if index < 0:
        raise InvalidPathError('Expected index to be an integer >= 0, got %r' % (index,))


def validate_property(prop):
    if not isinstance(prop, str):
        raise InvalidPathError(
            'Expected property to be a string, got %r' % (prop,))


def validate_component(component):
    if is_index(component):
        validate_index(component)
    elif not isinstance(component, str):
        raise InvalidPathError(
            'Expected component to be a string or an integer, got %s: %r' % (
                type(component).__name__, component))


def is_valid_identifier(name):
    return identifier_pattern.match(name) is not None


def index_to_string(index):
    return '[%d]' % index


def property_to_string(prop):
    if is_valid_identifier(prop):
        return '.' + prop
    # JSON string escaping with double quotes is the canonical form
    return '[' + json.dumps(prop, ensure_ascii=False) + ']'


def component_to_string(component):
    if is_index(component):
        return index_to_string(component)
    return property_to_string(component)


class rootedmethod(object):
    """Method that extends Path.ROOT when called on the class itself.

    `Path.index(0)` is then the same as `Path.ROOT.index(0)`.
    """

    def __init__(self, func):
        self.func = func
        self.__doc__ = func.__doc__

    def __get__(self, instance, owner):
        if instance is None:
            instance = owner.ROOT
        return self.func.__get__(instance, owner)


class Path(object):
    """Immutable address of a location inside a JSON-like tree.

    A path is a sequence of components: integers index into lists and
    strings name properties of dicts. All operations deriving a new path
    return a new instance, so paths can be shared freely.
    """
    __slots__ = ('_components',)

    ROOT = None

    def __init__(self, components=()):
        components = tuple(components)
        for component in components:
            validate_component(component)
        object.__setattr__(self, '_components', components)

    @classmethod
    def _of_valid(cls, components):
        if not components and cls.ROOT is not None:
            return cls.ROOT
        path = object.__new__(cls)
        object.__setattr__(path, '_components', components)
        return path

    def __setattr__(self, name, value):
        raise AttributeError('Path is immutable')

    @classmethod
    def of(cls, *components):
        if not components:
            return cls.ROOT
        return cls(components)

    @property
    def components(self):
        return self._components

    @rootedmethod
    def index(self, index):
        "Extend with a list index."
        validate_index(index)
        return Path._of_valid(self._components + (index,))

    # Keep below all @property uses, it shadows the builtin in the class body
    @rootedmethod
    def property(self, prop):
        "Extend with a property name."
        validate_property(prop)
        return Path._of_valid(self._components + (prop,))

    def child(self, component):
        validate_component(component)
        return Path._of_valid(self._components + (component,))

    def parent(self):
        "The path without its last component, None for the root."
        if not self._components:
            return None
        return Path._of_valid(self._components[:-1])

    def concat(self, other):
        return Path._of_valid(self._components + other._components)

    def connect_to(self, prefix):
        return Path._of_valid(prefix._components + self._components)

    def component_at(self, i):
        return self._components[i]

    def __len__(self):
        return len(self._components)

    def __iter__(self):
        return iter(self._components)

    def equals(self, other):
        if other is None or len(self) != len(other):
            return False
        return all(components_equal(a, b) for a, b in zip(self, other))

    def __eq__(self, other):
        if not isinstance(other, Path):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(tuple(normalize_component(c) for c in self._components))

    def to_json(self):
        return '$' + ''.join(component_to_string(c) for c in self._components)

    def __str__(self):
        return self.to_json()

    def __repr__(self):
        return 'Path(%r)' % (self.to_json(),)

    def get(self, root, default=None):
        """Resolve the path against root.

        Returns default when the path does not resolve: a property of a
        non-dict, an index of a non-list, or a missing key or index.
        """
        current = root
        for component in self._components:
            if is_index(component):
                if not isinstance(current, list) or component >= len(current):
                    return default
            elif not isinstance(current, dict) or component not in current:
                return default
            current = current[component]
        if current is Missing:
            return default
        return current

    def set(self, root, value):
        """Set value at this path within root, modifying root in place.

        Intermediate containers are created as needed: a list for an index
        component and a dict for a property component. If root is None a new
        container is created; the possibly new root is returned.

        Setting Missing deletes the value. Trailing holes of a list are
        truncated and no containers are created for a deletion.
        """
        if not self._components:
            return value
        deleting = value is Missing
        if root is None or root is Missing:
            if deleting:
                return root
            root = self._new_container(0)
        elif container_type(root) is None:
            if deleting:
                return root
            raise InvalidPathError(
                'Cannot set %s: root is a %s, not a container' % (
                    self, type(root).__name__))

        current = root
        for i, component in enumerate(self._components[:-1]):
            child = self._child_of(current, component, deleting)
            if child is None or child is Missing:
                if deleting:
                    return root
                child = self._new_container(i + 1)
                self._put(current, component, child)
            elif container_type(child) is None:
                if deleting:
                    return root
                raise InvalidPathError(
                    'Cannot set %s: value at %s is a %s, not a container' % (
                        self, Path._of_valid(self._components[:i + 1]),
                        type(child).__name__))
            current = child

        last = self._components[-1]
        if deleting:
            self._delete(current, last)
        else:
            self._put(current, last, value)
        return root

    def unset(self, root):
        return self.set(root, Missing)

    def _new_container(self, i):
        if is_index(self._components[i]):
            return []
        return {}

    def _child_of(self, container, component, deleting):
        if isinstance(container, list):
            if not is_index(component):
                if deleting:
                    return Missing
                raise InvalidPathError(
                    'Cannot set %s: property %r of a list' % (self, component))
            if component < len(container):
                return container[component]
            return Missing
        # An existing dict keeps its type, indexes become string keys
        return container.get(normalize_component(component), Missing)

    def _put(self, container, component, value):
        if isinstance(container, list):
            if not is_index(component):
                raise InvalidPathError(
                    'Cannot set %s: property %r of a list' % (self, component))
            if component >= len(container):
                container.extend([Missing] * (component + 1 - len(container)))
            container[component] = value
        else:
            container[normalize_component(component)] = value

    def _delete(self, container, component):
        if isinstance(container, list):
            if is_index(component) and component < len(container):
                container[component] = Missing
                while container and container[-1] is Missing:
                    container.pop()
        else:
            container.pop(normalize_component(component), None)


Path.ROOT = Path._of_valid(())
