# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import Change
from ..log import UnsupportedValueError, debug
from ..matchers import Node
from ..path import Path
from ..utils import container_type, empty_container

from .config import DiffConfig

__all__ = [
    "Diff", "changeset", "changed_paths", "all_paths", "paths_and_values",
    "collect_paths_and_values", "iter_paths_and_values", "patch", "apply_patch",
]


class ContainerMarker(object):
    """Placeholder leaf standing for a dict or list node itself.

    Only emitted when include_objects is enabled, and always replaced by a
    new empty container before leaving this module.
    """

    def __init__(self, kind):
        self.kind = kind

    def empty(self):
        return [] if self.kind == 'array' else {}

    def __repr__(self):
        return '<%s marker>' % self.kind


OBJECT_MARKER = ContainerMarker('object')
ARRAY_MARKER = ContainerMarker('array')

_markers = {'object': OBJECT_MARKER, 'array': ARRAY_MARKER}


def scalar_value(value):
    if isinstance(value, ContainerMarker):
        return value.empty()
    return value


def iter_paths_and_values(value, config=None, path=Path.ROOT):
    """Generate the leaves of value as (canonical path, Node) in pre-order.

    Values rejected by the config filter are skipped with their whole
    subtree. Dicts and lists are recursed into, and produce a container
    marker leaf themselves if config.include_objects is set.
    """
    if config is None:
        config = DiffConfig()

    if not config.accepts(path, value):
        return
    if config.is_leaf(value, path):
        yield path.to_json(), Node(path, value)
        return

    kind = container_type(value)
    if kind is None:
        raise UnsupportedValueError(
            'only primitives, arrays and plain objects are supported, '
            'got "%s"' % type(value).__name__)

    if config.include_objects:
        yield path.to_json(), Node(path, _markers[kind])

    if kind == 'array':
        for i, item in enumerate(value):
            for leaf in iter_paths_and_values(item, config, path.index(i)):
                yield leaf
    else:
        for key, item in value.items():
            if not isinstance(key, str):
                raise UnsupportedValueError(
                    'only string keys are supported in objects, '
                    'got "%s" at %s' % (type(key).__name__, path.to_json()))
            for leaf in iter_paths_and_values(item, config, path.property(key)):
                yield leaf


def collect_paths_and_values(value, config=None):
    "Map canonical path strings to the leaf Nodes of value, in pre-order."
    return dict(iter_paths_and_values(value, config))


def _leaves_equal(a, b, path, config):
    if isinstance(a, ContainerMarker) or isinstance(b, ContainerMarker):
        return a is b
    return config.values_equal(a, b, path)


def changeset(before, after, config=None):
    """Compute the changes between two json-like values.

    Returns a dict from canonical path string to Change. Paths found in
    after come first, in the pre-order of after, followed by the paths
    removed from before, in the pre-order of before.
    """
    if config is None:
        config = DiffConfig()

    remaining = collect_paths_and_values(before, config)
    debug("Collected %d leaves of the base value", len(remaining))

    changes = {}
    for key, node in iter_paths_and_values(after, config):
        if key in remaining:
            old = remaining.pop(key).value
            if not _leaves_equal(old, node.value, node.path, config):
                changes[key] = Change(
                    node.path,
                    old_value=scalar_value(old),
                    new_value=scalar_value(node.value))
        else:
            changes[key] = Change(node.path, new_value=scalar_value(node.value))

    for key, node in remaining.items():
        changes[key] = Change(node.path, old_value=scalar_value(node.value))

    debug("Found %d changes", len(changes))
    return changes


def changed_paths(before, after, config=None):
    return set(changeset(before, after, config))


def all_paths(value, config=None):
    "Canonical paths of all leaves reachable in value."
    return changed_paths(empty_container(value), value, config)


def paths_and_values(value, config=None):
    return {
        key: Node(node.path, scalar_value(node.value))
        for key, node in iter_paths_and_values(value, config)
    }


def patch(before, after, config=None):
    """Compute the list of Nodes that turn before into after.

    Applying them in order with Path.set (see apply_patch) to a copy of
    before produces after. A node with value Missing is a deletion.
    Deletions come first, so that removing [0] from a list can not
    delete the "0" key of a dict replacing that list.
    """
    if config is None:
        config = DiffConfig()
    config = config.replace(include_objects=True)
    changes = list(changeset(before, after, config).values())
    removed = [c for c in changes if not c.has_new_value]
    updated = [c for c in changes if c.has_new_value]
    return [Node(change.path, change.new_value) for change in removed + updated]


def apply_patch(root, patch):
    "Apply a patch from Diff.patch to root, modifying it in place where possible."
    for node in patch:
        root = node.path.set(root, node.value)
    return root


class Diff:
    """Structural differ with a fixed configuration.

    The configuration holds no state from one call to the next, so a
    single instance can be reused for any number of diffs.
    """

    def __init__(self, config=None, **kwargs):
        if config is None:
            config = DiffConfig(**kwargs)
        elif kwargs:
            config = config.replace(**kwargs)
        self.config = config

    def changeset(self, before, after):
        return changeset(before, after, self.config)

    def changed_paths(self, before, after):
        return changed_paths(before, after, self.config)

    def all_paths(self, value):
        return all_paths(value, self.config)

    def paths_and_values(self, value):
        return paths_and_values(value, self.config)

    def patch(self, before, after):
        return patch(before, after, self.config)
