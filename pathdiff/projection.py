# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .diff_format import Missing
from .pathmatcher import PathMatcher
from .utils import empty_container

__all__ = ["Projection", "projection", "json_clone"]


json_scalar_types = (str, int, float, bool, type(None))


def _json_key(key):
    if isinstance(key, str):
        return key
    if isinstance(key, (int, float)) and not isinstance(key, bool):
        return str(key)
    raise TypeError('keys must be str, int or float, not %s' % type(key).__name__)


def _json_clone(key, value, replacer):
    to_json = getattr(value, 'to_json', None)
    if callable(to_json):
        value = to_json()
    if callable(replacer):
        value = replacer(key, value)

    if isinstance(value, dict):
        clone = {}
        if isinstance(replacer, (list, tuple)):
            keys = [str(k) for k in replacer if str(k) in value]
        else:
            keys = list(value)
        for k in keys:
            item = _json_clone(_json_key(k), value[k], replacer)
            # values without a JSON representation are left out of objects
            if item is not Missing:
                clone[_json_key(k)] = item
        return clone
    elif isinstance(value, (list, tuple)):
        clone = []
        for i, item in enumerate(value):
            item = _json_clone(str(i), item, replacer)
            # ... and become null in arrays
            clone.append(None if item is Missing else item)
        return clone
    elif value is Missing or callable(value):
        return Missing
    elif isinstance(value, json_scalar_types):
        return value
    raise TypeError('Object of type %s is not JSON serializable' % type(value).__name__)


def json_clone(value, replacer=None):
    """Deep clone value the way a JSON round trip would.

    Objects with a to_json() method are replaced by its result. replacer is
    either a function (key, value) -> value applied to every value, or a
    list of the keys to keep in every dict. Missing values and callables
    are dropped from dicts and become None in lists; other values without
    a JSON representation raise TypeError.
    """
    return _json_clone('', value, replacer)


def remove_gaps(value):
    "Remove the Missing holes of all lists within value."
    if isinstance(value, list):
        return [remove_gaps(item) for item in value if item is not Missing]
    if isinstance(value, dict):
        return {key: remove_gaps(item) for key, item in value.items()}
    return value


def validate_path_matcher(value):
    if not isinstance(value, PathMatcher):
        raise TypeError('Expected an instance of PathMatcher, got %r' % (value,))
    return value


class Projection(object):
    """Include/exclude filter of json-like values.

    With includes, only the nodes matched by any include pattern are kept.
    Nodes matched by any exclude pattern are then removed. The input value
    is never modified.
    """
    __slots__ = ('_includes', '_excludes', '_allow_gaps')

    def __init__(self, includes=(), excludes=()):
        includes = tuple(validate_path_matcher(m) for m in includes)
        excludes = tuple(validate_path_matcher(m) for m in excludes)
        object.__setattr__(self, '_includes', includes)
        object.__setattr__(self, '_excludes', excludes)
        object.__setattr__(self, '_allow_gaps', any(
            m.allow_gaps for m in includes + excludes))

    @classmethod
    def of(cls, includes=None, excludes=None):
        return cls(includes or (), excludes or ())

    def __setattr__(self, name, value):
        raise AttributeError('Projection is immutable')

    @property
    def includes(self):
        return self._includes

    @property
    def excludes(self):
        return self._excludes

    def map(self, value):
        if self._includes:
            source = json_clone(value)
            output = empty_container(source)
            if output is Missing:
                output = {}
            for matcher in self._includes:
                for node in matcher.find(source):
                    output = node.path.set(output, node.value)
        elif self._excludes:
            output = json_clone(value)
        else:
            output = value

        for matcher in self._excludes:
            for node in matcher.find(output):
                output = node.path.unset(output)

        if self._allow_gaps:
            output = remove_gaps(output)
        return output

    def __call__(self, value):
        return self.map(value)

    def match(self, path):
        "Whether the value at path would be kept by this projection."
        if self._includes:
            if not any(m.partial_match(path) for m in self._includes):
                return False
        if any(m.prefix_match(path) for m in self._excludes):
            return False
        return True


def projection(includes=None, excludes=None):
    "Return a function mapping values through a Projection."
    return Projection.of(includes, excludes).map
