# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.


class _MissingType(object):
    """Sentinel for an absent value, allowing None to be a real value.

    Array holes left behind by Path.set hold this value.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(_MissingType, cls).__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'Missing'

    def __bool__(self):
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_MissingType, ())


Missing = _MissingType()


class ChangeOp:
    "Collection of valid values for the op of a change."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"


class Change(object):
    """A difference found at a single path.

    Whether a change has an old or a new value is tracked separately
    from the values themselves, so a present value of None (or Missing,
    with a permissive filter) is distinguishable from no value at all.
    """
    __slots__ = ('_path', '_values')

    _fields = ('old_value', 'new_value')

    def __init__(self, path, **values):
        for key in values:
            if key not in Change._fields:
                raise TypeError('Unexpected Change field %r' % (key,))
        object.__setattr__(self, '_path', path)
        object.__setattr__(self, '_values', dict(values))

    def __setattr__(self, name, value):
        raise AttributeError('Change is immutable')

    @property
    def path(self):
        return self._path

    @property
    def has_old_value(self):
        return 'old_value' in self._values

    @property
    def has_new_value(self):
        return 'new_value' in self._values

    @property
    def old_value(self):
        return self._values.get('old_value', Missing)

    @property
    def new_value(self):
        return self._values.get('new_value', Missing)

    @property
    def op(self):
        if self.has_old_value and self.has_new_value:
            return ChangeOp.REPLACE
        elif self.has_new_value:
            return ChangeOp.ADD
        return ChangeOp.REMOVE

    def reversed(self):
        "Return the change undoing this one."
        values = {}
        if self.has_old_value:
            values['new_value'] = self.old_value
        if self.has_new_value:
            values['old_value'] = self.new_value
        return Change(self._path, **values)

    def to_dict(self):
        d = {'path': self._path.to_json()}
        d.update(self._values)
        return d

    def __eq__(self, other):
        if not isinstance(other, Change):
            return NotImplemented
        return self._path == other._path and self._values == other._values

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        fields = ''.join(
            ', %s=%r' % (key, self._values[key])
            for key in Change._fields if key in self._values)
        return 'Change(%s%s)' % (self._path.to_json(), fields)
