
from ..diff_format import Missing
from ..utils import is_primitive


def default_filter(path, value):
    "Accept every value except Missing."
    return value is not Missing


def _is_number(x):
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def primitives_equal(a, b):
    "Strict equality of builtin primitives: 1 == 1.0, but True != 1."
    if a is b:
        return True
    if _is_number(a) and _is_number(b):
        return a == b
    return type(a) is type(b) and is_primitive(a) and a == b


class DiffConfig:
    """Set of predicates and options to pass around the differ.

    filter(path, value) prunes values (and their subtrees) from both sides
    of a diff. is_primitive(value, path) claims additional types as
    atomic leaves, and is_equal(a, b, path) is the fallback equality of
    leaves that are not strictly equal.
    """

    def __init__(self, *, filter=None, is_primitive=None, is_equal=None,
                 include_objects=False):
        self.filter = filter if filter is not None else default_filter
        self.is_primitive = is_primitive
        self.is_equal = is_equal
        self.include_objects = include_objects

    def accepts(self, path, value):
        return bool(self.filter(path, value))

    def is_leaf(self, value, path):
        "Return True for values that diff should treat as a single atomic value."
        if is_primitive(value):
            return True
        return self.is_primitive is not None and bool(self.is_primitive(value, path))

    def values_equal(self, a, b, path):
        if primitives_equal(a, b):
            return True
        return self.is_equal is not None and bool(self.is_equal(a, b, path))

    def replace(self, **kwargs):
        "Return a copy of this config with some options replaced."
        options = dict(
            filter=self.filter,
            is_primitive=self.is_primitive,
            is_equal=self.is_equal,
            include_objects=self.include_objects,
        )
        options.update(kwargs)
        return DiffConfig(**options)

    def __copy__(self):
        return self.replace()


def ignore_filter(matchers, inner=default_filter):
    """Make a filter rejecting the values at (or below) any of matchers.

    Values passing that test are then checked by inner.
    """
    matchers = tuple(matchers)

    def accept(path, value):
        if any(m.prefix_match(path) for m in matchers):
            return False
        return inner(path, value)
    return accept
