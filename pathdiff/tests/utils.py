# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from pathdiff import changeset, patch, apply_patch


def check_patch(a, b):
    "Check that applying patch(a, b) to a copy of a reproduces b."
    result = apply_patch(copy.deepcopy(a), patch(a, b))
    assert result == b


def check_symmetric_patch(a, b):
    "Check that patching works from a to b and vice versa."
    check_patch(a, b)
    check_patch(b, a)


def check_symmetric_changeset(a, b):
    """Check that changeset(b, a) is changeset(a, b) with every change reversed."""
    forward = changeset(a, b)
    backward = changeset(b, a)
    assert set(forward) == set(backward)
    for key, change in forward.items():
        assert backward[key] == change.reversed()


def assert_clean_exit(main, args):
    assert 0 == main(args)
