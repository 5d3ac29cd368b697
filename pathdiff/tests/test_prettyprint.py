# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
from io import StringIO

from pathdiff import prettyprint as pp
from pathdiff import Change, Node, Path, changeset


def TestConfig(use_color=True):
    return pp.PrettyPrintConfig(out=StringIO(), use_color=use_color)


def test_pretty_print_dict_complex():
    d = {
        'a': 5,
        'b': [1, 2, 3],
        'c': {
            'x': 'y',
        },
        'd': 10,
        'short': 'text',
        'long': 'long\ntext',
    }
    prefix = '-'

    config = TestConfig()
    pp.pretty_print_dict(d, {'d'}, prefix, config)
    text = config.out.getvalue()

    for key in d:
        if key != 'd':
            mark = '-%s:' % key
            assert mark in text
    assert "short: text" in text
    assert 'long:\n' in text
    assert 'd:' not in text


def test_pretty_print_long_strings_unchanged():
    ins = "QUJD" * 64
    assert _pretty_print(ins, "+") == "+" + ins + "\n"


def test_pretty_print_multiline_string_long():
    ins = '\n'.join('line %i' % i for i in range(64))
    prefix = '+'
    config = TestConfig()
    pp.pretty_print_value(ins, prefix, config)
    text = config.out.getvalue()
    lines = text.splitlines(False)
    assert len(lines) == 64
    assert (prefix + 'line 32') in lines


def test_format_value():
    assert pp.format_value(5) == "5"
    assert pp.format_value("xyz") == "xyz"
    assert pp.format_value(None) == "None"


def _pretty_print(value, prefix="+"):
    config = TestConfig()
    pp.pretty_print_value(value, prefix, config)
    return config.out.getvalue()


def test_pretty_print_str():
    assert _pretty_print("x", "+") == "+x\n"


def test_pretty_print_dict():
    assert _pretty_print({'key': 5}, "+") == "+key: 5\n"


def test_pretty_print_dict_longstrings():
    d = {"0": 'a\nb', "1": 'c\nd'}
    text = _pretty_print(d, "+")
    assert text == "+0:\n+  a\n+  b\n+1:\n+  c\n+  d\n"


def test_pretty_print_list():
    assert _pretty_print(['a', 'b'], "+") == "+['a', 'b']\n"


def test_pretty_print_empty_containers():
    assert _pretty_print({}, "-") == "-{}\n"
    assert _pretty_print([], "-") == "-[]\n"


def _print_change(change):
    config = TestConfig(use_color=False)
    pp.pretty_print_change(change, config)
    return config.out.getvalue()


def test_pretty_print_change_added():
    text = _print_change(Change(Path.of('a', 0), new_value='x'))
    assert text == "## added $.a[0]:\n+  x\n\n"


def test_pretty_print_change_deleted():
    text = _print_change(Change(Path.of('not valid'), old_value={'k': 1}))
    assert text == '## deleted $["not valid"]:\n-  k: 1\n\n'


def test_pretty_print_change_replaced():
    text = _print_change(Change(Path.of('a'), old_value=1, new_value=2))
    assert text == "## replaced $.a:\n-  1\n+  2\n\n"


def test_pretty_print_change_type_changed():
    text = _print_change(Change(Path.of('a'), old_value=1, new_value='1'))
    assert text.startswith(
        "## replaced (type changed from int to str) $.a:\n")


def test_pretty_print_change_colors():
    config = TestConfig(use_color=True)
    pp.pretty_print_change(Change(Path.of('a'), new_value=1), config)
    text = config.out.getvalue()
    assert config.ADD in text
    assert config.RESET in text


def test_pretty_print_changeset(filespath):
    afn = os.path.join(filespath, "person--1.json")
    config = TestConfig(use_color=False)
    changes = changeset({'a': 1, 'b': [1]}, {'a': 2, 'b': []})
    pp.pretty_print_changeset(afn, 'other.json', changes, config)
    lines = config.out.getvalue().splitlines()
    assert lines[0] == 'pathdiff %s other.json' % afn
    assert lines[1].startswith('--- %s  ' % afn)
    assert lines[2] == '+++ other.json  (no timestamp)'
    assert '## replaced $.a:' in lines
    assert '## deleted $.b[0]:' in lines


def test_pretty_print_changeset_no_changes():
    config = TestConfig()
    pp.pretty_print_changeset('a.json', 'b.json', changeset({'a': 1}, {'a': 1}), config)
    assert config.out.getvalue() == ''


def test_pretty_print_nodes():
    config = TestConfig()
    pp.pretty_print_nodes([
        Node(Path.of('a'), 'text'),
        Node(Path.of('b', 1), [1, 2]),
        Node(Path.of('c'), {'d': None}),
    ], config)
    assert config.out.getvalue() == (
        "$.a: text\n"
        "$.b[1]:\n  [1, 2]\n"
        "$.c:\n  d: None\n"
    )


def test_pretty_print_long_list_items():
    li = ['line\n%d' % i for i in range(3)]
    text = _pretty_print(li, "-")
    assert text.startswith("-[0]:\n-  line\n-  0\n-[1]:\n")


def test_pretty_print_dict_keeps_order():
    assert _pretty_print({'b': 1, 'a': 2}, "") == "b: 1\na: 2\n"
