# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from pathdiff import (
    Path, PathMatcher, AnyIndex, AnyProperty, UnionMatcher, PathParseError,
    parse_path, parse_path_matcher,
)
from pathdiff.parsing import tokenize


def test_tokenize():
    kinds = [t[0] for t in tokenize('$.a[0]["b"]')]
    assert kinds == ['$', '.', 'property', '[', 'integer', ']', '[', 'qqstring', ']']


def test_parse_path():
    assert parse_path('$') is Path.ROOT
    assert parse_path('$.a[0].b_1') == Path.of('a', 0, 'b_1')
    assert parse_path('$["with space"][12]') == Path.of('with space', 12)
    assert parse_path("$['single']") == Path.of('single')
    assert parse_path("$['it\\'s']") == Path.of("it's")
    assert parse_path("$['say \"hi\"']") == Path.of('say "hi"')
    assert parse_path('$["tab\\there"]') == Path.of('tab\there')
    assert parse_path('$ . a [ 0 ]') == Path.of('a', 0)


def test_parse_path_keeps_index_kind():
    p = parse_path('$[0]["0"]')
    assert p.components == (0, '0')


@pytest.mark.parametrize('components', [
    (),
    ('a', 'b', 'c'),
    ('', 'ünïcode', 'new\nline', 'back\\slash', "qu'o\"tes"),
    (0, 1, 100, 'x'),
    ('1st', '$', '.', '[*]'),
])
def test_round_trip(components):
    p = Path.of(*components)
    assert parse_path(p.to_json()) == p
    assert parse_path(p.to_json()).components == p.components


@pytest.mark.parametrize('text', [
    '',
    'a.b',
    '$.',
    '$.0',
    '$[',
    '$[0',
    '$[-1]',
    '$["unterminated]',
    '$["bad \\q escape"]',
    '$.a b',
    '$.*',
    '$[*]',
    '$[0,1]',
    '$ ? ',
])
def test_parse_path_errors(text):
    with pytest.raises(PathParseError):
        parse_path(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_path('$.')


def test_parse_path_matcher():
    assert parse_path_matcher('$') == PathMatcher()
    assert parse_path_matcher('$.a[*].*') == PathMatcher.of('a', AnyIndex, AnyProperty)
    assert parse_path_matcher('$[0]["b"]') == PathMatcher.of(0, 'b')
    assert parse_path_matcher('$[0, "a", b, \'c d\']') == PathMatcher.of(
        UnionMatcher([0, 'a', 'b', 'c d']))


@pytest.mark.parametrize('matcher', [
    PathMatcher(),
    PathMatcher.of('a', AnyIndex, AnyProperty),
    PathMatcher.of(UnionMatcher([1, 'x y', 'z']), 'not an ident', 7),
])
def test_matcher_round_trip(matcher):
    assert parse_path_matcher(matcher.to_json()) == matcher


@pytest.mark.parametrize('text', [
    '$[a]',
    '$[0,]',
    '$[*,1]',
    '$.a[',
    '$a',
])
def test_parse_path_matcher_errors(text):
    with pytest.raises(PathParseError):
        parse_path_matcher(text)


def test_parse_path_matcher_finds():
    tree = {'cells': [{'source': 'a'}, {'source': 'b'}]}
    m = parse_path_matcher('$.cells[*].source')
    assert list(m.find_values(tree)) == ['a', 'b']
