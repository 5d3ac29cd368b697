# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Parsing of textual paths and path patterns.

Paths use the canonical string form produced by Path.to_json:

    $.name[0]["not an identifier"]['single quoted']

Patterns additionally accept the wildcards `.*` (any property) and
`[*]` (any index), and unions of literals such as `[0,"a",b]`.
"""

import json
import re

from .log import PathParseError
from .matchers import AnyIndex, AnyProperty, IndexMatcher, PropertyMatcher, UnionMatcher
from .path import Path
from .pathmatcher import PathMatcher

__all__ = ["parse_path", "parse_path_matcher"]


_token_re = re.compile(r"""
    (?P<qstring>'(?:\\.|[^'\\])*')
  | (?P<qqstring>"(?:\\.|[^"\\])*")
  | (?P<integer>[0-9]+)
  | (?P<property>[a-zA-Z_][a-zA-Z0-9_]*)
  | (?P<punct>[$\[\].,*])
  | (?P<space>\s+)
""", re.VERBOSE)

_single_quote_escapes = re.compile(r"""\\'|"|\\.""")


def _decode_qqstring(token):
    return json.loads(token)


def _decode_qstring(token):
    # Translate to a double quoted JSON string: \' needs no escape
    # there, while a bare " does
    def repl(m):
        s = m.group(0)
        if s == "\\'":
            return "'"
        if s == '"':
            return '\\"'
        return s
    return json.loads('"' + _single_quote_escapes.sub(repl, token[1:-1]) + '"')


def tokenize(text):
    """Split text into (kind, value, position) tuples.

    Raises PathParseError on characters that start no token.
    """
    tokens = []
    pos = 0
    while pos < len(text):
        m = _token_re.match(text, pos)
        if m is None:
            raise PathParseError(
                'Unexpected character %r at position %d in %r' % (text[pos], pos, text))
        kind = m.lastgroup
        value = m.group(kind)
        if kind == 'punct':
            kind = value
        if kind != 'space':
            tokens.append((kind, value, pos))
        pos = m.end()
    return tokens


class _Parser(object):

    def __init__(self, text, allow_patterns):
        self.text = text
        self.allow_patterns = allow_patterns
        self.tokens = tokenize(text)
        self.pos = 0

    def peek(self):
        if self.pos < len(self.tokens):
            return self.tokens[self.pos][0]
        return None

    def next(self, *kinds):
        if self.pos >= len(self.tokens):
            raise PathParseError(
                'Unexpected end of %r, expected one of %s' % (self.text, ', '.join(kinds)))
        kind, value, position = self.tokens[self.pos]
        if kind not in kinds:
            raise PathParseError(
                'Unexpected %r at position %d in %r, expected one of %s' % (
                    value, position, self.text, ', '.join(kinds)))
        self.pos += 1
        return kind, value

    def parse(self):
        self.next('$')
        components = []
        while self.peek() is not None:
            kind, _ = self.next('.', '[')
            if kind == '.':
                components.append(self.parse_property())
            else:
                components.append(self.parse_bracket())
                self.next(']')
        return components

    def parse_property(self):
        if self.allow_patterns:
            kind, value = self.next('property', '*')
            if kind == '*':
                return AnyProperty
            return PropertyMatcher(value)
        return self.next('property')[1]

    def parse_literal(self, kind, value):
        if kind == 'integer':
            return int(value)
        try:
            if kind == 'qqstring':
                return _decode_qqstring(value)
            elif kind == 'qstring':
                return _decode_qstring(value)
        except ValueError as e:
            raise PathParseError('Invalid string %s in %r: %s' % (value, self.text, e))
        return value

    def parse_bracket(self):
        if not self.allow_patterns:
            kind, value = self.next('integer', 'qqstring', 'qstring')
            return self.parse_literal(kind, value)

        kind, value = self.next('integer', 'qqstring', 'qstring', 'property', '*')
        if kind == '*':
            return AnyIndex
        first = self.parse_literal(kind, value)
        if self.peek() != ',':
            if kind == 'property':
                raise PathParseError(
                    'Unexpected %r in %r, identifiers in brackets are only '
                    'allowed in unions' % (value, self.text))
            if kind == 'integer':
                return IndexMatcher(first)
            return PropertyMatcher(first)

        members = [first]
        while self.peek() == ',':
            self.next(',')
            members.append(self.parse_literal(
                *self.next('integer', 'qqstring', 'qstring', 'property')))
        return UnionMatcher(members)


def parse_path(text):
    "Parse the canonical string form of a path into a Path."
    return Path.of(*_Parser(text, allow_patterns=False).parse())


def parse_path_matcher(text):
    "Parse a path pattern into a PathMatcher."
    return PathMatcher(_Parser(text, allow_patterns=True).parse())
