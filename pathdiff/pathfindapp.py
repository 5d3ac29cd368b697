# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    add_generic_args, add_filename_args, add_prettyprint_args,
    ConfigBackedParser, prettyprint_config_from_args,
    )
from .log import PathParseError, error
from .parsing import parse_path_matcher
from .prettyprint import pretty_print_nodes
from .utils import read_json, setup_std_streams


_description = "Find the values of a json document matching a path pattern."


def main_find(args):
    if not os.path.exists(args.file):
        print("Missing file {}".format(args.file))
        return 1
    try:
        matcher = parse_path_matcher(args.pattern)
    except PathParseError as e:
        error("Invalid pattern: %s", e)
        return 1

    value = read_json(args.file)
    if args.first:
        node = matcher.find_first(value)
        nodes = [node] if node is not None else []
    else:
        nodes = matcher.find(value)

    class Printer:
        def write(self, text):
            print(text, end="")
    config = prettyprint_config_from_args(args, out=Printer())
    pretty_print_nodes(nodes, config)
    return 0


def _build_arg_parser(prog='pathdiff-find'):
    """Creates an argument parser for the find command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_prettyprint_args(parser)
    parser.add_argument(
        'pattern',
        help="the path pattern, e.g. '$.items[*].name'.")
    add_filename_args(parser, ["file"])
    parser.add_argument(
        '--first',
        action='store_true',
        default=False,
        help="only print the first match.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_find(arguments)


if __name__ == "__main__":
    sys.exit(main())
