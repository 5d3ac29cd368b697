# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    add_generic_args, add_projection_args, add_filename_args, add_output_args,
    ConfigBackedParser,
    )
from .log import PathParseError, error
from .parsing import parse_path_matcher
from .projection import Projection
from .utils import read_json, setup_std_streams


_description = "Keep or drop parts of a json document by path patterns."


def main_project(args):
    if not os.path.exists(args.file):
        print("Missing file {}".format(args.file))
        return 1
    try:
        includes = [parse_path_matcher(p) for p in args.include]
        excludes = [parse_path_matcher(p) for p in args.exclude]
    except PathParseError as e:
        error("Invalid pattern: %s", e)
        return 1

    value = read_json(args.file)
    result = Projection.of(includes, excludes).map(value)

    if args.out:
        with open(args.out, "w") as f:
            json.dump(result, f, indent=2, separators=(",", ": "))
    else:
        print(json.dumps(result, indent=2, separators=(",", ": ")))
    return 0


def _build_arg_parser(prog='pathdiff-project'):
    """Creates an argument parser for the project command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_projection_args(parser)
    add_filename_args(parser, ["file"])
    add_output_args(parser)
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_project(arguments)


if __name__ == "__main__":
    sys.exit(main())
