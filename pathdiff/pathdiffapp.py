# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    add_generic_args, add_diff_args, add_filename_args, add_output_args,
    add_prettyprint_args, ConfigBackedParser, prettyprint_config_from_args,
    )
from .diffing import Diff, ignore_filter
from .log import PathParseError, error
from .parsing import parse_path_matcher
from .prettyprint import pretty_print_changeset
from .utils import EXPLICIT_MISSING_FILE, read_json, setup_std_streams


_description = "Compute the changes between two json documents."


def diff_from_args(args):
    """Build a Diff from the diff arguments.

    Raises PathParseError for invalid ignore patterns.
    """
    ignores = [parse_path_matcher(p) for p in (getattr(args, 'ignore', None) or ())]
    kwargs = dict(include_objects=getattr(args, 'include_objects', False))
    if ignores:
        kwargs['filter'] = ignore_filter(ignores)
    return Diff(**kwargs)


def main_diff(args):
    """Main handler of diff CLI"""
    output = getattr(args, 'out', None)
    base, remote = args.before, args.after

    # Check that if args are filenames they either exist, or are
    # explicitly marked as missing (added/removed):
    for fn in (base, remote):
        if (isinstance(fn, str) and not os.path.exists(fn) and
                fn != EXPLICIT_MISSING_FILE):
            print("Missing file {}".format(fn))
            return 1

    try:
        differ = diff_from_args(args)
    except PathParseError as e:
        error("Invalid ignore pattern: %s", e)
        return 1

    # Perform actual work:
    a = read_json(base, on_null='empty')
    b = read_json(remote, on_null='empty')

    changes = differ.changeset(a, b)

    # Output as JSON to file, or print to stdout:
    if output:
        with open(output, "w") as df:
            json.dump([c.to_dict() for c in changes.values()], df,
                      indent=2, separators=(",", ": "))
    else:
        # This printer is to keep the unit tests passing,
        # some tests capture output with capsys which doesn't
        # pick up on sys.stdout.write()
        class Printer:
            def write(self, text):
                print(text, end="")
        config = prettyprint_config_from_args(args, out=Printer())
        pretty_print_changeset(base, remote, changes, config)

    return 0


def _build_arg_parser(prog='pathdiff-diff'):
    """Creates an argument parser for the diff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["before", "after"])
    add_output_args(parser)
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
