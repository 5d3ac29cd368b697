# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import os
import pprint
import sys

import colorama

from .diff_format import ChangeOp


# Indentation offset in pretty-print
IND = "  "

# Lists with a shorter pprint form are printed on one line
MAXWIDTH = 78

DIFF_ENTRY_END = '\n'

ColoredConstants = namedtuple('ColoredConstants', (
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            ):
        self.out = out
        self.use_color = use_color

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def file_timestamp(filename):
    "Return modification time for filename as a string."
    if os.path.exists(filename):
        t = os.path.getmtime(filename)
        dt = datetime.datetime.fromtimestamp(t)
        return dt.isoformat(str(" "))
    else:
        return "(no timestamp)"


def format_value(v):
    "Format a leaf value for printing: strings as they are, pprint for the rest."
    if isinstance(v, str):
        return v
    return pprint.pformat(v)


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly complex value with all lines prefixed.

    Calls out to generic formatters based on value
    type for dicts, lists, and multiline strings.
    Uses format_value for simple values.
    """
    if isinstance(value, dict) and value:
        pretty_print_dict(value, (), prefix, config)
    elif isinstance(value, list) and value:
        pretty_print_list(value, prefix, config)
    else:
        pretty_print_multiline(format_value(value), prefix, config)


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_change_header(msg, path, config):
    "Print the `## <msg> <path>:` line opening a change."
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, path, config.RESET))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict):
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, (), prefix+IND, config)
    elif isinstance(v, list):
        pretty_print_key(k, prefix, config)
        pretty_print_list(v, prefix+IND, config)
    else:
        vstr = format_value(v)
        if "\n" in vstr:
            # Multiline strings
            pretty_print_key(k, prefix, config)
            for line in vstr.splitlines(False):
                config.out.write("%s%s\n" % (prefix+IND, line))
        else:
            # Singleline strings
            pretty_print_key_value(k, vstr, prefix, config)


def pretty_print_multiline(text, prefix="", config=DefaultConfig):
    assert isinstance(text, str), 'expected string argument'

    # Preprend prefix to lines, letting lines keep their own newlines
    lines = text.splitlines(True)
    for line in lines:
        config.out.write(prefix + line)

    # If the final line doesn't have a newline,
    # make sure we still start a new line
    if not text.endswith("\n"):
        config.out.write("\n")


def pretty_print_list(li, prefix="", config=DefaultConfig):
    listr = pprint.pformat(li)
    if len(listr) < MAXWIDTH - len(prefix) and "\\n" not in listr:
        config.out.write("%s%s\n" % (prefix, listr))
    else:
        for k, v in enumerate(li):
            pretty_print_item("[%d]" % k, v, prefix, config)


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys, in insertion order

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k, v in d.items():
        if k not in exclude_keys:
            pretty_print_item(k, v, prefix, config)


def pretty_print_change(change, config=DefaultConfig):
    "Pretty-print a single Change."
    path = change.path.to_json()
    op = change.op

    if op == ChangeOp.ADD:
        pretty_print_change_header("added", path, config)
        pretty_print_value(change.new_value, config.ADD, config)

    elif op == ChangeOp.REMOVE:
        pretty_print_change_header("deleted", path, config)
        pretty_print_value(change.old_value, config.REMOVE, config)

    else:
        aval = change.old_value
        bval = change.new_value
        if type(aval) is not type(bval):
            typechange = " (type changed from %s to %s)" % (
                aval.__class__.__name__, bval.__class__.__name__)
        else:
            typechange = ""
        pretty_print_change_header("replaced" + typechange, path, config)
        pretty_print_value(aval, config.REMOVE, config)
        pretty_print_value(bval, config.ADD, config)

    config.out.write(DIFF_ENTRY_END + config.RESET)


changeset_header = """\
pathdiff {afn} {bfn}
--- {afn}{atime}
+++ {bfn}{btime}
"""

def pretty_print_changeset(afn, bfn, changes, config=DefaultConfig):
    """Pretty-print a changeset

    Parameters
    ----------

    afn: str
        Filename of the base json document
    bfn: str
        Filename of the modified json document
    changes: dict
        The changeset from the base to the modified document
    config: PrettyPrintConfig
        Config object determining how and where things get printed
    """
    if changes:
        atime = "  " + file_timestamp(afn)
        btime = "  " + file_timestamp(bfn)
        config.out.write(changeset_header.format(
            afn=afn, bfn=bfn, atime=atime, btime=btime))
        for change in changes.values():
            pretty_print_change(change, config)


def pretty_print_nodes(nodes, config=DefaultConfig):
    "Pretty-print found nodes as path: value items."
    for node in nodes:
        pretty_print_item(node.path.to_json(), node.value, "", config)
