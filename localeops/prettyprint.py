# -*- coding: utf-8 -*-

# Copyright (c) LocaleOps Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import sys

import colorama

from .delta_format import DeltaType
from .log import DeltaFormatError
from .resource_format import join_path


DELTA_ENTRY_END = '\n'

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
    def __init__(self, out=sys.stdout, use_color=True):
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


def format_location(delta):
    location = join_path(delta["path"])
    file_path = delta.get("file_path")
    if file_path:
        location = "{}:{}".format(file_path, location)
    return location


def pretty_print_delta(delta, config=DefaultConfig):
    t = delta["type"]
    config.out.write("{}{} {}{}\n".format(
        config.INFO, t, format_location(delta), config.RESET))
    if t == DeltaType.ADDED:
        config.out.write("{}{}{}\n".format(config.ADD, delta["value"], config.RESET))
    elif t == DeltaType.REMOVED:
        pass
    elif t == DeltaType.CHANGED:
        config.out.write("{}{}{}\n".format(config.REMOVE, delta["old_value"], config.RESET))
        config.out.write("{}{}{}\n".format(config.ADD, delta["new_value"], config.RESET))
    else:
        raise DeltaFormatError("Unknown delta type {}".format(t))
    config.out.write(DELTA_ENTRY_END)


def pretty_print_deltas(deltas, config=DefaultConfig):
    "Pretty-print a list of localeops deltas."
    for d in deltas:
        pretty_print_delta(d, config)
