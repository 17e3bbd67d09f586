##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
StructStash CLI `set-path` command module.

This module defines the `SetPathCommand` class, which writes a single path of a
record stored with the `json` encoding.
"""

import logging
from argparse import ArgumentParser, Namespace

from structstash.cli.commands.command_entry_point import CommandEntryPoint
from structstash.cli.utils import add_condition_arguments, open_persistence, parse_json_value


LOG = logging.getLogger("structstash")


class SetPathCommand(CommandEntryPoint):
    """
    Handles the `set-path` CLI command for updating part of a JSON document.

    Methods:
        add_parser: Adds the `set-path` command to the CLI parser.
        process_command: Writes the value at the path.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `set-path` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `set-path` command parser will be added.
        """
        set_path: ArgumentParser = subparsers.add_parser(
            "set-path",
            help="Write one path of a record stored with the 'json' encoding.",
        )
        set_path.set_defaults(func=self.process_command)
        set_path.add_argument("key", type=str, help="The key of the JSON document.")
        set_path.add_argument("path", type=str, help="The path to write, e.g. info.Major.")
        set_path.add_argument("value", type=str, help='The value to write as JSON text, e.g. \'"EEE"\'.')
        add_condition_arguments(set_path)

    def process_command(self, args: Namespace):
        """
        CLI command to write one path of a JSON document.

        Args:
            args: Parsed command-line arguments.
        """
        value = parse_json_value(args.value)
        with open_persistence(args) as persistence:
            persistence.write_json_path(args.key, args.path, value, nx=args.nx, xx=args.xx)
        LOG.info(f"Set '{args.path}' of '{args.key}'.")
