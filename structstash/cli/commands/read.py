##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
StructStash CLI `read` command module.

This module defines the `ReadCommand` class, which prints what's stored under a
key exactly as Redis returns it.
"""

import logging
from argparse import ArgumentParser, Namespace

from structstash.backends.redis.redis_backend import ENCODINGS
from structstash.cli.commands.command_entry_point import CommandEntryPoint
from structstash.cli.utils import open_persistence


LOG = logging.getLogger("structstash")


class ReadCommand(CommandEntryPoint):
    """
    Handles the `read` CLI command for printing a stored record.

    Methods:
        add_parser: Adds the `read` command to the CLI parser.
        process_command: Reads the key and prints the payload.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `read` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `read` command parser will be added.
        """
        read: ArgumentParser = subparsers.add_parser("read", help="Print the record stored under a key.")
        read.set_defaults(func=self.process_command)
        read.add_argument("key", type=str, help="The key to read.")
        read.add_argument(
            "-e",
            "--encoding",
            type=str,
            choices=ENCODINGS,
            default="json",
            help="How the record was stored [Default: %(default)s]",
        )
        read.add_argument(
            "-p",
            "--path",
            type=str,
            default="",
            help="JSON path to read, e.g. info.Major. Only applies to the 'json' encoding [Default: whole document]",
        )

    def process_command(self, args: Namespace):
        """
        CLI command to print a stored record.

        Args:
            args: Parsed command-line arguments.
        """
        kwargs = {"path": args.path} if args.encoding == "json" else {}
        with open_persistence(args) as persistence:
            payload = persistence.retrieve(args.encoding, args.key, **kwargs)

        if isinstance(payload, dict):
            for field, value in payload.items():
                print(f"{field}: {value}")
        else:
            print(payload)
