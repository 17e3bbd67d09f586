##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
StructStash CLI `write` command module.

This module defines the `WriteCommand` class, which builds a record from the
command line and stores it under a key with the chosen encoding.
"""

import logging
from argparse import ArgumentParser, Namespace

from structstash.backends.redis.redis_backend import ENCODINGS
from structstash.cli.commands.command_entry_point import CommandEntryPoint
from structstash.cli.utils import add_condition_arguments, open_persistence
from structstash.data_models import DetailModel, RecordModel


LOG = logging.getLogger("structstash")


class WriteCommand(CommandEntryPoint):
    """
    Handles the `write` CLI command for storing a record.

    Methods:
        add_parser: Adds the `write` command to the CLI parser.
        process_command: Builds the record and writes it.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `write` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `write` command parser will be added.
        """
        write: ArgumentParser = subparsers.add_parser("write", help="Store a record under a key.")
        write.set_defaults(func=self.process_command)
        write.add_argument("key", type=str, help="The key to store the record under.")
        write.add_argument(
            "-e",
            "--encoding",
            type=str,
            choices=ENCODINGS,
            default="json",
            help="How to store the record [Default: %(default)s]",
        )
        write.add_argument("--first", type=str, default=None, help="The first name of the record's detail.")
        write.add_argument("--last", type=str, default=None, help="The last name of the record's detail.")
        write.add_argument("--major", type=str, default=None, help="The major of the record's detail.")
        write.add_argument("--rank", type=int, default=0, help="The rank of the record [Default: %(default)s]")
        add_condition_arguments(write)

    def process_command(self, args: Namespace):
        """
        CLI command to store a record.

        A detail is attached when any of `--first`, `--last` or `--major` is given.
        `--nx`/`--xx` only apply to the `json` encoding.

        Args:
            args: Parsed command-line arguments.
        """
        detail_args = (args.first, args.last, args.major)
        info = None
        if any(value is not None for value in detail_args):
            info = DetailModel(*(value or "" for value in detail_args))
        record = RecordModel(info=info, rank=args.rank)

        kwargs = {}
        if args.encoding == "json":
            kwargs = {"nx": args.nx, "xx": args.xx}
        elif args.nx or args.xx:
            LOG.warning(f"--nx/--xx only apply to the 'json' encoding; ignoring them for '{args.encoding}'.")

        with open_persistence(args) as persistence:
            persistence.save(args.encoding, args.key, record, **kwargs)
        LOG.info(f"Stored record under '{args.key}' with encoding '{args.encoding}'.")
