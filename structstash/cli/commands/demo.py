##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
StructStash CLI `demo` command module.

This module defines the `DemoCommand` class, which writes the same sample record
with all three encodings, reads each one back, and prints what became of the
nested detail.
"""

# pylint: disable=duplicate-code

import logging
from argparse import ArgumentParser, Namespace

from structstash.backends.redis.redis_backend import StructPersistence
from structstash.backends.utils import deserialize_flat_entity
from structstash.cli.commands.command_entry_point import CommandEntryPoint
from structstash.cli.utils import open_persistence
from structstash.data_models import DetailModel, RecordModel


LOG = logging.getLogger("structstash")

HASH_KEY = "JohnDoeHash"
JSON_KEY = "JohnDoeJSON"
HASH_JSON_KEY = "JohnDoeHashJSON"


def sample_record() -> RecordModel:
    """
    Build the record used by the demo.

    Returns:
        John Doe, majoring in CSE, ranked first.
    """
    return RecordModel(info=DetailModel(first_name="John", last_name="Doe", major="CSE"), rank=1)


def describe(label: str, value: object) -> str:
    """
    Format one line of demo output.

    Args:
        label: The encoding label.
        value: What was read back for the nested detail.

    Returns:
        The value together with its type.
    """
    return f"[{label}] Record Info {value} [Type {type(value).__name__}]"


def run_demo(persistence: StructPersistence):
    """
    Store the sample record with every encoding and print what comes back for its detail.

    Args:
        persistence: The persistence facade bound to a live connection.
    """
    record = sample_record()

    persistence.write_flattened(HASH_KEY, record)
    persistence.write_json_native(JSON_KEY, record)

    # Only the string the detail was flattened to survives
    flat_record = persistence.read_flattened(HASH_KEY)
    print(describe("HASH", flat_record["info"]))
    print(describe("HASH rebuilt", deserialize_flat_entity(flat_record, RecordModel).info))

    native_record = RecordModel.from_json(persistence.read_json_native(JSON_KEY))
    print(describe("ReJSON", native_record.info))

    persistence.write_json_in_hash(HASH_JSON_KEY, record)
    hash_json_record = RecordModel.from_json(persistence.read_json_from_hash(HASH_JSON_KEY))
    print(describe("HSET JSON", hash_json_record.info))


class DemoCommand(CommandEntryPoint):
    """
    Handles the `demo` CLI command comparing the three storage encodings.

    Methods:
        add_parser: Adds the `demo` command to the CLI parser.
        process_command: Connects to Redis and runs the demo.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `demo` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `demo` command parser will be added.
        """
        demo: ArgumentParser = subparsers.add_parser(
            "demo",
            help=f"Store a sample record as '{HASH_KEY}', '{JSON_KEY}' and '{HASH_JSON_KEY}' and compare the results.",
        )
        demo.set_defaults(func=self.process_command)

    def process_command(self, args: Namespace):
        """
        CLI command to run the encoding comparison.

        Args:
            args: Parsed command-line arguments, which may include:\n
                - `server`: The `host:port` address of the Redis server.
        """
        with open_persistence(args) as persistence:
            LOG.info(f"Connected to Redis {persistence.get_version()}.")
            run_demo(persistence)
