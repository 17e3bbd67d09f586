##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
StructStash CLI Commands Package.

Each module encapsulates the logic and argument parsing for one command,
following a consistent structure built around the `CommandEntryPoint` interface.

Modules:
    command_entry_point: Defines the abstract base class `CommandEntryPoint` for all CLI commands.
    demo: Implements the `demo` command that compares the three encodings side by side.
    read: Implements the `read` command for reading a stored record back.
    set_path: Implements the `set-path` command for writing one path of a JSON document.
    write: Implements the `write` command for storing a record with a chosen encoding.
"""

from structstash.cli.commands.demo import DemoCommand
from structstash.cli.commands.read import ReadCommand
from structstash.cli.commands.set_path import SetPathCommand
from structstash.cli.commands.write import WriteCommand


# Keep these in alphabetical order
ALL_COMMANDS = [
    DemoCommand(),
    ReadCommand(),
    SetPathCommand(),
    WriteCommand(),
]
