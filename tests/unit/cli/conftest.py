##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
Fixtures for the tests of the `structstash/cli/` folder.
"""

from argparse import ArgumentParser

import pytest

from structstash.cli.commands.command_entry_point import CommandEntryPoint
from tests.fixture_types import FixtureCallable


@pytest.fixture
def create_parser() -> FixtureCallable:
    """
    A fixture to help create a parser for any command.

    Returns:
        A function that creates a parser.
    """

    def _create_parser(cmd: CommandEntryPoint) -> ArgumentParser:
        """
        Returns an `ArgumentParser` configured with the `cmd` command.

        Returns:
            Parser with the `cmd` command registered.
        """
        parser = ArgumentParser()
        subparsers = parser.add_subparsers(dest="main_command")
        cmd.add_parser(subparsers)
        return parser

    return _create_parser


@pytest.fixture
def mock_open_persistence(mocker, persistence) -> FixtureCallable:
    """
    A fixture that replaces `open_persistence` in a command module with one that
    yields a `StructPersistence` over a mocked client.

    Args:
        mocker: PyTest mocker fixture.
        persistence: A fixture providing a StructPersistence instance.

    Returns:
        A function that patches the given command module and returns the patch.
    """

    def _mock_open_persistence(module: str):
        mock_open = mocker.patch(f"{module}.open_persistence")
        mock_open.return_value.__enter__.return_value = persistence
        return mock_open

    return _mock_open_persistence
