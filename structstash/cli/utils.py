##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
Utility functions shared by the StructStash CLI commands.
"""

import json
import logging
from argparse import ArgumentParser, Namespace
from contextlib import contextmanager
from typing import Any, Iterator

from structstash.backends.redis.redis_backend import StructPersistence
from structstash.backends.redis.redis_connection import redis_connection
from structstash.config.configfile import load_app_config
from structstash.exceptions import RecordEncodingError


LOG = logging.getLogger("structstash")


@contextmanager
def open_persistence(args: Namespace) -> Iterator[StructPersistence]:
    """
    Connect to the store named by the CLI arguments (or by `app.yaml`) for the
    duration of a command.

    Args:
        args: Parsed CLI arguments. `server` overrides the configured address.

    Yields:
        A `StructPersistence` bound to a live connection.
    """
    config = load_app_config(address=getattr(args, "server", None))
    with redis_connection(config) as client:
        yield StructPersistence(client)


def add_condition_arguments(parser: ArgumentParser):
    """
    Add the mutually exclusive `--nx`/`--xx` flags of native JSON writes to `parser`.

    Args:
        parser: The command parser to extend.
    """
    condition = parser.add_mutually_exclusive_group()
    condition.add_argument(
        "--nx",
        action="store_true",
        default=False,
        help="Only write if nothing is stored at the target yet.",
    )
    condition.add_argument(
        "--xx",
        action="store_true",
        default=False,
        help="Only write if something is already stored at the target.",
    )


def parse_json_value(text: str) -> Any:
    """
    Decode a value given on the command line as JSON text.

    Args:
        text: The JSON text, e.g. `'"EEE"'` or `3`.

    Returns:
        The decoded value.

    Raises:
        RecordEncodingError: If `text` isn't valid JSON.
    """
    try:
        return json.loads(text)
    except ValueError as exc:
        raise RecordEncodingError(f"'{text}' is not valid JSON: {exc}") from exc
