##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
This module contains pytest fixtures to be used throughout the entire test suite.
"""

import pytest

from structstash.config import Config
from structstash.config.configfile import DEFAULT_ADDRESS, DEFAULT_DB_NUM
from tests.fixture_types import FixtureCallable


#######################################
# Loading in Module Specific Fixtures #
#######################################

pytest_plugins = [
    "tests.fixtures.records",
    "tests.fixtures.stores",
]


#######################################
######### Fixture Definitions #########
#######################################


@pytest.fixture
def create_config() -> FixtureCallable:
    """
    Fixture to build a `Config` object pointing at a given store address.

    Returns:
        A function that creates a `Config`.
    """

    def _create_config(address: str = DEFAULT_ADDRESS, db_num: int = DEFAULT_DB_NUM) -> Config:
        return Config({"store": {"address": address, "db_num": db_num}})

    return _create_config
