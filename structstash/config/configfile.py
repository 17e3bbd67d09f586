##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
This module provides functionality for locating and loading the application
configuration file (`app.yaml`), filling in default settings, and turning the
configured store address into a Redis connection string.
"""
import logging
import os
from copy import deepcopy
from typing import Dict, Tuple

from structstash.config import Config
from structstash.config.config_filepaths import APP_FILENAME, STRUCTSTASH_HOME
from structstash.exceptions import InvalidAddressError
from structstash.utils import load_yaml


LOG: logging.Logger = logging.getLogger(__name__)

DEFAULT_ADDRESS: str = "localhost:6379"
DEFAULT_DB_NUM: int = 0
DEFAULT_CONFIG: Dict = {"store": {"address": DEFAULT_ADDRESS, "db_num": DEFAULT_DB_NUM}}


def load_config(filepath: str) -> Dict:
    """
    Reads a StructStash YAML configuration file and returns its contents as a dictionary.

    Args:
        filepath (str): The path to the YAML configuration file.

    Returns:
        A dictionary containing the contents of the YAML file or None if file doesn't exist.
    """
    if not os.path.isfile(filepath):
        LOG.debug(f"No app config file at {filepath}")
        return None
    LOG.debug(f"Reading app config from file {filepath}")
    return load_yaml(filepath)


def find_config_file(path: str = None) -> str:
    """
    Locate the application configuration file (`app.yaml`).

    If no directory is given, the current working directory is checked first
    and the `STRUCTSTASH_HOME` directory second. If a `path` is explicitly
    provided, only that directory is checked.

    Args:
        path (str, optional): A specific directory to look for `app.yaml`.

    Returns:
        The full path to the `app.yaml` file if found, otherwise `None`.
    """
    if path is None:
        local_app = os.path.join(os.getcwd(), APP_FILENAME)
        if os.path.isfile(local_app):
            return local_app

        path_app = os.path.join(STRUCTSTASH_HOME, APP_FILENAME)
        if os.path.isfile(path_app):
            return path_app

        return None

    app_path = os.path.join(path, APP_FILENAME)
    if os.path.exists(app_path):
        return app_path

    return None


def load_app_config(path: str = None, address: str = None) -> Config:
    """
    Build the application configuration. Defaults are overlaid by the
    `store` section of `app.yaml` (if one is found) and finally by `address`.

    Args:
        path: A specific directory to look for `app.yaml`.
        address: A `host:port` address that takes precedence over everything else.

    Returns:
        The populated Config object.
    """
    app_dict = deepcopy(DEFAULT_CONFIG)

    filepath = find_config_file(path)
    if filepath is not None:
        loaded = load_config(filepath) or {}
        app_dict["store"].update(loaded.get("store") or {})

    if address is not None:
        LOG.debug(f"Overriding configured store address with '{address}'.")
        app_dict["store"]["address"] = address

    return Config(app_dict)


def parse_address(address: str) -> Tuple[str, int]:
    """
    Split a `host:port` address into its parts.

    Args:
        address: The address of the store.

    Returns:
        A tuple of the host and the port number.

    Raises:
        InvalidAddressError: If `address` isn't of the form `host:port`.
    """
    host, sep, port = (address or "").rpartition(":")
    if not sep or not host:
        raise InvalidAddressError(f"Store address '{address}' is not of the form 'host:port'.")
    try:
        port_num = int(port)
    except ValueError as exc:
        raise InvalidAddressError(f"Store address '{address}' has an invalid port '{port}'.") from exc
    if not 0 < port_num < 65536:
        raise InvalidAddressError(f"Store address '{address}' has an out of range port {port_num}.")
    return host, port_num


def get_connection_string(config: Config) -> str:
    """
    Build the Redis connection URL for the configured store.

    Args:
        config: The application configuration.

    Returns:
        A URL of the form `redis://host:port/db_num`.
    """
    host, port = parse_address(config.store.address)
    db_num = getattr(config.store, "db_num", DEFAULT_DB_NUM)
    return f"redis://{host}:{port}/{db_num}"
