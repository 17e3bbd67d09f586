##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
Redis persistence facade for StructStash.

This module defines `StructPersistence`, which writes a
[`RecordModel`][data_models.RecordModel] to Redis and reads it back using one of
three interchangeable encodings. Each encoding is handled by its own store in
`redis_stores`; this class only routes calls to them.

| Encoding    | Write                | Read                  | Nested detail            |
|-------------|----------------------|-----------------------|--------------------------|
| `flat`      | `HSET key mapping`   | `HGETALL key`         | lost (opaque string)     |
| `hash_json` | `HSET key JSON text` | `HGET key JSON`       | kept                     |
| `json`      | `JSON.SET key . doc` | `JSON.GET key path`   | kept, path-addressable   |
"""

import logging
from typing import Any, Dict

from redis import Redis

from structstash.backends.redis.redis_stores import RedisFlatStore, RedisHashJSONStore, RedisJSONStore
from structstash.backends.store_base import StoreBase
from structstash.data_models import RecordModel
from structstash.exceptions import UnsupportedEncodingError


LOG = logging.getLogger(__name__)

ENCODINGS = ("flat", "hash_json", "json")


class StructPersistence:
    """
    Persist records in Redis under a caller-chosen key.

    Every method is a single request/response against Redis with no retries.
    Errors are raised to the caller, never logged and swallowed.

    Attributes:
        client (Redis): The Redis client, owned by the caller.
        stores (Dict[str, StoreBase]): The store that implements each encoding.

    Methods:
        get_version:
            Query Redis for the current version.

        write_flattened / read_flattened:
            Store a record as a flat hash and read the raw hash back.

        write_json_in_hash / read_json_from_hash:
            Store a record as JSON text in a hash field and read the text back.

        write_json_native / read_json_native / write_json_path:
            Store a record as a RedisJSON document and read or write any of its paths.

        save / retrieve:
            Encoding-agnostic versions of the writes and reads above.
    """

    def __init__(self, client: Redis):
        """
        Initialize `StructPersistence` with a Redis client and set up a store per encoding.

        Args:
            client: A connected Redis client.
        """
        self.client: Redis = client
        self.stores: Dict[str, StoreBase] = {
            "flat": RedisFlatStore(self.client),
            "hash_json": RedisHashJSONStore(self.client),
            "json": RedisJSONStore(self.client),
        }

    def get_version(self) -> str:
        """
        Query the Redis server for its version.

        Returns:
            A string representing the current version of Redis.
        """
        client_info = self.client.info()
        return client_info.get("redis_version", "N/A")

    def _get_store(self, encoding: str) -> StoreBase:
        """
        Get the store that implements `encoding`.

        Args:
            encoding: One of `flat`, `hash_json` or `json`.

        Returns:
            The corresponding store.

        Raises:
            UnsupportedEncodingError: If `encoding` is unknown.
        """
        if encoding not in self.stores:
            raise UnsupportedEncodingError(
                f"Invalid encoding '{encoding}'. Valid encodings are: {', '.join(ENCODINGS)}."
            )
        return self.stores[encoding]

    def save(self, encoding: str, key: str, record: RecordModel, **kwargs):
        """
        Write `record` under `key` using `encoding`.

        Args:
            encoding: One of `flat`, `hash_json` or `json`.
            key: The key to write to.
            record: The record to write.
            **kwargs: Extra options for the store, e.g. `nx`/`xx` for `json`.
        """
        LOG.debug(f"Saving record under '{key}' with encoding '{encoding}'.")
        self._get_store(encoding).save(key, record, **kwargs)

    def retrieve(self, encoding: str, key: str, **kwargs) -> Any:
        """
        Read the raw payload stored under `key` using `encoding`.

        Args:
            encoding: One of `flat`, `hash_json` or `json`.
            key: The key to read from.
            **kwargs: Extra options for the store, e.g. `path` for `json`.

        Returns:
            A `Dict[str, str]` for `flat` and JSON text for the other two.
        """
        LOG.debug(f"Retrieving '{key}' with encoding '{encoding}'.")
        return self._get_store(encoding).retrieve(key, **kwargs)

    def write_flattened(self, key: str, record: RecordModel):
        """
        Flatten `record` into a hash at `key`. The nested detail becomes an
        opaque string and can't be read back field by field.

        Args:
            key: The key of the hash.
            record: The record to write.
        """
        self.save("flat", key, record)

    def read_flattened(self, key: str) -> Dict[str, str]:
        """
        Read the hash at `key` as a raw `field -> value` mapping.

        Args:
            key: The key of the hash.

        Returns:
            The mapping stored in the hash.
        """
        return self.retrieve("flat", key)

    def write_json_in_hash(self, key: str, record: RecordModel):
        """
        Encode `record` as JSON and store it in the `JSON` field of a hash at `key`.

        Args:
            key: The key of the hash.
            record: The record to write.
        """
        self.save("hash_json", key, record)

    def read_json_from_hash(self, key: str) -> str:
        """
        Read the JSON text from the `JSON` field of the hash at `key`.

        Args:
            key: The key of the hash.

        Returns:
            The raw JSON text; decode it with `RecordModel.from_json`.
        """
        return self.retrieve("hash_json", key)

    def write_json_native(self, key: str, record: RecordModel, nx: bool = False, xx: bool = False):
        """
        Store `record` as a RedisJSON document at the root of `key`.

        Args:
            key: The key of the document.
            record: The record to write.
            nx: Only write if `key` holds no document yet.
            xx: Only write if `key` already holds a document.
        """
        self.save("json", key, record, nx=nx, xx=xx)

    def read_json_native(self, key: str, path: str = "") -> str:
        """
        Read the JSON value at `path` of the document at `key`.

        Args:
            key: The key of the document.
            path: `""` for the whole document or a dotted path like `info.Major`.

        Returns:
            The raw JSON text of the value.
        """
        return self.retrieve("json", key, path=path)

    def write_json_path(self, key: str, path: str, value: Any, nx: bool = False, xx: bool = False):
        """
        Write `value` at `path` of the document at `key` without rewriting the
        rest of the document.

        Args:
            key: The key of the document.
            path: A dotted path like `info.Major`.
            value: A JSON-compatible value.
            nx: Only write if nothing exists at `path`.
            xx: Only write if something already exists at `path`.
        """
        LOG.debug(f"Saving JSON path '{path}' of '{key}'.")
        self.stores["json"].save_path(key, path, value, nx=nx, xx=xx)
