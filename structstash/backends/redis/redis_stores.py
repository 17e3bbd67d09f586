##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
Redis Store Implementations for StructStash Records

This module provides one Redis-backed store per storage encoding:

- `RedisFlatStore`: the record's fields become the fields of a hash. Nested
  models are collapsed to a string, so their attributes are lost.
- `RedisHashJSONStore`: the whole record is encoded as JSON text and kept in
  the single `JSON` field of a hash.
- `RedisJSONStore`: the record is stored as a RedisJSON document, so every
  nested attribute can be read and written on its own path.

Every store issues exactly one write command per `save`, so a write is
applied entirely or not at all.

See also:
    - structstash.backends.redis.redis_store_base: Base class
    - structstash.data_models: Data model definitions
"""

import logging
from typing import Any, Dict

from redis import Redis
from redis.commands.json import JSON

from structstash.backends.redis.redis_store_base import RedisStoreBase
from structstash.backends.utils import ROOT_PATH, normalize_json_path, serialize_flat_entity
from structstash.data_models import RecordModel
from structstash.exceptions import ConditionalWriteError, RecordEncodingError, RecordNotFoundError


LOG = logging.getLogger(__name__)

JSON_FIELD = "JSON"


class RawJSONDecoder:
    """
    A decoder for redis-py's JSON command group that hands back the JSON text
    exactly as Redis sent it. Decoding is left to the caller.
    """

    def decode(self, payload: Any) -> Any:
        """
        Return `payload` untouched.

        Args:
            payload: The reply of a `JSON.GET` command.

        Returns:
            The same reply.
        """
        return payload


class RedisFlatStore(RedisStoreBase[RecordModel]):
    """
    A Redis-based store that flattens [`RecordModel`][data_models.RecordModel]
    objects into a hash, one hash field per record field.
    """

    encoding = "flat"

    def __init__(self, client: Redis):
        """
        Initialize the `RedisFlatStore` with a Redis client.

        Args:
            client: A Redis client instance used to interact with the Redis database.
        """
        super().__init__(client, RecordModel)

    def save(self, key: str, entity: RecordModel, **kwargs):
        """
        Flatten `entity` and write every field with a single `HSET`.

        Args:
            key: The key of the hash.
            entity: The record to write.
        """
        self._check_model(entity)
        flat_data = serialize_flat_entity(entity)
        LOG.debug(f"Writing {len(flat_data)} flattened fields to hash '{key}'...")
        self.client.hset(key, mapping=flat_data)
        LOG.debug(f"Successfully wrote flattened hash '{key}'.")

    def retrieve(self, key: str, **kwargs) -> Dict[str, str]:
        """
        Read every field of the hash at `key`. The nested field comes back as
        the string it was flattened to.

        Args:
            key: The key of the hash.

        Returns:
            The raw `field -> value` mapping stored in the hash.

        Raises:
            RecordNotFoundError: If there's no hash at `key`.
        """
        self._check_exists(key)
        return self.client.hgetall(key)


class RedisHashJSONStore(RedisStoreBase[RecordModel]):
    """
    A Redis-based store that encodes [`RecordModel`][data_models.RecordModel]
    objects as JSON text inside the single `JSON` field of a hash.
    """

    encoding = "hash_json"

    def __init__(self, client: Redis):
        """
        Initialize the `RedisHashJSONStore` with a Redis client.

        Args:
            client: A Redis client instance used to interact with the Redis database.
        """
        super().__init__(client, RecordModel)

    def save(self, key: str, entity: RecordModel, **kwargs):
        """
        Encode `entity` as JSON and write it to the `JSON` field of the hash at `key`.
        Encoding happens before anything is sent to Redis.

        Args:
            key: The key of the hash.
            entity: The record to write.

        Raises:
            RecordEncodingError: If `entity` can't be encoded as JSON.
        """
        self._check_model(entity)
        payload = entity.to_json()
        LOG.debug(f"Writing JSON field of hash '{key}'...")
        self.client.hset(key, JSON_FIELD, payload)
        LOG.debug(f"Successfully wrote JSON field of hash '{key}'.")

    def retrieve(self, key: str, **kwargs) -> str:
        """
        Read the JSON text stored in the `JSON` field of the hash at `key`.

        Args:
            key: The key of the hash.

        Returns:
            The raw JSON text.

        Raises:
            RecordNotFoundError: If there's no `JSON` field at `key`.
        """
        payload = self.client.hget(key, JSON_FIELD)
        if payload is None:
            raise RecordNotFoundError(f"Hash '{key}' has no '{JSON_FIELD}' field.")
        return payload


class RedisJSONStore(RedisStoreBase[RecordModel]):
    """
    A Redis-based store that keeps [`RecordModel`][data_models.RecordModel]
    objects as RedisJSON documents.

    This store needs the RedisJSON module on the server; without it Redis
    answers every command with a `ResponseError`, which is passed on.
    """

    encoding = "json"

    def __init__(self, client: Redis):
        """
        Initialize the `RedisJSONStore` with a Redis client.

        Args:
            client: A Redis client instance used to interact with the Redis database.
        """
        super().__init__(client, RecordModel)

    def _json(self) -> JSON:
        """
        Get the JSON command group of the client, set up to return JSON text undecoded.

        Returns:
            The redis-py JSON command group.
        """
        return self.client.json(decoder=RawJSONDecoder())

    def _set(self, key: str, path: str, value: Any, nx: bool, xx: bool):
        """
        Run `JSON.SET` with the optional existence condition.

        Args:
            key: The key of the document.
            path: The path inside the document to write to.
            value: The value to write, handed to redis-py's JSON encoder.
            nx: Only write if nothing exists at `path`.
            xx: Only write if something already exists at `path`.

        Raises:
            ValueError: If both `nx` and `xx` are requested.
            RecordEncodingError: If `value` can't be encoded as JSON.
            ConditionalWriteError: If Redis refused the write because of `nx` or `xx`.
        """
        if nx and xx:
            raise ValueError("Only one of 'nx' (only if absent) and 'xx' (only if present) may be requested.")

        LOG.debug(f"Setting JSON path '{path}' of '{key}' (nx={nx}, xx={xx})...")
        try:
            written = self._json().set(key, path, value, nx=nx, xx=xx)
        except TypeError as exc:
            raise RecordEncodingError(f"Unable to encode the value for '{key}' path '{path}' as JSON: {exc}") from exc

        if not written:
            condition = "absent" if nx else "present"
            raise ConditionalWriteError(f"JSON path '{path}' of '{key}' was not written: it is not {condition}.")
        LOG.debug(f"Successfully set JSON path '{path}' of '{key}'.")

    def save(self, key: str, entity: RecordModel, nx: bool = False, xx: bool = False, **kwargs):
        """
        Store `entity` as a JSON document at the root path of `key`.

        Args:
            key: The key of the document.
            entity: The record to write.
            nx: Only write if `key` holds no document yet.
            xx: Only write if `key` already holds a document.

        Raises:
            ValueError: If both `nx` and `xx` are requested.
            RecordEncodingError: If `entity` can't be encoded as JSON.
            ConditionalWriteError: If the `nx`/`xx` condition didn't hold. The
                stored document is left as it was.
        """
        self._check_model(entity)
        self._set(key, ROOT_PATH, entity.to_dict(), nx, xx)

    def save_path(self, key: str, path: str, value: Any, nx: bool = False, xx: bool = False):
        """
        Write `value` at `path` inside the document at `key`, leaving the rest of
        the document alone.

        Args:
            key: The key of the document.
            path: The path to write, e.g. `info.Major`.
            value: A JSON-compatible value.
            nx: Only write if nothing exists at `path`.
            xx: Only write if something already exists at `path`.

        Raises:
            ValueError: If both `nx` and `xx` are requested.
            RecordEncodingError: If `value` can't be encoded as JSON.
            ConditionalWriteError: If the `nx`/`xx` condition didn't hold.
        """
        self._set(key, normalize_json_path(path), value, nx, xx)

    def retrieve(self, key: str, path: str = "", **kwargs) -> str:
        """
        Read the JSON value at `path` of the document at `key`.

        Args:
            key: The key of the document.
            path: The path to read. `""` or `"."` returns the whole document and
                a dotted path such as `info.Major` returns one value.

        Returns:
            The raw JSON text of the value.

        Raises:
            RecordNotFoundError: If there's no document at `key`.
        """
        json_path = normalize_json_path(path)
        LOG.debug(f"Getting JSON path '{json_path}' of '{key}'...")
        payload = self._json().get(key, json_path)
        if payload is None:
            raise RecordNotFoundError(f"Key '{key}' does not hold a JSON document.")
        return payload
