##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
Base Class for Redis-Backed Stores in StructStash

This module provides the foundational class that every Redis store builds on. It holds
the client handle that's passed in by the caller and the common key checks.

See also:
    - structstash.backends.store_base: Base class
    - structstash.backends.redis.redis_stores: Concrete store implementations
    - structstash.data_models: Data model definitions
"""

import logging
from typing import Generic, Type

from redis import Redis

from structstash.backends.store_base import StoreBase, T
from structstash.exceptions import RecordNotFoundError


LOG = logging.getLogger(__name__)


class RedisStoreBase(StoreBase[T], Generic[T]):
    """
    Base class for Redis-based stores.

    The store never opens or closes connections itself; the client handle is
    owned by the caller.

    Attributes:
        client (Redis): The Redis client used for database operations.
        model_class (Type[T]): The model class this store writes.
    """

    def __init__(self, client: Redis, model_class: Type[T]):
        """
        Initialize the Redis store with a Redis client.

        Args:
            client: A Redis client instance used to interact with the Redis database.
            model_class: The model class this store writes.
        """
        self.client: Redis = client
        self.model_class: Type[T] = model_class

    def _check_exists(self, key: str):
        """
        Make sure something is stored at `key`.

        Args:
            key: The key to check.

        Raises:
            RecordNotFoundError: If nothing is stored at `key`.
        """
        if not self.client.exists(key):
            raise RecordNotFoundError(f"Key '{key}' does not exist in the store.")

    def _check_model(self, entity: T):
        """
        Make sure `entity` is an instance of the model this store writes.

        Args:
            entity: The entity about to be written.

        Raises:
            TypeError: If `entity` is of the wrong type.
        """
        if not isinstance(entity, self.model_class):
            raise TypeError(
                f"The {self.encoding} store writes {self.model_class.__name__} objects, not {type(entity).__name__}."
            )
