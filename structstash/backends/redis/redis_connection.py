##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
Connection handling for the Redis stores.

Stores never connect on their own. Callers open a client here, pass it to
[`StructPersistence`][backends.redis.redis_backend.StructPersistence], and
release it when they're done:

```python
with redis_connection(config) as client:
    persistence = StructPersistence(client)
    ...
```
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from redis import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from structstash.config import Config
from structstash.config.configfile import get_connection_string
from structstash.exceptions import StoreConnectionError


LOG = logging.getLogger(__name__)


def get_redis_client(config: Config) -> Redis:
    """
    Create a Redis client for the configured store. No command is sent yet.

    Args:
        config: The application configuration.

    Returns:
        A Redis client that decodes replies to `str`.
    """
    return Redis.from_url(get_connection_string(config), decode_responses=True)


@contextmanager
def redis_connection(config: Config) -> Iterator[Redis]:
    """
    Open a Redis client, check that the server answers, and close the client on exit.

    Args:
        config: The application configuration.

    Yields:
        A connected Redis client.

    Raises:
        StoreConnectionError: If the server at the configured address can't be reached.
    """
    client = get_redis_client(config)
    try:
        client.ping()
    except (RedisConnectionError, RedisTimeoutError) as exc:
        client.close()
        raise StoreConnectionError(f"Failed to connect to redis-server @ {config.store.address}: {exc}") from exc

    LOG.debug(f"Connected to redis-server @ {config.store.address}.")
    try:
        yield client
    finally:
        client.close()
        LOG.debug(f"Closed connection to redis-server @ {config.store.address}.")
