##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other StructStash
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to StructStash.
##############################################################################

"""
Redis-based backend infrastructure for StructStash.

This package provides the Redis-backed stores for persisting a record under one
of three encodings, and the facade that routes between them.

Modules:
    redis_backend: Implements `StructPersistence`, the facade over every encoding.
    redis_connection: Builds Redis clients from a `host:port` address and scopes their use.
    redis_store_base: Provides shared base logic for Redis-backed stores.
    redis_stores: Contains the encoding-specific Redis store classes.
"""
